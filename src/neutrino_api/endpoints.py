# src/neutrino_api/endpoints.py
"""
Catalog of Neutrino API endpoints.

Each endpoint is plain data: path, HTTP verb, read timeout and whether
it returns a file. ``NeutrinoAPIClient.call`` looks entries up by name.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from .core.exceptions import UnknownEndpointError

# Read timeouts (сек)
SHORT_TIMEOUT = 10
DEFAULT_TIMEOUT = 30
LONG_TIMEOUT = 300


@dataclass(frozen=True)
class Endpoint:
    """
    One remote operation.

    Args:
        path: Путь относительно base URL (также имя endpoint)
        http_method: GET или POST
        timeout: Таймаут чтения (сек)
        returns_file: Ответ - файл (без output_file_path call() пишет warning в лог)
    """
    path: str
    http_method: str
    timeout: int
    returns_file: bool = False

    @property
    def name(self) -> str:
        return self.path


_CATALOG = (
    Endpoint("bad-word-filter", "POST", DEFAULT_TIMEOUT),
    Endpoint("bin-list-download", "POST", DEFAULT_TIMEOUT, returns_file=True),
    Endpoint("bin-lookup", "GET", SHORT_TIMEOUT),
    Endpoint("browser-bot", "POST", LONG_TIMEOUT),
    Endpoint("convert", "GET", SHORT_TIMEOUT),
    Endpoint("domain-lookup", "GET", LONG_TIMEOUT),
    Endpoint("email-validate", "GET", DEFAULT_TIMEOUT),
    Endpoint("email-verify", "GET", LONG_TIMEOUT),
    Endpoint("geocode-address", "GET", DEFAULT_TIMEOUT),
    Endpoint("geocode-reverse", "GET", DEFAULT_TIMEOUT),
    Endpoint("hlr-lookup", "GET", DEFAULT_TIMEOUT),
    Endpoint("host-reputation", "GET", LONG_TIMEOUT),
    Endpoint("html-clean", "POST", DEFAULT_TIMEOUT, returns_file=True),
    Endpoint("html-render", "POST", LONG_TIMEOUT, returns_file=True),
    Endpoint("image-resize", "POST", DEFAULT_TIMEOUT, returns_file=True),
    Endpoint("image-watermark", "POST", DEFAULT_TIMEOUT, returns_file=True),
    Endpoint("ip-blocklist", "GET", SHORT_TIMEOUT),
    Endpoint("ip-blocklist-download", "POST", DEFAULT_TIMEOUT, returns_file=True),
    Endpoint("ip-info", "GET", SHORT_TIMEOUT),
    Endpoint("ip-probe", "GET", LONG_TIMEOUT),
    Endpoint("phone-playback", "POST", DEFAULT_TIMEOUT),
    Endpoint("phone-validate", "GET", SHORT_TIMEOUT),
    Endpoint("phone-verify", "POST", DEFAULT_TIMEOUT),
    Endpoint("qr-code", "POST", DEFAULT_TIMEOUT, returns_file=True),
    Endpoint("sms-verify", "POST", DEFAULT_TIMEOUT),
    Endpoint("ua-lookup", "GET", SHORT_TIMEOUT),
    Endpoint("url-info", "GET", DEFAULT_TIMEOUT),
    Endpoint("verify-security-code", "GET", DEFAULT_TIMEOUT),
)

ENDPOINTS: Mapping[str, Endpoint] = MappingProxyType({e.name: e for e in _CATALOG})


def get_endpoint(name: str) -> Endpoint:
    """
    Look up an endpoint by name.

    Raises:
        UnknownEndpointError: no such endpoint
    """
    try:
        return ENDPOINTS[name]
    except KeyError:
        raise UnknownEndpointError(name) from None
