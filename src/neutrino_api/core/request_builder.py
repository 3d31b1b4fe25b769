# src/neutrino_api/core/request_builder.py
"""
Request Builder: (method, path, params, timeout) -> requests.PreparedRequest.

GET parameters go to the query string, POST parameters to an
``application/x-www-form-urlencoded`` body. Both always carry the
``User-ID`` and ``API-Key`` headers.
"""

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional, Union

import requests
from requests.utils import default_headers
from urllib3.exceptions import LocationParseError
from urllib3.util import parse_url

from .config import TransportConfig
from .exceptions import URLParsingError

SUPPORTED_METHODS = ("GET", "POST")


@dataclass(frozen=True)
class RequestSpec:
    """
    One API call, fixed before anything touches the network.

    Args:
        http_method: GET или POST
        endpoint_path: Путь endpoint относительно base URL
        params: Параметры запроса (строка -> строка)
        output_file_path: Куда сохранять не-JSON ответ (опционально)
        timeout: Таймаут чтения для этого вызова (сек)

    Examples:
        >>> RequestSpec("GET", "geocode-reverse", {"latitude": "-41.27"}, timeout=30)
    """
    http_method: str
    endpoint_path: str
    params: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    output_file_path: Optional[Union[str, Path]] = None
    timeout: float = 30

    def __post_init__(self):
        """Валидация и заморозка параметров."""
        method = self.http_method.upper() if isinstance(self.http_method, str) else self.http_method
        if method not in SUPPORTED_METHODS:
            raise ValueError(
                f"http_method must be one of {', '.join(SUPPORTED_METHODS)}, got {self.http_method!r}"
            )
        object.__setattr__(self, 'http_method', method)

        if self.timeout is None or self.timeout <= 0:
            raise ValueError("timeout must be positive")

        object.__setattr__(self, 'params', MappingProxyType(dict(self.params or {})))

        if self.output_file_path is not None:
            object.__setattr__(self, 'output_file_path', Path(self.output_file_path))


def build_url(base_url: str, endpoint_path: str) -> str:
    """
    Склеивает base_url и endpoint.

    Examples:
        >>> build_url("https://neutrinoapi.net/", "ip-info")
        'https://neutrinoapi.net/ip-info'
    """
    base = base_url.rstrip("/")
    endpoint = endpoint_path.lstrip("/")
    return f"{base}/{endpoint}"


def validate_url(url: str) -> None:
    """
    Raise :class:`URLParsingError` unless ``url`` is an absolute http(s) URL.

    Whitespace and control characters are rejected outright instead of being
    silently stripped or escaped.
    """
    for ch in url:
        if ch.isspace() or ord(ch) < 0x20 or ord(ch) == 0x7f:
            raise URLParsingError(url, "contains whitespace or control characters")

    try:
        parsed = parse_url(url)
    except LocationParseError as e:
        raise URLParsingError(url, str(e)) from e

    if parsed.scheme not in ("http", "https"):
        raise URLParsingError(url, "scheme must be http or https")
    if not parsed.host:
        raise URLParsingError(url, "missing host")


def build_request(config: TransportConfig, spec: RequestSpec) -> requests.PreparedRequest:
    """
    Build a transport-ready request.

    Args:
        config: Transport config (base URL, credentials, extra headers)
        spec: The call to make

    Returns:
        PreparedRequest ready for ``Session.send``

    Raises:
        URLParsingError: base URL + endpoint is not a valid URL; nothing is sent
    """
    url = build_url(config.base_url, spec.endpoint_path)
    validate_url(url)

    headers = default_headers()
    headers.update(config.headers)
    headers.update(config.credentials.as_headers())

    params = dict(spec.params)
    if spec.http_method == "GET":
        request = requests.Request("GET", url, headers=headers, params=params)
    else:
        request = requests.Request("POST", url, headers=headers, data=params)

    try:
        return request.prepare()
    except (requests.exceptions.InvalidURL,
            requests.exceptions.MissingSchema,
            requests.exceptions.InvalidSchema,
            LocationParseError) as e:
        raise URLParsingError(url, str(e)) from e
