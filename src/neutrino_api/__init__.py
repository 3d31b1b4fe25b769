"""Neutrino API client - credentialed HTTP client returning result values."""

import logging
from importlib.metadata import version, PackageNotFoundError

from .core.client import NeutrinoAPIClient
from .core.config import (
    Credentials,
    TimeoutConfig,
    ConnectionPoolConfig,
    SecurityConfig,
    TransportConfig,
    BASE_ENDPOINTS,
    MULTICLOUD_ENDPOINT,
    AWS_ENDPOINT,
    GCP_ENDPOINT,
    BACKUP_ENDPOINT,
    EU_GEOFENCE_ENDPOINT,
    AU_GEOFENCE_ENDPOINT,
    US_GEOFENCE_ENDPOINT,
)
from .core.outcome import ErrorCode, JsonResult, FileResult, ErrorResult, Outcome
from .core.request_builder import RequestSpec
from .core.exceptions import NeutrinoAPIException, UnknownEndpointError
from .core.logging import LoggingConfig
from .endpoints import ENDPOINTS, Endpoint, get_endpoint

# NullHandler prevents "No handler found" warnings;
# configure logging.getLogger('neutrino_api') or pass TransportConfig.logging
logging.getLogger('neutrino_api').addHandler(logging.NullHandler())

try:
    __version__ = version("neutrino-api-client")
except PackageNotFoundError:
    # Package is not installed (development mode)
    __version__ = "0.0.0-dev"

__all__ = [
    # Client
    "NeutrinoAPIClient",

    # Config
    "Credentials",
    "TimeoutConfig",
    "ConnectionPoolConfig",
    "SecurityConfig",
    "TransportConfig",
    "LoggingConfig",
    "BASE_ENDPOINTS",
    "MULTICLOUD_ENDPOINT",
    "AWS_ENDPOINT",
    "GCP_ENDPOINT",
    "BACKUP_ENDPOINT",
    "EU_GEOFENCE_ENDPOINT",
    "AU_GEOFENCE_ENDPOINT",
    "US_GEOFENCE_ENDPOINT",

    # Requests and results
    "RequestSpec",
    "ErrorCode",
    "JsonResult",
    "FileResult",
    "ErrorResult",
    "Outcome",

    # Endpoints
    "ENDPOINTS",
    "Endpoint",
    "get_endpoint",

    # Exceptions
    "NeutrinoAPIException",
    "UnknownEndpointError",

    # Version
    "__version__",
]
