"""Core модули: конфиг, стадии запроса, результаты."""

from .config import (
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
from .outcome import ErrorCode, JsonResult, FileResult, ErrorResult, Outcome
from .exceptions import (
    NeutrinoAPIException,
    URLParsingError,
    OutputFileError,
    InvalidJSONResponseError,
    UnknownEndpointError,
)
from .request_builder import RequestSpec, build_request
from .executor import RawResponse, execute_request
from .classifier import classify_response
from .error_handler import ErrorHandler
from .client import NeutrinoAPIClient

__all__ = [
    # Config
    "Credentials",
    "TimeoutConfig",
    "ConnectionPoolConfig",
    "SecurityConfig",
    "TransportConfig",
    "BASE_ENDPOINTS",
    "MULTICLOUD_ENDPOINT",
    "AWS_ENDPOINT",
    "GCP_ENDPOINT",
    "BACKUP_ENDPOINT",
    "EU_GEOFENCE_ENDPOINT",
    "AU_GEOFENCE_ENDPOINT",
    "US_GEOFENCE_ENDPOINT",
    # Outcome
    "ErrorCode",
    "JsonResult",
    "FileResult",
    "ErrorResult",
    "Outcome",
    # Exceptions
    "NeutrinoAPIException",
    "URLParsingError",
    "OutputFileError",
    "InvalidJSONResponseError",
    "UnknownEndpointError",
    # Stages
    "RequestSpec",
    "build_request",
    "RawResponse",
    "execute_request",
    "classify_response",
    "ErrorHandler",
    # Client
    "NeutrinoAPIClient",
]
