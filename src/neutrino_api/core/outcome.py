"""
Result values returned by every API call.

Exactly one of three shapes is produced per call:

- :class:`JsonResult` - 2xx response with a JSON body
- :class:`FileResult` - 2xx non-JSON response saved to the requested file
- :class:`ErrorResult` - anything else, local or remote

All of them are immutable. Callers branch on the type::

    outcome = client.call("geocode-reverse", params)
    if isinstance(outcome, JsonResult):
        print(outcome.data["address"])
    elif isinstance(outcome, ErrorResult):
        print(outcome.error_code, outcome.error_message)
"""

from dataclasses import dataclass, field
from enum import IntEnum
from pathlib import Path
from typing import Any, Optional, Union


class ErrorCode(IntEnum):
    """
    Local error kinds.

    Numbered from 1001 so they never collide with the numeric
    ``api-error`` codes reported by the remote service (1 = invalid parameter, ...).
    """
    URL_PARSING_ERROR = 1001
    CONNECT_TIMEOUT = 1002
    READ_TIMEOUT = 1003
    DNS_LOOKUP_FAILED = 1004
    TLS_PROTOCOL_ERROR = 1005
    FILE_IO_ERROR = 1006
    NETWORK_IO_ERROR = 1007
    INVALID_JSON_RESPONSE = 1008
    API_GATEWAY_ERROR = 1009

    @property
    def message(self) -> str:
        """Default human-readable message."""
        return _ERROR_MESSAGES[self]

    @classmethod
    def describe(cls, code: int) -> str:
        """Name of a local code, or ``API_ERROR_<n>`` for a remote one."""
        try:
            return cls(code).name
        except ValueError:
            return f"API_ERROR_{code}"


_ERROR_MESSAGES = {
    ErrorCode.URL_PARSING_ERROR: "API base URL is invalid",
    ErrorCode.CONNECT_TIMEOUT: "Failed to connect to the API",
    ErrorCode.READ_TIMEOUT: "Timed out reading the API response",
    ErrorCode.DNS_LOOKUP_FAILED: "Failed to resolve the API host",
    ErrorCode.TLS_PROTOCOL_ERROR: "TLS handshake with the API failed",
    ErrorCode.FILE_IO_ERROR: "Failed to write the output file",
    ErrorCode.NETWORK_IO_ERROR: "Network error while talking to the API",
    ErrorCode.INVALID_JSON_RESPONSE: "API returned invalid JSON",
    ErrorCode.API_GATEWAY_ERROR: "API gateway error",
}

# Status code parameter value when no HTTP response was received
NO_STATUS: Optional[int] = None


def is_success_status(status: int) -> bool:
    """2xx check."""
    return 200 <= status < 300


@dataclass(frozen=True)
class JsonResult:
    """Successful response with a parsed JSON body."""

    http_status: int
    content_type: str
    data: Any

    ok = True


@dataclass(frozen=True)
class FileResult:
    """Successful response whose body was written to ``file_path``."""

    http_status: int
    content_type: str
    file_path: Path

    ok = True


@dataclass(frozen=True)
class ErrorResult:
    """
    Failed call.

    Attributes:
        http_status: HTTP status, or None if no response was received
        content_type: Response content type, or None
        error_code: :class:`ErrorCode` member or the remote ``api-error`` number
        error_message: Message for the caller
        error_cause: Underlying exception, if any (not part of equality)
    """

    http_status: Optional[int]
    content_type: Optional[str]
    error_code: int
    error_message: str
    error_cause: Optional[BaseException] = field(default=None, compare=False, repr=False)

    ok = False

    @classmethod
    def of(
        cls,
        code: ErrorCode,
        cause: Optional[BaseException] = None,
        http_status: Optional[int] = NO_STATUS,
        content_type: Optional[str] = None,
        message: Optional[str] = None,
    ) -> 'ErrorResult':
        """Build from a local error code using its default message."""
        return cls(
            http_status=http_status,
            content_type=content_type,
            error_code=code,
            error_message=message if message is not None else code.message,
            error_cause=cause,
        )

    @property
    def error_name(self) -> str:
        return ErrorCode.describe(self.error_code)


Outcome = Union[JsonResult, FileResult, ErrorResult]
