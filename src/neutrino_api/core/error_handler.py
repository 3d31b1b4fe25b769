# src/neutrino_api/core/error_handler.py
"""
Error Mapper: caught exception -> ErrorCode.

requests wraps the interesting failure several levels deep
(``ConnectionError(MaxRetryError(reason=NameResolutionError(...)))``),
so the whole cause chain is inspected and the first matching rule in
``EXCEPTION_RULES`` wins.
"""

import json
import socket
import ssl
from typing import Iterator, Optional, Tuple, Type

import requests
from urllib3 import exceptions as urllib3_exceptions

from .exceptions import InvalidJSONResponseError, OutputFileError, URLParsingError
from .outcome import ErrorCode, ErrorResult

# Exceptions the client boundary converts into ErrorResult.
# Anything else is a bug and propagates.
HANDLED_EXCEPTIONS: Tuple[Type[BaseException], ...] = (
    requests.exceptions.RequestException,
    urllib3_exceptions.HTTPError,
    OSError,
    ValueError,
)

# Порядок важен: более специфичные правила раньше
EXCEPTION_RULES: Tuple[Tuple[Tuple[Type[BaseException], ...], ErrorCode], ...] = (
    ((URLParsingError,
      requests.exceptions.InvalidURL,
      requests.exceptions.MissingSchema,
      requests.exceptions.InvalidSchema,
      urllib3_exceptions.LocationParseError), ErrorCode.URL_PARSING_ERROR),
    ((OutputFileError,), ErrorCode.FILE_IO_ERROR),
    ((InvalidJSONResponseError, json.JSONDecodeError), ErrorCode.INVALID_JSON_RESPONSE),
    ((requests.exceptions.SSLError,
      urllib3_exceptions.SSLError,
      ssl.SSLError), ErrorCode.TLS_PROTOCOL_ERROR),
    ((urllib3_exceptions.NameResolutionError,
      socket.gaierror), ErrorCode.DNS_LOOKUP_FAILED),
    # NewConnectionError (refused/unreachable) is a ConnectTimeoutError subclass
    ((requests.exceptions.ConnectTimeout,
      urllib3_exceptions.ConnectTimeoutError,
      ConnectionRefusedError), ErrorCode.CONNECT_TIMEOUT),
    ((requests.exceptions.ReadTimeout,
      urllib3_exceptions.ReadTimeoutError,
      TimeoutError), ErrorCode.READ_TIMEOUT),
    ((requests.exceptions.RequestException,
      urllib3_exceptions.HTTPError,
      OSError), ErrorCode.NETWORK_IO_ERROR),
)


def iter_causes(exc: BaseException) -> Iterator[BaseException]:
    """
    Yield ``exc`` and every exception reachable from it.

    Follows ``reason`` (urllib3 MaxRetryError), exception-valued ``args``
    (requests wraps the urllib3 error as its first arg), ``__cause__`` and
    ``__context__``. Breadth-first, each exception once.
    """
    seen = set()
    queue = [exc]
    while queue:
        current = queue.pop(0)
        if id(current) in seen:
            continue
        seen.add(id(current))
        yield current

        linked = [getattr(current, "reason", None)]
        linked.extend(current.args)
        linked.extend((current.__cause__, current.__context__))
        queue.extend(e for e in linked if isinstance(e, BaseException))


class ErrorHandler:
    """Класс для преобразования исключений в ErrorResult"""

    @staticmethod
    def map_exception(error: BaseException) -> ErrorCode:
        """
        Map an exception to its ErrorCode.

        Examples:
            >>> ErrorHandler.map_exception(requests.exceptions.ReadTimeout())
            <ErrorCode.READ_TIMEOUT: 1003>
        """
        causes = list(iter_causes(error))
        for exception_types, code in EXCEPTION_RULES:
            if any(isinstance(cause, exception_types) for cause in causes):
                return code
        return ErrorCode.NETWORK_IO_ERROR

    @staticmethod
    def to_result(
        error: BaseException,
        http_status: Optional[int] = None,
        content_type: Optional[str] = None,
    ) -> ErrorResult:
        """
        Build the ErrorResult for ``error``.

        The message is the code's fixed message; the exception itself is
        kept as ``error_cause`` only.
        """
        return ErrorResult.of(
            ErrorHandler.map_exception(error),
            cause=error,
            http_status=http_status,
            content_type=content_type,
        )

    @staticmethod
    def is_handled(error: BaseException) -> bool:
        """Проверяет, относится ли исключение к транспорту/разбору ответа"""
        return isinstance(error, HANDLED_EXCEPTIONS)
