"""
Structured logging for the Neutrino API client.

Example:
    >>> from neutrino_api import NeutrinoAPIClient, TransportConfig
    >>> from neutrino_api.core.logging import LoggingConfig
    >>>
    >>> config = TransportConfig.create(
    ...     "<user-id>", "<api-key>",
    ...     logging=LoggingConfig.create(level="DEBUG", format="json"),
    ... )
    >>> client = NeutrinoAPIClient(config=config)
"""

from .config import LoggingConfig, LogLevel, LogFormat
from .logger import APILogger, DEFAULT_LOGGER_NAME
from .formatters import JSONFormatter, TextFormatter, ColoredFormatter, get_formatter
from .filters import (
    CorrelationIdFilter,
    ExtraFieldsFilter,
    set_correlation_id,
    get_correlation_id,
    clear_correlation_id,
)
from .handlers import create_console_handler, create_file_handler

__all__ = [
    # Config
    "LoggingConfig",
    "LogLevel",
    "LogFormat",
    # Logger
    "APILogger",
    "DEFAULT_LOGGER_NAME",
    # Formatters
    "JSONFormatter",
    "TextFormatter",
    "ColoredFormatter",
    "get_formatter",
    # Filters
    "CorrelationIdFilter",
    "ExtraFieldsFilter",
    "set_correlation_id",
    "get_correlation_id",
    "clear_correlation_id",
    # Handlers
    "create_console_handler",
    "create_file_handler",
]
