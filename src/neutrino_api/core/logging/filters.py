"""
Log filters adding per-call and static context to records.
"""

import logging
import threading
from typing import Any, Dict, Optional

# Correlation id of the call running in the current thread
_correlation_id_storage = threading.local()


def set_correlation_id(correlation_id: str) -> None:
    _correlation_id_storage.value = correlation_id


def get_correlation_id() -> Optional[str]:
    return getattr(_correlation_id_storage, 'value', None)


def clear_correlation_id() -> None:
    if hasattr(_correlation_id_storage, 'value'):
        delattr(_correlation_id_storage, 'value')


class CorrelationIdFilter(logging.Filter):
    """
    Adds the current thread's correlation id to every record.

    Example:
        >>> handler.addFilter(CorrelationIdFilter())
        >>> set_correlation_id("3f1c...")
        >>> logger.info("Request started")  # correlation_id=3f1c...
    """

    def filter(self, record: logging.LogRecord) -> bool:
        correlation_id = get_correlation_id()
        if correlation_id:
            record.correlation_id = correlation_id
        return True


class ExtraFieldsFilter(logging.Filter):
    """
    Adds static fields (service, environment, ...) to every record.

    Fields already present on the record are left alone.
    """

    def __init__(self, extra_fields: Dict[str, Any]):
        super().__init__()
        self.extra_fields = dict(extra_fields)

    def filter(self, record: logging.LogRecord) -> bool:
        for key, value in self.extra_fields.items():
            if not hasattr(record, key):
                setattr(record, key, value)
        return True
