"""
Tests for log handlers.

Tests create_console_handler and create_file_handler.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler

from neutrino_api.core.logging.handlers import create_console_handler, create_file_handler
from neutrino_api.core.logging.formatters import TextFormatter
from neutrino_api.core.logging.filters import ExtraFieldsFilter


class TestCreateConsoleHandler:
    """Tests for create_console_handler function."""

    def test_configured(self):
        formatter = TextFormatter()
        log_filter = ExtraFieldsFilter({"service": "geo"})

        handler = create_console_handler(logging.DEBUG, formatter, [log_filter])

        assert isinstance(handler, logging.StreamHandler)
        assert handler.stream is sys.stdout
        assert handler.level == logging.DEBUG
        assert handler.formatter is formatter
        assert log_filter in handler.filters

    def test_no_filters(self):
        handler = create_console_handler(logging.INFO, TextFormatter())
        assert handler.filters == []


class TestCreateFileHandler:
    """Tests for create_file_handler function."""

    def test_creates_rotating_handler(self, tmp_path):
        log_file = tmp_path / "client.log"

        handler = create_file_handler(str(log_file), logging.INFO, TextFormatter(),
                                      max_bytes=1024, backup_count=2)
        try:
            assert isinstance(handler, RotatingFileHandler)
            assert handler.maxBytes == 1024
            assert handler.backupCount == 2
            assert handler.level == logging.INFO
        finally:
            handler.close()

    def test_creates_parent_directory(self, tmp_path):
        log_file = tmp_path / "nested" / "dir" / "client.log"

        handler = create_file_handler(str(log_file), logging.INFO, TextFormatter())
        handler.close()

        assert log_file.parent.is_dir()

    def test_writes_records(self, tmp_path):
        log_file = tmp_path / "client.log"
        handler = create_file_handler(str(log_file), logging.INFO, TextFormatter())

        record = logging.LogRecord("neutrino_api", logging.INFO, "client.py", 1, "Request started", (), None)
        handler.emit(record)
        handler.close()

        assert "Request started" in log_file.read_text(encoding="utf-8")
