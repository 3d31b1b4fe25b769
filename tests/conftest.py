"""
Pytest configuration and fixtures for neutrino-api-client tests.
"""

import io

import pytest
import requests
import responses as responses_lib

from neutrino_api import NeutrinoAPIClient, TransportConfig
from neutrino_api.core.executor import RawResponse
from neutrino_api.core.logging import LoggingConfig

TEST_USER_ID = "test-user"
TEST_API_KEY = "test-api-key-0123456789"


@pytest.fixture
def base_url():
    """Base URL for testing."""
    return "https://neutrinoapi.net/"


@pytest.fixture
def mock_responses():
    """Mock HTTP responses using responses library."""
    with responses_lib.RequestsMock() as rsps:
        yield rsps


@pytest.fixture
def config(base_url):
    """TransportConfig with test credentials."""
    return TransportConfig.create(TEST_USER_ID, TEST_API_KEY, base_url=base_url)


@pytest.fixture
def client(config):
    """API client instance for testing."""
    client = NeutrinoAPIClient(config=config)
    yield client
    client.close()


@pytest.fixture
def logging_config():
    """LoggingConfig with console output at DEBUG."""
    return LoggingConfig.create(
        level="DEBUG",
        enable_console=True,
        enable_file=False
    )


@pytest.fixture
def logging_config_with_file(tmp_path):
    """
    LoggingConfig fixture with file logging enabled.

    Uses temporary directory for log files to avoid cleanup issues.
    """
    log_file = tmp_path / "test.log"
    return LoggingConfig.create(
        level="DEBUG",
        format="json",
        enable_console=False,
        enable_file=True,
        file_path=str(log_file)
    )


def make_raw_response(status, content_type, body=b""):
    """
    Build a RawResponse over an in-memory body, without any transport.

    ``content_type=None`` leaves the Content-Type header out.
    """
    response = requests.Response()
    response.status_code = status
    if content_type is not None:
        response.headers["Content-Type"] = content_type
    if isinstance(body, str):
        body = body.encode("utf-8")
    response.raw = io.BytesIO(body)
    return RawResponse.from_response(response)


@pytest.fixture
def raw_response():
    """Factory fixture: raw_response(status, content_type, body)."""
    return make_raw_response
