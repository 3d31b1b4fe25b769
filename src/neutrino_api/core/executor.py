# src/neutrino_api/core/executor.py
"""
Request Executor: sends a prepared request under a per-call timeout.

The body is always streamed (``stream=True``); :class:`RawResponse`
owns the connection until it is closed, so callers must use it as a
context manager.
"""

from dataclasses import dataclass
from typing import Iterator

import requests

from .config import TransportConfig

DEFAULT_CHUNK_SIZE = 8192


@dataclass(frozen=True)
class RawResponse:
    """
    Status, content type and body stream of a received response.

    Body accessors delegate to ``requests.Response``: ``read_body`` and
    ``text`` cache the content, so the same response can be classified
    more than once. ``iter_body`` streams without caching.
    """

    http_status: int
    content_type: str
    response: requests.Response

    @classmethod
    def from_response(cls, response: requests.Response) -> 'RawResponse':
        return cls(
            http_status=response.status_code,
            content_type=response.headers.get("Content-Type", ""),
            response=response,
        )

    def read_body(self) -> bytes:
        return self.response.content

    @property
    def text(self) -> str:
        return self.response.text

    def iter_body(self, chunk_size: int = DEFAULT_CHUNK_SIZE) -> Iterator[bytes]:
        return self.response.iter_content(chunk_size=chunk_size)

    def close(self) -> None:
        """Release the connection back to the pool."""
        self.response.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False


def execute_request(
    session: requests.Session,
    request: requests.PreparedRequest,
    timeout: float,
    config: TransportConfig,
) -> RawResponse:
    """
    Send ``request`` and return the response with its body unread.

    Args:
        session: Thread-local session (mounts the shared connection pool)
        request: Prepared request from the builder
        timeout: Read timeout for this call only (сек)
        config: Transport config (connect timeout, TLS, redirects)

    Raises:
        requests.exceptions.RequestException: any transport failure;
            mapped to an ErrorCode by the caller
    """
    response = session.send(
        request,
        timeout=config.timeout.as_tuple(read=timeout),
        verify=config.security.verify_ssl,
        allow_redirects=config.security.allow_redirects,
        stream=True,
    )
    return RawResponse.from_response(response)
