"""
Integration tests against real local sockets.

No external network: the server side is a socket on 127.0.0.1.
"""

import socket
import threading
from http.server import BaseHTTPRequestHandler, HTTPServer

import pytest

from neutrino_api import NeutrinoAPIClient, ErrorCode, ErrorResult, JsonResult, FileResult

pytestmark = pytest.mark.integration


def _closed_port():
    """A loopback port nothing listens on."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.bind(("127.0.0.1", 0))
    port = sock.getsockname()[1]
    sock.close()
    return port


class _Handler(BaseHTTPRequestHandler):

    def do_GET(self):
        if self.path.startswith("/slow"):
            self.server.release.wait(5)
        body = b'{"echo-user": "%s"}' % self.headers["User-ID"].encode()
        self.send_response(200)
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def do_POST(self):
        length = int(self.headers.get("Content-Length", 0))
        self.rfile.read(length)
        body = b"%PDF-1.7 " + b"x" * 4096
        self.send_response(200)
        self.send_header("Content-Type", "application/pdf")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format, *args):
        pass


@pytest.fixture
def local_server():
    server = HTTPServer(("127.0.0.1", 0), _Handler)
    server.release = threading.Event()
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield f"http://127.0.0.1:{server.server_address[1]}/"
    server.release.set()
    server.shutdown()
    server.server_close()


class TestLoopback:

    def test_connection_refused(self):
        base_url = f"http://127.0.0.1:{_closed_port()}/"

        with NeutrinoAPIClient("user", "key", base_url=base_url) as client:
            outcome = client.request("GET", "ip-info", {"ip": "1.1.1.1"}, timeout=5)

        assert isinstance(outcome, ErrorResult)
        assert outcome.error_code == ErrorCode.CONNECT_TIMEOUT
        assert outcome.error_cause is not None
        assert outcome.http_status is None

    def test_json_round_trip(self, local_server):
        with NeutrinoAPIClient("loopback-user", "key", base_url=local_server) as client:
            outcome = client.request("GET", "ip-info", {"ip": "1.1.1.1"})

        assert outcome == JsonResult(200, "application/json", {"echo-user": "loopback-user"})

    def test_file_download(self, local_server, tmp_path):
        target = tmp_path / "page.pdf"

        with NeutrinoAPIClient("user", "key", base_url=local_server) as client:
            outcome = client.request("POST", "html-render", {"content": "<p>hi</p>"}, output_file_path=target)

        assert outcome == FileResult(200, "application/pdf", target)
        assert target.stat().st_size == len(b"%PDF-1.7 ") + 4096

    def test_read_timeout(self, local_server):
        with NeutrinoAPIClient("user", "key", base_url=local_server) as client:
            outcome = client.request("GET", "slow", timeout=0.2)

        assert outcome.error_code == ErrorCode.READ_TIMEOUT
