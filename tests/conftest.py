"""
Pytest configuration for http-testing-server tests.

This file ensures that the src directory is in the Python path
so that tests can import from http_testing_server, and provides
a hosted directory plus a helper for driving a real server.
"""
import socket
import sys
import threading
from pathlib import Path

import pytest

# Add src directory to Python path
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from http_testing_server.server import TestingServer  # noqa: E402


@pytest.fixture
def hosted_dir(tmp_path):
    """A directory with a couple of files to serve, next to a secret outside it."""
    site = tmp_path / "site"
    site.mkdir()
    (site / "index.html").write_bytes(b"<h1>hello</h1>\n")
    (site / "data.bin").write_bytes(bytes(range(256)) * 64)
    (site / "nested").mkdir()
    (site / "nested" / "file.txt").write_text("nested contents")
    (tmp_path / "secret").write_text("do not serve")
    return site


class ServerDriver:
    """Runs serve_one() on a helper thread for each request a test makes."""

    def __init__(self, server: TestingServer):
        self.server = server
        port = server.server_address[1]
        self.base_url = f"http://127.0.0.1:{port}"

    def request(self, send):
        """Handle exactly one request; `send` performs it and returns the client response."""
        thread = threading.Thread(target=self.server.serve_one, daemon=True)
        thread.start()
        try:
            return send(self.base_url)
        finally:
            thread.join(timeout=10)
            assert not thread.is_alive(), "server did not finish the request"

    def raw(self, method: str, target: str, headers: bytes = b"", body: bytes = b""):
        """Send one request with an untouched request line; return (status, body)."""
        port = self.server.server_address[1]
        with socket.create_connection(("127.0.0.1", port), timeout=5) as sock:
            sock.sendall(f"{method} {target} HTTP/1.0\r\nHost: localhost\r\n".encode() + headers + b"\r\n" + body)
            chunks = []
            while True:
                chunk = sock.recv(4096)
                if not chunk:
                    break
                chunks.append(chunk)
        head, _, response_body = b"".join(chunks).partition(b"\r\n\r\n")
        status = int(head.split(b"\r\n")[0].split(b" ")[1])
        return status, response_body


@pytest.fixture
def serve():
    """Factory: serve(responder) binds a TestingServer on an ephemeral port."""
    servers = []

    def _serve(responder):
        server = TestingServer(("127.0.0.1", 0), responder)
        servers.append(server)
        return ServerDriver(server)

    yield _serve

    for server in servers:
        server.server_close()
