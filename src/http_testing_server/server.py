"""
Receive loop built on Python stdlib http.server.

Requests are handled one at a time on the calling thread: the next
connection is not accepted until the previous response has been sent.
Receive and send failures are not caught; they end the process.
"""
import errno
import logging
import shutil
from http.server import HTTPServer, BaseHTTPRequestHandler
from typing import Callable
from urllib.parse import unquote

from .core import Request, Response

logger = logging.getLogger(__name__)

Responder = Callable[[Request], Response]


class ResponderHandler(BaseHTTPRequestHandler):
    """HTTP request handler that answers every method through the server's responder."""

    server_version = "http-testing-server"

    def __getattr__(self, name):
        # handle_one_request looks up do_<METHOD>; any method, even unknown ones, is answered
        if name.startswith("do_"):
            return self.respond
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

    def log_message(self, format, *args):
        logger.info(f"[{self.client_address[0]}] {format % args}")

    def discard_body(self) -> int:
        """Read and drop the request body so the connection closes cleanly."""
        if "chunked" in self.headers.get("Transfer-Encoding", "").lower():
            discarded = self.discard_chunked_body()
        else:
            try:
                content_length = int(self.headers.get("Content-Length", 0))
            except ValueError:
                content_length = 0
            discarded = len(self.rfile.read(content_length)) if content_length > 0 else 0
        if discarded:
            logger.debug(f"Discarded {discarded} bytes of request body")
        return discarded

    def discard_chunked_body(self) -> int:
        discarded = 0
        while True:
            size_line = self.rfile.readline(65537)
            try:
                size = int(size_line.split(b";", 1)[0].strip(), 16)
            except ValueError:
                # Malformed chunk header: stop draining, the connection is closed anyway
                return discarded
            if size == 0:
                break
            discarded += len(self.rfile.read(size))
            self.rfile.readline(65537)  # CRLF after the chunk data
        # Trailer section ends with an empty line
        while self.rfile.readline(65537) not in (b"\r\n", b"\n", b""):
            pass
        return discarded

    def request_url(self) -> str:
        """Request target without query string or fragment, percent-decoded."""
        path = self.path.split("?", 1)[0].split("#", 1)[0]
        # surrogateescape keeps non-UTF-8 file names intact for open()
        return unquote(path, errors="surrogateescape")

    def respond(self):
        self.discard_body()
        request = Request(method=self.command, url=self.request_url())
        response = self.server.responder(request)
        try:
            self.send_responder_response(response)
        finally:
            response.close()

    def send_responder_response(self, response: Response):
        self.send_response(response.status_code)
        for name, value in response.headers.items():
            self.send_header(name, value)
        self.send_header("Content-Length", str(response.content_length))
        self.end_headers()

        if self.command == "HEAD":
            return
        if response.is_file:
            shutil.copyfileobj(response.body, self.wfile)
        else:
            self.wfile.write(response.body)


class TestingServer(HTTPServer):
    """HTTP server that handles exactly one request at a time."""

    __test__ = False  # not a pytest test class

    def __init__(self, server_address, responder: Responder):
        self.responder = responder
        super().__init__(server_address, ResponderHandler)

    def serve_one(self):
        """Block until a connection arrives, then handle its request and send the response."""
        request, client_address = self.get_request()
        try:
            self.finish_request(request, client_address)
        finally:
            self.shutdown_request(request)

    def serve_forever(self, poll_interval=0.5):
        """Handle requests one after another until an error ends the loop."""
        while True:
            self.serve_one()


def create_server(host: str, port: int, responder: Responder) -> TestingServer:
    """
    Bind and listen on host:port.

    Raises:
        OSError: if the address can't be bound (logged first)
    """
    try:
        server = TestingServer((host, port), responder)
    except OSError as e:
        if e.errno == errno.EADDRINUSE:
            logger.error(f"Port {port} is already in use! Stop the existing process or pick another port.")
        else:
            logger.error(f"Couldn't listen on {host}:{port}: {e}")
        raise

    logger.info(f"Listening on http://{host}:{server.server_port}")
    return server
