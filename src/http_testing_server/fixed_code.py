#!/usr/bin/env python3
"""
Fixed status code server.

Answers every request, whatever the method or path, with one status code
and an empty body. Configured from the environment (or a .env file):

    HTTP_PORT   port to listen on (default 8000)
    HTTP_CODE   status code to return (default 200)
    HTTP_HOST   address to bind (default 0.0.0.0)

Run with: python -m http_testing_server.fixed_code
"""
import logging

from .core import Config, Request, Response, setup_logging
from .server import create_server

logger = logging.getLogger(__name__)


class FixedCodeResponder:
    """Ignores the request and returns the same empty response every time."""

    def __init__(self, status_code: int):
        self.status_code = status_code

    def __call__(self, request: Request) -> Response:
        return Response.empty(self.status_code)


def main():
    setup_logging()

    # Both values are validated before anything is bound
    port = Config.get_http_port()
    code = Config.get_http_code()
    host = Config.get_http_host()

    print(f"Responding with status code {code}")

    server = create_server(host, port, FixedCodeResponder(code))
    server.serve_forever()


if __name__ == "__main__":
    main()
