#!/usr/bin/env python3
"""
HTTP testing server CLI

Usage:
    python -m http_testing_server.cli                       # empty 200 for every request
    python -m http_testing_server.cli ./site -p 8080        # serve files from ./site
    python -m http_testing_server.cli --status-code 503     # always 503
    python -m http_testing_server.cli --extra-delay 5       # respond after at least 5s
"""

import argparse
import logging
from pathlib import Path

from .core import Config, ServerResponder, setup_logging
from .server import create_server

logger = logging.getLogger(__name__)


def u16(value: str) -> int:
    """argparse type for ports and status codes"""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}")
    if not 0 <= number <= 0xFFFF:
        raise argparse.ArgumentTypeError(f"{number} is not in 0..65535")
    return number


def seconds(value: str) -> int:
    """argparse type for the extra delay"""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number of seconds: {value!r}")
    if number < 0:
        raise argparse.ArgumentTypeError("delay must not be negative")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="http-testing-server",
        description="HTTP server for testing clients: serves files or fixed status codes",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  http-testing-server ./fixtures                   Serve files from ./fixtures
  http-testing-server --status-code 500            Answer everything with 500
  http-testing-server ./fixtures --extra-delay 3   Serve files, slowly
        """
    )
    parser.add_argument(
        "host_directory",
        nargs="?",
        type=Path,
        help="The directory to host, if any"
    )
    parser.add_argument(
        "-p", "--port",
        type=u16,
        default=Config.DEFAULT_PORT,
        help="Port to listen on (default: %(default)s)"
    )
    parser.add_argument(
        "--status-code",
        type=u16,
        help="The status code to return"
    )
    parser.add_argument(
        "--extra-delay",
        type=seconds,
        default=0,
        help="An extra delay to add before responding, in seconds"
    )
    parser.add_argument(
        "--host",
        default=Config.DEFAULT_HOST,
        help="Address to bind (default: %(default)s)"
    )
    parser.add_argument(
        "--log-level",
        default=Config.LOG_LEVEL,
        help="Logging level (default: LOG_LEVEL or INFO)"
    )
    return parser


def build_responder(args: argparse.Namespace) -> ServerResponder:
    builder = ServerResponder.builder()
    if args.host_directory is not None:
        builder = builder.host_directory(args.host_directory)
    if args.status_code is not None:
        builder = builder.status_code(args.status_code)
    return builder.extra_delay(args.extra_delay).build()


def main(argv=None):
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    responder = build_responder(args)
    if responder.host_directory is not None and not responder.host_directory.is_dir():
        logger.warning(f"Host directory {responder.host_directory} is not a directory; requests will fail")

    server = create_server(args.host, args.port, responder)
    logger.info(f"  Host directory: {responder.host_directory or '(none)'}")
    logger.info(f"  Status code override: {'(none)' if responder.status_code is None else responder.status_code}")
    logger.info(f"  Extra delay: {args.extra_delay}s")

    server.serve_forever()


if __name__ == "__main__":
    main()
