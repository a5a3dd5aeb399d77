# Core shared modules for both server variants
from .config import Config, setup_logging, parse_u16
from .messages import Request, Response
from .files import fetch_file, requested_file, escapes_directory
from .responder import ServerResponder, ServerResponderBuilder

__all__ = [
    # Config
    "Config",
    "setup_logging",
    "parse_u16",
    # Messages
    "Request",
    "Response",
    # Files
    "fetch_file",
    "requested_file",
    "escapes_directory",
    # Responder
    "ServerResponder",
    "ServerResponderBuilder",
]
