"""
HTTP testing server: a deterministic HTTP fixture that serves files or fixed
status codes, optionally after an artificial delay.
"""
from .core import Request, Response, ServerResponder, ServerResponderBuilder

__version__ = "0.1.0"

__all__ = ["Request", "Response", "ServerResponder", "ServerResponderBuilder", "__version__"]
