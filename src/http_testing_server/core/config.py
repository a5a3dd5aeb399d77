"""
Shared configuration for both server variants.
"""
import os
import logging
from dotenv import load_dotenv

load_dotenv()


def parse_u16(name: str, value: str) -> int:
    """Parse an environment value as an unsigned 16-bit integer."""
    # Plain ASCII digits only: int() would also take "1_000", " 80" or "+80"
    if not (value.isascii() and value.isdigit()):
        raise ValueError(f"{name} must be a valid integer, got {value!r}")
    number = int(value)
    if number > 0xFFFF:
        raise ValueError(f"{name} must be between 0 and 65535, got {number}")
    return number


class Config:
    """Centralized configuration loaded from environment variables."""

    # Server defaults
    DEFAULT_HOST = "0.0.0.0"
    DEFAULT_PORT = 8000
    DEFAULT_CODE = 200

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # Fixed-code variant, read when called so tests can patch os.environ
    @classmethod
    def get_http_port(cls) -> int:
        """Listening port from HTTP_PORT, default 8000."""
        value = os.getenv("HTTP_PORT")
        if value is None:
            return cls.DEFAULT_PORT
        return parse_u16("HTTP_PORT", value)

    @classmethod
    def get_http_code(cls) -> int:
        """Status code from HTTP_CODE, default 200."""
        value = os.getenv("HTTP_CODE")
        if value is None:
            return cls.DEFAULT_CODE
        return parse_u16("HTTP_CODE", value)

    @classmethod
    def get_http_host(cls) -> str:
        return os.getenv("HTTP_HOST", cls.DEFAULT_HOST)


def setup_logging(level: str = None):
    """Configure logging based on LOG_LEVEL."""
    level = level or Config.LOG_LEVEL
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(asctime)s - %(levelname)s - %(message)s'
    )
    return logging.getLogger("http_testing_server")
