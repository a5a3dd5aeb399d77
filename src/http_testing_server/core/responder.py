"""
Server Responder Module

Decides what to send back for each request: a file from the hosted
directory or an empty 200, an optional status code override, and an
optional delay before the response is handed to the server.
"""
import time
import logging
from dataclasses import dataclass
from datetime import timedelta
from pathlib import Path
from typing import Optional, Union

from .files import fetch_file
from .messages import Request, Response

logger = logging.getLogger(__name__)

_UNSET = object()


@dataclass(frozen=True)
class ServerResponder:
    """
    Immutable responder configuration plus the per-request algorithm.

    Build instances with ServerResponder.builder().
    """
    host_directory: Optional[Path] = None  # The directory to host, if any
    status_code: Optional[int] = None  # An override on the returned status code
    extra_delay: timedelta = timedelta(0)  # Minimum time spent in respond()

    @staticmethod
    def builder() -> "ServerResponderBuilder":
        return ServerResponderBuilder()

    def respond(self, request: Request) -> Response:
        """
        Respond to the given request.

        The delay is measured from the start of the call, so time spent
        opening the file counts towards it.
        """
        starting_time = time.monotonic()

        if self.host_directory is not None:
            response = fetch_file(self.host_directory, request.url)
        else:
            response = Response.empty(200)

        if self.status_code is not None:
            response = response.with_status_code(self.status_code)

        remaining = starting_time + self.extra_delay.total_seconds() - time.monotonic()
        if remaining > 0:
            time.sleep(remaining)

        return response

    def __call__(self, request: Request) -> Response:
        return self.respond(request)


class ServerResponderBuilder:
    """Collects each ServerResponder setting at most once."""

    def __init__(self):
        self._host_directory = _UNSET
        self._status_code = _UNSET
        self._extra_delay = _UNSET

    def host_directory(self, directory: Union[str, Path]) -> "ServerResponderBuilder":
        if self._host_directory is not _UNSET:
            raise RuntimeError("Set host directory multiple times")
        self._host_directory = Path(directory)
        return self

    def status_code(self, code: int) -> "ServerResponderBuilder":
        if self._status_code is not _UNSET:
            raise RuntimeError("Set status code override multiple times")
        self._status_code = int(code)
        return self

    def extra_delay(self, delay: Union[timedelta, int, float]) -> "ServerResponderBuilder":
        if self._extra_delay is not _UNSET:
            raise RuntimeError("Set extra delay multiple times")
        if not isinstance(delay, timedelta):
            delay = timedelta(seconds=delay)
        if delay < timedelta(0):
            raise ValueError(f"Extra delay must not be negative, got {delay}")
        self._extra_delay = delay
        return self

    def build(self) -> ServerResponder:
        responder = ServerResponder(
            host_directory=None if self._host_directory is _UNSET else self._host_directory,
            status_code=None if self._status_code is _UNSET else self._status_code,
            extra_delay=timedelta(0) if self._extra_delay is _UNSET else self._extra_delay,
        )
        logger.debug(f"Built {responder}")
        return responder
