"""
Request and response values passed between the server loop and responders.
"""
import os
from dataclasses import dataclass, field, replace
from typing import BinaryIO, Dict, Union

TEXT_CONTENT_TYPE = "text/plain; charset=UTF-8"


@dataclass(frozen=True)
class Request:
    """An incoming request as seen by a responder"""
    method: str
    url: str  # Path part of the request target, query string removed


@dataclass(frozen=True)
class Response:
    """
    An outgoing response.

    The body is either a byte string or a binary file opened for reading,
    which the server streams and then closes.
    """
    status_code: int
    body: Union[bytes, BinaryIO] = b""
    headers: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def empty(cls, status_code: int) -> "Response":
        return cls(status_code)

    @classmethod
    def from_string(cls, text: str, status_code: int = 200) -> "Response":
        # surrogateescape restores raw bytes from undecodable file names
        return cls(status_code, text.encode("utf-8", "surrogateescape"), {"Content-Type": TEXT_CONTENT_TYPE})

    @classmethod
    def from_file(cls, file: BinaryIO, status_code: int = 200) -> "Response":
        return cls(status_code, file)

    def with_status_code(self, status_code: int) -> "Response":
        """Same body and headers, different status code."""
        return replace(self, status_code=status_code)

    @property
    def is_file(self) -> bool:
        return not isinstance(self.body, bytes)

    @property
    def content_length(self) -> int:
        if self.is_file:
            return os.fstat(self.body.fileno()).st_size
        return len(self.body)

    def read_body(self) -> bytes:
        """Return the whole body as bytes (reads a file body to the end)."""
        if self.is_file:
            return self.body.read()
        return self.body

    def close(self):
        if self.is_file:
            self.body.close()
