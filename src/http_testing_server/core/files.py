"""
Serving files out of a hosted directory.
"""
import logging
from pathlib import Path, PurePath
from typing import Optional

from .messages import Response

logger = logging.getLogger(__name__)


def requested_file(url: str) -> Optional[str]:
    """
    Strip the leading "/" from a request URL.

    Returns None when there is nothing left to look up ("/" itself, or a
    URL that does not start with "/").
    """
    if not url.startswith("/") or url == "/":
        return None
    return url[1:]


def escapes_directory(relative_path: str) -> bool:
    """
    Check whether a relative request path could point outside the hosted directory.

    Rejects parent-directory components, a root marker, or a drive prefix.
    Symlinks are not resolved.
    """
    path = PurePath(relative_path)
    return bool(path.anchor) or ".." in path.parts


def fetch_file(host_directory: Path, url: str) -> Response:
    """
    Build the response for a request against the hosted directory.

    Args:
        host_directory: Directory being hosted
        url: Request URL path, beginning with "/"

    Returns:
        200 with the open file as the body, 400 for paths that escape the
        directory, 404 for missing files, 500 with the error text otherwise
    """
    relative_path = requested_file(url)
    if relative_path is None:
        return Response.empty(404)

    if escapes_directory(relative_path):
        logger.debug(f"Rejected path outside hosted directory: {url}")
        return Response.empty(400)

    try:
        file = open(Path(host_directory) / relative_path, "rb")
    except FileNotFoundError:
        return Response.empty(404)
    except (OSError, ValueError) as e:
        # ValueError covers paths with an embedded NUL byte
        logger.warning(f"Failed to open {url}: {e}")
        return Response.from_string(str(e), status_code=500)

    return Response.from_file(file)
