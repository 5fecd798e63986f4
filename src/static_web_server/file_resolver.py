"""
Maps request paths onto files beneath the document root.
"""

import os
import logging
from typing import Optional

logger = logging.getLogger(__name__)


class PathOutsideRootError(ValueError):
    """Raised when a request path would resolve outside the document root."""


def confine_path(document_root: str, request_path: str) -> str:
    """
    Join a request path onto the document root without leaving it.

    The check is purely lexical and runs before any filesystem access:
    the leading slash is treated as the root itself, and any ".." segment
    is refused outright rather than collapsed.

    Raises:
        PathOutsideRootError: If the path is not origin-form or would escape the root
    """
    if not request_path.startswith("/"):
        raise PathOutsideRootError(f"Request path is not absolute: {request_path!r}")

    segments = [segment for segment in request_path.split("/") if segment]
    if ".." in segments or any("\\" in segment for segment in segments):
        raise PathOutsideRootError(f"Parent traversal in request path: {request_path!r}")

    root = os.path.abspath(document_root)
    candidate = os.path.normpath(os.path.join(root, *segments))
    if os.path.commonpath([candidate, root]) != root:
        raise PathOutsideRootError(f"Request path escapes document root: {request_path!r}")
    return candidate


def resolve_path(document_root: str, request_path: str, default_file: str = "index.html") -> Optional[str]:
    """
    Resolve a request path to an existing regular file under the document root.

    Args:
        document_root: Directory being served
        request_path: Path token from the request line
        default_file: File name substituted when the path is exactly "/"

    Returns:
        Absolute file path, or None if nothing servable exists there
        (missing file, directory, or a name the filesystem rejects)

    Raises:
        PathOutsideRootError: If the path would escape the document root
    """
    if request_path == "/":
        request_path = "/" + default_file

    candidate = confine_path(document_root, request_path)

    try:
        if os.path.isfile(candidate):
            return candidate
    except (OSError, ValueError) as e:
        # e.g. embedded NUL bytes in the name
        logger.debug(f"Cannot stat {candidate!r}: {e}")
    return None
