"""
Extension to Content-Type mapping for served files.
"""
import os
from typing import Dict

DEFAULT_CONTENT_TYPE = "application/octet-stream"

CONTENT_TYPES: Dict[str, str] = {
    "html": "text/html",
    "htm": "text/html",
    "css": "text/css",
    "js": "application/javascript",
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "png": "image/png",
    "gif": "image/gif",
    "ico": "image/x-icon",
    "txt": "text/plain",
    "pdf": "application/pdf",
    "json": "application/json",
}


def get_content_type(filename: str) -> str:
    """Return the Content-Type for a file name, matching the extension case-insensitively.

    The extension is whatever follows the last dot of the base name, so a
    dotfile such as ".json" counts as a json file.
    """
    name = os.path.basename(filename).lower()
    extension = name.rsplit(".", 1)[1] if "." in name else ""
    return CONTENT_TYPES.get(extension, DEFAULT_CONTENT_TYPE)
