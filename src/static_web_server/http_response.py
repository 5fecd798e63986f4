"""
HTTP Response Module

Writes HTTP/1.0 responses to a connection's output stream.

Wire format:
    HTTP/1.0 200 OK\\r\\n
    Content-Type: text/html\\r\\n
    Content-Length: 1234\\r\\n
    \\r\\n
    <body>

Headers are always written in the order Content-Type, Content-Length.
"""

import os
import shutil
import logging
from typing import BinaryIO, List, Tuple

logger = logging.getLogger(__name__)

CRLF = "\r\n"
HTTP_VERSION = "HTTP/1.0"

# File bodies are copied to the socket in chunks of this size
BUFFER_SIZE = 1024

NOT_FOUND_BODY = (
    "<HTML>"
    "<HEAD><TITLE>404 Not Found</TITLE></HEAD>"
    "<BODY>"
    "<H1>404 Not Found</H1>"
    "<P>The requested resource was not found on this server.</P>"
    "</BODY>"
    "</HTML>"
).encode("ascii")


def build_head(status: int, reason: str, headers: List[Tuple[str, str]]) -> bytes:
    """Build the status line, header lines and the blank separator line."""
    lines = [f"{HTTP_VERSION} {status} {reason}{CRLF}"]
    lines.extend(f"{name}: {value}{CRLF}" for name, value in headers)
    lines.append(CRLF)
    return "".join(lines).encode("iso-8859-1")


def send_file_response(wfile: BinaryIO, fileobj: BinaryIO, content_type: str) -> int:
    """
    Send a 200 response whose body is streamed from an open file.

    The file is never read into memory as a whole; it is copied in
    BUFFER_SIZE chunks.

    Returns:
        Body length in bytes, as advertised in Content-Length
    """
    size = os.fstat(fileobj.fileno()).st_size
    wfile.write(build_head(200, "OK", [
        ("Content-Type", content_type),
        ("Content-Length", str(size)),
    ]))
    shutil.copyfileobj(fileobj, wfile, BUFFER_SIZE)
    return size


def send_not_found_response(wfile: BinaryIO) -> int:
    """Send the fixed 404 page. Returns the body length in bytes."""
    wfile.write(build_head(404, "Not Found", [
        ("Content-Type", "text/html"),
        ("Content-Length", str(len(NOT_FOUND_BODY))),
    ]))
    wfile.write(NOT_FOUND_BODY)
    return len(NOT_FOUND_BODY)
