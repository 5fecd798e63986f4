"""
HTTP Request Module

Reads the request line and header block from a connection's input stream.

Only the request line is kept. Header lines are read up to the blank line
that ends the header block and thrown away, since the server has no
per-header behavior. Method and version are carried through but never
enforced.
"""

import logging
import re
from dataclasses import dataclass
from typing import BinaryIO, Optional

logger = logging.getLogger(__name__)

# Same limit http.server puts on a single request or header line
MAX_LINE_LENGTH = 65536

# Undecodable bytes survive as surrogates, so os functions map the path back to the raw bytes
LINE_ENCODING = "utf-8"
LINE_ERRORS = "surrogateescape"

# Request line tokens are separated by ASCII whitespace only
TOKEN_SEPARATOR = re.compile(r"[ \t\f]+")


class MalformedRequestError(ValueError):
    """Raised when the request line cannot be split into method, path and version."""


@dataclass(frozen=True)
class ParsedRequest:
    """The three tokens of an HTTP request line."""
    method: str
    path: str  # Client supplied, untrusted
    http_version: str

    @property
    def request_line(self) -> str:
        """Printable form of the request line; undecodable bytes show as \\udcXX escapes."""
        line = f"{self.method} {self.path} {self.http_version}"
        return line.encode(LINE_ENCODING, "backslashreplace").decode(LINE_ENCODING)


def read_line(rfile: BinaryIO) -> Optional[str]:
    """
    Read one line and strip its terminator.

    Accepts CRLF or a bare LF as the terminator.

    Returns:
        The decoded line, or None at end of stream
    """
    raw = rfile.readline(MAX_LINE_LENGTH + 1)
    if not raw:
        return None
    if len(raw) > MAX_LINE_LENGTH:
        raise MalformedRequestError(f"Line longer than {MAX_LINE_LENGTH} bytes")
    return raw.decode(LINE_ENCODING, LINE_ERRORS).rstrip("\r\n")


def parse_request_line(line: str) -> ParsedRequest:
    """
    Split a request line into method, path and version.

    Raises:
        MalformedRequestError: If the line does not have exactly three tokens
    """
    tokens = TOKEN_SEPARATOR.split(line.strip(" \t\f"))
    if len(tokens) != 3:
        raise MalformedRequestError(f"Malformed request line: {line!r}")

    method, path, http_version = tokens
    return ParsedRequest(method=method, path=path, http_version=http_version)


def consume_headers(rfile: BinaryIO) -> int:
    """
    Read and discard header lines up to the blank separator line or EOF.

    Returns:
        Number of header lines discarded
    """
    count = 0
    while True:
        line = read_line(rfile)
        if line is None or line == "":
            return count
        count += 1


def read_request(rfile: BinaryIO) -> Optional[ParsedRequest]:
    """
    Read a request from the stream: the first non-empty line, then the headers.

    Returns:
        The parsed request line, or None if the stream ended before any
        request line arrived (client disconnected without sending anything)

    Raises:
        MalformedRequestError: If the request line is malformed or too long
    """
    line = read_line(rfile)
    while line == "":
        line = read_line(rfile)
    if line is None:
        return None

    request = parse_request_line(line)
    discarded = consume_headers(rfile)
    logger.debug(f"Discarded {discarded} header lines for {request.request_line}")
    return request
