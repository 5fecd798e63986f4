"""
Pytest configuration for static-web-server tests.

This file ensures that the src directory is in the Python path
so that tests can import from static_web_server, and provides a
temporary document root plus a live server bound to a free port.
"""
import sys
import socket
import threading
import time
from pathlib import Path

import pytest

# Add src directory to Python path
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from static_web_server.server import StaticFileServer  # noqa: E402

# 10 bytes, so "GET /" answers with Content-Length: 10
INDEX_HTML = b"<p>hi!</p>"
BIG_FILE = bytes(range(256)) * 1000


@pytest.fixture
def doc_root(tmp_path):
    """Document root with a handful of files, plus a file just outside it."""
    root = tmp_path / "www"
    root.mkdir()
    (root / "index.html").write_bytes(INDEX_HTML)
    (root / "notes.txt").write_bytes(b"plain text\n")
    (root / "data.json").write_bytes(b'{"ok": true}')
    (root / "PHOTO.JPG").write_bytes(b"\xff\xd8\xff\xe0fakejpeg")
    (root / "archive.tar.xz").write_bytes(b"\xfd7zXZ\x00")
    (root / "big.bin").write_bytes(BIG_FILE)
    (root / "css").mkdir()
    (root / "css" / "style.css").write_bytes(b"body { color: red; }\n")
    (root / "empty").mkdir()
    (tmp_path / "secret.txt").write_bytes(b"outside the document root\n")
    return root


@pytest.fixture
def running_server(doc_root):
    """StaticFileServer on 127.0.0.1 with an OS-assigned port, serving doc_root."""
    server = StaticFileServer(("127.0.0.1", 0), str(doc_root), default_file="index.html")
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield server
    server.stop()
    thread.join(timeout=5)


def recv_all(sock: socket.socket) -> bytes:
    """Read until the peer closes the connection."""
    chunks = []
    while True:
        chunk = sock.recv(4096)
        if not chunk:
            return b"".join(chunks)
        chunks.append(chunk)


@pytest.fixture
def raw_request():
    """Send raw bytes to a port and return everything the server sends back."""
    def _raw_request(port: int, payload: bytes, timeout: float = 5.0) -> bytes:
        with socket.create_connection(("127.0.0.1", port), timeout=timeout) as sock:
            sock.sendall(payload)
            return recv_all(sock)
    return _raw_request


@pytest.fixture
def split_response():
    """Split a raw response into (status line, header dict, body)."""
    def _split(raw: bytes):
        head, _, body = raw.partition(b"\r\n\r\n")
        lines = head.decode("iso-8859-1").split("\r\n")
        headers = {}
        for line in lines[1:]:
            name, _, value = line.partition(": ")
            headers[name] = value
        return lines[0], headers, body
    return _split


@pytest.fixture
def wait_until():
    """Poll a condition until it holds or the timeout expires."""
    def _wait_until(condition, timeout: float = 5.0) -> bool:
        deadline = time.monotonic() + timeout
        while time.monotonic() < deadline:
            if condition():
                return True
            time.sleep(0.01)
        return condition()
    return _wait_until
