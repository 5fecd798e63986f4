"""
Per-connection request handler.

One handler instance serves exactly one request on one connection:
read request line -> discard headers -> resolve file -> respond -> close.
The socket itself is closed by the server once handle() returns or raises.
"""

import logging
import socketserver
from typing import BinaryIO, Optional

from .core.content_types import get_content_type
from .file_resolver import PathOutsideRootError, resolve_path
from .http_request import MalformedRequestError, ParsedRequest, read_request
from .http_response import send_file_response, send_not_found_response

logger = logging.getLogger(__name__)


class ConnectionHandler(socketserver.StreamRequestHandler):
    """Serves static files from the server's document root, one request per connection."""

    # No read deadline: a client that never sends its request line keeps its thread
    timeout = None

    @property
    def client_ip(self) -> str:
        return self.client_address[0]

    def handle(self):
        try:
            self.serve_request()
        except MalformedRequestError as e:
            # Closed without a response
            logger.warning(f"[{self.client_ip}] Error processing request: {e}")
        except OSError as e:
            logger.error(f"[{self.client_ip}] Error processing request: {e}")

    def serve_request(self):
        request = read_request(self.rfile)
        if request is None:
            logger.debug(f"[{self.client_ip}] Disconnected without sending a request")
            return

        logger.info(f"[{self.client_ip}] {request.request_line}")

        fileobj = self.open_requested_file(request)
        if fileobj is None:
            send_not_found_response(self.wfile)
            logger.info(f"[{self.client_ip}] Sent: 404 Not Found")
            return

        with fileobj:
            content_type = get_content_type(fileobj.name)
            size = send_file_response(self.wfile, fileobj, content_type)
        logger.info(f"[{self.client_ip}] Sent: 200 OK ({size} bytes)")

    def open_requested_file(self, request: ParsedRequest) -> Optional[BinaryIO]:
        """Open the file a request maps to, or return None when it gets a 404."""
        try:
            file_path = resolve_path(
                self.server.document_root,
                request.path,
                self.server.default_file,
            )
        except PathOutsideRootError as e:
            logger.warning(f"[{self.client_ip}] {e}")
            return None

        if file_path is None:
            return None

        try:
            return open(file_path, "rb")
        except OSError as e:
            logger.warning(f"[{self.client_ip}] Cannot open {file_path!r}: {e}")
            return None
