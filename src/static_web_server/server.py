"""
Listener and dispatcher.

Accepts connections and hands each one to a new thread running
ConnectionHandler. The accept loop never waits on request processing.
There is no worker pool and no admission control: every accepted
connection gets its own thread.
"""

import os
import signal
import socket
import logging
import threading
import socketserver

from .core.config import Config
from .request_handler import ConnectionHandler

logger = logging.getLogger(__name__)


class StaticFileServer(socketserver.ThreadingMixIn, socketserver.TCPServer):
    """TCP server that handles each connection in a new thread."""

    allow_reuse_address = True
    request_queue_size = socket.SOMAXCONN
    # Handler threads are joined on close so in-flight responses complete
    daemon_threads = False
    block_on_close = True

    def __init__(
        self,
        server_address,
        document_root: str,
        default_file: str = Config.DEFAULT_FILE,
        handler_class=ConnectionHandler,
    ):
        """
        Bind and listen immediately.

        Args:
            server_address: (host, port) tuple; port 0 picks a free port
            document_root: Directory to serve, read-only
            default_file: File served for the path "/"

        Raises:
            OSError: If the address cannot be bound (in use, permission denied)
        """
        self.document_root = os.path.abspath(document_root)
        self.default_file = default_file
        self._stop_event = threading.Event()
        self._state_lock = threading.Lock()
        self._serving = False
        super().__init__(server_address, handler_class)

    @property
    def port(self) -> int:
        return self.server_address[1]

    @property
    def stopping(self) -> bool:
        return self._stop_event.is_set()

    def serve_forever(self, poll_interval=0.5):
        with self._state_lock:
            if self._stop_event.is_set():
                return
            self._serving = True
        try:
            super().serve_forever(poll_interval)
        finally:
            with self._state_lock:
                self._serving = False

    def get_request(self):
        try:
            return super().get_request()
        except OSError as e:
            if not self._stop_event.is_set():
                logger.error(f"Error accepting connection: {e}")
            # socketserver drops the failed accept and keeps looping
            raise

    def handle_error(self, request, client_address):
        logger.exception(f"[{client_address[0]}] Unhandled error processing request")

    def stop(self):
        """
        Stop accepting, close the listening socket and wait for in-flight handlers.

        Must not be called from the thread running serve_forever().
        """
        with self._state_lock:
            if self._stop_event.is_set():
                return
            self._stop_event.set()
            serving = self._serving

        if serving:
            self.shutdown()
        self.server_close()
        logger.info("WebServer stopped")


def _raise_keyboard_interrupt(signum, frame):
    raise KeyboardInterrupt


def serve(
    port: int,
    document_root: str,
    host: str = Config.SERVER_HOST,
    default_file: str = Config.DEFAULT_FILE,
):
    """
    Bind to port and serve document_root until interrupted.

    SIGINT and SIGTERM both end the accept loop; connections already
    accepted are served to completion before this returns.

    Raises:
        OSError: If the listening socket cannot be bound
    """
    server = StaticFileServer((host, port), document_root, default_file)
    logger.info(f"WebServer started on port {server.port}, serving {server.document_root}")

    if threading.current_thread() is threading.main_thread():
        signal.signal(signal.SIGTERM, _raise_keyboard_interrupt)

    try:
        server.serve_forever()
    except KeyboardInterrupt:
        logger.info("Shutdown requested")
    finally:
        server.stop()
