"""Minimal multi-client static-file HTTP/1.0 server."""
from .server import StaticFileServer, serve
from .request_handler import ConnectionHandler

__all__ = ["StaticFileServer", "ConnectionHandler", "serve"]
