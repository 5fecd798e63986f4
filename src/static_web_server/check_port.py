import errno
import socket
import logging

logger = logging.getLogger(__name__)


def is_port_available(host: str, port: int) -> bool:
    """
    Check whether we could listen on host:port right now.

    Uses bind rather than connect: what matters is whether this process
    can listen on the port, not whether something answers there.
    """
    bind_host = "" if host == "0.0.0.0" else host

    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    # Same option the server binds with, so TIME_WAIT leftovers don't count as "in use"
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    try:
        sock.bind((bind_host, port))
        return True
    except OSError as e:
        # 10048 is WSAEADDRINUSE on Windows
        if e.errno in (errno.EADDRINUSE, 10048):
            return False
        raise
    finally:
        sock.close()


def describe_bind_error(port: int, error: OSError) -> str:
    """Human-readable reason a listening socket could not be bound."""
    if error.errno in (errno.EADDRINUSE, 10048):
        return f"Port {port} is already in use"
    if error.errno in (errno.EACCES, errno.EPERM):
        return f"Permission denied binding port {port}"
    return f"Error creating listening socket on port {port}: {error}"
