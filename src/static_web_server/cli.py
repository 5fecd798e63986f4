#!/usr/bin/env python3
"""
Static Web Server CLI - serve a directory and check on a running server

Usage:
    python -m static_web_server.cli serve 5555 --root ./www   # Serve ./www on port 5555
    python -m static_web_server.cli check-port 5555           # Is the port free?
    python -m static_web_server.cli status /index.html        # Fetch a path from a running server
"""

import asyncio
import argparse
import os
import sys

import httpx

from .check_port import describe_bind_error, is_port_available
from .core.config import Config, setup_logging, validate_port
from .server import serve

# Fix Windows console encoding for Unicode
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding='utf-8', errors='replace')
    sys.stderr.reconfigure(encoding='utf-8', errors='replace')


def cmd_serve(port: int, document_root: str, host: str) -> int:
    """Serve document_root until Ctrl+C. Returns the process exit status."""
    if not os.path.isdir(document_root):
        print(f"Error: Document root {document_root} is not a directory", file=sys.stderr)
        return 1

    print("=" * 60)
    print("  Static Web Server")
    print("=" * 60)
    print(f"  Host: {host}")
    print(f"  Port: {port}")
    print(f"  Document root: {os.path.abspath(document_root)}")
    print(f"  Log Level: {Config.LOG_LEVEL}")
    print("=" * 60)
    print(f"Open browser: http://localhost:{port}/{Config.DEFAULT_FILE}")
    print("Press Ctrl+C to stop the server")
    print("-" * 60)

    try:
        serve(port, document_root, host=host, default_file=Config.DEFAULT_FILE)
    except OSError as e:
        print(f"Error: {describe_bind_error(port, e)}", file=sys.stderr)
        return 1
    return 0


def cmd_check_port(port: int, host: str) -> int:
    """Report whether the port can be bound"""
    print(f"Checking if port {port} is available on {host}...")
    try:
        available = is_port_available(host, port)
    except OSError as e:
        print(f"Error checking port {port}: {describe_bind_error(port, e)}")
        return 1

    if available:
        print(f"  ✓ Port {port} is available.")
        return 0

    print(f"  ✗ Port {port} is already in use!")
    print("    Stop the existing process or pick another port (SERVER_PORT in .env).")
    return 1


async def cmd_status(host: str, port: int, path: str) -> int:
    """Fetch one path from a running server and print the response metadata"""
    url = f"http://{host}:{port}{path}"
    print(f"Requesting {url}")

    async with httpx.AsyncClient(timeout=10.0) as client:
        try:
            response = await client.get(url)
        except httpx.HTTPError as e:
            print(f"  ✗ Cannot reach server: {e}")
            return 1

    print(f"  ✓ {response.http_version} {response.status_code} {response.reason_phrase}")
    print(f"    Content-Type: {response.headers.get('content-type', '(none)')}")
    print(f"    Content-Length: {response.headers.get('content-length', '(none)')}")
    print(f"    Received: {len(response.content)} bytes")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="static-web-server",
        description="Static Web Server - serve a directory over HTTP/1.0",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  static-web-server serve 5555 --root ./www     Serve ./www on port 5555
  static-web-server check-port 5555             Check the port is free
  static-web-server status / --port 5555        Fetch / from a running server
        """
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve_parser = subparsers.add_parser("serve", help="Serve the document root")
    serve_parser.add_argument("port", nargs="?", default=Config.SERVER_PORT, help="Listening port (1024-65535)")
    serve_parser.add_argument("--root", default=Config.DOCUMENT_ROOT, help="Document root directory")
    serve_parser.add_argument("--host", default=Config.SERVER_HOST, help="Interface to bind")

    check_parser = subparsers.add_parser("check-port", help="Check whether the port can be bound")
    check_parser.add_argument("port", nargs="?", default=Config.SERVER_PORT, help="Port to check")
    check_parser.add_argument("--host", default=Config.SERVER_HOST, help="Interface to check")

    status_parser = subparsers.add_parser("status", help="Fetch a path from a running server")
    status_parser.add_argument("path", nargs="?", default="/", help="Request path")
    status_parser.add_argument("--port", default=Config.SERVER_PORT, help="Server port")
    status_parser.add_argument("--host", default="127.0.0.1", help="Server host")

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        port = validate_port(args.port)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    setup_logging()

    if args.command == "serve":
        return cmd_serve(port, args.root, args.host)
    elif args.command == "check-port":
        return cmd_check_port(port, args.host)
    elif args.command == "status":
        return asyncio.run(cmd_status(args.host, port, args.path))
    return 1


if __name__ == "__main__":
    sys.exit(main())
