"""
Shared configuration for the server and the CLI.
"""
import os
import logging
from dotenv import load_dotenv

load_dotenv()

MIN_PORT = 1024
MAX_PORT = 65535


class Config:
    """Centralized configuration loaded from environment variables."""

    # Listener
    SERVER_HOST = os.getenv("SERVER_HOST", "0.0.0.0")
    # Raw string; validate_port parses it where the CLI reports errors
    SERVER_PORT = os.getenv("SERVER_PORT", "5555")

    # Content
    DOCUMENT_ROOT = os.getenv("DOCUMENT_ROOT", "./www")
    DEFAULT_FILE = os.getenv("DEFAULT_FILE", "index.html")

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


def validate_port(value) -> int:
    """
    Parse and range-check a listening port.

    Args:
        value: Port as given on the command line or in the environment

    Returns:
        The port as an int

    Raises:
        ValueError: If the value is not an integer in MIN_PORT..MAX_PORT
    """
    try:
        port = int(value)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid port number: {value}")

    if port < MIN_PORT or port > MAX_PORT:
        raise ValueError(f"Port must be between {MIN_PORT} and {MAX_PORT}")
    return port


def setup_logging():
    """Configure logging based on LOG_LEVEL."""
    logging.basicConfig(
        level=getattr(logging, Config.LOG_LEVEL.upper(), logging.INFO),
        format='%(asctime)s - %(levelname)s - %(message)s'
    )
    return logging.getLogger(__name__)
