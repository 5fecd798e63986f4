# Core shared modules for the server and the CLI
from .config import Config, setup_logging, validate_port, MIN_PORT, MAX_PORT
from .content_types import CONTENT_TYPES, DEFAULT_CONTENT_TYPE, get_content_type

__all__ = [
    # Config
    "Config",
    "setup_logging",
    "validate_port",
    "MIN_PORT",
    "MAX_PORT",
    # Content types
    "CONTENT_TYPES",
    "DEFAULT_CONTENT_TYPE",
    "get_content_type",
]
