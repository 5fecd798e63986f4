#!/usr/bin/env python3
"""
Run the static web server.

Usage:
    python run.py              # Serve $DOCUMENT_ROOT on $SERVER_PORT (default ./www on 5555)
    python run.py 8080         # Serve on port 8080

    # or with venv
    .venv/Scripts/python run.py 8080
"""
import sys
import os

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))


if __name__ == "__main__":
    from static_web_server.cli import main

    sys.exit(main(["serve", *sys.argv[1:]]))
