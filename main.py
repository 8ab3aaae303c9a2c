#!/usr/bin/env python3
"""
Kickstarter Graveyard — launch the web GUI.

Usage:
    python main.py                          # http://localhost:8000
    python main.py --port 9000              # http://localhost:9000
    python main.py --host 127.0.0.1         # bind to localhost only
    python main.py --data /path/to/graveyard.json
    python main.py --data https://example.org/graveyard.json
    python main.py --reload                 # auto-reload on code changes
"""

from __future__ import annotations

import argparse
import logging
import os
import threading
import webbrowser
from pathlib import Path

import uvicorn

from utils.config import DEFAULT_DATA_PATH
from utils.http import is_url

logger = logging.getLogger("graveyard")


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Launch the Kickstarter Graveyard web interface.",
    )
    parser.add_argument(
        "--host", default=os.getenv("APP_HOST", "127.0.0.1"),
        help="Bind address (default: 127.0.0.1 or APP_HOST env var)",
    )
    parser.add_argument(
        "--port", type=int, default=int(os.getenv("APP_PORT", "8000")),
        help="Port to listen on (default: 8000 or APP_PORT env var)",
    )
    parser.add_argument(
        "--data", default=None,
        help=f"Dataset path or URL (default: {DEFAULT_DATA_PATH} or APP_DATA_PATH env var)",
    )
    parser.add_argument(
        "--reload", action="store_true",
        help="Enable auto-reload on file changes (development mode)",
    )
    parser.add_argument(
        "--no-browser", action="store_true",
        help="Don't open a browser window automatically",
    )
    args = parser.parse_args()
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s %(message)s")

    # api.app reads APP_DATA_PATH when it is imported by uvicorn.
    if args.data is not None:
        os.environ["APP_DATA_PATH"] = str(args.data)

    data_path = os.getenv("APP_DATA_PATH", DEFAULT_DATA_PATH)
    if not is_url(data_path) and not Path(data_path).exists():
        logger.warning("Dataset not found at %s; the page will show a load error", data_path)

    url = f"http://{'localhost' if args.host == '0.0.0.0' else args.host}:{args.port}"
    logger.info("Starting Kickstarter Graveyard at %s (dataset: %s)", url, data_path)

    if not args.no_browser:
        # Open browser after a short delay to let the server start
        threading.Timer(1.5, webbrowser.open, args=(url,)).start()

    uvicorn.run(
        "api.app:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level="info",
    )


if __name__ == "__main__":
    main()
