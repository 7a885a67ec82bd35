"""
Server entrypoint: configure logging and start uvicorn with the FastAPI app.

Run from backend dir: python backend_entry.py [--host HOST] [--port PORT] [--reload]
Defaults come from HOST / PORT (127.0.0.1:3001).
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

_backend_dir = Path(__file__).resolve().parent
if str(_backend_dir) not in sys.path:
    sys.path.insert(0, str(_backend_dir))


def main() -> int:
    from core.config import get_settings
    from core.logging import setup_logging

    settings = get_settings()
    setup_logging(settings)
    parser = argparse.ArgumentParser(description="Start the Sports Prediction API server")
    parser.add_argument("--host", default=settings.host, help="Bind address")
    parser.add_argument("--port", type=int, default=settings.port, help="Bind port")
    parser.add_argument("--reload", action="store_true", help="Auto-reload on code changes (development)")
    args = parser.parse_args()

    import uvicorn

    logger = logging.getLogger(__name__)
    logger.info("Backend entry: host=%s port=%s env=%s", args.host, args.port, settings.env)
    uvicorn.run(
        "main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=settings.log_level.lower(),
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
