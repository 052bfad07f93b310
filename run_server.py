#!/usr/bin/env python3
"""Serve the Parity Validator 3000 web form.

Usage:
    python run_server.py             # host/port from settings (PV_HOST, PV_PORT)
    python run_server.py --reload    # restart on code changes
"""
import argparse
import logging
import sys
from pathlib import Path

import uvicorn

sys.path.insert(0, str(Path(__file__).resolve().parent))

from settings import Settings


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--reload", action="store_true", help="Restart the server on code changes")
    args = parser.parse_args()

    settings = Settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
        datefmt="%H:%M:%S",
    )
    logging.getLogger("run_server").info(
        "Starting Parity Validator 3000 on http://%s:%d", settings.host, settings.port
    )

    uvicorn.run(
        "web.server:app",
        host=settings.host,
        port=settings.port,
        reload=args.reload,
        log_config=None,
    )


if __name__ == "__main__":
    main()
