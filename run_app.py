#!/usr/bin/env python
"""Entry point for the Dash log explorer.

Usage
-----
    python run_app.py [--logs path/to/logs.json]

Without ``--logs`` the app starts on the upload page.
"""

from __future__ import annotations

import argparse
import logging
import sys

from log_explorer.config import ExplorerConfig
from log_explorer.errors import LogLoadError
from log_explorer.io import load_logs
from log_explorer.session import ExplorerSession

logger = logging.getLogger("log_explorer")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Launch the error-log explorer web app")
    parser.add_argument(
        "--logs", default=None,
        help="Optional JSON log file to load on startup",
    )
    parser.add_argument(
        "--host", default="127.0.0.1",
        help="Host to bind to (default: 127.0.0.1)",
    )
    parser.add_argument(
        "--port", type=int, default=8050,
        help="Port to serve on (default: 8050)",
    )
    parser.add_argument(
        "--debounce-ms", type=int, default=250,
        help="Quiet window before a selection settles (default: 250)",
    )
    parser.add_argument(
        "--wrap-width", type=int, default=50,
        help="Line width for wrapped error messages (default: 50)",
    )
    parser.add_argument(
        "--log-level", default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    parser.add_argument(
        "--debug", action="store_true",
        help="Run Dash in debug mode",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    config = ExplorerConfig.from_args(args)

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    session = ExplorerSession(config)
    if args.logs:
        logger.info("Loading logs from %s...", args.logs)
        try:
            session.load_collection(load_logs(args.logs))
        except LogLoadError as exc:
            logger.error("Could not load %s: %s", args.logs, exc)
            return 1
        logger.info("  %s", session.status_text())

    logger.info("Starting Dash app on http://%s:%s/", config.host, config.port)

    from log_explorer.app import create_app
    app = create_app(session)
    app.run(host=config.host, port=config.port, debug=config.debug)
    return 0


if __name__ == "__main__":
    sys.exit(main())
