"""Command-line entry point: run the local transfer server.

Usage:
    drivetransfer                         # serve on http://localhost:3000
    drivetransfer --port 8080 --no-browser
    drivetransfer --credentials path/to/client.json --token path/to/token.json
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import threading
import webbrowser
from pathlib import Path
from typing import Optional, Sequence

from drivetransfer.config import Settings
from drivetransfer.errors import ConfigurationError

logger = logging.getLogger(__name__)

BROWSER_DELAY_SEC = 1.0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="drivetransfer",
        description="Local web app for transferring ownership of Google Drive documents.",
    )
    parser.add_argument("--host", help="Bind address (default: localhost)")
    parser.add_argument("--port", type=int, help="Bind port (default: 3000)")
    parser.add_argument("--credentials", type=Path, help="OAuth client JSON file")
    parser.add_argument("--token", type=Path, help="OAuth token file")
    parser.add_argument("--redirect-uri", help="OAuth redirect URI override")
    parser.add_argument(
        "--no-browser",
        action="store_true",
        help="Do not open the front-end in a browser on startup",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )
    return parser


def settings_from_args(args: argparse.Namespace, base: Settings) -> Settings:
    """Overlay explicitly given CLI flags on settings loaded from the environment."""
    overrides: dict[str, object] = {}
    if args.host:
        overrides["host"] = args.host
    if args.port is not None:
        overrides["port"] = args.port
    if args.credentials is not None:
        overrides["credentials_file"] = args.credentials
    if args.token is not None:
        overrides["token_file"] = args.token
    if args.redirect_uri:
        overrides["redirect_uri"] = args.redirect_uri
    if args.no_browser:
        overrides["open_browser"] = False
    if args.log_level:
        overrides["log_level"] = args.log_level
    return dataclasses.replace(base, **overrides)


def _open_browser(url: str) -> None:
    try:
        opened = webbrowser.open(url)
    except webbrowser.Error as exc:
        logger.info("Could not open a browser (%s)", exc)
        opened = False
    if not opened:
        logger.info("Please open %s in your browser", url)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = settings_from_args(args, Settings.from_env())
    except ConfigurationError as exc:
        logging.basicConfig(level=logging.INFO)
        logger.error("Invalid configuration: %s", exc)
        return 1

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    import uvicorn

    from drivetransfer.auth import AuthSession
    from drivetransfer.web import create_app

    session = AuthSession(settings)
    try:
        session.initialize()
    except ConfigurationError as exc:
        logger.error("Initialization failed: %s", exc)
        logger.error("Make sure %s exists", settings.credentials_file)
        return 1

    app = create_app(session, public_dir=settings.public_dir)

    url = settings.base_url
    logger.info("Drive Transfer Server running at %s", url)
    if settings.open_browser:
        threading.Timer(BROWSER_DELAY_SEC, _open_browser, args=(url,)).start()

    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
    return 0
