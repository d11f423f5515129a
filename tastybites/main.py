"""Entry point for the TastyBites counter."""

from __future__ import annotations

import argparse
import logging
from typing import Sequence

from rich.console import Console

from tastybites.catalog import build_default_catalog
from tastybites.config import DEBUG_LOG_PATH, RECEIPT_DIR
from tastybites.logs import configure_logging
from tastybites.ordering import OrderingSession

logger = logging.getLogger("tastybites.main")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tastybites", description="TastyBites café counter ordering.")
    parser.add_argument("--receipt-dir", default=RECEIPT_DIR, help="Directory receipts are written to (default: .)")
    parser.add_argument("--debug-log", default=DEBUG_LOG_PATH, help=f"Debug log file (default: {DEBUG_LOG_PATH})")
    return parser


def main(argv: Sequence[str] | None = None, console: Console | None = None) -> int:
    """Run one ordering session. Always exits 0."""
    args = build_parser().parse_args(argv)
    configure_logging(args.debug_log)
    console = console or Console()
    logger.info("app_start receipt_dir=%s", args.receipt_dir)

    session = OrderingSession(build_default_catalog(), console=console, receipt_dir=args.receipt_dir)
    session.run()

    logger.info("app_exit state=%s", session.state.value)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
