"""Receipt rendering and persistence."""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

from tastybites.config import (
    NAME_WIDTH,
    RECEIPT_DIR,
    RECEIPT_ENCODING,
    RECEIPT_FILE_PREFIX,
    RECEIPT_TIMESTAMP_FORMAT,
)
from tastybites.errors import PersistenceError
from tastybites.ledger import OrderLedger
from tastybites.rendering import format_price

logger = logging.getLogger("tastybites.receipt")

_HEADER = "========== TASTY BITES ONLINE BILL =========="
_RULE = "-------------------------------------------"
_FOOTER = "==========================================="


def render(ledger: OrderLedger, timestamp: datetime) -> str:
    """Render the ledger as a plain-text receipt."""
    lines = [
        _HEADER,
        f"🕒 Order Accepted Time: {timestamp.isoformat(timespec='seconds')}",
        _RULE,
    ]
    for line in ledger:
        lines.append(f"{line.item.name:<{NAME_WIDTH}} x {line.quantity:2d} = {format_price(line.line_total)}")
    lines.extend(
        [
            _RULE,
            f"Total Items Ordered: {ledger.line_count()}",
            f"Total Quantity:      {ledger.total_quantity()}",
            f"Grand Total:        {format_price(ledger.total_amount())}",
            _RULE,
            "✅ Your order has been accepted. Please collect it soon!",
            "Thank you for ordering at TastyBites! 🍔",
            _FOOTER,
        ]
    )
    return "\n".join(lines) + "\n"


def receipt_filename(timestamp: datetime) -> str:
    """Sortable receipt file name for an order time."""
    return f"{RECEIPT_FILE_PREFIX}{timestamp.strftime(RECEIPT_TIMESTAMP_FORMAT)}.txt"


def persist(rendered: str, timestamp: datetime, directory: str | Path = RECEIPT_DIR) -> Path:
    """Write a rendered receipt next to earlier ones and return its path."""
    path = Path(directory) / receipt_filename(timestamp)
    try:
        with path.open("w", encoding=RECEIPT_ENCODING) as fh:
            fh.write(rendered)
    except OSError as exc:
        logger.warning("receipt_write_failed path=%s error=%r", path, exc)
        raise PersistenceError(str(path), exc.strerror or str(exc)) from exc

    logger.info("receipt_written path=%s bytes=%d", path, len(rendered.encode(RECEIPT_ENCODING)))
    return path
