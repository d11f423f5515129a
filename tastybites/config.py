"""Compiled-in runtime configuration for the ordering counter."""

from __future__ import annotations

from datetime import time

OPEN_TIME = time(8, 0)
CLOSE_TIME = time(22, 0)

# Entering exactly this at the selection prompt ends the order.
TERMINATOR = "0"

RECEIPT_DIR = "."
RECEIPT_FILE_PREFIX = "TastyBites_Receipt_"
RECEIPT_TIMESTAMP_FORMAT = "%Y-%m-%d_%H%M%S"
RECEIPT_ENCODING = "utf-8"

NAME_WIDTH = 15
CURRENCY_SYMBOL = "$"

DEBUG_LOG_PATH = "/tmp/tastybites-debug.log"
