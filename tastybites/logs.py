"""Debug log wiring.

The counter console belongs to the operator, so log records only ever go
to a file.
"""

from __future__ import annotations

import logging
from pathlib import Path

from tastybites.config import DEBUG_LOG_PATH

LOGGER_NAME = "tastybites"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(path: str | Path = DEBUG_LOG_PATH, level: int = logging.DEBUG) -> logging.Logger:
    """Attach a file handler to the package logger and return it.

    If the file cannot be opened the logger is silenced instead, so a bad
    log path never stops the counter from taking orders.
    """
    root = logging.getLogger(LOGGER_NAME)
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    root.setLevel(level)
    root.propagate = False

    log_path = Path(path)
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(log_path, encoding="utf-8")
    except OSError:
        root.addHandler(logging.NullHandler())
        return root

    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    return root
