"""Opening-hours check run once before the counter starts taking orders."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import time

from tastybites.config import CLOSE_TIME, OPEN_TIME


@dataclass(frozen=True)
class TimeWindow:
    """Wall-clock opening window, inclusive at both ends."""

    open_time: time = OPEN_TIME
    close_time: time = CLOSE_TIME

    def contains(self, now: time) -> bool:
        return is_open(now, self.open_time, self.close_time)

    def label(self) -> str:
        return f"{format_clock(self.open_time)} - {format_clock(self.close_time)}"


def format_clock(value: time) -> str:
    """Render a time as HH:MM, or HH:MM:SS when seconds are set."""
    if value.second or value.microsecond:
        return value.strftime("%H:%M:%S")
    return value.strftime("%H:%M")


def is_open(now: time, open_time: time, close_time: time) -> bool:
    """Return True when ``now`` falls inside the window.

    Both boundary instants count as open, so 22:00 exactly is still open
    with a 22:00 close.
    """
    return open_time <= now <= close_time


def closure_notice(window: TimeWindow) -> list[str]:
    """Lines shown to the operator when the counter is closed."""
    return [
        "⚠️ Sorry! TastyBites is currently closed.",
        f"Please visit us between {format_clock(window.open_time)} and {format_clock(window.close_time)}.",
    ]
