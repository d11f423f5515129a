"""Interactive ordering session for the counter operator."""

from __future__ import annotations

import logging
import re
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Callable

from rich.console import Console

from tastybites.catalog import MenuCatalog
from tastybites.config import RECEIPT_DIR, TERMINATOR
from tastybites.errors import (
    InsufficientStockError,
    InvalidNumberError,
    InvalidQuantityError,
    OutOfRangeError,
    PersistenceError,
)
from tastybites.hours import TimeWindow, closure_notice
from tastybites.ledger import OrderLedger
from tastybites.models import MenuItem, OrderLine
from tastybites.receipt import persist, render
from tastybites.rendering import format_menu, notice

logger = logging.getLogger("tastybites.ordering")

SELECTION_PROMPT = f"Enter item numbers to order (e.g. 1 2 3, or {TERMINATOR} to finish): "

_INT_TOKEN = re.compile(r"[+-]?[0-9]+")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


class SessionState(str, Enum):
    AWAITING_SELECTION = "awaiting_selection"
    AWAITING_QUANTITY = "awaiting_quantity"
    CHECKOUT = "checkout"


def parse_int(token: str) -> int:
    """Parse a 32-bit decimal integer token such as "3" or "+3"."""
    if not _INT_TOKEN.fullmatch(token):
        raise InvalidNumberError(token)
    value = int(token)
    if not (_INT_MIN <= value <= _INT_MAX):
        raise InvalidNumberError(token)
    return value


class OrderingSession:
    """One operator's order, from the opening-hours check to the receipt.

    The catalog and ledger are owned by the session; nothing is shared
    between sessions. Input arrives through ``read_line``, which takes a
    prompt and returns one line (``EOFError`` ends the order), so tests
    can script a whole conversation.
    """

    def __init__(
        self,
        catalog: MenuCatalog,
        *,
        ledger: OrderLedger | None = None,
        console: Console | None = None,
        read_line: Callable[[str], str] | None = None,
        clock: Callable[[], datetime] | None = None,
        window: TimeWindow | None = None,
        receipt_dir: str | Path = RECEIPT_DIR,
    ) -> None:
        self.catalog = catalog
        self.ledger = ledger if ledger is not None else OrderLedger()
        self.console = console or Console()
        self._read_line = read_line or self.console.input
        self._clock = clock or datetime.now
        self.window = window or TimeWindow()
        self.receipt_dir = receipt_dir
        self.state = SessionState.AWAITING_SELECTION
        self.receipt_path: Path | None = None

    def run(self) -> Path | None:
        """Greet, check opening hours, take the order and check out.

        Returns the saved receipt path, or None when nothing was saved.
        """
        self.console.print("🍔 Welcome to TastyBites Online Ordering 🍟", style="bold")
        self.console.print(f"🕗 Café Timings: {self.window.label()}")

        now = self._clock().time()
        if not self.window.contains(now):
            logger.info("gate_closed now=%s window=%r", now.isoformat(), self.window.label())
            self.console.print()
            for line in closure_notice(self.window):
                self.console.print(notice(line, "warn"))
            return None

        logger.info("gate_open now=%s", now.isoformat())
        while self.state is not SessionState.CHECKOUT:
            self.console.print(format_menu(self.catalog.list()))
            raw = self._prompt(SELECTION_PROMPT)
            if raw is None:
                logger.info("selection_eof")
                self.state = SessionState.CHECKOUT
                break
            self.handle_line(raw)

        return self.checkout()

    def handle_line(self, raw: str) -> SessionState:
        """Apply one selection line; every token succeeds or fails on its own."""
        line = raw.strip()
        if line == TERMINATOR:
            logger.info("terminator_entered lines=%d", self.ledger.line_count())
            self.state = SessionState.CHECKOUT
            return self.state

        logger.debug("selection_line raw=%r", raw)
        for token in line.split():
            self.handle_token(token)
            if self.state is SessionState.CHECKOUT:
                break
        return self.state

    def handle_token(self, token: str) -> OrderLine | None:
        """Resolve one item number, ask for its quantity and take stock."""
        try:
            item = self._select(token)
            self.state = SessionState.AWAITING_QUANTITY
            qty = self._read_quantity(item)
            if qty is None:
                logger.info("quantity_eof item=%r", item.name)
                self.state = SessionState.CHECKOUT
                return None
            self.state = SessionState.AWAITING_SELECTION
            order_line = self._take(item, qty)
        except InsufficientStockError as exc:
            self.state = SessionState.AWAITING_SELECTION
            logger.info("insufficient_stock item=%r requested=%d available=%d", exc.name, exc.requested, exc.available)
            self.console.print(notice(f"⚠️ {exc}\n", "warn"))
            return None
        except OutOfRangeError as exc:
            logger.info("token_rejected token=%r reason=out_of_range", exc.token)
            self.console.print(notice(f"❌ {exc}", "error"))
            return None
        except InvalidQuantityError as exc:
            self.state = SessionState.AWAITING_SELECTION
            logger.info("token_rejected token=%r reason=quantity qty=%d", token, exc.quantity)
            self.console.print(notice(f"❌ {exc}\n", "error"))
            return None
        except InvalidNumberError as exc:
            self.state = SessionState.AWAITING_SELECTION
            logger.info("token_rejected token=%r reason=not_a_number", exc.token)
            self.console.print(notice(f"⚠️ {exc}", "warn"))
            return None

        logger.info("line_added item=%r qty=%d total=%s", item.name, qty, order_line.line_total)
        self.console.print(notice(f"✅ {item.name} added!\n", "ok"))
        return order_line

    def checkout(self) -> Path | None:
        """Show and save the receipt, or say goodbye when nothing was ordered."""
        self.state = SessionState.CHECKOUT
        if self.ledger.is_empty():
            logger.info("checkout_empty")
            self.console.print(notice("🕒 No items ordered. Goodbye!", "info"))
            return None

        timestamp = self._clock()
        receipt = render(self.ledger, timestamp)
        logger.info(
            "checkout lines=%d qty=%d total=%s",
            self.ledger.line_count(),
            self.ledger.total_quantity(),
            self.ledger.total_amount(),
        )
        self.console.print()
        self.console.print(receipt, markup=False, highlight=False, emoji=False)

        try:
            path = persist(receipt, timestamp, self.receipt_dir)
        except PersistenceError as exc:
            self.console.print(notice(f"⚠️ Error saving receipt: {exc.reason}", "warn"))
            return None

        self.receipt_path = path
        self.console.print(notice(f"🧾 Receipt saved as '{path.name}'.", "ok"))
        return path

    def _prompt(self, prompt: str) -> str | None:
        try:
            return self._read_line(prompt)
        except EOFError:
            return None

    def _select(self, token: str) -> MenuItem:
        index = parse_int(token)
        try:
            return self.catalog.get(index)
        except OutOfRangeError as exc:
            raise OutOfRangeError(exc.index, exc.size, token) from None

    def _read_quantity(self, item: MenuItem) -> int | None:
        # Blank lines are skipped until a value arrives; only the first value
        # on the line is used.
        tokens: list[str] = []
        while not tokens:
            raw = self._prompt(f"Enter quantity for {item.name}: ")
            if raw is None:
                return None
            tokens = raw.split()
        qty = parse_int(tokens[0])
        if qty <= 0:
            raise InvalidQuantityError(qty)
        return qty

    def _take(self, item: MenuItem, qty: int) -> OrderLine:
        result = self.catalog.reduce_stock(item, qty)
        if not result.ok:
            raise InsufficientStockError(item.name, qty, result.available)
        return self.ledger.add_line(item, qty)

