"""Order lines accumulated during one counter session."""

from __future__ import annotations

from decimal import Decimal
from typing import Iterator

from tastybites.models import MenuItem, OrderLine, to_money


class OrderLedger:
    """Append-only list of accepted order lines, kept in selection order."""

    def __init__(self) -> None:
        self._lines: list[OrderLine] = []

    def __iter__(self) -> Iterator[OrderLine]:
        return iter(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    @property
    def lines(self) -> list[OrderLine]:
        return list(self._lines)

    def add_line(self, item: MenuItem, qty: int) -> OrderLine:
        # Stock has already been taken by the caller.
        line = OrderLine(item=item, quantity=qty)
        self._lines.append(line)
        return line

    def is_empty(self) -> bool:
        return not self._lines

    def total_amount(self) -> Decimal:
        """Sum of all line totals in exact decimal currency."""
        return to_money(sum((line.line_total for line in self._lines), Decimal("0")))

    def total_quantity(self) -> int:
        return sum(line.quantity for line in self._lines)

    def line_count(self) -> int:
        """Number of distinct lines, not units."""
        return len(self._lines)
