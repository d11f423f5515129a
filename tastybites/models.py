"""Domain models for the TastyBites counter."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

CENT = Decimal("0.01")


def to_money(value: Decimal | str | int) -> Decimal:
    """Coerce a price to a Decimal quantized to cents."""
    return Decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


@dataclass(eq=False)
class MenuItem:
    """A purchasable item and its live stock count.

    Items compare by identity: two catalog rows are never the same item,
    even if they share a price and stock level.
    """

    name: str
    unit_price: Decimal
    available_quantity: int

    def __post_init__(self) -> None:
        self.unit_price = to_money(self.unit_price)
        if self.unit_price < 0:
            raise ValueError(f"unit_price must not be negative: {self.unit_price}")
        if self.available_quantity < 0:
            raise ValueError(f"available_quantity must not be negative: {self.available_quantity}")

    @property
    def sold_out(self) -> bool:
        return self.available_quantity == 0


@dataclass(frozen=True)
class OrderLine:
    """One accepted selection: an item and the quantity taken from stock."""

    item: MenuItem
    quantity: int

    @property
    def line_total(self) -> Decimal:
        return self.item.unit_price * self.quantity


@dataclass(frozen=True)
class StockResult:
    """Outcome of a stock reduction.

    ``available`` is the stock left after a successful reduction, or the
    untouched stock when the request could not be met.
    """

    ok: bool
    available: int
