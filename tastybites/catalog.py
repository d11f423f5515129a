"""The fixed menu and its live stock counts."""

from __future__ import annotations

import logging
from typing import Iterable

from tastybites.constant import MENU_SEED
from tastybites.errors import OutOfRangeError
from tastybites.models import MenuItem, StockResult

logger = logging.getLogger("tastybites.catalog")


class MenuCatalog:
    """Ordered menu whose rows are addressed by 1-based display position."""

    def __init__(self, items: Iterable[MenuItem]) -> None:
        self._items: list[MenuItem] = list(items)
        names = [item.name for item in self._items]
        if len(set(names)) != len(names):
            raise ValueError(f"Menu item names must be unique: {names}")

    def __len__(self) -> int:
        return len(self._items)

    def list(self) -> list[MenuItem]:
        """Return the items in display order."""
        return list(self._items)

    def get(self, index: int) -> MenuItem:
        """Return the item at a 1-based display position."""
        if not (1 <= index <= len(self._items)):
            raise OutOfRangeError(index, len(self._items))
        return self._items[index - 1]

    def reduce_stock(self, item: MenuItem, qty: int) -> StockResult:
        """Take ``qty`` units of ``item`` out of stock if enough are left.

        A shortfall is an ordinary outcome: stock stays as it was and the
        result reports what is still available.
        """
        if qty <= 0:
            raise ValueError(f"qty must be positive: {qty}")
        if qty <= item.available_quantity:
            item.available_quantity -= qty
            logger.debug("stock_reduced item=%r qty=%d left=%d", item.name, qty, item.available_quantity)
            return StockResult(ok=True, available=item.available_quantity)

        logger.debug("stock_short item=%r qty=%d left=%d", item.name, qty, item.available_quantity)
        return StockResult(ok=False, available=item.available_quantity)


def build_default_catalog() -> MenuCatalog:
    """Build a fresh catalog from the seed menu."""
    return MenuCatalog(MenuItem(name, price, stock) for name, price, stock in MENU_SEED)
