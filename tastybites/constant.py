"""Editable static menu configuration."""

from __future__ import annotations

# (name, unit price, opening stock) in display order.
MENU_SEED: list[tuple[str, str, int]] = [
    ("Espresso", "3.50", 10),
    ("Cappuccino", "4.00", 8),
    ("Latte", "4.50", 6),
    ("Mocha", "5.00", 5),
    ("Croissant", "2.75", 15),
    ("Muffin", "2.50", 12),
    ("Sandwich", "5.50", 7),
]
