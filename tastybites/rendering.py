"""Console rendering helpers."""

from __future__ import annotations

from decimal import Decimal

from rich.text import Text

from tastybites.config import CURRENCY_SYMBOL, NAME_WIDTH
from tastybites.models import MenuItem

MENU_HEADER = "------ MENU ------"
MENU_FOOTER = "------------------"

NOTICE_STYLES = {
    "ok": "bold green",
    "warn": "yellow",
    "error": "bold red",
    "info": "cyan",
}


def format_price(amount: Decimal) -> str:
    """Render a currency amount with exactly two decimal places."""
    return f"{CURRENCY_SYMBOL}{amount:.2f}"


def format_menu_row(position: int, item: MenuItem) -> Text:
    """Render one menu row; sold-out rows are dimmed."""
    text = Text()
    text.append(f"{position}. ", style="bold")
    text.append(f"{item.name:<{NAME_WIDTH}} ")
    text.append(format_price(item.unit_price), style="green")
    text.append(f" (Available: {item.available_quantity})")
    if item.sold_out:
        text.stylize("dim")
    return text


def format_menu(items: list[MenuItem]) -> Text:
    """Render the full menu block between its header and footer rules."""
    text = Text()
    text.append(f"\n{MENU_HEADER}\n", style="bold")
    for position, item in enumerate(items, start=1):
        text.append_text(format_menu_row(position, item))
        text.append("\n")
    text.append(MENU_FOOTER, style="bold")
    return text


def notice(message: str, kind: str = "info") -> Text:
    """Wrap a notice so operator-typed tokens are never parsed as markup."""
    return Text(message, style=NOTICE_STYLES.get(kind, ""))
