"""Pytest configuration and fixtures."""

import io
from datetime import datetime
from typing import Callable, Iterable

import pytest
from rich.console import Console

from tastybites.catalog import MenuCatalog, build_default_catalog
from tastybites.ledger import OrderLedger
from tastybites.models import MenuItem

OPEN_NOW = datetime(2026, 10, 18, 12, 30, 5)
CLOSED_NOW = datetime(2026, 10, 18, 23, 15, 0)


class ScriptedInput:
    """Stand-in for the operator: replays lines, then signals end of input."""

    def __init__(self, lines: Iterable[str]):
        self.lines = list(lines)
        self.prompts: list[str] = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)


@pytest.fixture
def catalog() -> MenuCatalog:
    """Fresh seed menu for every test."""
    return build_default_catalog()


@pytest.fixture
def small_catalog() -> MenuCatalog:
    """Two-item menu with a deliberately short second item."""
    return MenuCatalog(
        [
            MenuItem("Espresso", "3.50", 10),
            MenuItem("Latte", "4.50", 2),
        ]
    )


@pytest.fixture
def ledger() -> OrderLedger:
    return OrderLedger()


@pytest.fixture
def console() -> Console:
    """Console that records output instead of writing to a terminal."""
    return Console(file=io.StringIO(), width=120, color_system=None, force_terminal=False)


@pytest.fixture
def output(console) -> Callable[[], str]:
    return lambda: console.file.getvalue()


@pytest.fixture
def scripted() -> Callable[..., ScriptedInput]:
    return lambda *lines: ScriptedInput(lines)
