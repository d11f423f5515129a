"""Custom exceptions for the TastyBites counter."""

from __future__ import annotations


class TastyBitesError(Exception):
    """Base exception for all ordering errors."""

    pass


class UserInputError(TastyBitesError):
    """Raised when operator input cannot be used as typed."""

    def __init__(self, token: str, message: str):
        self.token = token
        super().__init__(message)


class InvalidNumberError(UserInputError):
    """Raised when a token is not an integer."""

    def __init__(self, token: str):
        super().__init__(token, f"'{token}' is not a valid number.")


class OutOfRangeError(UserInputError):
    """Raised when an item number is outside the menu."""

    def __init__(self, index: int, size: int, token: str | None = None):
        self.index = index
        self.size = size
        shown = token if token is not None else str(index)
        super().__init__(shown, f"Invalid item number: {shown}")


class InvalidQuantityError(UserInputError):
    """Raised when a requested quantity is zero or negative."""

    def __init__(self, quantity: int):
        self.quantity = quantity
        super().__init__(str(quantity), "Invalid quantity.")


class InsufficientStockError(TastyBitesError):
    """Raised when an item cannot cover the requested quantity."""

    def __init__(self, name: str, requested: int, available: int):
        self.name = name
        self.requested = requested
        self.available = available
        super().__init__(f"Only {available} available.")


class PersistenceError(TastyBitesError):
    """Raised when a receipt file cannot be written."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not write receipt to {path}: {reason}")
