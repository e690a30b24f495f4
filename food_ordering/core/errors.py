"""Errors raised by the menu and ordering services.

All of them are recoverable: the terminal driver catches ``OrderingError``,
shows the message and returns to the menu it came from.
"""
from decimal import Decimal
from typing import Optional


class OrderingError(Exception):
    """Base class for every domain error."""


class InvalidIdError(OrderingError):
    """Referenced item id is not in the catalog or not in the order."""

    def __init__(self, item_id: int, message: Optional[str] = None):
        self.item_id = item_id
        super().__init__(message or f"Item ID {item_id} not found.")


class InvalidQuantityError(OrderingError):
    """Quantity is zero or negative where a positive one is required."""

    def __init__(self, quantity: int):
        self.quantity = quantity
        super().__init__(f"Invalid quantity: {quantity}. Quantity must be positive.")


class InvalidPriceError(OrderingError):
    """Price is zero or negative."""

    def __init__(self, price):
        self.price = price
        super().__init__(f"Invalid price: {price}. Price must be greater than zero.")


class InvalidNameError(OrderingError):
    """Item name is blank or cannot be stored in the menu file."""


class MenuFileError(OrderingError):
    """Menu file could not be opened, read or written."""

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not access menu file {path}: {reason}")


class EmptyCatalogError(OrderingError):
    """Menu file produced zero valid records."""

    def __init__(self, path):
        self.path = path
        super().__init__(f"Menu file {path} contains no valid items.")


class InsufficientPaymentError(OrderingError):
    """Amount tendered is less than the order total."""

    def __init__(self, amount_due: Decimal, tendered: Decimal):
        self.amount_due = amount_due
        self.tendered = tendered
        super().__init__(
            f"Insufficient amount: {tendered:.2f} tendered, {amount_due:.2f} due."
        )


class EmptyOrderError(OrderingError):
    """Checkout or modification attempted with nothing in the order."""

    def __init__(self, message: str = "Order is empty."):
        super().__init__(message)


class InvalidAmountError(OrderingError):
    """Tendered amount cannot be represented in cents."""

    def __init__(self, amount):
        self.amount = amount
        super().__init__(f"Invalid amount: {amount}.")
