"""Order models."""
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel


class RemoveResult(str, Enum):
    """Outcome of removing a quantity of an item from an order."""

    FULLY_REMOVED = "fully_removed"
    PARTIALLY_REMOVED = "partially_removed"
    NOT_FOUND = "not_found"

    def __str__(self) -> str:
        return self.value


class OrderLine(BaseModel):
    """One rendered line of an order."""

    item_id: int
    quantity: int
    name: str
    line_total: Decimal


class CheckoutReceipt(BaseModel):
    """Result of a successful checkout."""

    total: Decimal
    tendered: Decimal
    change: Decimal
