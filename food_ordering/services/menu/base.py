"""Menu item model and money helpers."""
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import List, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

CENT = Decimal("0.01")


def to_money(value) -> Decimal:
    """Convert a number to a Decimal rounded to cents."""
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def format_money(value) -> str:
    """Format an amount with exactly two fractional digits."""
    return f"{to_money(value):.2f}"


class MenuItem(BaseModel):
    """Menu item model.

    ``id`` and ``name`` are fixed once the item exists; ``price`` may be
    changed by an admin and is re-validated on assignment.
    """

    model_config = ConfigDict(validate_assignment=True)

    id: int = Field(ge=1, frozen=True)
    name: str = Field(min_length=1, frozen=True)
    price: Decimal

    @field_validator("price")
    @classmethod
    def _round_to_cents(cls, value: Decimal) -> Decimal:
        if not value.is_finite():
            raise ValueError("price must be a finite number")
        try:
            value = to_money(value)
        except InvalidOperation:
            raise ValueError("price is out of range")
        if value <= 0:
            raise ValueError("price must be greater than zero")
        return value


# Built-in menu used when the menu file is missing or empty
DEFAULT_MENU_ITEMS: List[Tuple[int, str, Decimal]] = [
    (1, "Veggie Burger", Decimal("5.99")),
    (2, "Cheese Pizza Slice", Decimal("3.50")),
    (3, "French Fries (Large)", Decimal("2.99")),
    (4, "Soda (Coke/Pepsi)", Decimal("1.50")),
    (5, "Bottled Water", Decimal("1.00")),
    (6, "Iced Coffee", Decimal("4.00")),
]
