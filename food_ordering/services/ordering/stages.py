"""Customer session stage enumeration."""
from enum import Enum


class SessionStage(str, Enum):
    """Stages of a single customer's session at the terminal."""

    BROWSING = "browsing"  # Looking at the menu, nothing ordered yet
    ORDERING = "ordering"  # Adding or removing line items
    PAYING = "paying"  # Checkout started, payment not yet sufficient
    PAID = "paid"  # Payment taken and order cleared

    def __str__(self) -> str:
        """Return the string value of the stage."""
        return self.value
