"""Ordering service: the operations the terminal driver calls."""
import logging
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import List, Optional, Union

from food_ordering.core.errors import (
    EmptyOrderError,
    InsufficientPaymentError,
    InvalidAmountError,
    InvalidIdError,
    InvalidQuantityError,
)
from food_ordering.services.menu.base import MenuItem, to_money
from food_ordering.services.menu.catalog import MenuCatalog
from food_ordering.services.ordering.models import CheckoutReceipt, OrderLine, RemoveResult
from food_ordering.services.ordering.order import Order
from food_ordering.services.ordering.stages import SessionStage

logger = logging.getLogger(__name__)


class OrderingService:
    """Customer ordering and admin menu operations over one catalog and one order.

    Admin operations change the catalog in memory only; nothing reaches the
    menu file until ``admin_save`` is called.
    """

    def __init__(
        self,
        catalog: MenuCatalog,
        menu_path: Union[str, Path],
        order: Optional[Order] = None,
    ):
        self.catalog = catalog
        self.menu_path = Path(menu_path)
        self.order = order if order is not None else Order()
        self._stage = SessionStage.BROWSING

    @property
    def stage(self) -> SessionStage:
        """Current stage of the customer session."""
        return self._stage

    # Customer operations

    def list_menu(self) -> List[MenuItem]:
        """Get the menu in display order."""
        if self._stage == SessionStage.PAID:
            self._stage = SessionStage.BROWSING
        return self.catalog.list()

    def view_order(self) -> List[OrderLine]:
        """Get the current order lines."""
        return self.order.render(self.catalog)

    def order_total(self) -> Decimal:
        """Get the amount due for the current order."""
        return self.order.total()

    def lookup_item(self, item_id: int) -> Optional[MenuItem]:
        """Get a menu item by id."""
        return self.catalog.lookup(item_id)

    def has_open_order(self) -> bool:
        """Check if the current order has any lines."""
        return not self.order.is_empty()

    def has_line(self, item_id: int) -> bool:
        """Check if an item is in the current order."""
        return self.order.has(item_id)

    def place_line(self, item_id: int, quantity: int) -> MenuItem:
        """Add a quantity of a menu item to the order at its current price."""
        item = self.catalog.lookup(item_id)
        if item is None:
            raise InvalidIdError(item_id, f"Invalid Item ID {item_id}. Please choose from the menu.")
        if quantity <= 0:
            raise InvalidQuantityError(quantity)

        self.order.add(item.id, quantity, item.price)
        self._stage = SessionStage.ORDERING
        logger.info(f"[ORDER] {quantity} x {item.name} added, total {self.order.total():.2f}")
        return item

    def modify_line(self, item_id: int, quantity: int) -> RemoveResult:
        """Remove a quantity of an item from the order at its current price."""
        if self.order.is_empty():
            raise EmptyOrderError("Order is empty. Nothing to modify.")
        item = self.catalog.lookup(item_id)
        if item is None or not self.order.has(item_id):
            raise InvalidIdError(item_id, f"Item ID {item_id} not found in your current order.")

        result = self.order.remove(item_id, quantity, item.price)
        if result == RemoveResult.NOT_FOUND:
            raise InvalidQuantityError(quantity)

        if self.order.is_empty():
            self._stage = SessionStage.BROWSING
        logger.info(f"[ORDER] {quantity} x {item.name} removed ({result}), total {self.order.total():.2f}")
        return result

    def checkout(self, amount_tendered: Decimal) -> CheckoutReceipt:
        """Take payment for the order and clear it.

        Raises:
            EmptyOrderError: nothing to pay
            InvalidAmountError: amount is too large to handle in cents
            InsufficientPaymentError: tendered amount is below the total;
                the order is left as it was
        """
        if self.order.is_empty():
            raise EmptyOrderError("Order is empty. Nothing to pay.")

        total = self.order.total()
        try:
            tendered = to_money(amount_tendered)
        except InvalidOperation:
            raise InvalidAmountError(amount_tendered)
        if tendered < total:
            self._stage = SessionStage.PAYING
            logger.info(f"[CHECKOUT] Insufficient payment: {tendered:.2f} for {total:.2f}")
            raise InsufficientPaymentError(total, tendered)

        receipt = CheckoutReceipt(total=total, tendered=tendered, change=to_money(tendered - total))
        self.order.clear()
        self._stage = SessionStage.PAID
        logger.info(f"[CHECKOUT] Paid {tendered:.2f} for {total:.2f}, change {receipt.change:.2f}")
        return receipt

    # Admin operations

    def admin_add_item(self, name: str, price: Decimal) -> int:
        """Add an item to the menu (in memory until saved)."""
        item_id = self.catalog.add_item(name, price)
        logger.info(f"[ADMIN] Item added: ID {item_id} - {name}")
        return item_id

    def admin_update_price(self, item_id: int, price: Decimal) -> MenuItem:
        """Change an item's price (in memory until saved).

        Items already in the order keep the total they were added at.
        """
        item = self.catalog.update_price(item_id, price)
        logger.info(f"[ADMIN] Price for ID {item_id} updated to {item.price:.2f}")
        return item

    def admin_save(self) -> Path:
        """Persist the menu to the menu file."""
        self.catalog.save(self.menu_path)
        logger.info(f"[ADMIN] Menu saved to {self.menu_path}")
        return self.menu_path
