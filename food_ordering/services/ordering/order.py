"""In-progress customer order."""
import logging
from decimal import Decimal
from typing import Dict, List

from food_ordering.services.menu.catalog import MenuCatalog
from food_ordering.services.ordering.models import OrderLine, RemoveResult

logger = logging.getLogger(__name__)


class Order:
    """Quantities per menu item id plus a running total.

    The total is adjusted on every add/remove using the unit price passed
    in at that moment. A later price change in the catalog does not
    adjust the total of items already in the order.
    """

    def __init__(self):
        self._items: Dict[int, int] = {}
        self._total = Decimal("0.00")

    def add(self, item_id: int, quantity: int, unit_price: Decimal) -> None:
        """Add a quantity of an item. Non-positive quantities are ignored."""
        if quantity <= 0:
            return
        self._items[item_id] = self._items.get(item_id, 0) + quantity
        self._total += unit_price * quantity
        logger.debug(f"[ORDER] +{quantity} x {item_id} @ {unit_price:.2f}, total {self._total:.2f}")

    def remove(self, item_id: int, quantity: int, unit_price: Decimal) -> RemoveResult:
        """Remove a quantity of an item, or the whole line if quantity covers it."""
        stored = self._items.get(item_id)
        if stored is None or quantity <= 0:
            return RemoveResult.NOT_FOUND

        if quantity >= stored:
            del self._items[item_id]
            self._total -= unit_price * stored
            result = RemoveResult.FULLY_REMOVED
        else:
            self._items[item_id] = stored - quantity
            self._total -= unit_price * quantity
            result = RemoveResult.PARTIALLY_REMOVED

        if not self._items:
            self._total = Decimal("0.00")
        logger.debug(f"[ORDER] -{quantity} x {item_id} @ {unit_price:.2f} ({result}), total {self._total:.2f}")
        return result

    def total(self) -> Decimal:
        """Get the running total."""
        return self._total

    def has(self, item_id: int) -> bool:
        """Check if an item is in the order."""
        return item_id in self._items

    def quantity_of(self, item_id: int) -> int:
        """Get the stored quantity of an item, 0 if absent."""
        return self._items.get(item_id, 0)

    def is_empty(self) -> bool:
        return not self._items

    def item_count(self) -> int:
        """Total number of units across all lines."""
        return sum(self._items.values())

    def clear(self) -> None:
        """Clear the order."""
        self._items.clear()
        self._total = Decimal("0.00")

    def render(self, catalog: MenuCatalog) -> List[OrderLine]:
        """Get the order lines in item id order, priced from the catalog."""
        lines = []
        for item_id in sorted(self._items):
            item = catalog.lookup(item_id)
            if item is None:
                continue
            quantity = self._items[item_id]
            lines.append(
                OrderLine(
                    item_id=item_id,
                    quantity=quantity,
                    name=item.name,
                    line_total=item.price * quantity,
                )
            )
        return lines
