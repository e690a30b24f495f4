"""Menu catalog."""
import logging
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Dict, List, Optional, Union

from food_ordering.core.errors import (
    EmptyCatalogError,
    InvalidIdError,
    InvalidNameError,
    InvalidPriceError,
)
from food_ordering.services.menu.base import DEFAULT_MENU_ITEMS, MenuItem, to_money
from food_ordering.services.menu.menu_file import read_records, write_records

logger = logging.getLogger(__name__)


class MenuCatalog:
    """Orderable menu items keyed by id, kept in display order.

    A single insertion-ordered dict serves both sequential display and
    lookup by id. ``next_id`` only ever grows, so an id is never handed out
    twice by the same catalog.
    """

    def __init__(self):
        self._items: Dict[int, MenuItem] = {}
        self._next_id = 1

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._items

    @property
    def next_id(self) -> int:
        """Id the next added item will receive."""
        return self._next_id

    def load(self, path: Union[str, Path]) -> int:
        """Replace the catalog with the items in a menu file.

        Ids are assigned sequentially from 1 in file order; they are not
        stored in the file. The current contents are kept if loading fails.

        Returns:
            Number of items loaded

        Raises:
            MenuFileError: the file cannot be read
            EmptyCatalogError: the file has no valid records
        """
        records = read_records(path)
        if not records:
            logger.warning(f"[CATALOG] No valid items in {path}")
            raise EmptyCatalogError(path)

        self._items = {
            item_id: MenuItem(id=item_id, name=name, price=price)
            for item_id, (name, price) in enumerate(records, start=1)
        }
        self._next_id = max(self._next_id, len(records) + 1)
        logger.info(f"[CATALOG] Loaded {len(records)} items from {path}")
        return len(records)

    def load_defaults(self) -> None:
        """Replace the catalog with the built-in default menu."""
        self._items = {
            item_id: MenuItem(id=item_id, name=name, price=price)
            for item_id, name, price in DEFAULT_MENU_ITEMS
        }
        self._next_id = max(self._next_id, max(self._items) + 1)
        logger.info(f"[CATALOG] Using default menu ({len(self._items)} items)")

    @classmethod
    def default(cls) -> "MenuCatalog":
        """Create a catalog holding the default menu."""
        catalog = cls()
        catalog.load_defaults()
        return catalog

    def save(self, path: Union[str, Path]) -> None:
        """Write the catalog to a menu file, overwriting it.

        Raises:
            MenuFileError: the file cannot be written
        """
        write_records(path, ((item.name, item.price) for item in self._items.values()))
        logger.info(f"[CATALOG] Saved {len(self._items)} items to {path}")

    def add_item(self, name: str, price: Decimal) -> int:
        """Add a new item and return its id."""
        price = self._check_price(price)
        if not name or not name.strip():
            raise InvalidNameError("Item name must not be empty.")
        if "\n" in name or "\r" in name:
            raise InvalidNameError("Item name must be a single line.")

        item_id = self._next_id
        self._items[item_id] = MenuItem(id=item_id, name=name, price=price)
        self._next_id += 1
        logger.info(f"[CATALOG] Added item {item_id}: {name} ({price:.2f})")
        return item_id

    def update_price(self, item_id: int, new_price: Decimal) -> MenuItem:
        """Change the price of an existing item."""
        item = self._items.get(item_id)
        if item is None:
            raise InvalidIdError(item_id)
        new_price = self._check_price(new_price)

        old_price = item.price
        item.price = new_price
        logger.info(f"[CATALOG] Price for item {item_id} changed {old_price:.2f} -> {new_price:.2f}")
        return item

    def lookup(self, item_id: int) -> Optional[MenuItem]:
        """Get a menu item by id."""
        return self._items.get(item_id)

    def list(self) -> List[MenuItem]:
        """Get all items in catalog order."""
        return list(self._items.values())

    @staticmethod
    def _check_price(price) -> Decimal:
        try:
            if price is None or not Decimal(str(price)).is_finite():
                raise InvalidPriceError(price)
            rounded = to_money(price)
        except InvalidOperation:
            raise InvalidPriceError(price)
        if rounded <= 0:
            raise InvalidPriceError(price)
        return rounded
