"""Unit tests for order accumulation and totals."""
import random
from decimal import Decimal

import pytest

from food_ordering.services.ordering.models import RemoveResult
from food_ordering.services.ordering.order import Order


BURGER = Decimal("5.99")
SODA = Decimal("1.50")


@pytest.fixture
def order():
    """Create an order with 2 burgers (id 1) and 3 sodas (id 4)."""
    order = Order()
    order.add(1, 2, BURGER)
    order.add(4, 3, SODA)
    return order


class TestOrderAdd:
    """Test adding items to an order."""

    def test_add_accumulates_quantity_and_total(self, order):
        """Test totals for multiple items."""
        # Expected: 2x$5.99 + 3x$1.50 = $16.48
        assert order.total() == Decimal("16.48")
        assert order.quantity_of(1) == 2
        assert order.quantity_of(4) == 3
        assert order.item_count() == 5

    def test_add_same_item_twice(self):
        """Test adding an item already in the order increments its quantity."""
        order = Order()
        order.add(2, 1, Decimal("3.50"))
        order.add(2, 2, Decimal("3.50"))

        assert order.quantity_of(2) == 3
        assert order.total() == Decimal("10.50")

    @pytest.mark.parametrize("quantity", [0, -1])
    def test_add_non_positive_quantity_is_noop(self, quantity):
        """Test zero or negative quantities are ignored."""
        order = Order()
        order.add(1, quantity, BURGER)

        assert order.is_empty()
        assert not order.has(1)
        assert order.total() == Decimal("0")


class TestOrderRemove:
    """Test removing items from an order."""

    def test_partial_remove(self, order):
        """Test removing less than the stored quantity."""
        result = order.remove(1, 1, BURGER)

        assert result == RemoveResult.PARTIALLY_REMOVED
        assert order.quantity_of(1) == 1
        assert order.total() == Decimal("10.49")

    def test_full_remove(self, order):
        """Test removing exactly the stored quantity drops the line."""
        result = order.remove(4, 3, SODA)

        assert result == RemoveResult.FULLY_REMOVED
        assert not order.has(4)
        assert order.total() == Decimal("11.98")

    def test_remove_more_than_stored(self, order):
        """Test removing more than stored only subtracts the stored quantity."""
        result = order.remove(1, 10, BURGER)

        assert result == RemoveResult.FULLY_REMOVED
        assert order.total() == Decimal("4.50")

    def test_remove_zero_quantity(self, order):
        """Test a zero quantity on an existing id is not_found, not a no-op success."""
        assert order.remove(1, 0, BURGER) == RemoveResult.NOT_FOUND
        assert order.quantity_of(1) == 2
        assert order.total() == Decimal("16.48")

    def test_remove_unknown_id(self, order):
        """Test removing an id not in the order."""
        assert order.remove(99, 1, BURGER) == RemoveResult.NOT_FOUND
        assert order.total() == Decimal("16.48")

    def test_remove_then_readd_restores_state(self, order):
        """Test remove followed by add of the same quantity is a round trip."""
        for item_id, price in [(1, BURGER), (4, SODA)]:
            for quantity in (1, order.quantity_of(item_id)):
                before_qty = order.quantity_of(item_id)
                before_total = order.total()

                order.remove(item_id, quantity, price)
                order.add(item_id, quantity, price)

                assert order.quantity_of(item_id) == before_qty
                assert order.total() == before_total

    def test_emptying_order_resets_total(self):
        """Test the total is exactly zero once the last line is removed."""
        order = Order()
        order.add(1, 1, Decimal("5.00"))
        order.remove(1, 1, Decimal("7.00"))

        assert order.is_empty()
        assert order.total() == Decimal("0")


class TestOrderTotalInvariant:
    """Test the running total against a recomputation from the catalog."""

    def test_total_matches_catalog_after_random_operations(self, default_catalog):
        """Test total equals sum(quantity x price) after a mixed sequence."""
        rng = random.Random(1234)
        order = Order()
        ids = [item.id for item in default_catalog.list()]

        for _ in range(200):
            item_id = rng.choice(ids)
            price = default_catalog.lookup(item_id).price
            quantity = rng.randint(-1, 4)
            if rng.random() < 0.6:
                order.add(item_id, quantity, price)
            else:
                order.remove(item_id, quantity, price)

            expected = sum(
                (order.quantity_of(i) * default_catalog.lookup(i).price for i in ids),
                Decimal("0"),
            )
            assert order.total() == expected
            assert order.total() >= 0

    def test_price_change_after_add_is_not_retroactive(self, default_catalog):
        """Test totals keep the price that applied when the item was added."""
        order = Order()
        order.add(1, 2, default_catalog.lookup(1).price)

        default_catalog.update_price(1, Decimal("7.00"))

        assert order.total() == Decimal("11.98")
        # Rendered lines use the current catalog price
        assert order.render(default_catalog)[0].line_total == Decimal("14.00")


class TestOrderRenderAndClear:
    """Test rendering and clearing orders."""

    def test_render_sorted_by_id(self, default_catalog):
        """Test lines come out in item id order with names and line totals."""
        order = Order()
        order.add(4, 3, SODA)
        order.add(1, 2, BURGER)

        lines = order.render(default_catalog)

        assert [(line.item_id, line.quantity, line.name) for line in lines] == [
            (1, 2, "Veggie Burger"),
            (4, 3, "Soda (Coke/Pepsi)"),
        ]
        assert lines[0].line_total == Decimal("11.98")
        assert lines[1].line_total == Decimal("4.50")

    def test_render_skips_ids_missing_from_catalog(self, test_catalog):
        """Test ids unknown to the catalog are left out."""
        order = Order()
        order.add(1, 1, Decimal("10.00"))
        order.add(42, 1, Decimal("1.00"))

        lines = order.render(test_catalog)

        assert [line.item_id for line in lines] == [1]

    def test_clear(self, order):
        """Test clear empties the order and zeroes the total."""
        order.clear()

        assert order.is_empty()
        assert order.item_count() == 0
        assert order.total() == Decimal("0")
        assert not order.has(1)
