"""Interactive terminal for taking orders and administering the menu."""
import logging
from decimal import Decimal, InvalidOperation
from typing import List, Optional, TextIO

from rich.console import Console
from rich.markup import escape
from rich.prompt import IntPrompt, InvalidResponse, Prompt, PromptBase
from rich.table import Table

from food_ordering.core.config import settings
from food_ordering.core.dependencies import get_ordering_service
from food_ordering.core.errors import InsufficientPaymentError, InvalidAmountError, OrderingError
from food_ordering.core.logging import setup_logging
from food_ordering.services.menu.base import MenuItem, format_money, to_money
from food_ordering.services.ordering.models import OrderLine
from food_ordering.services.ordering.service import OrderingService

logger = logging.getLogger(__name__)

MAIN_CHOICES = ["1", "2", "3", "4", "5", "6", "7"]
ADMIN_CHOICES = ["1", "2", "3", "4"]


class DecimalPrompt(PromptBase[Decimal]):
    """A prompt that returns a finite Decimal that fits in cents."""

    response_type = Decimal
    validate_error_message = "[prompt.invalid]Please enter a valid amount"

    def process_response(self, value: str) -> Decimal:
        try:
            amount = Decimal(value.strip())
        except InvalidOperation:
            raise InvalidResponse(self.validate_error_message)
        if not amount.is_finite():
            raise InvalidResponse(self.validate_error_message)
        try:
            to_money(amount)
        except InvalidOperation:
            raise InvalidResponse(self.validate_error_message)
        return amount


class _ScriptedInput:
    """Input stream that raises EOFError when exhausted, like ``input()``."""

    def __init__(self, stream: TextIO):
        self._stream = stream

    def readline(self) -> str:
        line = self._stream.readline()
        if not line:
            raise EOFError
        return line


class FoodOrderingCLI:
    """Menu-driven terminal session over an OrderingService."""

    def __init__(
        self,
        service: OrderingService,
        console: Optional[Console] = None,
        stream: Optional[TextIO] = None,
        shop_name: Optional[str] = None,
        currency_symbol: Optional[str] = None,
    ):
        self.service = service
        self.console = console or Console()
        self.stream = _ScriptedInput(stream) if stream is not None else None
        self.shop_name = shop_name or settings.shop_name
        self.currency = currency_symbol if currency_symbol is not None else settings.currency_symbol

    # Input helpers

    def _ask_int(self, prompt: str, choices: Optional[List[str]] = None) -> int:
        return IntPrompt.ask(prompt, console=self.console, choices=choices, stream=self.stream)

    def _ask_amount(self, prompt: str) -> Decimal:
        return DecimalPrompt.ask(f"{prompt} {escape(self.currency)}", console=self.console, stream=self.stream)

    def _ask_text(self, prompt: str) -> str:
        return Prompt.ask(prompt, console=self.console, stream=self.stream)

    def _money(self, amount: Decimal) -> str:
        return f"{self.currency}{format_money(amount)}"

    # Display

    def show_menu(self, items: Optional[List[MenuItem]] = None) -> None:
        items = items if items is not None else self.service.list_menu()
        table = Table(title="TODAY'S MENU")
        table.add_column("ID", justify="left")
        table.add_column("ITEM", justify="left")
        table.add_column("PRICE", justify="right")
        for item in items:
            table.add_row(str(item.id), escape(item.name), format_money(item.price))
        self.console.print(table)

    def show_order(self, lines: Optional[List[OrderLine]] = None) -> None:
        lines = lines if lines is not None else self.service.view_order()
        if not lines:
            self.console.print("\n    --> Order is currently empty. <--")
            return

        table = Table(title="YOUR ORDER", show_footer=True)
        table.add_column("QTY", justify="left", footer="")
        table.add_column("ITEM", justify="left", footer="Total Amount Due:")
        table.add_column("PRICE", justify="right", footer=format_money(self.service.order_total()))
        for line in lines:
            table.add_row(str(line.quantity), escape(line.name), format_money(line.line_total))
        self.console.print(table)

    # Customer actions

    def take_order(self) -> None:
        self.console.print("\n--- Place Order ---")
        while True:
            self.show_menu()
            item_id = self._ask_int("Enter Item ID to order (0 to finish)")
            if item_id == 0:
                break

            item = self.service.lookup_item(item_id)
            if item is None:
                self.console.print("Invalid Item ID. Please choose from the menu.")
                continue

            quantity = self._ask_int(f"Enter Quantity for {escape(item.name)}")
            try:
                self.service.place_line(item_id, quantity)
            except OrderingError as e:
                self.console.print(f"{escape(str(e))} Please try again.")
                continue
            self.console.print(f"{quantity} x {escape(item.name)} added to order.")

    def modify_order(self) -> None:
        if not self.service.has_open_order():
            self.console.print("\nOrder is empty. Nothing to modify.")
            return

        self.show_order()
        self.console.print("\n--- Modify Order ---")
        item_id = self._ask_int("Enter Item ID to remove (0 to cancel)")
        if item_id == 0:
            return
        if not self.service.has_line(item_id):
            self.console.print("Error: Item ID not found in your current order.")
            return

        quantity = self._ask_int("Enter quantity to remove")
        try:
            self.service.modify_line(item_id, quantity)
        except OrderingError as e:
            self.console.print(f"Error: {escape(str(e))}")
            return
        name = self.service.lookup_item(item_id).name
        self.console.print(f"{quantity} x {escape(name)} successfully removed.")

    def process_payment(self) -> None:
        if not self.service.has_open_order():
            self.console.print("\nOrder is empty. Nothing to pay.")
            return

        self.console.print("\n*** PROCESSING PAYMENT ***")
        self.show_order()
        self.console.print(f"\nTotal Due: {self._money(self.service.order_total())}")

        while True:
            amount = self._ask_amount("Enter amount to pay:")
            try:
                receipt = self.service.checkout(amount)
            except InsufficientPaymentError:
                self.console.print("Insufficient amount. Please try again.")
                continue
            except InvalidAmountError as e:
                self.console.print(f"{escape(str(e))} Please try again.")
                continue
            break

        self.console.print("\n--- Transaction Complete ---")
        self.console.print(f"Change Due: {self._money(receipt.change)}")
        self.console.print("Thank you for your order!")

    # Admin actions

    def add_new_item(self) -> None:
        self.console.print("\n--- Admin: Add New Item ---")
        name = self._ask_text("Enter Item Name")
        price = self._ask_amount("Enter Price:")
        try:
            item_id = self.service.admin_add_item(name, price)
        except OrderingError as e:
            self.console.print(f"{escape(str(e))} Item not added.")
            return
        item = self.service.lookup_item(item_id)
        self.console.print(f"Item added: ID {item_id} - {escape(item.name)} ({self._money(item.price)})")

    def update_item_price(self) -> None:
        self.console.print("\n--- Admin: Update Price ---")
        self.show_menu()
        item_id = self._ask_int("Enter Item ID to update")
        item = self.service.lookup_item(item_id)
        if item is None:
            self.console.print(f"Error: Item ID {item_id} not found.")
            return

        self.console.print(f"Current Price for {escape(item.name)}: {self._money(item.price)}")
        new_price = self._ask_amount("Enter NEW Price:")
        try:
            item = self.service.admin_update_price(item_id, new_price)
        except OrderingError as e:
            self.console.print(f"{escape(str(e))} Price update cancelled.")
            return
        self.console.print(f"Price for ID {item_id} updated to {self._money(item.price)}")

    def save_menu(self) -> None:
        try:
            path = self.service.admin_save()
        except OrderingError as e:
            self.console.print(f"Error: {escape(str(e))}")
            return
        self.console.print(f"\n--- Admin Action: Menu saved successfully to {escape(str(path))}.")

    def admin_menu(self) -> None:
        while True:
            self.console.print("\n\n=== ADMIN PANEL ===")
            self.console.print("1. Add New Item")
            self.console.print("2. Update Item Price")
            self.console.print("3. Save Menu Changes to File (REQUIRED to save permanently)")
            self.console.print("4. Go Back to Main Menu")
            choice = self._ask_int("Enter choice", choices=ADMIN_CHOICES)

            if choice == 1:
                self.add_new_item()
            elif choice == 2:
                self.update_item_price()
            elif choice == 3:
                self.save_menu()
            else:
                self.console.print("Exiting Admin Panel.")
                return

    def run(self) -> None:
        """Run the main menu loop until the user exits or input ends."""
        actions = {
            1: self.show_menu,
            2: self.take_order,
            3: self.show_order,
            4: self.modify_order,
            5: self.process_payment,
            6: self.admin_menu,
        }
        try:
            while True:
                self.console.print(f"\n\n--- {escape(self.shop_name)} ---")
                self.console.print("1. View Menu")
                self.console.print("2. Place New Order")
                self.console.print("3. View Current Order")
                self.console.print("4. Modify Current Order (Remove Item)")
                self.console.print("5. Proceed to Payment")
                self.console.print("6. Enter Admin Panel")
                self.console.print("7. Exit System")
                choice = self._ask_int("Enter choice", choices=MAIN_CHOICES)
                if choice == 7:
                    break
                actions[choice]()
        except (EOFError, KeyboardInterrupt):
            logger.debug("[CLI] Input closed")
        self.console.print("Exiting. Goodbye!")


def main() -> None:
    """Console script entry point."""
    setup_logging()
    service = get_ordering_service()
    FoodOrderingCLI(service).run()
