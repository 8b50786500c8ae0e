"""Interactive console for managing businesses, menus and orders"""
import logging
from typing import Callable

from restaurateur.core.enums import SelectionResult
from restaurateur.core.menu_handler import MenuBuilder, format_menu
from restaurateur.core.models import Customer, create_business
from restaurateur.core.order import OrderAssembler, MenuNotFoundError, default_order_date
from restaurateur.core.store import Store
from restaurateur.utils.log import configure_logging
from restaurateur.utils.parsing import is_done, parse_age, parse_payment_mode

logger = logging.getLogger(__name__)

MAIN_MENU = (
    "1. Create a new business\n"
    "2. Add a menu to an existing business\n"
    "3. Add an order to an existing business\n"
    "4. Show orders for an existing business\n"
    "5. Remove orders from an existing business\n"
    "6. Exit"
)

class Console:
    def __init__(self, store: Store, input_func: Callable[[str], str] = input,
                 output: Callable[[str], None] = print):
        self.store = store
        self.input_func = input_func
        self.output = output
        self.actions = {
            '1': self.create_business,
            '2': self.create_menu,
            '3': self.add_order,
            '4': self.show_orders,
            '5': self.remove_orders,
        }

    def ask(self, prompt: str) -> str:
        return self.input_func(prompt).strip()

    def _warn(self, warning):
        if warning:
            self.output(warning)

    def run(self):
        """Run the main loop until the user exits or input runs out"""
        while True:
            self.output(MAIN_MENU)
            try:
                choice = self.ask("Enter your choice: ")
                if choice == '6':
                    self.output("Exiting...")
                    return
                action = self.actions.get(choice)
                if action is None:
                    self.output("Invalid choice!")
                    continue
                action()
            except EOFError:
                self.output("Exiting...")
                return

    def _lookup_business(self):
        name = self.ask("Enter business name: ")
        business = self.store.get_business(name)
        if business is None:
            self.output("Business not found!")
        return business

    def create_business(self):
        name = self.ask("Enter business name: ")
        address = self.ask("Enter business address: ")
        phone = self.ask("Enter business phone: ")
        self.store.add_business(create_business(name, address, phone))
        self.output("Business created successfully!")

    def create_menu(self):
        business = self._lookup_business()
        if business is None:
            return
        menu_name = self.ask("Enter menu name: ")
        menu_price = self.ask("Enter menu price: ")
        menu_is_veg = self.ask("Is the menu veg? (y/n): ")
        builder = MenuBuilder(menu_name, menu_price, menu_is_veg)
        for warning in builder.warnings:
            self.output(warning)

        while True:
            cuisine_name = self.ask("Enter cuisine name (or 'done' to finish): ")
            if is_done(cuisine_name):
                break
            builder.add_cuisine(cuisine_name)
            while True:
                food_name = self.ask("Enter food name (or 'done' to finish): ")
                if is_done(food_name):
                    break
                food_type = self.ask("Enter food type (veg/nonveg): ")
                food_category = self.ask("Enter food category (appetizer/maincourse/dessert): ")
                food_price = self.ask("Enter food price: ")
                seen = len(builder.warnings)
                builder.add_food(cuisine_name, food_name, food_type, food_category, food_price)
                for warning in builder.warnings[seen:]:
                    self.output(warning)

        self.store.add_menu(business.name, builder.build())
        self.output("Menu added successfully!")

    def _pick_food(self, assembler: OrderAssembler, cuisine_name: str):
        """Prompt for foods until one matches or the user backs out"""
        while True:
            food_name = self.ask("Enter food name (or 'done' to pick another cuisine): ")
            if is_done(food_name):
                assembler.cancel_selection()
                return
            if assembler.choose_food(food_name) == SelectionResult.SELECTED:
                return
            hint = assembler.suggest_food(cuisine_name, food_name)
            self.output("Food not found in cuisine!" + (f" Did you mean '{hint}'?" if hint else ""))

    def add_order(self):
        business = self._lookup_business()
        if business is None:
            return
        try:
            assembler = OrderAssembler(business.menu)
        except MenuNotFoundError:
            self.output("Menu not found for business!")
            return
        self.output(format_menu(business.menu))

        while True:
            cuisine_name = self.ask("Enter cuisine name (or 'done' to finish): ")
            if is_done(cuisine_name):
                break
            if assembler.choose_cuisine(cuisine_name) == SelectionResult.CUISINE_NOT_FOUND:
                hint = assembler.suggest_cuisine(cuisine_name)
                self.output("Cuisine not found in menu!" + (f" Did you mean '{hint}'?" if hint else ""))
                continue
            self._pick_food(assembler, cuisine_name)

        customer_name = self.ask("Enter customer name: ")
        age, warning = parse_age(self.ask("Enter customer age: "))
        self._warn(warning)
        customer_address = self.ask("Enter customer address: ")
        customer_phone = self.ask("Enter customer phone: ")
        payment_mode, warning = parse_payment_mode(self.ask("Enter payment mode (cash/card/upi/wallet): "))
        self._warn(warning)
        date = self.ask(f"Enter order date (blank for {default_order_date()}): ") or None

        customer = Customer(name=customer_name, age=age, address=customer_address, phone=customer_phone)
        order = assembler.finish(customer, payment_mode, date)
        self.store.add_order(business.name, order)
        self.output(f"Order {order.order_id} added successfully! Total: ${order.price}")

    def show_orders(self):
        business = self._lookup_business()
        if business is None:
            return
        orders = self.store.show_orders(business.name)
        if not orders:
            self.output("No orders found for business!")
            return
        self.output(f"Orders for business '{business.name}':")
        for order in orders:
            self.output(f"Order: {order.order_id}")
            self.output(f"Date: {order.date}")
            self.output(f"Customer: {order.customer.name}")
            self.output(f"Payment mode: {order.payment_mode.value}")
            self.output(f"Price: {order.price}")
            self.output("Foods:")
            for line in order.foods:
                self.output(f"- {line.food.name} ({line.quantity} x {line.food.price}): {line.price}")
            self.output("")

    def remove_orders(self):
        business = self._lookup_business()
        if business is None:
            return
        key = self.ask("Remove by date or id? (date/id): ").lower()
        if key == 'id':
            order_id = self.ask("Enter order id: ")
            if self.store.remove_order_by_id(business.name, order_id):
                self.output("Order removed successfully!")
            else:
                self.output("Order not found!")
            return
        date = self.ask("Enter order date: ")
        before = len(self.store.show_orders(business.name))
        self.store.remove_order(business.name, date)
        removed = before - len(self.store.show_orders(business.name))
        self.output(f"Removed {removed} order(s) dated {date}.")

def main():
    configure_logging('restaurateur', console=False)
    logger.info("=== Restaurateur console starting ===")
    Console(Store()).run()
