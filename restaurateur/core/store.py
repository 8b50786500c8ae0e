import copy
import logging
from typing import Dict, List, Optional

from restaurateur.core.models import Business, Menu, Order

logger = logging.getLogger(__name__)

class Store:
    """In-memory registry of businesses keyed by name.

    Mutations on an unknown business never raise: they leave the store
    untouched and return False, so callers that ignore the result see a
    silent no-op.
    """

    def __init__(self):
        self.businesses: Dict[str, Business] = {}

    def add_business(self, business: Business):
        """Insert a business, replacing any previous one with the same name"""
        if business.name in self.businesses:
            logger.info(f"Overwriting business '{business.name}'")
        self.businesses[business.name] = business
        logger.info(f"Business '{business.name}' stored")

    def remove_business(self, name: str) -> bool:
        if self.businesses.pop(name, None) is None:
            logger.info(f"Remove business ignored: '{name}' not found")
            return False
        logger.info(f"Business '{name}' removed")
        return True

    def get_business(self, name: str) -> Optional[Business]:
        """Return the stored business itself, not a copy.

        Treat it as read-only: menus and orders change through add_menu,
        add_order and the remove operations.
        """
        return self.businesses.get(name)

    def list_businesses(self) -> List[str]:
        return sorted(self.businesses)

    def add_menu(self, name: str, menu: Menu) -> bool:
        """Replace the business menu"""
        business = self.businesses.get(name)
        if business is None:
            logger.info(f"Add menu ignored: business '{name}' not found")
            return False
        business.menu = menu
        logger.info(f"Menu '{menu.name}' attached to '{name}' with {len(menu.cuisines)} cuisine(s)")
        return True

    def add_order(self, name: str, order: Order) -> bool:
        business = self.businesses.get(name)
        if business is None:
            logger.info(f"Add order ignored: business '{name}' not found")
            return False
        business.orders.append(order)
        logger.info(f"Order {order.order_id} added to '{name}' (total ${order.price})")
        return True

    def remove_order(self, name: str, date: str) -> bool:
        """Remove every order of the business placed on the given date"""
        business = self.businesses.get(name)
        if business is None:
            logger.info(f"Remove order ignored: business '{name}' not found")
            return False
        before = len(business.orders)
        business.orders = [order for order in business.orders if order.date != date]
        logger.info(f"Removed {before - len(business.orders)} order(s) dated '{date}' from '{name}'")
        return True

    def remove_order_by_id(self, name: str, order_id: str) -> bool:
        business = self.businesses.get(name)
        if business is None:
            logger.info(f"Remove order ignored: business '{name}' not found")
            return False
        for index, order in enumerate(business.orders):
            if order.order_id == order_id:
                del business.orders[index]
                logger.info(f"Order {order_id} removed from '{name}'")
                return True
        logger.info(f"Remove order failed: order {order_id} not found in '{name}'")
        return False

    def show_orders(self, name: str) -> List[Order]:
        """Copies of the business orders, empty if the business is unknown"""
        business = self.businesses.get(name)
        if business is None:
            return []
        return copy.deepcopy(business.orders)
