from datetime import date as dt_date
from decimal import Decimal
from typing import Iterable, List, Optional, Tuple
import dataclasses
import logging

from restaurateur.core.config import DEFAULT_ORDER_DATE
from restaurateur.core.enums import AssemblyStage, SelectionResult, PaymentMode
from restaurateur.core.menu_handler import closest_name
from restaurateur.core.models import Menu, Cuisine, Customer, FoodOrder, Order
from restaurateur.utils.parsing import is_done

logger = logging.getLogger(__name__)

class MenuNotFoundError(ValueError):
    """Raised when an order is started for a business without a menu"""

class SelectionError(LookupError):
    def __init__(self, message: str, cuisine: str, food: str, suggestion: Optional[str] = None):
        super().__init__(message)
        self.cuisine = cuisine
        self.food = food
        self.suggestion = suggestion

class CuisineNotFoundError(SelectionError):
    pass

class FoodNotFoundError(SelectionError):
    pass

def default_order_date() -> str:
    return DEFAULT_ORDER_DATE or dt_date.today().isoformat()

class OrderAssembler:
    """Collects (cuisine, food) selections against one menu into an order.

    Stages run AWAITING_CUISINE -> AWAITING_FOOD -> SELECTION_CONFIRMED; the
    next choose_cuisine() starts another pick, done() moves to DONE. A failed
    lookup leaves the stage unchanged so the caller can retry.
    """

    def __init__(self, menu: Optional[Menu]):
        if menu is None:
            raise MenuNotFoundError("Menu not found for business")
        self.menu = menu
        self.lines: List[FoodOrder] = []
        self.stage = AssemblyStage.AWAITING_CUISINE
        self.current_cuisine: Optional[Cuisine] = None
        logger.info(f"Started order against menu '{menu.name}'")

    def choose_cuisine(self, name: str) -> SelectionResult:
        if self.stage == AssemblyStage.DONE:
            raise ValueError("Order selection is already finished")
        cuisine = self.menu.get_cuisine(name)
        if cuisine is None:
            logger.info(f"Cuisine '{name}' not found in menu '{self.menu.name}'")
            return SelectionResult.CUISINE_NOT_FOUND
        self.current_cuisine = cuisine
        self.stage = AssemblyStage.AWAITING_FOOD
        return SelectionResult.CUISINE_FOUND

    def choose_food(self, name: str, quantity: int = 1) -> SelectionResult:
        if self.stage != AssemblyStage.AWAITING_FOOD:
            raise ValueError(f"Cannot choose a food while {self.stage.value}")
        food = self.current_cuisine.find_food(name)
        if food is None:
            logger.info(f"Food '{name}' not found in cuisine '{self.current_cuisine.name}'")
            return SelectionResult.FOOD_NOT_FOUND
        line = FoodOrder(food=dataclasses.replace(food), quantity=quantity, price=food.price * quantity)
        self.lines.append(line)
        self.stage = AssemblyStage.SELECTION_CONFIRMED
        logger.info(f"Selected {quantity}x {food.name} from '{self.current_cuisine.name}' (${line.price})")
        self.current_cuisine = None
        return SelectionResult.SELECTED

    def select(self, cuisine_name: str, food_name: str, quantity: int = 1) -> SelectionResult:
        """Resolve a whole (cuisine, food) pair"""
        result = self.choose_cuisine(cuisine_name)
        if result == SelectionResult.CUISINE_NOT_FOUND:
            return result
        result = self.choose_food(food_name, quantity)
        if result == SelectionResult.FOOD_NOT_FOUND:
            self.cancel_selection()
        return result

    def cancel_selection(self):
        """Drop a cuisine chosen without a food"""
        if self.stage == AssemblyStage.AWAITING_FOOD:
            self.current_cuisine = None
            self.stage = AssemblyStage.AWAITING_CUISINE

    def suggest_cuisine(self, name: str) -> Optional[str]:
        return closest_name(name, self.menu.cuisines)

    def suggest_food(self, cuisine_name: str, food_name: str) -> Optional[str]:
        cuisine = self.menu.get_cuisine(cuisine_name)
        if cuisine is None:
            return None
        return closest_name(food_name, [food.name for food in cuisine.foods])

    def done(self):
        self.current_cuisine = None
        self.stage = AssemblyStage.DONE

    @property
    def total(self) -> Decimal:
        return sum((line.price for line in self.lines), Decimal('0'))

    def finish(self, customer: Customer, payment_mode: PaymentMode, date: Optional[str] = None) -> Order:
        """Build the order from everything selected so far"""
        self.done()
        order = Order(
            customer=customer,
            date=date if date is not None else default_order_date(),
            payment_mode=payment_mode,
            foods=list(self.lines),
            price=self.total,
        )
        logger.info(f"Assembled order {order.order_id}: {len(order.foods)} item(s), total ${order.price}")
        return order

def assemble_order(menu: Optional[Menu], selections: Iterable[Tuple[str, str]], customer: Customer,
                   payment_mode: PaymentMode, date: Optional[str] = None) -> Order:
    """Resolve all selections against the menu and return the finished order.

    Selections stop at the first pair containing the done keyword. A pair
    that cannot be resolved raises a SelectionError and no order is built.
    """
    assembler = OrderAssembler(menu)
    for cuisine_name, food_name in selections:
        if is_done(cuisine_name) or is_done(food_name):
            break
        result = assembler.select(cuisine_name, food_name)
        if result == SelectionResult.CUISINE_NOT_FOUND:
            raise CuisineNotFoundError(
                f"Cuisine '{cuisine_name}' not found in menu",
                cuisine_name, food_name, assembler.suggest_cuisine(cuisine_name))
        if result == SelectionResult.FOOD_NOT_FOUND:
            raise FoodNotFoundError(
                f"Food '{food_name}' not found in cuisine '{cuisine_name}'",
                cuisine_name, food_name, assembler.suggest_food(cuisine_name, food_name))
    return assembler.finish(customer, payment_mode, date)

__all__ = ['OrderAssembler', 'assemble_order', 'MenuNotFoundError', 'SelectionError',
           'CuisineNotFoundError', 'FoodNotFoundError']
