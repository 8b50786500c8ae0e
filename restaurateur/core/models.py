"""Restaurant entities: businesses, their menus and their orders"""
from dataclasses import dataclass, field
from typing import List, Dict, Optional
from decimal import Decimal
import uuid
import logging

from restaurateur.core.enums import FoodType, FoodCategory, PaymentMode

logger = logging.getLogger(__name__)

def _new_order_id() -> str:
    return str(uuid.uuid4())[:8]  # Short unique ID

@dataclass(frozen=True)
class Food:
    name: str
    food_type: FoodType = FoodType.VEG
    food_category: FoodCategory = FoodCategory.APPETIZER
    price: Decimal = Decimal('0')

    def to_dict(self) -> Dict:
        return {
            'name': self.name,
            'food_type': self.food_type.value,
            'food_category': self.food_category.value,
            'price': str(self.price),
        }

@dataclass
class Cuisine:
    name: str
    foods: List[Food] = field(default_factory=list)

    def find_food(self, name: str) -> Optional[Food]:
        """Exact-name lookup, first match wins"""
        for food in self.foods:
            if food.name == name:
                return food
        return None

    def to_dict(self) -> Dict:
        return {'name': self.name, 'foods': [food.to_dict() for food in self.foods]}

@dataclass
class Menu:
    name: str
    price: Decimal = Decimal('0')
    is_veg: bool = True
    cuisines: Dict[str, Cuisine] = field(default_factory=dict)

    def add_cuisine(self, cuisine: Cuisine):
        """Insert or replace a cuisine by name"""
        if cuisine.name in self.cuisines:
            logger.info(f"Replacing cuisine '{cuisine.name}' in menu '{self.name}'")
        self.cuisines[cuisine.name] = cuisine

    def get_cuisine(self, name: str) -> Optional[Cuisine]:
        return self.cuisines.get(name)

    def to_dict(self) -> Dict:
        return {
            'name': self.name,
            'price': str(self.price),
            'is_veg': self.is_veg,
            'cuisines': [cuisine.to_dict() for cuisine in self.cuisines.values()],
        }

@dataclass(frozen=True)
class Customer:
    name: str
    age: int = 0
    address: str = ''
    phone: str = ''

    def to_dict(self) -> Dict:
        return {'name': self.name, 'age': self.age, 'address': self.address, 'phone': self.phone}

@dataclass(frozen=True)
class FoodOrder:
    food: Food
    quantity: int = 1
    price: Decimal = Decimal('0')

    def to_dict(self) -> Dict:
        return {'food': self.food.to_dict(), 'quantity': self.quantity, 'price': str(self.price)}

@dataclass
class Order:
    customer: Customer
    date: str
    payment_mode: PaymentMode
    foods: List[FoodOrder] = field(default_factory=list)
    price: Decimal = Decimal('0')
    order_id: str = field(default_factory=_new_order_id)

    def to_dict(self) -> Dict:
        return {
            'order_id': self.order_id,
            'date': self.date,
            'customer': self.customer.to_dict(),
            'payment_mode': self.payment_mode.value,
            'price': str(self.price),
            'foods': [line.to_dict() for line in self.foods],
        }

@dataclass
class Business:
    name: str
    address: str = ''
    phone: str = ''
    menu: Optional[Menu] = None
    orders: List[Order] = field(default_factory=list)

    def to_dict(self) -> Dict:
        return {
            'name': self.name,
            'address': self.address,
            'phone': self.phone,
            'menu': self.menu.to_dict() if self.menu else None,
            'orders': [order.to_dict() for order in self.orders],
        }

def create_business(name: str, address: str, phone: str) -> Business:
    """Create a business with no menu and no orders"""
    return Business(name=name, address=address, phone=phone)

__all__ = ['Food', 'Cuisine', 'Menu', 'Customer', 'FoodOrder', 'Order', 'Business', 'create_business']
