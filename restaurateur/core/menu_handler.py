"""Menu handling utilities"""
import logging
from typing import List, Iterable, Optional

from fuzzywuzzy import fuzz

from restaurateur.core.config import SUGGESTION_THRESHOLD
from restaurateur.core.models import Food, Cuisine, Menu
from restaurateur.utils.parsing import parse_price, parse_veg_flag, parse_food_type, parse_food_category

logger = logging.getLogger(__name__)

def closest_name(name: str, choices: Iterable[str], threshold: int = None) -> Optional[str]:
    """Return the choice that best resembles name, if it is close enough"""
    threshold = SUGGESTION_THRESHOLD if threshold is None else threshold
    best, best_score = None, 0
    for choice in choices:
        score = fuzz.ratio(name.lower(), choice.lower())
        if score > best_score:
            best, best_score = choice, score
    if best is not None and best_score >= threshold:
        logger.info(f"Suggesting '{best}' for '{name}' (score {best_score})")
        return best
    return None

class MenuBuilder:
    """Build a Menu from raw text fields, defaulting anything malformed"""

    def __init__(self, name: str, price_text='0', is_veg_text='y'):
        self.warnings: List[str] = []
        price = self._take(parse_price(price_text))
        is_veg = self._take(parse_veg_flag(is_veg_text))
        self.menu = Menu(name=name, price=price, is_veg=is_veg)
        logger.info(f"Building menu '{name}'")

    def _take(self, parsed):
        value, warning = parsed
        if warning:
            self.warnings.append(warning)
        return value

    def add_cuisine(self, name: str) -> Cuisine:
        """Start a cuisine; a repeated name replaces the earlier one"""
        cuisine = Cuisine(name=name)
        self.menu.add_cuisine(cuisine)
        return cuisine

    def add_food(self, cuisine_name: str, name: str, food_type_text='veg',
                 category_text='appetizer', price_text='0') -> Food:
        cuisine = self.menu.get_cuisine(cuisine_name)
        if cuisine is None:
            cuisine = self.add_cuisine(cuisine_name)
        food = Food(
            name=name,
            food_type=self._take(parse_food_type(food_type_text)),
            food_category=self._take(parse_food_category(category_text)),
            price=self._take(parse_price(price_text)),
        )
        cuisine.foods.append(food)
        logger.info(f"Added {food.name} (${food.price}) to cuisine '{cuisine_name}'")
        return food

    def build(self) -> Menu:
        logger.info(f"Menu '{self.menu.name}' built with {len(self.menu.cuisines)} cuisine(s), "
                    f"{len(self.warnings)} warning(s)")
        return self.menu

class MalformedMenuError(ValueError):
    """Raised when a menu document does not have the expected shape"""

def menu_from_dict(data: dict) -> MenuBuilder:
    """Build a menu from a JSON-style dict, returning the builder with its warnings.

    Bad values fall back to defaults; entries that are not objects raise
    MalformedMenuError.
    """
    if not isinstance(data, dict):
        raise MalformedMenuError("Menu must be an object")
    builder = MenuBuilder(
        name=str(data.get('name', '')),
        price_text=data.get('price', '0'),
        is_veg_text=data.get('is_veg', 'y'),
    )
    for cuisine in data.get('cuisines') or []:
        if not isinstance(cuisine, dict):
            raise MalformedMenuError(f"Cuisine entry must be an object, got {cuisine!r}")
        cuisine_name = str(cuisine.get('name', ''))
        builder.add_cuisine(cuisine_name)
        for food in cuisine.get('foods') or []:
            if not isinstance(food, dict):
                raise MalformedMenuError(f"Food entry in '{cuisine_name}' must be an object, got {food!r}")
            builder.add_food(
                cuisine_name,
                str(food.get('name', '')),
                food_type_text=food.get('food_type', 'veg'),
                category_text=food.get('food_category', 'appetizer'),
                price_text=food.get('price', '0'),
            )
    return builder

def format_menu(menu: Menu) -> str:
    """Get formatted menu listing"""
    veg = "veg" if menu.is_veg else "non-veg"
    lines = [f"Menu: {menu.name} (${menu.price}, {veg})"]
    for cuisine in menu.cuisines.values():
        lines.append(f"{cuisine.name}:")
        for food in cuisine.foods:
            lines.append(f"  - {food.name} [{food.food_type.value}, {food.food_category.value}] ${food.price}")
    return "\n".join(lines)
