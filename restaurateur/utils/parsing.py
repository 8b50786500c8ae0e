"""Lenient parsers for raw text input.

Every parser returns a (value, warning) pair. On bad input the value falls
back to a fixed default and the warning explains what happened; nothing
here raises.
"""
import logging
from decimal import Decimal, InvalidOperation
from typing import Optional, Tuple

from restaurateur.core.config import DONE_KEYWORD
from restaurateur.core.enums import FoodType, FoodCategory, PaymentMode

logger = logging.getLogger(__name__)

FOOD_TYPES = {
    'veg': FoodType.VEG,
    'nonveg': FoodType.NON_VEG,
    'non-veg': FoodType.NON_VEG,
    'non veg': FoodType.NON_VEG,
}

FOOD_CATEGORIES = {
    'appetizer': FoodCategory.APPETIZER,
    'maincourse': FoodCategory.MAIN_COURSE,
    'main course': FoodCategory.MAIN_COURSE,
    'dessert': FoodCategory.DESSERT,
}

VEG_FLAGS = {'y': True, 'yes': True, 'n': False, 'no': False}

PAYMENT_MODES = {mode.value: mode for mode in PaymentMode}

def _fallback(value, warning: str):
    logger.warning(warning)
    return value, warning

def parse_price(text) -> Tuple[Decimal, Optional[str]]:
    try:
        price = Decimal(str(text).strip())
    except InvalidOperation:
        return _fallback(Decimal('0'), f"Invalid price '{text}', defaulting to 0")
    if not price.is_finite():
        return _fallback(Decimal('0'), f"Invalid price '{text}', defaulting to 0")
    return price, None

def parse_age(text) -> Tuple[int, Optional[str]]:
    # JSON numbers such as 31.0
    if isinstance(text, float) and text.is_integer():
        text = int(text)
    try:
        age = int(str(text).strip())
    except ValueError:
        return _fallback(0, f"Invalid age '{text}', defaulting to 0")
    if not 0 <= age <= 255:
        return _fallback(0, f"Invalid age '{text}', defaulting to 0")
    return age, None

def parse_food_type(text) -> Tuple[FoodType, Optional[str]]:
    food_type = FOOD_TYPES.get(str(text).strip().lower())
    if food_type is None:
        return _fallback(FoodType.VEG, f"Invalid food type '{text}', defaulting to veg")
    return food_type, None

def parse_food_category(text) -> Tuple[FoodCategory, Optional[str]]:
    category = FOOD_CATEGORIES.get(str(text).strip().lower())
    if category is None:
        return _fallback(FoodCategory.APPETIZER, f"Invalid food category '{text}', defaulting to appetizer")
    return category, None

def parse_veg_flag(text) -> Tuple[bool, Optional[str]]:
    if isinstance(text, bool):
        return text, None
    flag = VEG_FLAGS.get(str(text).strip().lower())
    if flag is None:
        return _fallback(True, f"Invalid veg flag '{text}', defaulting to veg")
    return flag, None

def parse_payment_mode(text) -> Tuple[PaymentMode, Optional[str]]:
    mode = PAYMENT_MODES.get(str(text).strip().lower())
    if mode is None:
        return _fallback(PaymentMode.CARD, f"Invalid payment mode '{text}', defaulting to card")
    return mode, None

def is_done(text) -> bool:
    """Check for the sentinel that ends a list of entries"""
    return text is not None and str(text).strip().lower() == DONE_KEYWORD.strip().lower()
