"""Shared pytest fixtures."""
from decimal import Decimal

import pytest

from restaurateur.core.enums import FoodType, FoodCategory
from restaurateur.core.models import Food, Cuisine, Menu, Customer, create_business
from restaurateur.core.store import Store


@pytest.fixture
def store() -> Store:
    return Store()


@pytest.fixture
def italian_menu() -> Menu:
    """A menu with one Italian and one Indian cuisine."""
    menu = Menu(name="Dinner", price=Decimal('25'), is_veg=False)
    menu.add_cuisine(Cuisine(name="Italian", foods=[
        Food("Pizza", FoodType.VEG, FoodCategory.MAIN_COURSE, Decimal('9.5')),
        Food("Pasta", FoodType.VEG, FoodCategory.MAIN_COURSE, Decimal('7.0')),
        Food("Tiramisu", FoodType.VEG, FoodCategory.DESSERT, Decimal('5.25')),
    ]))
    menu.add_cuisine(Cuisine(name="Indian", foods=[
        Food("Chicken Tikka", FoodType.NON_VEG, FoodCategory.APPETIZER, Decimal('6.0')),
    ]))
    return menu


@pytest.fixture
def customer() -> Customer:
    return Customer(name="Asha", age=31, address="12 Lake Road", phone="555-0101")


@pytest.fixture
def business_with_menu(store, italian_menu):
    business = create_business("Luigi's", "1 Main St", "555-0100")
    store.add_business(business)
    store.add_menu("Luigi's", italian_menu)
    return business
