from enum import Enum

class FoodType(Enum):
    VEG = "veg"
    NON_VEG = "nonveg"

class FoodCategory(Enum):
    APPETIZER = "appetizer"
    MAIN_COURSE = "maincourse"
    DESSERT = "dessert"

class PaymentMode(Enum):
    CASH = "cash"
    CARD = "card"
    UPI = "upi"
    WALLET = "wallet"

class AssemblyStage(Enum):
    AWAITING_CUISINE = "awaiting_cuisine"
    AWAITING_FOOD = "awaiting_food"
    SELECTION_CONFIRMED = "selection_confirmed"
    DONE = "done"

class SelectionResult(Enum):
    SELECTED = "selected"
    CUISINE_FOUND = "cuisine_found"
    CUISINE_NOT_FOUND = "cuisine_not_found"
    FOOD_NOT_FOUND = "food_not_found"
