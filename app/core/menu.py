# app/core/menu.py
from decimal import Decimal

from shared.models.dish import DishCategory


# Baseline catalog seeded on startup
DEFAULT_MENU = [
    {"category": DishCategory.MAIN, "name": "Rice", "price": Decimal("100")},
    {"category": DishCategory.MAIN, "name": "Rotty", "price": Decimal("20")},
    {"category": DishCategory.MAIN, "name": "Noodles", "price": Decimal("150")},
    {"category": DishCategory.SIDE, "name": "Wadai", "price": Decimal("45")},
    {"category": DishCategory.SIDE, "name": "Dhal curry", "price": Decimal("75")},
    {"category": DishCategory.SIDE, "name": "Fish curry", "price": Decimal("120")},
    {"category": DishCategory.DESSERT, "name": "Watalappam", "price": Decimal("40")},
    {"category": DishCategory.DESSERT, "name": "Jelly", "price": Decimal("20")},
    {"category": DishCategory.DESSERT, "name": "Pudding", "price": Decimal("250")},
]
