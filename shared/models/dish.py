# shared/models/dish.py
from tortoise import Model, fields
from enum import Enum


class DishCategory(str, Enum):
    """Enum for menu slots a dish can fill."""

    MAIN = "main"
    SIDE = "side"
    DESSERT = "dessert"


class Dish(Model):
    """
    Dish database model representing a catalog entry.
    """

    id = fields.UUIDField(pk=True)
    category = fields.CharEnumField(DishCategory, index=True)
    name = fields.CharField(max_length=100, unique=True)
    price = fields.DecimalField(max_digits=10, decimal_places=2)
    created_at = fields.DatetimeField(auto_now_add=True)

    class Meta:
        table = "dishes"
        ordering = ["category", "name"]

    def __str__(self) -> str:
        return f"{self.name} ({self.category.value}) - {self.price}"
