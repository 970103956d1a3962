# app/schemas/dish.py
from pydantic import BaseModel


class DishResponseSchema(BaseModel):
    """Schema for dish responses."""

    id: str
    category: str
    name: str
    price: str

    model_config = {"from_attributes": True}

    @classmethod
    def from_orm_dish(cls, dish: 'Dish') -> 'DishResponseSchema':
        """
        Create response schema from ORM model.

        Args:
            dish: Dish ORM model

        Returns:
            DishResponseSchema instance
        """
        return cls(
            id=str(dish.id),
            category=dish.category.value,
            name=dish.name,
            price=f"{dish.price:.2f}"
        )
