# app/schemas/order.py
from pydantic import BaseModel, Field, field_validator
from typing import Any, List, Optional

from app.schemas.dish import DishResponseSchema


class OrderCreateSchema(BaseModel):
    """
    Schema for creating an order. Dishes are referenced by name.

    Fields accept any JSON value. Required fields and their shapes are checked
    by OrderService so that a missing main dish, an empty side list or a
    mistyped field is reported as a bad request.
    """

    main_dish: Any = Field(None, alias="mainDish", description="Main dish name")
    side_dishes: Any = Field(None, alias="sideDishes", description="Side dish names, in order")
    dessert: Any = Field(None, description="Dessert name")

    model_config = {"populate_by_name": True}

    @field_validator('main_dish', 'dessert')
    @classmethod
    def validate_name(cls, value: Any) -> Any:
        """Treat blank names as missing."""
        if isinstance(value, str) and not value.strip():
            return None
        return value


class OrderUpdateSchema(BaseModel):
    """Schema for replacing the dishes of an order. Dishes are referenced by id."""

    main_dish: Any = Field(None, alias="mainDish", description="Main dish UUID")
    side_dishes: Any = Field(None, alias="sideDishes", description="Side dish UUIDs, in order")
    dessert: Any = Field(None, description="Dessert UUID")

    model_config = {"populate_by_name": True}


class OrderResponseSchema(BaseModel):
    """Schema for order responses with dish references expanded."""

    id: str
    main_dish: DishResponseSchema
    side_dishes: List[DishResponseSchema]
    dessert: Optional[DishResponseSchema]
    created_at: str

    @classmethod
    def from_orm_order(cls, order: 'Order') -> 'OrderResponseSchema':
        """
        Create response schema from an order with main_dish, dessert
        and side_items__dish prefetched.
        """
        side_items = sorted(order.side_items, key=lambda item: item.position)
        return cls(
            id=str(order.id),
            main_dish=DishResponseSchema.from_orm_dish(order.main_dish),
            side_dishes=[DishResponseSchema.from_orm_dish(item.dish) for item in side_items],
            dessert=DishResponseSchema.from_orm_dish(order.dessert) if order.dessert else None,
            created_at=order.created_at.isoformat()
        )


class MessageResponseSchema(BaseModel):
    """Plain message response."""

    message: str
