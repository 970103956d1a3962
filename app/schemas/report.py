# app/schemas/report.py
from pydantic import BaseModel, Field


class DailySalesResponseSchema(BaseModel):
    """Schema for the daily sales report."""

    date: str = Field(..., description="Reported day in the report timezone, ISO format")
    total: str
    order_count: int


class PopularDishResponseSchema(BaseModel):
    """Schema for most popular main/side dish reports."""

    name: str
    count: int


class DishPairingResponseSchema(BaseModel):
    """Schema for the most common main/side pairing report."""

    main_dish: str
    side_dish: str
    count: int
