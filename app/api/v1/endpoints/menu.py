# app/api/v1/endpoints/menu.py
from fastapi import APIRouter
from typing import List

from app.schemas.dish import DishResponseSchema
from app.services.dish_service import DishService

router = APIRouter(prefix="/menu", tags=["menu"])


@router.get("", response_model=List[DishResponseSchema])
async def get_menu() -> List[DishResponseSchema]:
    """Retrieve the whole catalog."""
    dishes = await DishService.get_all_dishes()
    return [DishResponseSchema.from_orm_dish(dish) for dish in dishes]


@router.get("/{category}", response_model=List[DishResponseSchema])
async def get_menu_by_category(category: str) -> List[DishResponseSchema]:
    """
    Retrieve dishes of one category.

    Args:
        category: main, side or dessert

    Returns:
        List of dishes, empty for an unknown category
    """
    dishes = await DishService.get_dishes_by_category(category)
    return [DishResponseSchema.from_orm_dish(dish) for dish in dishes]
