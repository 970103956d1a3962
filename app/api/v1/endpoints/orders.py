# app/api/v1/endpoints/orders.py
from fastapi import APIRouter, HTTPException, status
from typing import List

from app.schemas.order import (
    OrderCreateSchema,
    OrderUpdateSchema,
    OrderResponseSchema,
    MessageResponseSchema
)
from app.services.order_service import OrderService
from app.exceptions.dish_exceptions import DishNotFoundError, DishCategoryMismatchError
from app.exceptions.order_exceptions import (
    OrderNotFoundError,
    InvalidOrderIdError,
    InvalidOrderRequestError
)

router = APIRouter(prefix="/orders", tags=["orders"])


@router.post(
    "",
    response_model=OrderResponseSchema,
    status_code=status.HTTP_201_CREATED
)
async def create_order(order_data: OrderCreateSchema) -> OrderResponseSchema:
    """
    Create a new order from dish names.

    Args:
        order_data: Main dish, side dishes and optional dessert names

    Returns:
        Created order with dishes expanded

    Raises:
        HTTPException: 400 if dishes are missing or in the wrong slot, 404 if a dish is unknown
    """
    try:
        order = await OrderService.create_order(order_data)
        return OrderResponseSchema.from_orm_order(order)
    except (InvalidOrderRequestError, DishCategoryMismatchError) as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    except DishNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )


@router.get("", response_model=List[OrderResponseSchema])
async def get_orders() -> List[OrderResponseSchema]:
    """Retrieve all orders with dishes expanded."""
    orders = await OrderService.get_all_orders()
    return [OrderResponseSchema.from_orm_order(order) for order in orders]


@router.get("/{order_id}", response_model=OrderResponseSchema)
async def get_order(order_id: str) -> OrderResponseSchema:
    """
    Retrieve a single order by ID.

    Raises:
        HTTPException: 404 if order not found
    """
    try:
        order = await OrderService.get_order_by_id(order_id)
        return OrderResponseSchema.from_orm_order(order)
    except OrderNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )


@router.put("/{order_id}", response_model=OrderResponseSchema)
async def update_order(order_id: str, order_data: OrderUpdateSchema) -> OrderResponseSchema:
    """
    Replace the dishes of an order. Dishes are referenced by id.

    Args:
        order_id: UUID of the order to update
        order_data: Replacement main dish, side dishes and dessert ids

    Returns:
        Updated order with dishes expanded

    Raises:
        HTTPException: 400 if an id is malformed or dishes are invalid, 404 if order or dish not found
    """
    try:
        order = await OrderService.update_order(order_id, order_data)
        return OrderResponseSchema.from_orm_order(order)
    except (InvalidOrderIdError, InvalidOrderRequestError, DishCategoryMismatchError) as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    except (OrderNotFoundError, DishNotFoundError) as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )


@router.delete("/{order_id}", response_model=MessageResponseSchema)
async def delete_order(order_id: str) -> MessageResponseSchema:
    """
    Delete an order.

    Raises:
        HTTPException: 404 if order not found
    """
    try:
        await OrderService.delete_order(order_id)
    except OrderNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )
    return MessageResponseSchema(message="Order deleted successfully")
