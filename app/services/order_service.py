# app/services/order_service.py
import logging
from typing import List, Optional, Tuple
from uuid import UUID

from tortoise.transactions import in_transaction

from shared.models.dish import Dish, DishCategory
from shared.models.order import Order, OrderSideDish
from app.schemas.order import OrderCreateSchema, OrderUpdateSchema
from app.services.dish_service import DishService
from app.exceptions.dish_exceptions import DishNotFoundError, DishCategoryMismatchError
from app.exceptions.order_exceptions import (
    OrderNotFoundError,
    InvalidOrderIdError,
    InvalidOrderRequestError
)

logger = logging.getLogger(__name__)

ORDER_RELATIONS = ("main_dish", "dessert", "side_items__dish")


def _parse_uuid(value: str) -> Optional[UUID]:
    try:
        return UUID(str(value))
    except (TypeError, ValueError):
        return None


def _check_category(dish: Dish, expected: DishCategory) -> None:
    if dish.category != expected:
        raise DishCategoryMismatchError(dish.name, expected.value, dish.category.value)


def _check_shape(order_data) -> None:
    """Require string dish references and a non-empty list of side references."""
    if not order_data.main_dish or not order_data.side_dishes:
        raise InvalidOrderRequestError()

    if not isinstance(order_data.side_dishes, list):
        raise InvalidOrderRequestError("sideDishes must be a list")

    references = [order_data.main_dish, *order_data.side_dishes]
    if order_data.dessert is not None:
        references.append(order_data.dessert)
    if not all(isinstance(reference, str) for reference in references):
        raise InvalidOrderRequestError("Dish references must be strings")


class OrderService:
    """Service for validating, storing and reading orders."""

    @staticmethod
    async def _resolve_names(
            order_data: OrderCreateSchema
    ) -> Tuple[Dish, List[Dish], Optional[Dish]]:
        """
        Resolve dish names to catalog entries, stopping at the first failure.

        Raises:
            InvalidOrderRequestError: If main dish or side dishes are missing or mistyped
            DishNotFoundError: If a name is not in the catalog
            DishCategoryMismatchError: If a dish is used in the wrong slot
        """
        _check_shape(order_data)

        main_dish = await DishService.resolve_by_name(order_data.main_dish)
        if not main_dish:
            raise DishNotFoundError("Main dish not found")

        side_dishes = []
        for side_name in order_data.side_dishes:
            side_dish = await DishService.resolve_by_name(side_name)
            if not side_dish:
                raise DishNotFoundError(f"Side dish {side_name} not found")
            side_dishes.append(side_dish)

        dessert = None
        if order_data.dessert:
            dessert = await DishService.resolve_by_name(order_data.dessert)
            if not dessert:
                raise DishNotFoundError("Dessert not found")

        _check_category(main_dish, DishCategory.MAIN)
        for side_dish in side_dishes:
            _check_category(side_dish, DishCategory.SIDE)
        if dessert:
            _check_category(dessert, DishCategory.DESSERT)

        return main_dish, side_dishes, dessert

    @staticmethod
    async def _resolve_ids(
            order_data: OrderUpdateSchema
    ) -> Tuple[Dish, List[Dish], Optional[Dish]]:
        """
        Resolve dish UUIDs to catalog entries.

        Raises:
            InvalidOrderRequestError: If a dish reference is missing, mistyped or not a UUID
            DishNotFoundError: If an id is not in the catalog
            DishCategoryMismatchError: If a dish is used in the wrong slot
        """
        _check_shape(order_data)

        raw_ids = [order_data.main_dish, *order_data.side_dishes]
        if order_data.dessert:
            raw_ids.append(order_data.dessert)

        parsed_ids = []
        for raw_id in raw_ids:
            dish_id = _parse_uuid(raw_id)
            if dish_id is None:
                raise InvalidOrderRequestError(f"Invalid dish ID format: {raw_id}")
            parsed_ids.append(dish_id)

        dishes = await DishService.get_dishes_by_ids(parsed_ids)
        for raw_id, dish_id in zip(raw_ids, parsed_ids):
            if dish_id not in dishes:
                raise DishNotFoundError(f"Dish with id {raw_id} not found")

        main_dish = dishes[parsed_ids[0]]
        side_count = len(order_data.side_dishes)
        side_dishes = [dishes[dish_id] for dish_id in parsed_ids[1:1 + side_count]]
        dessert = dishes[parsed_ids[-1]] if order_data.dessert else None

        _check_category(main_dish, DishCategory.MAIN)
        for side_dish in side_dishes:
            _check_category(side_dish, DishCategory.SIDE)
        if dessert:
            _check_category(dessert, DishCategory.DESSERT)

        return main_dish, side_dishes, dessert

    @staticmethod
    async def _get_expanded(order_id: UUID) -> Optional[Order]:
        return await Order.get_or_none(id=order_id).prefetch_related(*ORDER_RELATIONS)

    @staticmethod
    async def create_order(order_data: OrderCreateSchema) -> Order:
        """
        Create an order from dish names.

        Nothing is written unless every dish resolves.

        Args:
            order_data: Main dish, side dishes and optional dessert names

        Returns:
            Created order with dish references prefetched

        Raises:
            InvalidOrderRequestError: If main dish or side dishes are missing
            DishNotFoundError: If a dish name is not in the catalog
            DishCategoryMismatchError: If a dish is used in the wrong slot
        """
        main_dish, side_dishes, dessert = await OrderService._resolve_names(order_data)

        async with in_transaction():
            order = await Order.create(main_dish=main_dish, dessert=dessert)
            await OrderSideDish.bulk_create([
                OrderSideDish(order=order, dish=side_dish, position=position)
                for position, side_dish in enumerate(side_dishes)
            ])

        logger.info(f"Order created: {order.id} ({main_dish.name}, {len(side_dishes)} sides)")
        return await OrderService._get_expanded(order.id)

    @staticmethod
    async def get_all_orders() -> List[Order]:
        """
        Retrieve every order with dish references prefetched.

        Returns:
            List of orders, oldest first
        """
        return await Order.all().order_by("created_at").prefetch_related(*ORDER_RELATIONS)

    @staticmethod
    async def get_order_by_id(order_id: str) -> Order:
        """
        Retrieve a single order by ID.

        Args:
            order_id: UUID of the order

        Returns:
            Order with dish references prefetched

        Raises:
            OrderNotFoundError: If order doesn't exist
        """
        parsed_id = _parse_uuid(order_id)
        order = await OrderService._get_expanded(parsed_id) if parsed_id else None
        if not order:
            raise OrderNotFoundError(order_id)
        return order

    @staticmethod
    async def update_order(order_id: str, order_data: OrderUpdateSchema) -> Order:
        """
        Replace main dish, side dishes and dessert of an order.

        Args:
            order_id: UUID of the order to update
            order_data: Replacement dish ids

        Returns:
            Updated order with dish references prefetched

        Raises:
            InvalidOrderIdError: If order_id is not a UUID
            OrderNotFoundError: If order doesn't exist
            InvalidOrderRequestError: If dish references are missing or malformed
            DishNotFoundError: If a dish id is not in the catalog
            DishCategoryMismatchError: If a dish is used in the wrong slot
        """
        parsed_id = _parse_uuid(order_id)
        if parsed_id is None:
            raise InvalidOrderIdError()

        order = await Order.get_or_none(id=parsed_id)
        if not order:
            raise OrderNotFoundError(order_id)

        main_dish, side_dishes, dessert = await OrderService._resolve_ids(order_data)

        async with in_transaction():
            order.main_dish = main_dish
            order.dessert = dessert
            await order.save()
            await OrderSideDish.filter(order_id=parsed_id).delete()
            await OrderSideDish.bulk_create([
                OrderSideDish(order=order, dish=side_dish, position=position)
                for position, side_dish in enumerate(side_dishes)
            ])

        logger.info(f"Order updated: {order_id}")
        return await OrderService._get_expanded(parsed_id)

    @staticmethod
    async def delete_order(order_id: str) -> None:
        """
        Delete an order and its side dish rows.

        Args:
            order_id: UUID of the order to delete

        Raises:
            OrderNotFoundError: If order doesn't exist
        """
        parsed_id = _parse_uuid(order_id)
        if parsed_id is None or not await Order.exists(id=parsed_id):
            raise OrderNotFoundError(order_id)

        async with in_transaction():
            await OrderSideDish.filter(order_id=parsed_id).delete()
            await Order.filter(id=parsed_id).delete()

        logger.info(f"Order deleted: {order_id}")
