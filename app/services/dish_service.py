# app/services/dish_service.py
import logging
from decimal import Decimal, InvalidOperation
from typing import Dict, Iterable, List, Optional
from uuid import UUID

from tortoise.exceptions import IntegrityError

from shared.models.dish import Dish, DishCategory

logger = logging.getLogger(__name__)


class DishService:
    """Service for the dish catalog."""

    @staticmethod
    async def resolve_by_name(name: str) -> Optional[Dish]:
        """
        Look up a dish by its unique name.

        Args:
            name: Dish name

        Returns:
            Dish instance or None if no dish has that name
        """
        return await Dish.get_or_none(name=name)

    @staticmethod
    async def get_dishes_by_ids(dish_ids: Iterable[UUID]) -> Dict[UUID, Dish]:
        """
        Fetch several dishes in one query.

        Args:
            dish_ids: Dish UUIDs, duplicates allowed

        Returns:
            Mapping of UUID to dish for every id that exists
        """
        unique_ids = set(dish_ids)
        if not unique_ids:
            return {}
        dishes = await Dish.filter(id__in=list(unique_ids))
        return {dish.id: dish for dish in dishes}

    @staticmethod
    async def get_all_dishes() -> List[Dish]:
        """Retrieve the whole catalog."""
        return await Dish.all().order_by("category", "name")

    @staticmethod
    async def get_dishes_by_category(category: str) -> List[Dish]:
        """
        Retrieve dishes of one category.

        Args:
            category: Category value (main, side, dessert)

        Returns:
            List of dishes, empty for an unknown category
        """
        try:
            dish_category = DishCategory(category.lower())
        except ValueError:
            return []
        return await Dish.filter(category=dish_category).order_by("name")

    @staticmethod
    async def seed_menu(entries: Iterable[dict]) -> int:
        """
        Insert catalog entries whose name is not taken yet.

        A failing entry is logged and skipped; the rest of the batch is still seeded.

        Args:
            entries: Dicts with category, name and price

        Returns:
            Number of dishes created
        """
        created_count = 0
        for entry in entries:
            name = entry.get("name")
            try:
                category = DishCategory(entry["category"])
                price = Decimal(str(entry["price"]))
                if not name or price < 0:
                    raise ValueError("name is required and price must not be negative")

                if await Dish.exists(name=name):
                    continue
                await Dish.create(category=category, name=name, price=price)
                created_count += 1
            except IntegrityError:
                # Another instance inserted the same name first
                logger.info(f"Dish '{name}' already seeded")
            except (KeyError, ValueError, InvalidOperation) as e:
                logger.error(f"Invalid menu entry {entry!r}: {e}")
            except Exception:
                logger.exception(f"Failed to seed dish '{name}'")

        logger.info(f"Menu initialized, {created_count} new dishes")
        return created_count
