# app/services/report_service.py
from datetime import date, datetime, time, timedelta, timezone
from decimal import Decimal
from typing import Optional, Tuple
from zoneinfo import ZoneInfo

from tortoise.functions import Count, Min

from shared.models.dish import Dish
from shared.models.order import Order, OrderSideDish
from app.core.config import settings
from app.services.order_service import ORDER_RELATIONS


def get_day_bounds(now: datetime, tz_name: str) -> Tuple[date, datetime, datetime]:
    """
    Compute the local calendar day containing `now`.

    Args:
        now: Timezone-aware moment inside the day
        tz_name: IANA timezone that defines the day

    Returns:
        Tuple of (local date, start, end) where start is inclusive and end
        exclusive, both converted to UTC
    """
    tz = ZoneInfo(tz_name)
    local_day = now.astimezone(tz).date()
    start = datetime.combine(local_day, time.min, tzinfo=tz)
    end = datetime.combine(local_day + timedelta(days=1), time.min, tzinfo=tz)
    return local_day, start.astimezone(timezone.utc), end.astimezone(timezone.utc)


def order_total(order: Order) -> Decimal:
    """Sum the prices of every dish referenced by a prefetched order."""
    total = order.main_dish.price
    for item in order.side_items:
        total += item.dish.price
    if order.dessert:
        total += order.dessert.price
    return total


class ReportService:
    """
    Sales statistics computed from the current orders on every call.

    Nothing is cached; each report reflects the latest committed writes.
    """

    @staticmethod
    async def get_daily_sales(now: Optional[datetime] = None) -> dict:
        """
        Revenue of the orders created during the current local day.

        Args:
            now: Moment that selects the day, defaults to the current time

        Returns:
            Dict with date, total and order_count
        """
        now = now or datetime.now(timezone.utc)
        local_day, start, end = get_day_bounds(now, settings.REPORT_TIMEZONE)

        orders = await Order.filter(
            created_at__gte=start,
            created_at__lt=end
        ).prefetch_related(*ORDER_RELATIONS)

        total = sum((order_total(order) for order in orders), Decimal("0.00"))
        return {
            "date": local_day.isoformat(),
            "total": total,
            "order_count": len(orders),
        }

    @staticmethod
    async def get_popular_main_dish() -> Optional[dict]:
        """
        Main dish that appears in the most orders.

        Ties go to the dish that was ordered first.

        Returns:
            Dict with name and count, or None when there are no orders
        """
        rows = await (
            Order.annotate(order_count=Count("id"), first_ordered=Min("created_at"))
            .group_by("main_dish_id")
            .order_by("-order_count", "first_ordered")
            .limit(1)
            .values("main_dish_id", "order_count")
        )
        if not rows:
            return None

        dish = await Dish.get(id=rows[0]["main_dish_id"])
        return {"name": dish.name, "count": rows[0]["order_count"]}

    @staticmethod
    async def get_popular_side_dish() -> Optional[dict]:
        """
        Side dish ordered the most times, counting each side slot of every order.

        Ties go to the dish whose first side slot was stored first.

        Returns:
            Dict with name and count, or None when there are no orders
        """
        rows = await (
            OrderSideDish.annotate(order_count=Count("id"), first_seen=Min("id"))
            .group_by("dish_id")
            .order_by("-order_count", "first_seen")
            .limit(1)
            .values("dish_id", "order_count")
        )
        if not rows:
            return None

        dish = await Dish.get(id=rows[0]["dish_id"])
        return {"name": dish.name, "count": rows[0]["order_count"]}

    @staticmethod
    async def get_most_common_pairing() -> Optional[dict]:
        """
        Main/side combination that occurs most often.

        Every side slot of an order yields one (main dish, side dish) pair.
        Ties go to the pair whose first side slot was stored first.

        Returns:
            Dict with main_dish, side_dish and count, or None when there are no pairs
        """
        rows = await (
            OrderSideDish.annotate(pair_count=Count("id"), first_seen=Min("id"))
            .group_by("order__main_dish_id", "dish_id")
            .order_by("-pair_count", "first_seen")
            .limit(1)
            .values("order__main_dish_id", "dish_id", "pair_count")
        )
        if not rows:
            return None

        main_dish = await Dish.get(id=rows[0]["order__main_dish_id"])
        side_dish = await Dish.get(id=rows[0]["dish_id"])
        return {
            "main_dish": main_dish.name,
            "side_dish": side_dish.name,
            "count": rows[0]["pair_count"],
        }
