# app/api/v1/endpoints/reports.py
from fastapi import APIRouter
from typing import Union

from app.schemas.order import MessageResponseSchema
from app.schemas.report import (
    DailySalesResponseSchema,
    PopularDishResponseSchema,
    DishPairingResponseSchema
)
from app.services.report_service import ReportService

router = APIRouter(prefix="/reports", tags=["reports"])


@router.get("/daily-sales", response_model=DailySalesResponseSchema)
async def get_daily_sales() -> DailySalesResponseSchema:
    """Revenue of today's orders."""
    report = await ReportService.get_daily_sales()
    return DailySalesResponseSchema(
        date=report["date"],
        total=f"{report['total']:.2f}",
        order_count=report["order_count"]
    )


@router.get(
    "/famous-main-dish",
    response_model=Union[PopularDishResponseSchema, MessageResponseSchema]
)
async def get_famous_main_dish() -> Union[PopularDishResponseSchema, MessageResponseSchema]:
    """Most ordered main dish."""
    report = await ReportService.get_popular_main_dish()
    if report is None:
        return MessageResponseSchema(message="No orders found")
    return PopularDishResponseSchema(**report)


@router.get(
    "/famous-side-dish",
    response_model=Union[PopularDishResponseSchema, MessageResponseSchema]
)
async def get_famous_side_dish() -> Union[PopularDishResponseSchema, MessageResponseSchema]:
    """Most ordered side dish."""
    report = await ReportService.get_popular_side_dish()
    if report is None:
        return MessageResponseSchema(message="No orders found")
    return PopularDishResponseSchema(**report)


@router.get(
    "/most-common-pair",
    response_model=Union[DishPairingResponseSchema, MessageResponseSchema]
)
async def get_most_common_pair() -> Union[DishPairingResponseSchema, MessageResponseSchema]:
    """Side dish most often eaten with a given main dish."""
    report = await ReportService.get_most_common_pairing()
    if report is None:
        return MessageResponseSchema(message="No pairings found")
    return DishPairingResponseSchema(**report)
