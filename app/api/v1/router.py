# app/api/v1/router.py
from fastapi import APIRouter
from app.api.v1.endpoints import menu, orders, reports


api_router = APIRouter()

api_router.include_router(menu.router)
api_router.include_router(orders.router)
api_router.include_router(reports.router)
