"""
Pytest configuration and fixtures for backend tests.
"""

import os

# SQLite in-memory database for testing, must be set before the app is imported
os.environ["DATABASE_URL"] = "sqlite://:memory:"
os.environ["REPORT_TIMEZONE"] = "UTC"

import pytest
from httpx import AsyncClient, ASGITransport

from app.main import app
from app.core.config import settings
from app.core.database import init_db, close_db
from app.core.menu import DEFAULT_MENU
from app.schemas.order import OrderCreateSchema
from app.services.dish_service import DishService
from app.services.order_service import OrderService
from shared.models.dish import Dish


@pytest.fixture
async def db():
    """
    Initialize a fresh database for each test.
    The in-memory database is discarded when connections are closed.
    """
    await init_db()
    yield
    await close_db()


@pytest.fixture
async def seeded_db(db):
    """Database with the default menu seeded."""
    await DishService.seed_menu(DEFAULT_MENU)
    yield


@pytest.fixture
async def client(seeded_db):
    """
    Create an HTTP client bound to the app.
    The database is initialised by the fixtures, not by the app lifespan.
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as test_client:
        yield test_client


@pytest.fixture
def api_prefix():
    return settings.API_V1_PREFIX


@pytest.fixture
def make_order(seeded_db):
    """Factory creating orders through the service layer."""
    async def _make_order(main_dish, side_dishes, dessert=None):
        return await OrderService.create_order(
            OrderCreateSchema(main_dish=main_dish, side_dishes=side_dishes, dessert=dessert)
        )
    return _make_order


@pytest.fixture
def dish_by_name(seeded_db):
    """Look up a seeded dish by name."""
    async def _dish_by_name(name):
        return await Dish.get(name=name)
    return _dish_by_name
