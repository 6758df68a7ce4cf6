"""
Restaurant Ordering API: Test Configuration (conftest.py)
============================================================

What:  Shared fixtures: settings, an in-memory database, the app, an HTTP
       client and bearer credentials.
How:   Every test gets a fresh app built by create_app() with its own
       Settings and a session factory bound to an in-memory SQLite engine
       (aiosqlite, StaticPool so all sessions share one connection). httpx's
       ASGITransport does not run the lifespan, so nothing here depends on it.

Fixture Hierarchy (all function-scoped):
    test_settings ─┬─ auth_service ── auth_headers / make_token
                   └─ app ── client
    db_engine ── session_factory ──┘
    mock_db_session (unit tests without a database)
"""

import os

# Must be set before anything imports app.config (which builds the
# module-level settings and app)
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["JWT_SECRET"] = "test-secret-not-for-production-0123456789"
os.environ["LOG_LEVEL"] = "WARNING"

from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from app.config import Settings
from app.database import Base, create_session_factory
from app.main import create_app
from app.schemas.common import Principal
from app.services.auth_service import AuthService

# Register every table on Base.metadata before create_all
from app.models.customer import Customer  # noqa: F401
from app.models.menu import Menu  # noqa: F401
from app.models.order import Order  # noqa: F401
from app.models.payment import Payment  # noqa: F401
from app.models.restaurant import Restaurant  # noqa: F401
from app.models.shipping import Shipping  # noqa: F401

@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        _env_file=None,
        database_url="sqlite+aiosqlite://",
        jwt_secret="test-secret-not-for-production-0123456789",
        bcrypt_rounds=4,
        max_page_size=100,
        log_level="WARNING",
    )

@pytest.fixture
def mock_db_session():
    """
    AsyncMock standing in for AsyncSession.

    Usage:
        mock_db_session.execute.return_value = MagicMock(rowcount=0)
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session

@pytest_asyncio.fixture
async def db_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()

@pytest.fixture
def session_factory(db_engine):
    return create_session_factory(db_engine)

@pytest.fixture
def app(test_settings, session_factory):
    return create_app(settings=test_settings, session_factory=session_factory)

@pytest_asyncio.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as http:
        yield http

@pytest.fixture
def auth_service(test_settings) -> AuthService:
    return AuthService(test_settings)

@pytest.fixture
def make_token(auth_service):
    def _make(customer_id: int = 1, username: str = "tester", **kwargs) -> str:
        return auth_service.issue_token(Principal(id=customer_id, username=username), **kwargs)

    return _make

@pytest.fixture
def auth_headers(make_token):
    """Bearer header for customer 1. The gate only checks the token, not the table."""
    return {"Authorization": f"Bearer {make_token()}"}

@pytest_asyncio.fixture
async def restaurant_id(client, auth_headers) -> int:
    response = await client.post(
        "/api/restaurants",
        json={"restaurant_name": "Baan Somtum", "address": "1 Nimman Rd", "phone": "053000000"},
        headers=auth_headers,
    )
    assert response.status_code == 201
    return response.json()["id"]

@pytest_asyncio.fixture
async def menu_id(client, auth_headers, restaurant_id) -> int:
    response = await client.post(
        "/api/menus",
        json={
            "restaurant_id": restaurant_id,
            "menu_name": "Pad Thai",
            "price": 60,
            "category": "noodles",
        },
        headers=auth_headers,
    )
    assert response.status_code == 201
    return response.json()["id"]
