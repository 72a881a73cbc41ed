"""Shared pytest fixtures for City Explorer tests."""

import os
from contextlib import contextmanager
from typing import Any, Optional
from unittest.mock import AsyncMock, MagicMock, patch

# Settings are read at import time; point them at SQLite before any app import.
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("APP_ENV", "test")

import httpx
import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

import city_explorer.models  # noqa: F401
from city_explorer.db.session import Base, get_db
from city_explorer.db.store import Store
from city_explorer.main import app


@pytest_asyncio.fixture
async def session_maker():
    """Fresh in-memory database per test, shared by every session."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)
    await engine.dispose()


@pytest_asyncio.fixture
async def store(session_maker) -> Store:
    async with session_maker() as session:
        yield Store(session)


@pytest_asyncio.fixture
async def client(session_maker):
    """HTTP client bound to the app with get_db pointed at the test database."""

    async def override_get_db():
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@contextmanager
def mock_http(
    body: Any = None,
    status_code: int = 200,
    error: Optional[Exception] = None,
):
    """Patch httpx.AsyncClient so every GET answers with `body` (or raises `error`)."""
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = body

    with patch("httpx.AsyncClient") as mock_client:
        instance = mock_client.return_value
        instance.__aenter__ = AsyncMock(return_value=instance)
        instance.__aexit__ = AsyncMock(return_value=None)
        if error is not None:
            instance.get = AsyncMock(side_effect=error)
        else:
            instance.get = AsyncMock(return_value=response)
        yield instance.get


@pytest.fixture
def seattle_geocode() -> dict:
    """First element of a Google geocode `results` array."""
    return {
        "formatted_address": "Seattle, WA, USA",
        "geometry": {"location": {"lat": 47.6, "lng": -122.3}},
    }


@pytest.fixture
def daily_forecast() -> list[dict]:
    """Two days of a Dark Sky `daily.data` array."""
    return [
        {"time": 1760832000, "summary": "Light rain in the morning."},
        {"time": 1760918400, "summary": "Mostly cloudy throughout the day."},
    ]


@pytest.fixture
def eventbrite_events() -> list[dict]:
    """Eventbrite `events` array with three listings."""
    return [
        {
            "url": "https://www.eventbrite.com/e/jazz-night-1",
            "name": {"text": "Jazz Night"},
            "start": {"local": "2026-10-19T19:00:00"},
            "summary": "Live jazz downtown",
        },
        {
            "url": "https://www.eventbrite.com/e/food-truck-rally-2",
            "name": {"text": "Food Truck Rally"},
            "start": {"local": "2026-10-20T11:30:00"},
            "summary": "Twenty trucks, one parking lot",
        },
        {
            "url": "https://www.eventbrite.com/e/open-mic-3",
            "name": {"text": "Open Mic"},
            "start": {"local": "2026-10-21T20:00:00"},
            "summary": None,
        },
    ]


@pytest.fixture
def http_mock():
    """Expose `mock_http` to tests as a fixture."""
    return mock_http
