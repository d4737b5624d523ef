"""
Shared test fixtures.

Each test gets its own SQLite database file and a fake weather provider
wired in through FastAPI dependency overrides.
"""

import os

# Must be set before zipweather is imported
os.environ["SQLALCHEMY_DATABASE_URI"] = "sqlite+aiosqlite:///./test_zipweather.db"
os.environ["WEATHER_API_URL"] = "https://weather.test/data/2.5/weather"
os.environ["WEATHER_API_APPID"] = "test-app-id"
os.environ["LOG_TO_FILE"] = "false"

import httpx
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import NullPool

from zipweather.database import Base, get_db
from zipweather.dependencies.services import get_http_client
from zipweather.main import app
import zipweather.models  # noqa: F401

SAMPLE_WEATHER = '{"name": "Beverly Hills", "main": {"temp": 72.5, "humidity": 40}, "weather": [{"description": "clear sky"}]}'


class FakeWeatherProvider:
    """
    Stand-in for the weather provider, used as an httpx.MockTransport handler.

    Records every request and answers with the configured status and body.
    """

    def __init__(self):
        self.requests = []
        self.status_code = 200
        self.body = SAMPLE_WEATHER
        self.error = None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, text=self.body)

    @property
    def call_count(self) -> int:
        return len(self.requests)


@pytest.fixture
def database_path(tmp_path):
    """Create the schema in a fresh SQLite file and return its path."""
    path = tmp_path / "test.db"
    sync_engine = create_engine(f"sqlite:///{path}")
    Base.metadata.create_all(sync_engine)
    sync_engine.dispose()
    return path


@pytest.fixture
def session_factory(database_path):
    """Async session factory bound to the test database."""
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{database_path}",
        poolclass=NullPool,
    )
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db(session_factory):
    """Async database session for CRUD and service tests."""
    async with session_factory() as session:
        yield session


@pytest.fixture
def provider():
    """Fake weather provider."""
    return FakeWeatherProvider()


@pytest.fixture
def client(session_factory, provider):
    """Test client with the database and weather provider overridden."""

    async def override_get_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    async def override_get_http_client():
        async with httpx.AsyncClient(transport=httpx.MockTransport(provider)) as http_client:
            yield http_client

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_http_client] = override_get_http_client
    yield TestClient(app)
    app.dependency_overrides.clear()
