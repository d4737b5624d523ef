"""
Service dependencies.

FastAPI dependency functions that build the service objects used by the
routers, each bound to the request's database session.
"""

from typing import AsyncIterator

import httpx
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from zipweather.database import get_db
from zipweather.services.user_directory import UserDirectory
from zipweather.services.weather_gateway import WeatherGateway


async def get_http_client() -> AsyncIterator[httpx.AsyncClient]:
    """
    Yield an HTTP client for the weather provider.

    One client per request; tests override this to inject a mock transport.
    """
    async with httpx.AsyncClient() as client:
        yield client


def get_user_directory(db: AsyncSession = Depends(get_db)) -> UserDirectory:
    return UserDirectory(db)


def get_weather_gateway(
    db: AsyncSession = Depends(get_db),
    client: httpx.AsyncClient = Depends(get_http_client),
) -> WeatherGateway:
    return WeatherGateway(db, client)
