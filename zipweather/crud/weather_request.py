"""
Weather request log CRUD operations.
"""

from typing import List, Optional
from sqlalchemy import or_
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from zipweather.crud.base import CRUDBase
from zipweather.models.weather_request import WeatherRequest
from zipweather.schemas.weather import WeatherRequestCreate


class CRUDWeatherRequest(CRUDBase[WeatherRequest, WeatherRequestCreate]):
    """
    CRUD operations for WeatherRequest model.
    """

    async def get_by_zip_code_or_email(
        self,
        db: AsyncSession,
        *,
        zip_code: Optional[str] = None,
        email: Optional[str] = None,
    ) -> List[WeatherRequest]:
        """
        Get log entries whose zip code OR email matches.

        A filter left as None is ignored; with no filters at all every
        entry is returned.

        Args:
            db: Database session
            zip_code: ZIP code to match exactly
            email: Email to match exactly

        Returns:
            List of WeatherRequest instances in insertion order
        """
        conditions = []
        if zip_code is not None:
            conditions.append(WeatherRequest.zip_code == zip_code)
        if email is not None:
            conditions.append(WeatherRequest.email == email)

        query = select(WeatherRequest)
        if conditions:
            query = query.where(or_(*conditions))

        result = await db.execute(query.order_by(WeatherRequest.id))
        return list(result.scalars().all())


weather_request = CRUDWeatherRequest(WeatherRequest)
