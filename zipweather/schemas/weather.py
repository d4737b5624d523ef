"""
Weather lookup schemas.
"""

from datetime import datetime
from typing import Optional

from zipweather.schemas.base import BaseSchema, CamelSchema


class WeatherRequestCreate(BaseSchema):
    """Schema for writing a weather request log entry."""
    email: str
    zip_code: str
    weather_details: str
    timestamp: datetime


class WeatherResponse(CamelSchema):
    """
    Result of a weather lookup, also used for history entries.

    On a rejected lookup only ``weather_details`` is set and carries the
    reason.
    """
    email: Optional[str] = None
    zip_code: Optional[str] = None
    weather_details: Optional[str] = None
    timestamp: Optional[datetime] = None
