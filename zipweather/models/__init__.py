# Database models package

from zipweather.models.base import BaseModel
from zipweather.models.user import User
from zipweather.models.weather_request import WeatherRequest

__all__ = [
    "BaseModel",
    "User",
    "WeatherRequest",
]
