# Pydantic schemas package

from zipweather.schemas.base import BaseSchema, CamelSchema
from zipweather.schemas.user import UserCreate, UserRegistrationRequest
from zipweather.schemas.weather import WeatherRequestCreate, WeatherResponse

__all__ = [
    # Base schemas
    "BaseSchema", "CamelSchema",

    # User schemas
    "UserCreate", "UserRegistrationRequest",

    # Weather schemas
    "WeatherRequestCreate", "WeatherResponse",
]
