# CRUD operations package

from zipweather.crud.base import CRUDBase
from zipweather.crud.user import CRUDUser, user
from zipweather.crud.weather_request import CRUDWeatherRequest, weather_request

__all__ = [
    "CRUDBase",
    "CRUDUser", "user",
    "CRUDWeatherRequest", "weather_request",
]
