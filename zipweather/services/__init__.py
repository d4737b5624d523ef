# Service layer package

from zipweather.services.user_directory import UserDirectory
from zipweather.services.weather_gateway import WeatherGateway

__all__ = ["UserDirectory", "WeatherGateway"]
