"""
Domain exceptions.

Each exception carries the HTTP status it is reported with; the handler
registered in ``zipweather.main`` turns them into JSON error responses.
"""

from fastapi import status


class ZipWeatherError(Exception):
    """Base class for errors raised by the service layer."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidEmailFormat(ZipWeatherError):
    """Registration email failed the format check."""

    status_code = status.HTTP_400_BAD_REQUEST


class AlreadyRegistered(ZipWeatherError):
    """A user with the given email already exists."""

    status_code = status.HTTP_409_CONFLICT


class UserNotFound(ZipWeatherError):
    """No user has the given email."""

    status_code = status.HTTP_404_NOT_FOUND


class WeatherFetchError(ZipWeatherError):
    """The weather provider call failed."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
