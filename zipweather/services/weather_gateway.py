"""
Weather gateway.

Fetches current conditions for a ZIP code from the configured provider
(OpenWeatherMap-compatible) and keeps a log of every successful lookup.
"""

from datetime import datetime, timezone
from typing import List, Optional

import httpx
from sqlalchemy.ext.asyncio import AsyncSession

from zipweather.config import settings
from zipweather.crud.weather_request import weather_request as weather_request_crud
from zipweather.exceptions import WeatherFetchError
from zipweather.models.weather_request import WeatherRequest
from zipweather.schemas.weather import WeatherRequestCreate
from zipweather.utils.logging_config import get_logger

logger = get_logger(__name__)


def _provider_message(response: httpx.Response) -> str:
    """Best-effort error message from a provider error response."""
    try:
        payload = response.json()
    except ValueError:
        payload = None
    if isinstance(payload, dict) and payload.get("message"):
        return str(payload["message"])
    return response.text or response.reason_phrase


class WeatherGateway:
    """
    Access to the external weather provider and the request log.

    Every fetch is a fresh round-trip: no caching and no retries.
    """

    def __init__(
        self,
        db: AsyncSession,
        client: httpx.AsyncClient,
        api_url: Optional[str] = None,
        app_id: Optional[str] = None,
        units: Optional[str] = None,
    ):
        self.db = db
        self.client = client
        self.api_url = api_url or settings.WEATHER_API_URL
        self.app_id = app_id if app_id is not None else settings.WEATHER_API_APPID
        self.units = units or settings.WEATHER_API_UNITS

    async def fetch_weather(self, zip_code: str) -> str:
        """
        Fetch current weather for a ZIP code.

        Args:
            zip_code: US ZIP code, already validated

        Returns:
            The provider's response body, unparsed

        Raises:
            WeatherFetchError: On a provider 4xx (with the provider's message)
                or on any other failure
        """
        params = {"zip": zip_code, "appid": self.app_id, "units": self.units}
        logger.info(f"Fetching weather for zip {zip_code}")

        try:
            response = await self.client.get(self.api_url, params=params)
            response.raise_for_status()
            return response.text
        except httpx.HTTPStatusError as e:
            if e.response.is_client_error:
                message = _provider_message(e.response)
                logger.warning(
                    f"Weather provider rejected zip {zip_code} "
                    f"({e.response.status_code}): {message}"
                )
                raise WeatherFetchError(f"Error fetching weather data: {message}") from e
            logger.error(f"Weather provider error for zip {zip_code}: {e}")
            raise WeatherFetchError(
                f"Unexpected error occurred while fetching weather data: {e}"
            ) from e
        except Exception as e:
            logger.error(f"Weather request for zip {zip_code} failed: {e!r}")
            raise WeatherFetchError(
                f"Unexpected error occurred while fetching weather data: {e}"
            ) from e

    async def log_request(
        self, email: str, zip_code: str, weather_details: str
    ) -> WeatherRequest:
        """
        Persist a log entry stamped with the current server time.

        The returned entry keeps the timezone-aware UTC timestamp as written;
        SQLite would hand it back naive if the row were reloaded.
        """
        entry = await weather_request_crud.create(
            self.db,
            obj_in=WeatherRequestCreate(
                email=email,
                zip_code=zip_code,
                weather_details=weather_details,
                timestamp=datetime.now(timezone.utc),
            ),
            refresh=False,
        )
        logger.debug(f"Logged weather request {entry.id} for {email}")
        return entry

    async def get_history(
        self, zip_code: Optional[str] = None, email: Optional[str] = None
    ) -> List[WeatherRequest]:
        """Log entries matching the zip code OR the email."""
        return await weather_request_crud.get_by_zip_code_or_email(
            self.db, zip_code=zip_code, email=email
        )
