"""
Users router.

This module contains the user-facing endpoints: registration, weather
lookup on behalf of a registered user, lookup history, and account
activation.
"""

from typing import List, Optional
from fastapi import APIRouter, Depends, Query, Response, status
from fastapi.responses import JSONResponse

from zipweather.dependencies.services import get_user_directory, get_weather_gateway
from zipweather.exceptions import InvalidEmailFormat
from zipweather.schemas.user import UserRegistrationRequest
from zipweather.schemas.weather import WeatherResponse
from zipweather.services.user_directory import UserDirectory
from zipweather.services.weather_gateway import WeatherGateway
from zipweather.utils.logging_config import get_logger
from zipweather.utils.validators import is_valid_email, is_valid_us_zip_code

logger = get_logger(__name__)

USER_NOT_FOUND_MESSAGE = "User not found. Please register and then use the API."
USER_INACTIVE_MESSAGE = "User is inactive. Please activate your account to use the API."

router = APIRouter(
    prefix="/users",
    tags=["users"],
)


def _rejected_lookup(status_code: int, reason: str) -> JSONResponse:
    body = WeatherResponse(weather_details=reason)
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(mode="json", by_alias=True),
    )


@router.post(
    "/register",
    response_model=str,
    responses={
        400: {"description": "Invalid email format"},
        409: {"description": "Email already registered"},
    },
)
async def register_user(
    request: UserRegistrationRequest,
    users: UserDirectory = Depends(get_user_directory),
):
    """
    Register a new user.

    The email only has to contain ``@``. New users start out active.

    Raises:
        InvalidEmailFormat: If the email has no ``@`` (400)
        AlreadyRegistered: If the email is already registered (409)
    """
    if not is_valid_email(request.email):
        raise InvalidEmailFormat("Email is invalid")

    await users.register(request.email)
    return "User registered successfully"


@router.get(
    "/weather",
    response_model=WeatherResponse,
    responses={
        400: {"description": "User not registered or invalid ZIP code"},
        403: {"description": "User is inactive"},
        500: {"description": "Error fetching weather details"},
    },
)
async def get_weather(
    email: str = Query(..., description="The user's email address"),
    zip_code: str = Query(..., alias="zipCode", description="US ZIP code, e.g. 12345 or 12345-6789"),
    users: UserDirectory = Depends(get_user_directory),
    weather: WeatherGateway = Depends(get_weather_gateway),
):
    """
    Get current weather for a ZIP code on behalf of a registered user.

    The user must exist and be active and the ZIP code must be well formed
    before the weather provider is contacted. Each successful lookup is
    logged and the response carries the log timestamp.
    """
    user = await users.find_by_email(email)
    if user is None:
        logger.info(f"Weather lookup for unregistered email {email}")
        return _rejected_lookup(status.HTTP_400_BAD_REQUEST, USER_NOT_FOUND_MESSAGE)

    if not user.is_active:
        logger.info(f"Weather lookup for inactive user {email}")
        return _rejected_lookup(status.HTTP_403_FORBIDDEN, USER_INACTIVE_MESSAGE)

    if not is_valid_us_zip_code(zip_code):
        logger.info(f"Weather lookup with invalid zip {zip_code!r} from {email}")
        return Response(status_code=status.HTTP_400_BAD_REQUEST)

    weather_details = await weather.fetch_weather(zip_code)
    entry = await weather.log_request(email, zip_code, weather_details)

    return WeatherResponse(
        email=email,
        zip_code=zip_code,
        weather_details=weather_details,
        timestamp=entry.timestamp,
    )


@router.get("/history", response_model=List[WeatherResponse])
async def get_history(
    zip_code: Optional[str] = Query(None, alias="zipCode", description="Filter by ZIP code"),
    email: Optional[str] = Query(None, description="Filter by user email"),
    weather: WeatherGateway = Depends(get_weather_gateway),
):
    """
    Get past weather lookups.

    Returns entries matching the ZIP code OR the email. Omitted filters are
    ignored; with neither filter every lookup is returned.
    """
    history = await weather.get_history(zip_code=zip_code, email=email)
    return [WeatherResponse.model_validate(entry) for entry in history]


@router.post(
    "/activate",
    response_model=str,
    responses={404: {"description": "User not found"}},
)
async def activate_user(
    email: str = Query(..., description="The email address of the user to activate"),
    users: UserDirectory = Depends(get_user_directory),
):
    """Activate a user account."""
    await users.activate(email)
    return "User activated successfully"


@router.post(
    "/deactivate",
    response_model=str,
    responses={404: {"description": "User not found"}},
)
async def deactivate_user(
    email: str = Query(..., description="The email address of the user to deactivate"),
    users: UserDirectory = Depends(get_user_directory),
):
    """Deactivate a user account."""
    await users.deactivate(email)
    return "User deactivated successfully"
