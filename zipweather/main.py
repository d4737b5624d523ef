"""
Main FastAPI application for the ZIP Weather API.

This module contains the main FastAPI application instance, exception
handlers and router registration.
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from zipweather.config import settings
from zipweather.exceptions import ZipWeatherError
from zipweather.routers.status import router as status_router
from zipweather.routers.users import router as users_router
from zipweather.utils.logging_config import setup_logging, get_logger

# Import all models so they are registered with Base.metadata
import zipweather.models  # noqa: F401

# Initialize logging
setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for FastAPI application.

    Handles startup and shutdown events.

    Note: Database tables are managed through Alembic migrations.
    Run `alembic upgrade head` to create/update database tables.
    """
    logger.info("=" * 60)
    logger.info(f"{settings.SERVER_NAME} - Application starting up")
    logger.info(f"Environment: {'Development' if settings.DEBUG else 'Production'}")
    logger.info(f"API Version: {settings.API_V1_STR}")
    logger.info(f"Database: {settings.SQLALCHEMY_DATABASE_URI.split('://')[0]}")
    logger.info(f"Weather provider: {settings.WEATHER_API_URL}")
    logger.info("=" * 60)
    if not settings.WEATHER_API_APPID:
        logger.warning("WEATHER_API_APPID is not set; weather lookups will be rejected by the provider")

    yield

    logger.info("=" * 60)
    logger.info(f"{settings.SERVER_NAME} - Application shutting down")
    logger.info("=" * 60)


app = FastAPI(
    title=settings.SERVER_NAME,
    description="Register an email, look up current weather by US ZIP code, and review past lookups",
    version=settings.VERSION,
    openapi_url=f"{settings.API_V1_STR}/openapi.json",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)


@app.exception_handler(ZipWeatherError)
async def zipweather_exception_handler(request: Request, exc: ZipWeatherError):
    """Report domain errors with the status code they carry."""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    else:
        logger.info(f"{request.method} {request.url.path} rejected ({exc.status_code}): {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "detail": exc.message,
            "status_code": exc.status_code
        },
    )


# Set up CORS
if settings.BACKEND_CORS_ORIGINS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[str(origin) for origin in settings.BACKEND_CORS_ORIGINS],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


# Include routers
app.include_router(status_router)
app.include_router(users_router, prefix=settings.API_V1_STR)
