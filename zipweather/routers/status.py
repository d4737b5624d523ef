"""
Status router.

This module contains endpoints for API status and health checks.
"""

from fastapi import APIRouter

from zipweather.config import settings

router = APIRouter(tags=["status"])


@router.get("/")
async def root():
    """
    Root endpoint returning API information.
    """
    return {
        "message": f"Welcome to {settings.SERVER_NAME}",
        "version": settings.VERSION,
        "docs": "/docs",
        "redoc": "/redoc"
    }


@router.get("/health")
async def health_check():
    """
    Health check endpoint.
    """
    return {"status": "healthy"}
