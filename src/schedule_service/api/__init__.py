"""
API routers package for the FastAPI application.

This package contains all API endpoint routers organized by domain:
- schedule_event_api: Schedule event CRUD and lookup endpoints
- health_api: Health check endpoints
"""

from .schedule_event_api import schedule_event_router
from .health_api import health_api_router

__all__ = [
    "schedule_event_router",
    "health_api_router",
]
