"""
Common/shared Pydantic schemas.

This module contains reusable schemas used across the application:
- Base response types
- Health check responses
"""

from pydantic import BaseModel, Field
from typing import Any, Dict
from datetime import datetime, timezone


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class BaseResponse(BaseModel):
    """Base response model with standard fields."""
    message: str
    success: bool = True
    timestamp: datetime = Field(default_factory=_utcnow)


class HealthCheckResponse(BaseModel):
    """Health check response."""
    status: str
    database: Dict[str, Any]
    services: Dict[str, Any] = Field(default_factory=dict)
    timestamp: datetime = Field(default_factory=_utcnow)
