"""
Pydantic schemas package.

This package contains all Pydantic models for request/response validation,
organized by domain:
- schedule_event: Schedule event requests and responses
- common: Shared/common schemas (base responses, health)

Usage:
    from schemas import CreateScheduleEventRequest, ScheduleEventResponse
    from schemas.common import HealthCheckResponse
"""

# Common schemas
from schemas.common import (
    BaseResponse,
    HealthCheckResponse,
)

# Schedule event schemas
from schemas.schedule_event import (
    ScheduleEventBase,
    CreateScheduleEventRequest,
    UpdateScheduleEventRequest,
    ScheduleEventResponse,
    ClearScheduleEventsResponse,
    VALID_RECURRENCE_TYPES,
)

# Export all schemas
__all__ = [
    # Common
    "BaseResponse",
    "HealthCheckResponse",

    # Schedule events
    "ScheduleEventBase",
    "CreateScheduleEventRequest",
    "UpdateScheduleEventRequest",
    "ScheduleEventResponse",
    "ClearScheduleEventsResponse",
    "VALID_RECURRENCE_TYPES",
]
