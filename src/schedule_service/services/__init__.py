"""
Services package.

This package contains business logic services that sit between the API
routers and the repositories.

Services provide:
- High-level operations with existence checks
- Mapping of request payloads onto ORM records
- Consistent logging and error wrapping
"""

from services.schedule_event_service import ScheduleEventService

__all__ = ["ScheduleEventService"]
