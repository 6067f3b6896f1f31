"""
ORM Models package.

All models are imported here to ensure they are registered with
``Base.metadata`` before tables are created.

Usage:
    from models import ScheduleEvent
    from models.base import Base
"""

from models.base import Base, TimestampMixin
from models.schedule_event import ScheduleEvent

__all__ = [
    "Base",
    "TimestampMixin",
    "ScheduleEvent",
]
