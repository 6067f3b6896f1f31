"""
Schedule Event Repository

Data access layer for schedule events.
"""

import datetime as dt
from typing import List

from sqlalchemy import String, cast, func, or_
from sqlalchemy.orm import Session

from core.exceptions import DatabaseException
from models.schedule_event import ScheduleEvent
from repositories.base import BaseRepository


class ScheduleEventRepository(BaseRepository[ScheduleEvent]):
    """Repository for schedule events."""

    def __init__(self, db: Session):
        super().__init__(ScheduleEvent, db)

    def find_by_date(self, date: dt.date) -> List[ScheduleEvent]:
        """Events whose date equals ``date`` exactly."""
        return self.get_by_filter({"date": date})

    def find_by_day(self, day: str) -> List[ScheduleEvent]:
        """Events whose day label equals ``day`` (case-sensitive)."""
        return self.get_by_filter({"day": day})

    def find_by_recurring_true(self) -> List[ScheduleEvent]:
        return self.get_by_filter({"recurring": True})

    def search(self, term: str) -> List[ScheduleEvent]:
        """
        Case-insensitive substring search over the descriptive fields.

        Matches title, description, location, day label and the ISO form
        of the date. ``%`` and ``_`` in ``term`` match literally.

        Args:
            term: Text to look for

        Returns:
            Matching events ordered by id
        """
        needle = term.lower()
        columns = [
            ScheduleEvent.title,
            ScheduleEvent.description,
            ScheduleEvent.location,
            ScheduleEvent.day,
            cast(ScheduleEvent.date, String),
        ]
        criteria = [func.lower(column, type_=String).contains(needle, autoescape=True) for column in columns]

        try:
            return (
                self.db.query(ScheduleEvent)
                .filter(or_(*criteria))
                .order_by(ScheduleEvent.id.asc())
                .all()
            )
        except Exception as e:
            raise DatabaseException(f"Failed to search ScheduleEvent for {term!r}") from e
