"""
Schedule Event Service

Orchestrates schedule event requests on top of ScheduleEventRepository,
adding the existence checks the repository itself does not perform.
"""

import datetime as dt
from typing import Any, Dict, List, Optional

from models.schedule_event import ScheduleEvent
from repositories.schedule_event_repository import ScheduleEventRepository
from schemas.schedule_event import ScheduleEventBase
from services.base_service import BaseService
from services.error_handling import handle_service_errors


class ScheduleEventService(BaseService):
    """Create, read, update and delete schedule events."""

    def __init__(self, repository: ScheduleEventRepository):
        super().__init__(db=repository.db, service_name="SCHEDULE_EVENT_SERVICE")
        self.repository = repository

    @staticmethod
    def _to_model(payload: ScheduleEventBase, event_id: Optional[int] = None) -> ScheduleEvent:
        data = payload.model_dump(exclude={"id", "created_at", "updated_at"})
        return ScheduleEvent(id=event_id, **data)

    @handle_service_errors
    def list_events(self) -> List[ScheduleEvent]:
        with self._timed_operation("list_events"):
            return self.repository.get_all()

    @handle_service_errors
    def get_event(self, event_id: int) -> Optional[ScheduleEvent]:
        with self._timed_operation("get_event"):
            return self.repository.get(event_id)

    @handle_service_errors
    def create_event(self, payload: ScheduleEventBase) -> ScheduleEvent:
        with self._timed_operation("create_event"):
            event = self.repository.save(self._to_model(payload))
        self.logger.info(f"Created schedule event {event.id}")
        return event

    @handle_service_errors
    def update_event(self, event_id: int, payload: ScheduleEventBase) -> Optional[ScheduleEvent]:
        """
        Replace an existing event in full.

        The stored identifier always wins over anything carried by the
        payload. Unknown ids return None and nothing is written.
        """
        with self._timed_operation("update_event"):
            if not self.repository.exists(event_id):
                return None
            event = self.repository.save(self._to_model(payload, event_id=event_id))
        self.logger.info(f"Updated schedule event {event_id}")
        return event

    @handle_service_errors
    def delete_event(self, event_id: int) -> bool:
        with self._timed_operation("delete_event"):
            if not self.repository.exists(event_id):
                return False
            self.repository.delete_by_id(event_id)
        self.logger.info(f"Deleted schedule event {event_id}")
        return True

    @handle_service_errors
    def events_by_date(self, date: dt.date) -> List[ScheduleEvent]:
        with self._timed_operation("events_by_date"):
            return self.repository.find_by_date(date)

    @handle_service_errors
    def events_by_day(self, day: str) -> List[ScheduleEvent]:
        with self._timed_operation("events_by_day"):
            return self.repository.find_by_day(day)

    @handle_service_errors
    def recurring_events(self) -> List[ScheduleEvent]:
        with self._timed_operation("recurring_events"):
            return self.repository.find_by_recurring_true()

    @handle_service_errors
    def search_events(self, term: str) -> List[ScheduleEvent]:
        """Substring search; a blank term matches nothing."""
        term = (term or "").strip()
        if not term:
            return []
        with self._timed_operation("search_events"):
            return self.repository.search(term)

    @handle_service_errors
    def clear_events(self) -> int:
        with self._timed_operation("clear_events"):
            removed = self.repository.delete_all()
        self.logger.info(f"Cleared {removed} schedule events")
        return removed

    def health_check(self) -> Dict[str, Any]:
        try:
            self._ensure_db()
            return {"status": "healthy", "details": {"event_count": self.repository.count()}}
        except Exception as e:
            self.logger.error(f"Health check failed: {e}")
            return {"status": "unhealthy", "error": str(e)}
