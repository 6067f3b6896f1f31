"""
Repositories package.

This package contains all data access layer repositories following the Repository Pattern.
Each repository extends BaseRepository and provides domain-specific data operations.

Usage:
    from repositories import ScheduleEventRepository
    from core.database import get_db

    # In a FastAPI route with dependency injection:
    def get_events(db: Session = Depends(get_db)):
        repo = ScheduleEventRepository(db)
        return repo.get_all()
"""

from repositories.base import BaseRepository
from repositories.schedule_event_repository import ScheduleEventRepository

__all__ = [
    "BaseRepository",
    "ScheduleEventRepository",
]
