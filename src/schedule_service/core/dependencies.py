from functools import lru_cache
from sqlalchemy.orm import Session
from fastapi import Depends

from core.database import get_db
from core.config import get_settings, Settings


# ============================================================================
# Configuration Dependencies
# ============================================================================

@lru_cache()
def get_settings_cached() -> Settings:
    """
    Get cached application settings.

    Returns:
        Settings: Application configuration
    """
    return get_settings()


# ============================================================================
# Repository Dependencies
# ============================================================================

def get_schedule_event_repository(db: Session = Depends(get_db)):
    """
    Get ScheduleEventRepository instance.

    Args:
        db: Database session (automatically injected)

    Returns:
        ScheduleEventRepository: Schedule event data access layer

    Example:
        @router.get("/events/{event_id}")
        def get_event(
            event_id: int,
            repo: ScheduleEventRepository = Depends(get_schedule_event_repository)
        ):
            return repo.get(event_id)
    """
    from repositories import ScheduleEventRepository
    return ScheduleEventRepository(db)


# ============================================================================
# Service Dependencies
# ============================================================================

def get_schedule_event_service(repository=Depends(get_schedule_event_repository)):
    """
    Get ScheduleEventService bound to the request's repository.

    Returns:
        ScheduleEventService: Schedule event orchestration layer
    """
    from services.schedule_event_service import ScheduleEventService
    return ScheduleEventService(repository)
