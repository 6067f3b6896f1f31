from fastapi import APIRouter, Depends
import logging

from core.config import Settings
from core.database import get_database_health
from core.dependencies import get_schedule_event_service, get_settings_cached
from schemas.common import HealthCheckResponse
from services.schedule_event_service import ScheduleEventService

logger = logging.getLogger("HEALTH_API_LOGGER")

health_api_router = APIRouter(prefix="/health", tags=["health"])


@health_api_router.get("", response_model=HealthCheckResponse)
def health_status(
    service: ScheduleEventService = Depends(get_schedule_event_service),
    settings: Settings = Depends(get_settings_cached),
):
    """
    Aggregate health check for the database and the event service.
    Any unhealthy subsystem marks the whole response as degraded.
    """
    overall_status = "healthy"

    database_health = get_database_health()
    if database_health.get("status") != "healthy":
        overall_status = "degraded"

    service_health = service.health_check()
    if service_health.get("status") != "healthy":
        overall_status = "degraded"

    if overall_status != "healthy":
        logger.warning(f"Health check degraded: database={database_health} events={service_health}")

    return HealthCheckResponse(
        status=overall_status,
        database=database_health,
        services={
            "app": {"name": settings.app_name, "environment": settings.environment},
            "schedule_events": service_health,
        },
    )
