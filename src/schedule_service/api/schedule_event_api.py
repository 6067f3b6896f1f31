"""
Schedule Events API

Fixed paths (``/recurring``, ``/search``, ``/date/...``, ``/day/...``) are
registered before ``/{event_id}`` so they are never read as an id.
"""

import datetime as dt
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Path, Query, Response, status
import logging

from core.dependencies import get_schedule_event_service
from services.schedule_event_service import ScheduleEventService
from schemas.schedule_event import (
    CreateScheduleEventRequest,
    UpdateScheduleEventRequest,
    ScheduleEventResponse,
    ClearScheduleEventsResponse,
)

logger = logging.getLogger("SCHEDULE_EVENT_API")

schedule_event_router = APIRouter(
    prefix="/events",
    tags=["Schedule Events"]
)


def _not_found() -> Response:
    return Response(status_code=status.HTTP_404_NOT_FOUND)


def _parse_iso_date(value: str) -> dt.date:
    try:
        return dt.date.fromisoformat(value)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Invalid date {value!r}, expected YYYY-MM-DD",
        )


@schedule_event_router.get("", response_model=List[ScheduleEventResponse])
def list_events(service: ScheduleEventService = Depends(get_schedule_event_service)):
    return service.list_events()


@schedule_event_router.post(
    "",
    response_model=ScheduleEventResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_event(
    request: CreateScheduleEventRequest,
    service: ScheduleEventService = Depends(get_schedule_event_service),
):
    return service.create_event(request)


@schedule_event_router.delete("", response_model=ClearScheduleEventsResponse)
def clear_events(service: ScheduleEventService = Depends(get_schedule_event_service)):
    removed = service.clear_events()
    return ClearScheduleEventsResponse(
        message=f"Removed {removed} events",
        deleted_count=removed,
    )


@schedule_event_router.get("/recurring", response_model=List[ScheduleEventResponse])
def get_recurring_events(service: ScheduleEventService = Depends(get_schedule_event_service)):
    return service.recurring_events()


@schedule_event_router.get("/search", response_model=List[ScheduleEventResponse])
def search_events(
    q: str = Query("", description="Text matched against title, description, location, day and date"),
    service: ScheduleEventService = Depends(get_schedule_event_service),
):
    return service.search_events(q)


@schedule_event_router.get("/date/{date}", response_model=List[ScheduleEventResponse])
def get_events_by_date(
    date: str = Path(..., pattern=r"^\d{4}-\d{2}-\d{2}$", description="ISO calendar date (YYYY-MM-DD)"),
    service: ScheduleEventService = Depends(get_schedule_event_service),
):
    return service.events_by_date(_parse_iso_date(date))


@schedule_event_router.get("/day/{day}", response_model=List[ScheduleEventResponse])
def get_events_by_day(
    day: str,
    service: ScheduleEventService = Depends(get_schedule_event_service),
):
    return service.events_by_day(day)


@schedule_event_router.get(
    "/{event_id}",
    response_model=ScheduleEventResponse,
    responses={404: {"description": "Event not found"}},
)
def get_event(
    event_id: int,
    service: ScheduleEventService = Depends(get_schedule_event_service),
):
    event = service.get_event(event_id)
    if event is None:
        return _not_found()
    return event


@schedule_event_router.put(
    "/{event_id}",
    response_model=ScheduleEventResponse,
    responses={404: {"description": "Event not found"}},
)
def update_event(
    event_id: int,
    request: UpdateScheduleEventRequest,
    service: ScheduleEventService = Depends(get_schedule_event_service),
):
    event = service.update_event(event_id, request)
    if event is None:
        logger.info(f"Update requested for unknown event {event_id}")
        return _not_found()
    return event


@schedule_event_router.delete(
    "/{event_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: {"description": "Event not found"}},
)
def delete_event(
    event_id: int,
    service: ScheduleEventService = Depends(get_schedule_event_service),
):
    if not service.delete_event(event_id):
        logger.info(f"Delete requested for unknown event {event_id}")
        return _not_found()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
