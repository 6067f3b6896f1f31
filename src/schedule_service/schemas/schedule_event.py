"""
Schedule Event Pydantic Schemas
"""

import datetime as dt
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict, field_validator, model_validator
from pydantic.alias_generators import to_camel

from schemas.common import BaseResponse


VALID_RECURRENCE_TYPES = {"weekly", "monthly", "yearly"}


class ScheduleEventBase(BaseModel):
    """Base schedule event fields."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: Optional[str] = Field(None, max_length=255)
    description: Optional[str] = None
    location: Optional[str] = Field(None, max_length=255)
    date: Optional[dt.date] = None
    day: Optional[str] = Field(None, max_length=32, description="Weekday label, e.g. Monday")
    start_time: Optional[dt.time] = None
    end_time: Optional[dt.time] = None
    color: Optional[str] = Field(None, max_length=32)
    recurring: bool = False
    recurrence_type: Optional[str] = Field("weekly", description="weekly, monthly, or yearly")

    @field_validator("recurrence_type")
    @classmethod
    def validate_recurrence_type(cls, v):
        if v is None:
            return v
        if v not in VALID_RECURRENCE_TYPES:
            raise ValueError("recurrence_type must be weekly, monthly, or yearly")
        return v

    @model_validator(mode="after")
    def validate_time_range(self):
        if self.start_time is not None and self.end_time is not None:
            if self.end_time <= self.start_time:
                raise ValueError("end_time must be after start_time")
        return self


class CreateScheduleEventRequest(ScheduleEventBase):
    """Request schema for creating a schedule event. Any ``id`` sent is ignored."""


class UpdateScheduleEventRequest(ScheduleEventBase):
    """
    Request schema for replacing a schedule event.

    Updates are full replacements: fields left out take their defaults.
    """


class ScheduleEventResponse(ScheduleEventBase):
    """Response schema for a schedule event."""

    id: int
    created_at: Optional[dt.datetime] = None
    updated_at: Optional[dt.datetime] = None

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ClearScheduleEventsResponse(BaseResponse):
    """Response schema for removing every schedule event."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    deleted_count: int
