"""
Schedule event ORM model.

A schedule event is either a one-off occurrence on ``date`` or a slot that
repeats on the weekday named by ``day`` when ``recurring`` is set. Nothing
ties the two fields together.
"""

from sqlalchemy import Boolean, Column, Date, Integer, String, Text, Time

from models.base import Base, TimestampMixin


class ScheduleEvent(TimestampMixin, Base):
    """Calendar occurrence or recurring weekly slot."""

    __tablename__ = "schedule_events"
    # Keep SQLite from handing out the id of a deleted max row again
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    title = Column(String(255), nullable=True)
    description = Column(Text, nullable=True)
    location = Column(String(255), nullable=True)
    date = Column(Date, nullable=True, index=True)
    day = Column(String(32), nullable=True, index=True)
    start_time = Column(Time, nullable=True)
    end_time = Column(Time, nullable=True)
    color = Column(String(32), nullable=True)
    recurring = Column(Boolean, nullable=False, default=False, index=True)
    recurrence_type = Column(String(16), nullable=True, default="weekly")

    def __repr__(self) -> str:
        return (
            f"<ScheduleEvent id={self.id} date={self.date} day={self.day!r} "
            f"recurring={self.recurring}>"
        )
