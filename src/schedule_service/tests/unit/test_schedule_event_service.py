import datetime as dt
from unittest.mock import MagicMock

import pytest

from core.exceptions import DatabaseException
from repositories import ScheduleEventRepository
from schemas.schedule_event import CreateScheduleEventRequest, UpdateScheduleEventRequest
from services.error_handling import ServiceError
from services.schedule_event_service import ScheduleEventService


@pytest.fixture
def service(db_session):
    return ScheduleEventService(ScheduleEventRepository(db_session))


def _payload(cls=CreateScheduleEventRequest, **fields):
    return cls.model_validate(fields)


def test_create_ignores_payload_id(service):
    event = service.create_event(_payload(id=99, title="Seminar", day="Wednesday"))
    assert event.id is not None
    assert event.title == "Seminar"
    assert event.id != 99
    assert service.get_event(99) is None


def test_get_event_missing_is_none(service):
    assert service.get_event(1) is None


def test_update_replaces_all_mutable_fields(service, friday):
    created = service.create_event(_payload(title="Old", location="Hall", date=friday, day="Friday"))

    updated = service.update_event(
        created.id,
        _payload(UpdateScheduleEventRequest, title="New", day="Saturday", recurring=True),
    )

    assert updated.id == created.id
    assert updated.title == "New"
    assert updated.day == "Saturday"
    assert updated.recurring is True
    assert updated.location is None
    assert updated.date is None


def test_update_unknown_id_creates_nothing(service):
    assert service.update_event(999, _payload(UpdateScheduleEventRequest, title="ghost")) is None
    assert service.list_events() == []


def test_delete_event(service):
    created = service.create_event(_payload(title="Temp"))
    assert service.delete_event(created.id) is True
    assert service.get_event(created.id) is None
    assert service.delete_event(created.id) is False


def test_unknown_ids_never_reach_writes():
    repo = MagicMock()
    repo.exists.return_value = False
    svc = ScheduleEventService(repo)

    assert svc.update_event(7, _payload(UpdateScheduleEventRequest, title="x")) is None
    assert svc.delete_event(7) is False
    repo.exists.assert_called_with(7)
    repo.save.assert_not_called()
    repo.delete_by_id.assert_not_called()


def test_lookups_delegate_to_repository(service, friday):
    a = service.create_event(_payload(date=friday, day="Friday"))
    b = service.create_event(_payload(day="Friday", recurring=True))
    service.create_event(_payload(date=friday + dt.timedelta(days=3), day="Monday"))

    assert [e.id for e in service.events_by_date(friday)] == [a.id]
    assert [e.id for e in service.events_by_day("Friday")] == [a.id, b.id]
    assert [e.id for e in service.recurring_events()] == [b.id]


def test_blank_search_skips_repository():
    repo = MagicMock()
    svc = ScheduleEventService(repo)
    assert svc.search_events("   ") == []
    repo.search.assert_not_called()


def test_search_strips_term():
    repo = MagicMock()
    repo.search.return_value = ["match"]
    svc = ScheduleEventService(repo)
    assert svc.search_events("  math ") == ["match"]
    repo.search.assert_called_once_with("math")


def test_clear_events(service):
    service.create_event(_payload(title="a"))
    service.create_event(_payload(title="b"))
    assert service.clear_events() == 2
    assert service.list_events() == []


def test_database_errors_propagate_unchanged():
    repo = MagicMock()
    repo.get_all.side_effect = DatabaseException("connection lost")
    with pytest.raises(DatabaseException):
        ScheduleEventService(repo).list_events()


def test_unexpected_errors_are_wrapped():
    repo = MagicMock()
    repo.get.side_effect = RuntimeError("boom")
    with pytest.raises(ServiceError) as exc:
        ScheduleEventService(repo).get_event(1)
    assert exc.value.error_code == "INTERNAL_ERROR"


def test_health_check_reports_event_count(service):
    service.create_event(_payload(title="a"))
    health = service.health_check()
    assert health == {"status": "healthy", "details": {"event_count": 1}}


def test_health_check_without_session():
    repo = MagicMock()
    repo.db = None
    health = ScheduleEventService(repo).health_check()
    assert health["status"] == "unhealthy"
