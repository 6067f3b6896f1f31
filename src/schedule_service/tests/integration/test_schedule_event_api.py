from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from core.exceptions import DatabaseException
from main import app


EVENTS = "/api/events"


def _create(client, **body):
    r = client.post(EVENTS, json=body)
    assert r.status_code == 201, r.text
    return r.json()


def test_create_get_lookup_delete_scenario(client):
    created = _create(client, date="2024-03-01", day="Friday", recurring=False)
    assert isinstance(created["id"], int)
    assert created["date"] == "2024-03-01"
    assert created["day"] == "Friday"
    assert created["recurring"] is False

    r_get = client.get(f"{EVENTS}/{created['id']}")
    assert r_get.status_code == 200
    assert r_get.json() == created

    r_date = client.get(f"{EVENTS}/date/2024-03-01")
    assert r_date.status_code == 200
    assert created["id"] in [e["id"] for e in r_date.json()]

    r_del = client.delete(f"{EVENTS}/{created['id']}")
    assert r_del.status_code == 204
    assert r_del.content == b""

    r_gone = client.get(f"{EVENTS}/{created['id']}")
    assert r_gone.status_code == 404
    assert r_gone.content == b""


def test_list_empty(client):
    r = client.get(EVENTS)
    assert r.status_code == 200
    assert r.json() == []


def test_create_returns_camel_case_payload(client):
    created = _create(
        client,
        title="Calculus",
        startTime="09:00",
        endTime="10:15",
        color="#34A853",
        recurrenceType="monthly",
    )
    assert created["startTime"] == "09:00:00"
    assert created["endTime"] == "10:15:00"
    assert created["recurrenceType"] == "monthly"
    assert created["createdAt"] is not None


def test_create_ignores_client_supplied_id(client):
    created = _create(client, id=777, title="Lecture")
    assert created["id"] != 777
    assert client.get(f"{EVENTS}/777").status_code == 404


def test_create_rejects_invalid_payload(client):
    r = client.post(EVENTS, json={"startTime": "11:00", "endTime": "10:00"})
    assert r.status_code == 422
    r = client.post(EVENTS, json={"recurrenceType": "hourly"})
    assert r.status_code == 422
    assert client.get(EVENTS).json() == []


def test_update_replaces_event_and_forces_path_id(client):
    created = _create(client, title="Draft", location="Room 1", date="2024-03-01", day="Friday")

    r = client.put(
        f"{EVENTS}/{created['id']}",
        json={"id": 12345, "title": "Final", "day": "Monday", "recurring": True},
    )
    assert r.status_code == 200, r.text
    body = r.json()
    assert body["id"] == created["id"]
    assert body["title"] == "Final"
    assert body["day"] == "Monday"
    assert body["recurring"] is True
    assert body["location"] is None
    assert body["date"] is None

    assert client.get(f"{EVENTS}/12345").status_code == 404
    assert len(client.get(EVENTS).json()) == 1


def test_update_unknown_id_is_not_found_and_store_unchanged(client):
    r = client.put(f"{EVENTS}/999", json={"title": "nobody"})
    assert r.status_code == 404
    assert r.content == b""
    assert client.get(EVENTS).json() == []


def test_delete_unknown_id_is_not_found(client):
    r = client.delete(f"{EVENTS}/999")
    assert r.status_code == 404
    assert r.content == b""


def test_non_integer_id_is_client_error(client):
    assert client.get(f"{EVENTS}/abc").status_code == 422


def test_lookup_by_date_returns_exact_matches(client):
    a = _create(client, title="a", date="2024-03-01")
    _create(client, title="b", date="2024-03-02")
    _create(client, title="c")

    r = client.get(f"{EVENTS}/date/2024-03-01")
    assert [e["id"] for e in r.json()] == [a["id"]]
    assert client.get(f"{EVENTS}/date/2030-01-01").json() == []


def test_malformed_date_never_reaches_the_store(client, override_service):
    service = override_service(MagicMock())
    r = client.get(f"{EVENTS}/date/not-a-date")
    assert r.status_code == 422
    service.events_by_date.assert_not_called()


@pytest.mark.parametrize(
    "value", ["0", "1709251200", "2024-03-01T00:00:00", "20240301", "2024-02-30"]
)
def test_date_lookup_requires_iso_calendar_date(client, override_service, value):
    service = override_service(MagicMock())
    r = client.get(f"{EVENTS}/date/{value}")
    assert r.status_code == 422
    service.events_by_date.assert_not_called()


def test_lookup_by_day(client):
    monday = _create(client, title="m", day="Monday", recurring=True)
    _create(client, title="t", day="Tuesday")

    r = client.get(f"{EVENTS}/day/Monday")
    assert [e["id"] for e in r.json()] == [monday["id"]]
    assert client.get(f"{EVENTS}/day/monday").json() == []


def test_recurring_events(client):
    weekly = _create(client, title="weekly", day="Thursday", recurring=True)
    _create(client, title="once", date="2024-03-07", day="Thursday", recurring=False)

    r = client.get(f"{EVENTS}/recurring")
    assert r.status_code == 200
    assert [e["id"] for e in r.json()] == [weekly["id"]]


def test_search(client):
    hit = _create(client, title="Organic Chemistry", description="Lab session")
    _create(client, title="Poetry")

    r = client.get(f"{EVENTS}/search", params={"q": "CHEM"})
    assert r.status_code == 200
    assert [e["id"] for e in r.json()] == [hit["id"]]
    assert client.get(f"{EVENTS}/search").json() == []


def test_clear_all_events(client):
    _create(client, title="a")
    _create(client, title="b")

    r = client.delete(EVENTS)
    assert r.status_code == 200
    body = r.json()
    assert body["deletedCount"] == 2
    assert body["success"] is True
    assert client.get(EVENTS).json() == []


@pytest.mark.parametrize("path", [EVENTS, f"{EVENTS}/1", f"{EVENTS}/recurring"])
def test_cors_preflight_allows_frontend_origin(client, path):
    r = client.options(
        path,
        headers={
            "Origin": "http://localhost:3000",
            "Access-Control-Request-Method": "PUT",
        },
    )
    assert r.status_code == 200
    assert r.headers["access-control-allow-origin"] == "http://localhost:3000"


def test_cors_rejects_unknown_origin(client):
    r = client.options(
        EVENTS,
        headers={
            "Origin": "http://evil.example",
            "Access-Control-Request-Method": "GET",
        },
    )
    assert r.status_code == 400
    assert "access-control-allow-origin" not in r.headers


def test_store_failure_is_server_error(override_service):
    service = override_service(MagicMock())
    service.list_events.side_effect = DatabaseException("connection refused")
    with TestClient(app, raise_server_exceptions=False) as c:
        r = c.get(EVENTS)
    assert r.status_code == 500
