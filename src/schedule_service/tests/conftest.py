import os

# Point the app at an in-memory SQLite database before anything imports
# core.database (the engine is created at import time).
os.environ["DATABASE_URL"] = os.getenv("SCHEDULE_TEST_DB", "sqlite+pysqlite:///:memory:")

import datetime as dt

import pytest
from fastapi.testclient import TestClient

import core.database as db_module
from core.dependencies import get_schedule_event_service
from main import app
from models import Base, ScheduleEvent


@pytest.fixture
def db_session():
    Base.metadata.create_all(bind=db_module.engine)
    session = db_module.SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=db_module.engine)


def _override_get_db_for(session):
    def _override_get_db():
        yield session
    return _override_get_db


@pytest.fixture
def client(db_session):
    app.dependency_overrides[db_module.get_db] = _override_get_db_for(db_session)
    try:
        with TestClient(app) as c:
            yield c
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def override_service():
    """Swap the event service for a stand-in for the duration of a test."""
    def _install(service):
        app.dependency_overrides[get_schedule_event_service] = lambda: service
        return service
    try:
        yield _install
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def event_factory(db_session):
    def _create(**fields):
        event = ScheduleEvent(**fields)
        db_session.add(event)
        db_session.commit()
        db_session.refresh(event)
        return event
    return _create


@pytest.fixture
def friday():
    return dt.date(2024, 3, 1)
