"""
Shared fixtures: an application on a fresh in-memory database per test.
"""
from datetime import date

import pytest
from fastapi.testclient import TestClient

from backend.main import create_app
from backend.modules.users import UserService
from backend.modules.exercises import ExerciseService


@pytest.fixture
def app():
    return create_app("sqlite://", configure_logs=False)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def db_session(app):
    session = app.state.session_factory()
    yield session
    session.close()


@pytest.fixture
def user(db_session):
    return UserService(db_session).create_user("alice")


@pytest.fixture
def january_user(db_session, user):
    """User with exercises on 2023-01-01, 2023-01-10 and 2023-01-20"""
    service = ExerciseService(db_session)
    for day in (date(2023, 1, 1), date(2023, 1, 10), date(2023, 1, 20)):
        service.add_exercise(user.id, f"run {day.day}", "30", day.isoformat())
    return user
