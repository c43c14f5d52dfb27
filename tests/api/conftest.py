"""Fixtures for API tests.

Every test gets its own in-memory SQLite database; the app's ``get_db``
dependency is overridden to hand out sessions bound to it.
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

import sprintlab.db.base  # noqa: F401
from sprintlab.db.session import get_db
from sprintlab.main import app


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def client(engine):
    """TestClient wired to the in-memory database."""

    def _override_get_db():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_db] = _override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.pop(get_db, None)


@pytest.fixture
def athlete(client):
    """A 46-year-old 80 kg athlete (on 2026-05-10)."""
    response = client.post(
        "/api/v1/athletes",
        json={"name": "Test Sprinter", "date_of_birth": "1980-01-01", "weight_kg": 80.0},
    )
    assert response.status_code == 201
    return response.json()
