"""Pytest configuration and fixtures."""

import asyncio

import pytest
from fastapi.testclient import TestClient

from exercise_tracker_api.app.core.config import Settings
from exercise_tracker_api.app.core.db import Database
from exercise_tracker_api.app.main import create_app


@pytest.fixture
def test_settings(tmp_path):
    """Settings pointing at a throwaway database file."""
    return Settings(database_url=str(tmp_path / "test.db"), strict_input=False)


@pytest.fixture
def client(test_settings):
    """Test client for a freshly created app; startup opens the database."""
    with TestClient(create_app(test_settings)) as test_client:
        yield test_client


@pytest.fixture
def strict_client(tmp_path):
    """Test client for an app that rejects unparseable durations and dates."""
    settings = Settings(database_url=str(tmp_path / "strict.db"), strict_input=True)
    with TestClient(create_app(settings)) as test_client:
        yield test_client


@pytest.fixture
def db():
    """An open, migrated in-memory database."""
    database = Database(":memory:")
    asyncio.run(database.open())
    asyncio.run(database.migrate())
    yield database
    asyncio.run(database.close())


@pytest.fixture
def create_user(client):
    """Register a user through the API and return its id."""
    def _create(username="fcc_test"):
        response = client.post("/api/users", json={"username": username})
        assert response.status_code == 200
        return response.json()["id"]
    return _create
