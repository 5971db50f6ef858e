"""Pytest configuration for the API tests."""

from datetime import datetime

import mongomock
import pytest
from fastapi.testclient import TestClient

from srevent_api.app.core.config import settings
from srevent_api.app.main import create_app


@pytest.fixture
def mongo_client():
    """An in‑memory MongoDB client shared by the app and the test."""
    return mongomock.MongoClient()


@pytest.fixture
def db(mongo_client):
    return mongo_client[settings.database_name]


@pytest.fixture
def client(mongo_client):
    """Create a test client with startup and shutdown handlers run."""
    app = create_app(mongo_client=mongo_client)
    with TestClient(app) as test_client:
        yield test_client


def parse_timestamp(value: str) -> datetime:
    """Parse a timestamp as serialised by the API."""
    return datetime.fromisoformat(value.replace("Z", "+00:00"))
