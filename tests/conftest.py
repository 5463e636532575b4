"""Shared pytest fixtures for the assistant API."""

from __future__ import annotations

import random
import sys
from pathlib import Path

import mongomock
import pytest

# Ensure the application package is importable during tests.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from cvletter import database  # noqa: E402
from cvletter.main import create_app  # noqa: E402
from cvletter.services.session_store import SessionStore  # noqa: E402


@pytest.fixture(autouse=True)
def mongo_db(monkeypatch: pytest.MonkeyPatch):
    """Provide an isolated in-memory MongoDB database for each test."""
    test_db_name = "test_cvletter_app"
    monkeypatch.setenv("ENABLE_MONGODB", "true")
    monkeypatch.setenv("MONGODB_DATABASE", test_db_name)
    monkeypatch.delenv("ENABLE_WEB_SEARCH", raising=False)

    client = mongomock.MongoClient()
    db = client[test_db_name]

    monkeypatch.setattr(database, "get_mongo_client", lambda: client)
    monkeypatch.setattr(database, "get_database", lambda: db)

    yield db

    client.drop_database(test_db_name)


@pytest.fixture
def app():
    flask_app = create_app({"TESTING": True, "ASSISTANT_RANDOM_SEED": "42", "ENABLE_WEB_SEARCH": False})
    yield flask_app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def store() -> SessionStore:
    return SessionStore()


@pytest.fixture
def rng() -> random.Random:
    return random.Random(7)
