"""Pytest fixtures: SQLite file database for fast, isolated tests."""
import os

# Must be set before drinklog.config is imported.
os.environ["DATABASE_URL"] = "sqlite:///./test.db"
os.environ.setdefault("SESSION_SECRET", "test-secret")

import pytest
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from fastapi.testclient import TestClient

from drinklog.database import Base, get_db
from drinklog.main import app

# Import all models so they register with Base.metadata
from drinklog.models.user import User    # noqa: F401
from drinklog.models.drink import Drink  # noqa: F401
from drinklog.models.event import Event  # noqa: F401

SQLITE_URL = "sqlite:///./test.db"
DEFAULT_PASSWORD = "correct-horse-battery"


@pytest.fixture(scope="function")
def db_engine():
    """Create a fresh SQLite engine for each test."""
    engine = create_engine(SQLITE_URL, connect_args={"check_same_thread": False})

    # Enable WAL mode for better concurrency
    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.close()

    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def db(db_engine):
    """Yield a database session bound to the test engine."""
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="function")
def client(db_engine):
    """FastAPI TestClient with the database dependency overridden to use SQLite."""
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)

    def _override_get_db():
        session = TestingSession()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Helpers: accounts and events via the API
# ---------------------------------------------------------------------------
def signup(client: TestClient, username: str = "alice", password: str = DEFAULT_PASSWORD) -> dict:
    """Helper: POST /auth/signup (which also logs in) and return response JSON."""
    resp = client.post("/auth/signup", json={"username": username, "password": password})
    assert resp.status_code == 200, resp.text
    return resp.json()


def login(client: TestClient, username: str, password: str = DEFAULT_PASSWORD) -> dict:
    """Helper: POST /auth/login, switching the client's session to ``username``."""
    resp = client.post("/auth/login", json={"username": username, "password": password})
    assert resp.status_code == 200, resp.text
    return resp.json()


def make_event(client: TestClient, **overrides):
    """Helper: POST /events with a valid IPA payload, fields overridable."""
    payload = {
        "drinkType": "beer",
        "drinkName": "IPA",
        "percentage": 6,
        "date": "2024-01-01",
        "volume": "330",
    }
    payload.update(overrides)
    return client.post("/events", json=payload)
