"""Pytest fixtures — SQLite file database, created and dropped per test."""
import os
from datetime import date

# Must be set before warranty_tracker.config is imported
os.environ["DATABASE_URL"] = "sqlite:///./test.db"
os.environ.setdefault("BCRYPT_ROUNDS", "10")

import pytest
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from fastapi.testclient import TestClient

from warranty_tracker.database import Base, get_db
from warranty_tracker.dependencies import get_today
from warranty_tracker.main import app

# Import all models so they register with Base.metadata
from warranty_tracker.models.user import User          # noqa: F401
from warranty_tracker.models.warranty import Warranty  # noqa: F401

SQLITE_URL = "sqlite:///./test.db"
FIXED_TODAY = date(2025, 12, 20)
DEFAULT_PASSWORD = "Secret123"


@pytest.fixture(scope="function")
def db_engine():
    """Create a fresh SQLite engine for each test."""
    engine = create_engine(SQLITE_URL, connect_args={"check_same_thread": False})

    # Enforce FK constraints like PostgreSQL does
    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    Base.metadata.drop_all(bind=engine)
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
    """FastAPI TestClient on the test database, with "today" pinned to FIXED_TODAY."""
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)

    def _override_get_db():
        session = TestingSession()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _override_get_db
    app.dependency_overrides[get_today] = lambda: FIXED_TODAY
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Helpers: drive the API and return response JSON
# ---------------------------------------------------------------------------
def register_user(client: TestClient, email: str = "owner@example.com", password: str = DEFAULT_PASSWORD) -> dict:
    """Helper — POST /api/auth/register and return response JSON."""
    resp = client.post("/api/auth/register", json={"email": email, "password": password})
    assert resp.status_code == 201, resp.text
    return resp.json()


def auth_headers(email: str = "owner@example.com") -> dict:
    return {"X-User-Email": email}


def create_warranty(client: TestClient, email: str = "owner@example.com", **overrides) -> dict:
    """Helper — POST /api/warranties as ``email`` and return response JSON."""
    payload = {
        "productName": "MacBook Pro",
        "serialNumber": "C02XYZ123",
        "purchaseDate": "2024-01-15",
        "warrantyMonths": 24,
    }
    payload.update(overrides)
    resp = client.post("/api/warranties", json=payload, headers=auth_headers(email))
    assert resp.status_code == 201, resp.text
    return resp.json()
