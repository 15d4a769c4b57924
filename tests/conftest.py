"""
Shared pytest fixtures.

Uses a file-backed SQLite database so no Postgres is required for tests.
"""
import os
import uuid

SQLITE_URL = "sqlite:///./test_wellness.db"
os.environ.setdefault("DATABASE_URL", SQLITE_URL)

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402

from campus_wellness.db.base import Base, get_db  # noqa: E402
from campus_wellness.main import app  # noqa: E402
import campus_wellness.models  # noqa: E402,F401

engine = create_engine(SQLITE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(scope="session", autouse=True)
def create_tables():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def client(db):
    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture()
def user(client) -> dict:
    """A fresh consenting student, isolated from every other test's data."""
    r = client.post("/users", json={
        "name": "Test Student",
        "email": f"student-{uuid.uuid4().hex[:12]}@campus.edu",
    })
    assert r.status_code == 201
    return r.json()
