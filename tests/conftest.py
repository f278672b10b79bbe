# tests/conftest.py

from __future__ import annotations

import os
from datetime import datetime

# Keep the app's module-level engine off the real database file.
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine

from tasktracker.database import get_db
from tasktracker.main import app
from tasktracker.models import Task
from tasktracker.routers.tasks import get_now

NOW = datetime(2024, 1, 1, 12, 0, 0)


@pytest.fixture()
def now() -> datetime:
    return NOW


@pytest.fixture()
def make_task():
    """
    Factory for detached Task rows.

    Ids increase in call order unless given, so tests can refer to tasks by id
    the way they appear in assertions.
    """
    counter = {"next": 1}

    def _make(**fields) -> Task:
        if "id" not in fields:
            fields["id"] = counter["next"]
        counter["next"] = fields["id"] + 1
        fields.setdefault("title", f"Task {fields['id']}")
        return Task(**fields)

    return _make


@pytest.fixture()
def db_session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture()
def client(db_session):
    """
    TestClient wired to an in-memory database and a fixed clock.

    Not used as a context manager, so the startup hook (real table creation
    and logging setup) does not run.
    """

    def _get_db():
        yield db_session

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_now] = lambda: NOW
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
