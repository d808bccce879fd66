# tests/conftest.py

from __future__ import annotations

import os
from datetime import date

# Avant tout import du package : pas d'echo SQL, pas de fichier tasks.db
os.environ.setdefault("ENV", "test")
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session

from tasks_back.db.repositories.tasks import TaskRepository
from tasks_back.db.session import build_engine, get_session, init_db
from tasks_back.features.tasks.schemas import TaskCreate
from tasks_back.features.tasks.services import TaskService
from tasks_back.main import app


@pytest.fixture()
def engine():
    """
    In-memory SQLite shared by every connection of the test (StaticPool),
    so the HTTP client and the direct session see the same rows.
    """
    engine = build_engine("sqlite://")
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture()
def repo(session) -> TaskRepository:
    return TaskRepository(session)


@pytest.fixture()
def service(repo) -> TaskService:
    return TaskService(repo)


@pytest.fixture()
def make_task(service):
    def _make(name: str = "Task", due_date: date = date(2024, 1, 1), **fields):
        return service.create(TaskCreate(name=name, due_date=due_date, **fields))

    return _make


@pytest.fixture()
def client(engine):
    def _session_override():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = _session_override
    yield TestClient(app)
    app.dependency_overrides.clear()
