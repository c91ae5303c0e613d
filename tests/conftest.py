"""
Pytest configuration for the Student Registry API.

Provides fixtures for:
- Settings pointing at a temporary SQLite database
- A record store and service bound to that database
- A TestClient running the full application lifespan
"""

from __future__ import annotations

from pathlib import Path
from typing import Generator

import pytest
from fastapi.testclient import TestClient

from student_registry_api.app.core.config import Settings
from student_registry_api.app.core.db import StudentStore
from student_registry_api.app.main import create_app
from student_registry_api.app.services.student_service import StudentService


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """Settings with a fresh database file per test."""
    return Settings(database_url=str(tmp_path / "students.db"), log_level="DEBUG")


@pytest.fixture
def store(test_settings: Settings) -> Generator[StudentStore, None, None]:
    store = StudentStore.open(test_settings.database_url)
    try:
        yield store
    finally:
        store.close()


@pytest.fixture
def service(store: StudentStore) -> StudentService:
    return StudentService(store)


@pytest.fixture
def client(test_settings: Settings) -> Generator[TestClient, None, None]:
    """Client for an app whose store is opened by the lifespan handler."""
    app = create_app(test_settings)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def ana() -> dict:
    return {"name": "Ana", "externalCode": "X1", "category": "CS"}
