"""
Pytest configuration and shared fixtures for the taskboard test suite.
"""

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Ensure project src is importable when running tests without installing
repo_root = Path(__file__).resolve().parents[1]
src_path = repo_root / "src"
if src_path.exists() and str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from taskboard.config import Settings  # noqa: E402
from taskboard.main import create_app  # noqa: E402
from taskboard.service import TaskService  # noqa: E402
from taskboard.store import InMemoryTaskStore  # noqa: E402


@pytest.fixture
def store() -> InMemoryTaskStore:
    return InMemoryTaskStore()


@pytest.fixture
def service(store) -> TaskService:
    return TaskService(store)


@pytest.fixture
def settings(monkeypatch) -> Settings:
    monkeypatch.delenv("TASKBOARD_API_PREFIX", raising=False)
    monkeypatch.delenv("CORS_ALLOW_ORIGINS", raising=False)
    return Settings()


@pytest.fixture
def app(settings, service):
    return create_app(settings, service=service)


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)
