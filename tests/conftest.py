# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up a clean environment before any app imports
# - In-memory SQLite database shared by service and API tests
# - TestClient wired to that database via dependency overrides
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# app.config builds settings at import time, so provider keys and the
# database URL must be cleared first: tests never hit a real LLM or DB.

for _name in ("DEEPSEEK_API_KEY", "SPEECH_API_KEY", "DATABASE_URL"):
    os.environ.pop(_name, None)
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "false")

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.config import settings
from app.dependencies import get_db_session
from app.main import app
from core.services.speech_service import daily_speech_cache
from lib.db_models import Base


# =============================================================================
# Database Fixtures
# =============================================================================

@pytest.fixture
def db_engine():
    """In-memory SQLite engine with foreign keys enforced."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return sessionmaker(db_engine, expire_on_commit=False)


@pytest.fixture
def db_session(session_factory):
    """A session for calling MessagingService directly."""
    with session_factory() as session:
        yield session


# =============================================================================
# HTTP Fixtures
# =============================================================================

@pytest.fixture
def client(session_factory):
    """TestClient whose messaging routes use the in-memory database."""

    def override_db_session():
        with session_factory() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_db_session
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def bare_client():
    """TestClient with no database configured."""
    app.dependency_overrides.clear()
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def assets_dir(tmp_path, monkeypatch):
    """A temporary sprite directory with two sprites and a hidden file."""
    (tmp_path / "sprite-idle-01.png").write_bytes(b"\x89PNG\r\n\x1a\nidle")
    (tmp_path / "sprite-walk-01.png").write_bytes(b"\x89PNG\r\n\x1a\nwalk")
    (tmp_path / ".DS_Store").write_bytes(b"junk")
    (tmp_path / "nested").mkdir()
    monkeypatch.setattr(settings, "ASSETS_DIR", tmp_path)
    return tmp_path


# =============================================================================
# LLM Fixtures
# =============================================================================

@pytest.fixture
def mock_llm():
    """A configured LLM client whose complete() is a MagicMock."""
    llm = MagicMock()
    llm.is_configured = True
    return llm


@pytest.fixture(autouse=True)
def reset_daily_speech():
    """The daily speech slot is process-global; start every test empty."""
    daily_speech_cache.clear()
    yield
    daily_speech_cache.clear()


# =============================================================================
# Sample Data
# =============================================================================

@pytest.fixture
def sample_frame_dict():
    """A frame as the Figma plugin sends it."""
    return {
        "frameId": "12:34",
        "frameData": {
            "name": "Login Screen",
            "width": 375,
            "height": 812,
            "fills": [{"type": "SOLID", "color": {"r": 1, "g": 1, "b": 1}}],
            "strokes": [],
        },
    }
