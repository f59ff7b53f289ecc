# =============================================================================
# tests/test_database.py - Database Engine Tests
# =============================================================================
# Tests for lib/database.py: URL normalization and the lazy engine
# lifecycle, using a throwaway SQLite URL.
#
# Run with: pytest tests/test_database.py -v
# =============================================================================

import pytest

from app.config import settings
from lib import database


@pytest.fixture
def sqlite_url(monkeypatch):
    """Point DATABASE_URL at in-memory SQLite and reset the global engine."""
    database.dispose_engine()
    monkeypatch.setattr(settings, "DATABASE_URL", "sqlite://")
    yield
    database.dispose_engine()


class TestNormalizeDatabaseUrl:

    @pytest.mark.parametrize(
        "url, expected",
        [
            ("postgres://u:p@host:5432/ameo", "postgresql+psycopg://u:p@host:5432/ameo"),
            ("postgresql://u:p@host/ameo", "postgresql+psycopg://u:p@host/ameo"),
            ("postgresql+psycopg://u:p@host/ameo", "postgresql+psycopg://u:p@host/ameo"),
            ("sqlite:///./ameo.db", "sqlite:///./ameo.db"),
        ],
    )
    def test_normalize(self, url, expected):
        assert database.normalize_database_url(url) == expected


class TestEngineLifecycle:

    def test_not_configured(self):
        database.dispose_engine()

        assert database.get_session_factory() is None
        assert database.init_database() is False
        assert database.check_database() == "not_configured"

    def test_configured(self, sqlite_url):
        assert settings.messaging_enabled is True
        assert database.init_database() is True
        assert database.check_database() == "healthy"
        assert database.get_session_factory() is not None

    def test_dispose_resets_engine(self, sqlite_url):
        first = database.get_engine()
        database.dispose_engine()

        assert database.get_engine() is not first
