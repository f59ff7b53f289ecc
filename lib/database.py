# =============================================================================
# lib/database.py - Messaging Database Engine
# =============================================================================
# Lazily creates one SQLAlchemy engine and session factory from DATABASE_URL.
# Nothing connects at import time; the app lifespan calls init_database()
# once and FastAPI dependencies open sessions from the factory.
#
# Usage:
#   from lib.database import get_session_factory
#   factory = get_session_factory()
#   with factory() as db:
#       ...
# =============================================================================

from __future__ import annotations

import logging

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from app.config import settings
from lib.db_models import Base

logger = logging.getLogger(__name__)

_engine: Engine | None = None
_SessionFactory: sessionmaker[Session] | None = None


def normalize_database_url(url: str) -> str:
    """
    Point bare PostgreSQL URLs at the psycopg driver.

    Hosting providers hand out postgres:// URLs, which SQLAlchemy no longer
    accepts, and postgresql:// defaults to psycopg2.

    Example:
        normalize_database_url("postgres://u:p@host/db")  # "postgresql+psycopg://u:p@host/db"
    """
    for prefix in ("postgres://", "postgresql://"):
        if url.startswith(prefix):
            return "postgresql+psycopg://" + url[len(prefix):]
    return url


def _ensure_engine() -> tuple[Engine | None, sessionmaker[Session] | None]:
    global _engine, _SessionFactory
    if _engine is None and settings.DATABASE_URL:
        url = normalize_database_url(settings.DATABASE_URL)
        connect_args = {}
        if settings.DATABASE_SSL and url.startswith("postgresql"):
            connect_args["sslmode"] = "require"
        _engine = create_engine(url, pool_pre_ping=True, connect_args=connect_args)
        _SessionFactory = sessionmaker(_engine, expire_on_commit=False)
    return _engine, _SessionFactory


def get_engine() -> Engine | None:
    """Return the shared engine, or None when messaging is disabled."""
    engine, _ = _ensure_engine()
    return engine


def get_session_factory() -> sessionmaker[Session] | None:
    """Return the shared session factory, or None when messaging is disabled."""
    _, factory = _ensure_engine()
    return factory


def init_database() -> bool:
    """
    Create any missing messaging tables.

    Existing tables are left alone. Returns False when no database is
    configured or creation failed; the server keeps running either way.
    """
    engine = get_engine()
    if engine is None:
        logger.warning("DATABASE_URL not set - messaging features will not work")
        return False

    try:
        Base.metadata.create_all(engine)
    except Exception as e:
        logger.error(f"Database initialization error: {e}")
        return False

    logger.info("Database tables initialized successfully")
    return True


def check_database() -> str:
    """Run a trivial query; returns "healthy", "not_configured" or the failure."""
    engine = get_engine()
    if engine is None:
        return "not_configured"
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return "healthy"
    except Exception as e:
        return f"unhealthy: {str(e)[:50]}"


def dispose_engine() -> None:
    """Dispose global engine (app shutdown)."""
    global _engine, _SessionFactory
    if _engine is not None:
        _engine.dispose()
        _engine = None
        _SessionFactory = None
