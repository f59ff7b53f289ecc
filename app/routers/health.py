# =============================================================================
# app/routers/health.py - Health Check Endpoints
# =============================================================================
# Liveness, readiness and a summary of which optional features are wired up.
# Missing LLM keys or a missing database never make the server unready:
# feedback and speech degrade to canned content and messaging answers 503.
# =============================================================================

import time
from datetime import datetime, timezone

from fastapi import APIRouter
from pydantic import BaseModel

from app.config import settings
from lib.database import check_database

router = APIRouter()

API_VERSION = "1.0.0"

_STARTED_AT = time.monotonic()


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


def _configured(value: str | None) -> str:
    return "configured" if value else "not_configured"


# =============================================================================
# Response Models
# =============================================================================

class HealthResponse(BaseModel):
    status: str
    timestamp: str
    environment: str
    version: str
    messaging: str


class ComponentChecks(BaseModel):
    """Per-component state reported by /health/ready."""
    database: str
    feedback_llm: str
    speech_llm: str


class ReadinessResponse(BaseModel):
    status: str
    checks: ComponentChecks
    timestamp: str


class LivenessResponse(BaseModel):
    status: str
    uptime_seconds: float
    timestamp: str


# =============================================================================
# Endpoints
# =============================================================================

@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Basic status for load balancers and the plugin's connection check."""
    return HealthResponse(
        status="ok",
        timestamp=_timestamp(),
        environment=settings.ENVIRONMENT,
        version=API_VERSION,
        messaging="enabled" if settings.messaging_enabled else "disabled",
    )


@router.get("/health/ready", response_model=ReadinessResponse)
def readiness_check():
    """
    Readiness check.

    Pings the messaging database if one is configured and reports whether
    each LLM provider has a key. Only a configured-but-unreachable database
    turns the status to "degraded".
    """
    database = check_database()

    return ReadinessResponse(
        status="ready" if database in ("healthy", "not_configured") else "degraded",
        checks=ComponentChecks(
            database=database,
            feedback_llm=_configured(settings.DEEPSEEK_API_KEY),
            speech_llm=_configured(settings.speech_api_key),
        ),
        timestamp=_timestamp(),
    )


@router.get("/health/live", response_model=LivenessResponse)
async def liveness_check():
    return LivenessResponse(
        status="alive",
        uptime_seconds=round(time.monotonic() - _STARTED_AT, 3),
        timestamp=_timestamp(),
    )
