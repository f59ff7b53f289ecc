# =============================================================================
# core/models/speech.py - Mascot Speech Schemas
# =============================================================================
# Request/response models for the speech endpoints. A "speech" is one
# short line the cat mascot says in the plugin UI.
# =============================================================================

import datetime as dt
from enum import Enum

from pydantic import BaseModel, Field


class SpeechSource(str, Enum):
    """Where a speech came from."""
    LLM = "llm"
    FALLBACK = "fallback"


class SpeechRequest(BaseModel):
    """Body of POST /api/speech."""

    context: str | None = Field(
        default=None,
        max_length=1000,
        description="Optional hint about what the user is doing",
        examples=["Reviewing a checkout page", "Just opened the plugin"],
    )
    count: int = Field(
        default=3,
        ge=1,
        le=10,
        description="How many lines to generate"
    )


class SpeechResponse(BaseModel):
    """Response of POST /api/speech."""
    speeches: list[str]
    source: SpeechSource


class DailySpeechResponse(BaseModel):
    """
    Response of GET /api/speech/daily.

    Example:
        {
            "date": "2024-01-15",
            "speech": "Purr-fect pixels today!",
            "source": "llm",
            "cached": true
        }
    """
    date: dt.date
    speech: str
    source: SpeechSource
    cached: bool = False
