# =============================================================================
# app/config.py - Application Settings
# =============================================================================
# This module loads configuration from environment variables using pydantic-settings.
# It provides a single Settings class with all configuration values.
#
# Usage:
#   from app.config import settings
#   print(settings.DEEPSEEK_MODEL)
#
# Environment variables are loaded from:
# 1. System environment variables
# 2. .env file in project root (if exists)
#
# Nothing here is required: without an LLM key the feedback and speech
# endpoints use canned content, and without DATABASE_URL messaging is off.
# =============================================================================

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

PROJECT_ROOT = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings are accessed via the global `settings` instance.
    """

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------

    ENVIRONMENT: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Current environment"
    )

    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode (verbose logging, error text in 500s)"
    )

    API_HOST: str = Field(
        default="0.0.0.0",
        description="Host to bind the API server to"
    )

    API_PORT: int = Field(
        default=3000,
        ge=1,
        le=65535,
        description="Port for the API server"
    )

    # CORS origins (comma-separated string that gets parsed)
    CORS_ORIGINS: str = Field(
        default="*",
        description="Allowed CORS origins in production (comma-separated)"
    )

    # -------------------------------------------------------------------------
    # Static Assets
    # -------------------------------------------------------------------------

    ASSETS_DIR: Path = Field(
        default=PROJECT_ROOT / "assets",
        description="Directory holding the sprite images served at the root"
    )

    # -------------------------------------------------------------------------
    # Design Feedback LLM (DeepSeek, OpenAI-compatible)
    # -------------------------------------------------------------------------

    DEEPSEEK_API_KEY: str | None = Field(
        default=None,
        description="DeepSeek API key; rule-based feedback is used when unset"
    )

    DEEPSEEK_BASE_URL: str = Field(
        default="https://api.deepseek.com",
        description="Base URL of the OpenAI-compatible chat completions API"
    )

    DEEPSEEK_MODEL: str = Field(
        default="deepseek-chat",
        description="Model used for design feedback"
    )

    FEEDBACK_TEMPERATURE: float = Field(
        default=0.7,
        ge=0.0,
        le=2.0,
        description="Sampling temperature for design feedback"
    )

    FEEDBACK_MAX_TOKENS: int = Field(
        default=500,
        ge=1,
        description="Max tokens per feedback completion"
    )

    # -------------------------------------------------------------------------
    # Speech LLM
    # -------------------------------------------------------------------------
    # Defaults to the DeepSeek credentials when not set separately.

    SPEECH_API_KEY: str | None = Field(
        default=None,
        description="API key for speech generation (defaults to DEEPSEEK_API_KEY)"
    )

    SPEECH_BASE_URL: str | None = Field(
        default=None,
        description="Base URL for speech generation (defaults to DEEPSEEK_BASE_URL)"
    )

    SPEECH_MODEL: str | None = Field(
        default=None,
        description="Model for speech generation (defaults to DEEPSEEK_MODEL)"
    )

    SPEECH_TEMPERATURE: float = Field(
        default=0.9,
        ge=0.0,
        le=2.0,
        description="Sampling temperature for speech lines"
    )

    SPEECH_MAX_TOKENS: int = Field(
        default=300,
        ge=1,
        description="Max tokens per speech completion"
    )

    LLM_TIMEOUT_SECONDS: float = Field(
        default=30.0,
        gt=0,
        description="Timeout for outbound LLM requests"
    )

    # -------------------------------------------------------------------------
    # Messaging Database
    # -------------------------------------------------------------------------

    DATABASE_URL: str | None = Field(
        default=None,
        description="SQLAlchemy database URL; messaging is disabled when unset"
    )

    DATABASE_SSL: bool = Field(
        default=False,
        description="Require SSL for PostgreSQL connections (hosted databases)"
    )

    TYPING_STATUS_TTL_SECONDS: int = Field(
        default=8,
        ge=1,
        le=300,
        description="Seconds a typing flag stays fresh without being refreshed"
    )

    # -------------------------------------------------------------------------
    # Pydantic Settings Configuration
    # -------------------------------------------------------------------------

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        case_sensitive=True,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def cors_origins_list(self) -> list[str]:
        """
        Parse CORS_ORIGINS string into a list.

        Example: "http://localhost:3000, https://figma.com" -> ["http://localhost:3000", "https://figma.com"]
        """
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    @property
    def speech_api_key(self) -> str | None:
        return self.SPEECH_API_KEY or self.DEEPSEEK_API_KEY

    @property
    def speech_base_url(self) -> str:
        return self.SPEECH_BASE_URL or self.DEEPSEEK_BASE_URL

    @property
    def speech_model(self) -> str:
        return self.SPEECH_MODEL or self.DEEPSEEK_MODEL

    @property
    def messaging_enabled(self) -> bool:
        """True when a database is configured for messaging."""
        return bool(self.DATABASE_URL)

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.ENVIRONMENT == "production"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached Settings instance.

    Using lru_cache ensures we only parse .env and validate once,
    not on every access.
    """
    return Settings()


# Global settings instance for easy importing
# Usage: from app.config import settings
settings = get_settings()
