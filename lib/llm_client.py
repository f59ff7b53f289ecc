# =============================================================================
# lib/llm_client.py - OpenAI-Compatible Chat Completion Client
# =============================================================================
# Thin wrapper around the OpenAI SDK for providers that speak the chat
# completions protocol (DeepSeek by default). One prompt in, one string out.
#
# Callers always have canned fallback content, so this module only needs to
# fail loudly with LLMClientError and let them decide what to do.
#
# Usage:
#   from lib.llm_client import get_feedback_client
#   client = get_feedback_client()
#   if client.is_configured:
#       text = client.complete("Say hi")
# =============================================================================

from __future__ import annotations

import logging

from openai import OpenAI

from app.config import settings
from lib.utils import ApplicationError

logger = logging.getLogger(__name__)


class LLMClientError(ApplicationError):
    """Error while calling an LLM provider or reading its response."""

    def __init__(self, message: str, code: str = "LLM_ERROR", **kwargs):
        super().__init__(message, code=code, **kwargs)


class LLMClient:
    """
    Single-turn chat completion client.

    Attributes:
        model: Provider model ID
        temperature: Sampling temperature for every call
        max_tokens: Completion token cap for every call
    """

    def __init__(
        self,
        api_key: str | None,
        base_url: str,
        model: str,
        temperature: float = 0.7,
        max_tokens: int = 500,
        timeout: float = 30.0,
    ):
        self.api_key = api_key
        self.base_url = base_url
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.timeout = timeout
        self._client: OpenAI | None = None

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    @property
    def client(self) -> OpenAI:
        if self._client is None:
            self._client = OpenAI(
                api_key=self.api_key,
                base_url=self.base_url,
                timeout=self.timeout,
            )
        return self._client

    def complete(self, prompt: str) -> str:
        """
        Send one user message and return the assistant's text.

        Raises:
            LLMClientError: If no key is set, the call fails, or the
                response carries no message content
        """
        if not self.is_configured:
            raise LLMClientError(
                message="LLM API key not configured",
                code="LLM_NOT_CONFIGURED",
                suggestion="Set DEEPSEEK_API_KEY (or SPEECH_API_KEY) in the environment",
            )

        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
                temperature=self.temperature,
                max_tokens=self.max_tokens,
            )
        except Exception as e:
            logger.error(f"LLM API error ({self.base_url}, {self.model}): {e}")
            raise LLMClientError(
                message=f"LLM API call failed: {e}",
                code="LLM_API_ERROR",
                suggestion="Check the API key, base URL and network connection",
                details={"model": self.model, "base_url": self.base_url},
            ) from e

        if not response.choices or response.choices[0].message is None:
            logger.error(f"Invalid LLM response structure from {self.model}: {response}")
            raise LLMClientError(
                message="Invalid response from LLM API",
                code="LLM_INVALID_RESPONSE",
                details={"model": self.model},
            )

        content = response.choices[0].message.content or ""
        if not content.strip():
            raise LLMClientError(
                message="LLM returned empty content",
                code="LLM_INVALID_RESPONSE",
                details={"model": self.model},
            )

        logger.info(f"LLM response ({len(content)} chars) from {self.model}")
        return content


# =============================================================================
# Factories
# =============================================================================

def get_feedback_client() -> LLMClient:
    """Client for design feedback (DeepSeek settings)."""
    return LLMClient(
        api_key=settings.DEEPSEEK_API_KEY,
        base_url=settings.DEEPSEEK_BASE_URL,
        model=settings.DEEPSEEK_MODEL,
        temperature=settings.FEEDBACK_TEMPERATURE,
        max_tokens=settings.FEEDBACK_MAX_TOKENS,
        timeout=settings.LLM_TIMEOUT_SECONDS,
    )


def get_speech_client() -> LLMClient:
    """Client for mascot speech (SPEECH_* settings, DeepSeek as default)."""
    return LLMClient(
        api_key=settings.speech_api_key,
        base_url=settings.speech_base_url,
        model=settings.speech_model,
        temperature=settings.SPEECH_TEMPERATURE,
        max_tokens=settings.SPEECH_MAX_TOKENS,
        timeout=settings.LLM_TIMEOUT_SECONDS,
    )
