# =============================================================================
# agents/speech_writer.py - Mascot Speech Agent
# =============================================================================
# Writes the short lines Ameo says in the plugin UI.
#
# Models are asked for a JSON array of strings, but the parser also accepts
# arrays of objects, numbered/bulleted lists, and plain one-line-per-speech
# text. Anything else falls back to canned lines.
#
# Usage:
#   from agents.speech_writer import SpeechWriterAgent
#   writer = SpeechWriterAgent()
#   lines, source = writer.write(count=3, context="reviewing a login screen")
# =============================================================================

from __future__ import annotations

import logging
from datetime import date
from typing import Any

from agents.fallbacks import fallback_speeches
from agents.prompts.speech_prompt import build_daily_speech_prompt, build_speech_prompt
from core.models.speech import SpeechSource
from lib.llm_client import LLMClient, LLMClientError, get_speech_client
from lib.response_parsing import (
    extract_json_array,
    opens_with_json,
    parse_numbered_list,
    strip_code_fences,
    strip_markdown,
)

logger = logging.getLogger(__name__)

_QUOTES = "\"'“”‘’`"
_TEXT_KEYS = ("text", "speech", "line")


def clean_speech(text: str) -> str:
    """Strip Markdown and wrapping quotes from one line."""
    return strip_markdown(text).strip().strip(_QUOTES).strip()


def _entry_text(entry: Any) -> str | None:
    if isinstance(entry, str):
        return entry
    if isinstance(entry, dict):
        for key in _TEXT_KEYS:
            value = entry.get(key)
            if isinstance(value, str):
                return value
    return None


def parse_speech_response(content: str, count: int) -> list[str]:
    """
    Pull up to `count` speech lines out of model output.

    Tries a JSON array first, then a numbered/bulleted list, then plain
    non-empty lines. Returns an empty list when nothing usable is found,
    including a reply that opens as JSON but doesn't parse (typically one
    cut off at the token limit).
    """
    candidates: list[str] = []

    array = extract_json_array(content)
    if array:
        candidates = [text for text in (_entry_text(entry) for entry in array) if text]

    if not candidates and opens_with_json(content):
        return []

    if not candidates:
        candidates = parse_numbered_list(content)

    if not candidates:
        candidates = strip_code_fences(content).splitlines()

    speeches = [line for line in (clean_speech(c) for c in candidates) if line]
    return speeches[:count]


class SpeechWriterAgent:
    """
    Generates mascot speech lines.

    Attributes:
        client: LLM client used for generation (SPEECH_* settings)
    """

    def __init__(self, client: LLMClient | None = None):
        self.client = client or get_speech_client()

    def _generate(self, prompt: str, count: int) -> list[str]:
        """Call the model; empty list on any failure."""
        if not self.client.is_configured:
            logger.warning("Speech API key not configured, using fallback speeches")
            return []

        try:
            content = self.client.complete(prompt)
        except LLMClientError as e:
            logger.error(f"Speech model error: {e.message}")
            return []

        speeches = parse_speech_response(content, count)
        if not speeches:
            logger.warning("Unusable speech response, using fallback speeches")
        return speeches

    def write(self, count: int = 3, context: str | None = None) -> tuple[list[str], SpeechSource]:
        """
        Generate `count` speech lines.

        Returns:
            (lines, source) where source says whether the model or the
            canned list produced them
        """
        speeches = self._generate(build_speech_prompt(count, context), count)
        if speeches:
            return speeches, SpeechSource.LLM
        return fallback_speeches(count), SpeechSource.FALLBACK

    def write_daily(self, today: date) -> str | None:
        """Generate the speech of the day; None if the model couldn't."""
        speeches = self._generate(build_daily_speech_prompt(today), 1)
        return speeches[0] if speeches else None
