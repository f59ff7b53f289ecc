# =============================================================================
# agents/design_critic.py - Design Critic Agent
# =============================================================================
# Reviews one Figma frame and returns a few pieces of friendly feedback.
#
# The critic's job:
# 1. Build a prompt from the frame's metadata and visual payload
# 2. Ask the feedback model for a JSON array of comments
# 3. Salvage whatever structure the model actually returned
#
# Every failure path ends in canned feedback, so review() never raises for
# provider or parsing problems.
#
# Usage:
#   from agents.design_critic import DesignCriticAgent
#   critic = DesignCriticAgent()
#   items = critic.review(frame_data)
# =============================================================================

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from agents.fallbacks import simple_feedback
from agents.prompts.feedback_prompt import build_feedback_prompt
from core.models.feedback import FeedbackItem, FrameData
from lib.llm_client import LLMClient, LLMClientError, get_feedback_client
from lib.response_parsing import extract_json_array, extract_json_object, has_json_span, strip_markdown

logger = logging.getLogger(__name__)

DEFAULT_FEEDBACK_TEXT = "Nice design!"
DEFAULT_CONFIDENCE = 0.8
RAW_TEXT_CONFIDENCE = 0.75


class DesignCriticAgent:
    """
    Turns a frame into feedback items.

    Attributes:
        client: LLM client used for the critique (DeepSeek by default)
    """

    def __init__(self, client: LLMClient | None = None):
        self.client = client or get_feedback_client()

    def review(self, frame: FrameData) -> list[FeedbackItem]:
        """
        Produce feedback for one frame.

        Args:
            frame: Frame metadata from the plugin

        Returns:
            At least one FeedbackItem
        """
        if not self.client.is_configured:
            logger.warning("DeepSeek API key not configured, using simple feedback")
            return simple_feedback()

        prompt = build_feedback_prompt(frame)

        try:
            content = self.client.complete(prompt)
        except LLMClientError as e:
            logger.error(f"Feedback model error for '{frame.name}': {e.message}")
            return simple_feedback()

        items = parse_feedback_response(content)
        if not items:
            logger.warning(f"Unusable feedback response for '{frame.name}', using simple feedback")
            return simple_feedback()
        return items


# =============================================================================
# Response Parsing
# =============================================================================

def _item_from_entry(entry: Any) -> FeedbackItem | None:
    """Build a FeedbackItem from one JSON entry, filling in defaults."""
    if isinstance(entry, str):
        text = strip_markdown(entry)
        return FeedbackItem(feedback=text) if text else None
    if not isinstance(entry, dict):
        return None

    try:
        return FeedbackItem(
            feedback=str(entry.get("feedback") or DEFAULT_FEEDBACK_TEXT),
            category=entry.get("category"),
            confidence=entry.get("confidence") or DEFAULT_CONFIDENCE,
        )
    except ValidationError:
        return None


def parse_feedback_response(content: str) -> list[FeedbackItem]:
    """
    Extract feedback items from model output.

    Tries, in order:
    1. A JSON array of {feedback, category, confidence} objects
    2. A single JSON object with the same keys
    3. The whole text (Markdown stripped) as one general comment

    Step 3 only applies to replies with no JSON-looking span: a broken
    array or object is a parse failure and yields an empty list, as does
    blank text.
    """
    array = extract_json_array(content)
    if array:
        items = [item for item in (_item_from_entry(entry) for entry in array) if item]
        if items:
            return items

    obj = extract_json_object(content)
    if obj:
        item = _item_from_entry(obj)
        if item:
            return [item]

    if has_json_span(content):
        return []

    text = strip_markdown(content)
    if not text:
        return []
    return [FeedbackItem(feedback=text, category="general", confidence=RAW_TEXT_CONFIDENCE)]
