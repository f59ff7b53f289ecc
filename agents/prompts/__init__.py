# =============================================================================
# agents/prompts/ - Prompts for the LLM Agents
# =============================================================================
# This package contains prompt builders for each agent:
# - feedback_prompt.py: Design critic prompt (one Figma frame)
# - speech_prompt.py: Mascot speech prompt (ad hoc and daily)
# =============================================================================

from agents.prompts.feedback_prompt import (
    FEEDBACK_CATEGORIES,
    PayloadKind,
    build_feedback_prompt,
    classify_payload,
    decode_frame_content,
)
from agents.prompts.speech_prompt import (
    build_daily_speech_prompt,
    build_speech_prompt,
)

__all__ = [
    "FEEDBACK_CATEGORIES",
    "PayloadKind",
    "build_feedback_prompt",
    "classify_payload",
    "decode_frame_content",
    "build_daily_speech_prompt",
    "build_speech_prompt",
]
