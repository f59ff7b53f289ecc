# =============================================================================
# agents/ - LLM Agent Definitions
# =============================================================================
# This package contains the two LLM-backed agents:
# - design_critic.py: Reviews a Figma frame and returns feedback items
# - speech_writer.py: Writes short lines for the cat mascot
#
# Supporting modules:
# - prompts/: Prompt builders for each agent
# - fallbacks.py: Canned feedback and speeches used when a provider fails
# =============================================================================

from agents.design_critic import DesignCriticAgent, parse_feedback_response
from agents.speech_writer import SpeechWriterAgent, parse_speech_response

__all__ = [
    "DesignCriticAgent",
    "parse_feedback_response",
    "SpeechWriterAgent",
    "parse_speech_response",
]
