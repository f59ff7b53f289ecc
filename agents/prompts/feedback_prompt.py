# =============================================================================
# agents/prompts/feedback_prompt.py - Design Critic Prompt
# =============================================================================
# Builds the single user prompt sent to the feedback model for one frame.
#
# The prompt has three parts:
# 1. Persona and frame metadata (name, size, fills/strokes)
# 2. One visual-context section chosen from the frame's payload
# 3. The JSON-array output contract and category list
#
# Usage:
#   prompt = build_feedback_prompt(frame_data)
# =============================================================================

from __future__ import annotations

import base64
import binascii
from enum import Enum

from core.models.feedback import FrameData

FRAME_CONTENT_PREFIX = "FRAME_CONTENT:"
PNG_BASE64_PREFIX = "iVBORw0KGgo"

FEEDBACK_CATEGORIES = ["layout", "spacing", "color", "typography", "accessibility", "general"]


class PayloadKind(str, Enum):
    """What kind of visual context a frame carries."""
    CONTENT = "content"
    PNG = "png"
    SVG = "svg"
    EMPTY = "empty"
    METADATA = "metadata"


# =============================================================================
# Prompt Sections
# =============================================================================

PERSONA = (
    "You are Ameo, a friendly UX/UI design expert cat. Analyze this Figma frame "
    "and provide detailed, specific feedback based on the visual design."
)

CONTENT_SECTION = """
FRAME STRUCTURE & CONTENT:
{content}

Analyze the frame content and structure above. Provide feedback on:
1. Layout and organization of elements
2. Content hierarchy and visual balance
3. Spacing and alignment consistency
4. Typography and text hierarchy (if applicable)
5. Suggestions for improvement"""

PNG_SECTION = """
VISUAL DESIGN (PNG Screenshot):
data:image/png;base64,{payload}

Analyze the PNG screenshot of the frame above and provide detailed feedback on:
1. Visual layout and composition of elements
2. Spacing and alignment between elements
3. Color usage, contrast, and visual hierarchy
4. Typography and text readability
5. Design quality and specific improvement opportunities"""

SVG_SECTION = """
VISUAL DESIGN (SVG):
data:image/svg+xml;base64,{payload}

Analyze the SVG visual representation above and provide feedback on:
1. Visual layout and composition
2. Spacing and alignment
3. Color usage and contrast (if applicable)
4. Visual hierarchy and visual balance
5. Any design inconsistencies or improvement opportunities"""

EMPTY_SECTION = """
NOTE: This frame appears to be empty or blank. Provide feedback on:
1. Suggested purpose for this frame
2. What type of content could work well here
3. Recommended dimensions and structure
4. Design considerations for this frame's intended use"""

METADATA_SECTION = """
Analyze the frame based on metadata and provide feedback on design aspects."""

OUTPUT_CONTRACT = """
Provide feedback as a JSON array with 3-4 specific, actionable comments. Each comment should be 1-2 sentences and friendly.

Respond with ONLY JSON array (no markdown, no extra text):
[
  {{
    "feedback": "Specific feedback about what you observe",
    "category": "category_name"
  }}
]

Use these categories as appropriate: {categories}"""


# =============================================================================
# Payload Detection
# =============================================================================

def decode_frame_content(payload: str) -> str | None:
    """
    Return the descriptor text if payload is a FRAME_CONTENT descriptor.

    The plugin has sent it both raw and base64-encoded, so both are checked.
    """
    if payload.startswith(FRAME_CONTENT_PREFIX):
        return payload[len(FRAME_CONTENT_PREFIX):].strip()

    try:
        decoded = base64.b64decode(payload, validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError, ValueError):
        return None

    if decoded.startswith(FRAME_CONTENT_PREFIX):
        return decoded[len(FRAME_CONTENT_PREFIX):].strip()
    return None


def classify_payload(frame: FrameData) -> PayloadKind:
    """Pick the visual-context section a frame should get."""
    payload = frame.svg_base64
    if payload:
        if decode_frame_content(payload) is not None:
            return PayloadKind.CONTENT
        if payload.startswith(PNG_BASE64_PREFIX):
            return PayloadKind.PNG
        return PayloadKind.SVG
    if not frame.has_fills:
        return PayloadKind.EMPTY
    return PayloadKind.METADATA


# =============================================================================
# Prompt Builder
# =============================================================================

def _format_dimension(value: float | None) -> str:
    if value is None:
        return "?"
    return str(int(value)) if float(value).is_integer() else str(value)


def build_feedback_prompt(frame: FrameData) -> str:
    """
    Build the feedback prompt for one frame.

    Args:
        frame: Frame metadata from the plugin

    Returns:
        The complete prompt text
    """
    header = (
        f"{PERSONA}\n\n"
        f"Frame: {frame.name} ({_format_dimension(frame.width)}x{_format_dimension(frame.height)}px)\n"
        f"Has colors: {str(frame.has_fills).lower()}\n"
        f"Has borders: {str(frame.has_strokes).lower()}"
    )

    kind = classify_payload(frame)
    if kind == PayloadKind.CONTENT:
        section = CONTENT_SECTION.format(content=decode_frame_content(frame.svg_base64 or ""))
    elif kind == PayloadKind.PNG:
        section = PNG_SECTION.format(payload=frame.svg_base64)
    elif kind == PayloadKind.SVG:
        section = SVG_SECTION.format(payload=frame.svg_base64)
    elif kind == PayloadKind.EMPTY:
        section = EMPTY_SECTION
    else:
        section = METADATA_SECTION

    contract = OUTPUT_CONTRACT.format(categories=", ".join(FEEDBACK_CATEGORIES))
    return f"{header}\n{section}\n{contract}"
