# =============================================================================
# core/models/feedback.py - Design Feedback Schemas
# =============================================================================
# These models define the API contract for POST /api/feedback:
# - FrameData: What the Figma plugin knows about one frame
# - FeedbackFrame: A frame plus the plugin's ID for it
# - FeedbackItem: One piece of feedback produced by the critic
# - FrameFeedback: A FeedbackItem tagged with its frame ID (response row)
#
# The plugin speaks camelCase (frameId, frameData, svgBase64), so those
# fields carry aliases; Python code uses the snake_case names.
# =============================================================================

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class FeedbackCategory(str, Enum):
    """Categories the critic is asked to use."""
    LAYOUT = "layout"
    SPACING = "spacing"
    COLOR = "color"
    TYPOGRAPHY = "typography"
    ACCESSIBILITY = "accessibility"
    RESPONSIVE = "responsive"
    GENERAL = "general"


class FrameData(BaseModel):
    """
    Frame metadata exported by the Figma plugin.

    svg_base64 carries one of three payloads:
    - a "FRAME_CONTENT:" text descriptor (raw or base64-encoded)
    - a base64 PNG screenshot (starts with "iVBORw0KGgo")
    - a base64 SVG export

    Example:
        {
            "name": "Login Screen",
            "width": 375,
            "height": 812,
            "fills": [{"type": "SOLID"}],
            "strokes": [],
            "svgBase64": "iVBORw0KGgo..."
        }
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    name: str = Field(default="Untitled frame", description="Frame name in Figma")
    width: float | None = Field(default=None, description="Frame width in px")
    height: float | None = Field(default=None, description="Frame height in px")
    fills: list[Any] | None = Field(default=None, description="Figma fill paints")
    strokes: list[Any] | None = Field(default=None, description="Figma stroke paints")
    svg_base64: str | None = Field(
        default=None,
        alias="svgBase64",
        description="Visual payload: content descriptor, PNG or SVG (base64)"
    )

    @property
    def has_fills(self) -> bool:
        return bool(self.fills)

    @property
    def has_strokes(self) -> bool:
        return bool(self.strokes)


class FeedbackFrame(BaseModel):
    """One frame in a feedback request."""

    model_config = ConfigDict(populate_by_name=True)

    frame_id: str | int | None = Field(default=None, alias="frameId")
    frame_data: FrameData = Field(..., alias="frameData")


class FeedbackRequest(BaseModel):
    """
    Body of POST /api/feedback.

    frames is left untyped so a missing, empty or non-list value is answered
    with a 400 by the service, and a single malformed frame only costs that
    frame its feedback instead of failing the whole request.
    """
    frames: Any = None


class FeedbackItem(BaseModel):
    """A single piece of feedback before it is tied to a frame."""

    feedback: str = Field(..., description="Friendly, actionable comment")
    category: str = Field(default=FeedbackCategory.GENERAL.value)
    confidence: float = Field(default=0.8)

    @field_validator("category", mode="before")
    @classmethod
    def normalize_category(cls, value: Any) -> str:
        if not isinstance(value, str) or not value.strip():
            return FeedbackCategory.GENERAL.value
        return value.strip().lower()

    @field_validator("confidence", mode="before")
    @classmethod
    def clamp_confidence(cls, value: Any) -> float:
        try:
            number = float(value)
        except (TypeError, ValueError):
            return 0.8
        return max(0.0, min(1.0, number))


class FrameFeedback(BaseModel):
    """One row of the POST /api/feedback response."""

    model_config = ConfigDict(populate_by_name=True)

    frame_id: str | int | None = Field(default=None, alias="frameId")
    feedback: str
    category: str
    confidence: float

    @classmethod
    def from_item(cls, frame_id: str | int | None, item: FeedbackItem) -> "FrameFeedback":
        return cls(
            frame_id=frame_id,
            feedback=item.feedback,
            category=item.category,
            confidence=item.confidence,
        )
