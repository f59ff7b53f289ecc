# =============================================================================
# app/routers/feedback.py - Design Feedback API
# =============================================================================
# Accepts Figma frames from the plugin and returns Ameo's feedback on each.
# The response is a flat list: one row per feedback item, tagged with the
# frame it belongs to.
#
# The body is taken as raw JSON so that a missing body, a non-object body
# and a missing "frames" key all get the same 400 from the service.
# =============================================================================

from typing import Annotated, Any

from fastapi import APIRouter, Body

from core.models.feedback import FeedbackRequest, FrameFeedback
from core.services.feedback_service import FeedbackService

router = APIRouter()


@router.post("/feedback", response_model=list[FrameFeedback])
def generate_feedback(
    body: Annotated[Any, Body(examples=[{"frames": [{"frameId": "1:2", "frameData": {"name": "Login"}}]}])] = None,
):
    """
    Generate design feedback for one or more frames.

    - **frames**: non-empty list of `{frameId, frameData}` objects
    - Frames that fail get a single "Unable to generate feedback" row
      with confidence 0; the others are unaffected
    """
    request = FeedbackRequest.model_validate(body) if isinstance(body, dict) else FeedbackRequest()
    return FeedbackService.generate_feedback(request.frames)
