# =============================================================================
# core/services/feedback_service.py - Design Feedback Business Logic
# =============================================================================
# Validates a feedback request and runs the design critic over each frame.
# One bad frame never sinks the request: it gets a placeholder item and the
# remaining frames are still reviewed.
# =============================================================================

import logging
from typing import Any

from pydantic import ValidationError

from agents.design_critic import DesignCriticAgent
from agents.fallbacks import unavailable_feedback
from app.exceptions import InvalidRequestError
from core.models.feedback import FeedbackFrame, FrameFeedback

logger = logging.getLogger(__name__)


def _raw_frame_id(raw: Any) -> str | int | None:
    if isinstance(raw, dict):
        frame_id = raw.get("frameId", raw.get("frame_id"))
        if isinstance(frame_id, (str, int)):
            return frame_id
    return None


class FeedbackService:
    """
    Service for design feedback generation.

    Provides a clean interface between the feedback route and the critic.
    """

    @staticmethod
    def generate_feedback(
        frames: Any,
        critic: DesignCriticAgent | None = None,
    ) -> list[FrameFeedback]:
        """
        Review every frame and flatten the results.

        Args:
            frames: The raw "frames" value from the request body
            critic: Critic to use (a default one is built if omitted)

        Returns:
            One FrameFeedback per feedback item, in frame order

        Raises:
            InvalidRequestError: If frames is missing, not a list, or empty
        """
        if not isinstance(frames, list) or not frames:
            raise InvalidRequestError(
                message="Missing or invalid frames array",
                suggestion="Send a JSON body like {\"frames\": [{\"frameId\": \"1:2\", \"frameData\": {...}}]}",
            )

        logger.info(f"Processing feedback for {len(frames)} frame(s)")
        critic = critic or DesignCriticAgent()

        results: list[FrameFeedback] = []
        for raw in frames:
            frame_id = _raw_frame_id(raw)
            try:
                frame = FeedbackFrame.model_validate(raw)
                frame_id = frame.frame_id
                items = critic.review(frame.frame_data)
            except ValidationError as e:
                logger.error(f"Invalid frame {frame_id}: {e.error_count()} validation error(s)")
                results.append(FrameFeedback.from_item(frame_id, unavailable_feedback()))
                continue
            except Exception as e:
                logger.exception(f"Error processing frame {frame_id}: {e}")
                results.append(FrameFeedback.from_item(frame_id, unavailable_feedback()))
                continue

            results.extend(FrameFeedback.from_item(frame_id, item) for item in items)
            logger.info(f"Feedback generated for: \"{frame.frame_data.name}\" ({len(items)} points)")

        return results
