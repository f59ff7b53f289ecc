# =============================================================================
# tests/test_feedback_service.py - Feedback Service Tests
# =============================================================================
# Tests for FeedbackService.generate_feedback with a mocked critic.
#
# Run with: pytest tests/test_feedback_service.py -v
# =============================================================================

from unittest.mock import MagicMock

import pytest

from app.exceptions import InvalidRequestError
from core.models.feedback import FeedbackItem
from core.services.feedback_service import FeedbackService


@pytest.fixture
def critic():
    critic = MagicMock()
    critic.review.return_value = [
        FeedbackItem(feedback="Increase contrast", category="accessibility", confidence=0.9),
        FeedbackItem(feedback="Align the cards", category="layout", confidence=0.85),
    ]
    return critic


class TestGenerateFeedback:

    @pytest.mark.parametrize("frames", [None, [], {}, "frames", 3])
    def test_rejects_missing_or_invalid_frames(self, frames):
        with pytest.raises(InvalidRequestError) as exc_info:
            FeedbackService.generate_feedback(frames, critic=MagicMock())

        assert exc_info.value.status_code == 400
        assert exc_info.value.message == "Missing or invalid frames array"

    def test_flattens_items_per_frame(self, critic, sample_frame_dict):
        second = {"frameId": "99:1", "frameData": {"name": "Footer"}}

        results = FeedbackService.generate_feedback([sample_frame_dict, second], critic=critic)

        assert [r.frame_id for r in results] == ["12:34", "12:34", "99:1", "99:1"]
        assert results[0].feedback == "Increase contrast"
        assert critic.review.call_count == 2
        assert critic.review.call_args_list[0].args[0].name == "Login Screen"

    def test_invalid_frame_gets_placeholder(self, critic, sample_frame_dict):
        broken = {"frameId": "7:7", "frameData": "not an object"}

        results = FeedbackService.generate_feedback([broken, sample_frame_dict], critic=critic)

        assert results[0].frame_id == "7:7"
        assert results[0].feedback == "Unable to generate feedback at this time"
        assert results[0].confidence == 0.0
        assert len(results) == 3

    def test_critic_crash_gets_placeholder(self, sample_frame_dict):
        critic = MagicMock()
        critic.review.side_effect = RuntimeError("unexpected")

        results = FeedbackService.generate_feedback([sample_frame_dict], critic=critic)

        assert len(results) == 1
        assert results[0].frame_id == "12:34"
        assert results[0].category == "general"
        assert results[0].confidence == 0.0
