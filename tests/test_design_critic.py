# =============================================================================
# tests/test_design_critic.py - Design Critic Tests
# =============================================================================
# Tests for the feedback prompt, response parsing and DesignCriticAgent.
#
# The LLM client is a MagicMock (see the mock_llm fixture), so these tests
# exercise prompt selection and fallback behaviour without network calls.
#
# Run with: pytest tests/test_design_critic.py -v
# =============================================================================

import base64
import random

import pytest

from agents.design_critic import DesignCriticAgent, parse_feedback_response
from agents.fallbacks import FALLBACK_FEEDBACK, simple_feedback, unavailable_feedback
from agents.prompts.feedback_prompt import (
    PayloadKind,
    build_feedback_prompt,
    classify_payload,
    decode_frame_content,
)
from core.models.feedback import FrameData
from lib.llm_client import LLMClientError

PNG_PAYLOAD = "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNk"
SVG_PAYLOAD = base64.b64encode(b'<svg xmlns="http://www.w3.org/2000/svg"></svg>').decode()


def make_frame(**kwargs):
    data = {"name": "Hero", "width": 1440, "height": 900, "fills": [{"type": "SOLID"}], "strokes": []}
    data.update(kwargs)
    return FrameData.model_validate(data)


# =============================================================================
# Payload Detection
# =============================================================================

class TestPayloadDetection:
    """Tests for classify_payload and decode_frame_content."""

    def test_raw_frame_content(self):
        assert decode_frame_content("FRAME_CONTENT: Title, Button") == "Title, Button"

    def test_base64_frame_content(self):
        encoded = base64.b64encode(b"FRAME_CONTENT:\nText: Sign in").decode()
        assert decode_frame_content(encoded) == "Text: Sign in"

    def test_svg_is_not_frame_content(self):
        assert decode_frame_content(SVG_PAYLOAD) is None

    @pytest.mark.parametrize(
        "overrides, expected",
        [
            ({"svgBase64": "FRAME_CONTENT: Title"}, PayloadKind.CONTENT),
            ({"svgBase64": PNG_PAYLOAD}, PayloadKind.PNG),
            ({"svgBase64": SVG_PAYLOAD}, PayloadKind.SVG),
            ({"fills": []}, PayloadKind.EMPTY),
            ({}, PayloadKind.METADATA),
        ],
    )
    def test_classify_payload(self, overrides, expected):
        assert classify_payload(make_frame(**overrides)) == expected


# =============================================================================
# Prompt Building
# =============================================================================

class TestBuildFeedbackPrompt:

    def test_header_describes_frame(self):
        prompt = build_feedback_prompt(make_frame())

        assert "Frame: Hero (1440x900px)" in prompt
        assert "Has colors: true" in prompt
        assert "Has borders: false" in prompt
        assert "JSON array" in prompt

    def test_content_section(self):
        prompt = build_feedback_prompt(make_frame(svgBase64="FRAME_CONTENT: Logo, Nav, CTA"))

        assert "FRAME STRUCTURE & CONTENT:" in prompt
        assert "Logo, Nav, CTA" in prompt

    def test_png_section_embeds_data_url(self):
        prompt = build_feedback_prompt(make_frame(svgBase64=PNG_PAYLOAD))
        assert f"data:image/png;base64,{PNG_PAYLOAD}" in prompt

    def test_svg_section_embeds_data_url(self):
        prompt = build_feedback_prompt(make_frame(svgBase64=SVG_PAYLOAD))
        assert f"data:image/svg+xml;base64,{SVG_PAYLOAD}" in prompt

    def test_empty_frame_section(self):
        prompt = build_feedback_prompt(make_frame(fills=[]))
        assert "appears to be empty" in prompt


# =============================================================================
# Response Parsing
# =============================================================================

class TestParseFeedbackResponse:

    def test_json_array(self):
        content = '[{"feedback": "Great contrast", "category": "Color", "confidence": 0.95},' \
                  ' {"feedback": "Align the buttons", "category": "layout"}]'

        items = parse_feedback_response(content)

        assert [item.feedback for item in items] == ["Great contrast", "Align the buttons"]
        assert items[0].category == "color"
        assert items[0].confidence == 0.95
        assert items[1].confidence == 0.8

    def test_array_entries_get_defaults(self):
        items = parse_feedback_response('[{"category": "spacing"}]')

        assert items[0].feedback == "Nice design!"
        assert items[0].category == "spacing"

    def test_single_object(self):
        items = parse_feedback_response('Here: {"feedback": "Use an 8px grid", "category": "spacing"}')

        assert len(items) == 1
        assert items[0].feedback == "Use an 8px grid"

    def test_plain_text_becomes_general(self):
        items = parse_feedback_response("**Nice!** Consider a larger heading.")

        assert len(items) == 1
        assert items[0].feedback == "Nice! Consider a larger heading."
        assert items[0].category == "general"
        assert items[0].confidence == 0.75

    def test_blank_text(self):
        assert parse_feedback_response("   ") == []

    def test_bracketed_prose_is_still_text(self):
        items = parse_feedback_response("Try [Inter] for the headings.")

        assert len(items) == 1
        assert items[0].feedback == "Try [Inter] for the headings."
        assert items[0].category == "general"

    @pytest.mark.parametrize(
        "content",
        [
            '[{"feedback": "Use more contrast", "category": "color",}]',
            'Here you go: {"feedback": "Tighten spacing" "category": "spacing"}',
            '[{"feedback": "Align the hero text", "categ',
            '```json\n[{"feedback": "Cut off',
        ],
    )
    def test_broken_json_is_not_used_as_text(self, content):
        assert parse_feedback_response(content) == []


# =============================================================================
# Agent
# =============================================================================

class TestDesignCriticAgent:
    """Tests for DesignCriticAgent.review()."""

    def test_uses_model_feedback(self, mock_llm):
        mock_llm.complete.return_value = '[{"feedback": "Tighten spacing", "category": "spacing"}]'
        critic = DesignCriticAgent(client=mock_llm)

        items = critic.review(make_frame())

        assert items[0].feedback == "Tighten spacing"
        prompt = mock_llm.complete.call_args.args[0]
        assert "Frame: Hero" in prompt

    def test_unconfigured_client_uses_simple_feedback(self, mock_llm):
        mock_llm.is_configured = False
        critic = DesignCriticAgent(client=mock_llm)

        items = critic.review(make_frame())

        mock_llm.complete.assert_not_called()
        assert len(items) == 1
        assert (items[0].feedback, items[0].category) in FALLBACK_FEEDBACK

    def test_malformed_json_uses_simple_feedback(self, mock_llm):
        mock_llm.complete.return_value = '[{"feedback": "Use more contrast", "category": "color",}]'
        critic = DesignCriticAgent(client=mock_llm)

        items = critic.review(make_frame())

        assert len(items) == 1
        assert (items[0].feedback, items[0].category) in FALLBACK_FEEDBACK
        assert "{" not in items[0].feedback

    def test_provider_error_uses_simple_feedback(self, mock_llm):
        mock_llm.complete.side_effect = LLMClientError("boom", code="LLM_API_ERROR")
        critic = DesignCriticAgent(client=mock_llm)

        items = critic.review(make_frame())

        assert len(items) == 1
        assert 0.7 <= items[0].confidence <= 0.9


class TestFallbackFeedback:

    def test_simple_feedback_keeps_tip_and_category_together(self):
        items = simple_feedback(rng=random.Random(7))

        assert len(items) == 1
        assert (items[0].feedback, items[0].category) in FALLBACK_FEEDBACK
        assert 0.7 <= items[0].confidence <= 0.9

    def test_unavailable_feedback(self):
        item = unavailable_feedback()

        assert item.feedback == "Unable to generate feedback at this time"
        assert item.category == "general"
        assert item.confidence == 0.0
