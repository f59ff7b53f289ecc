# =============================================================================
# tests/test_llm_client.py - LLM Client Tests
# =============================================================================
# Tests for lib/llm_client.py. The OpenAI SDK client is replaced with a
# MagicMock, so no network calls are made.
#
# Run with: pytest tests/test_llm_client.py -v
# =============================================================================

from unittest.mock import MagicMock

import pytest

from lib.llm_client import LLMClient, LLMClientError, get_feedback_client, get_speech_client


def make_client(api_key="sk-test"):
    return LLMClient(api_key=api_key, base_url="https://llm.example.com", model="test-model")


def make_response(content):
    response = MagicMock()
    response.choices = [MagicMock(message=MagicMock(content=content))]
    return response


class TestLLMClientComplete:
    """Tests for LLMClient.complete()."""

    def test_returns_message_content(self):
        client = make_client()
        client._client = MagicMock()
        client._client.chat.completions.create.return_value = make_response("Hello designer")

        assert client.complete("Say hi") == "Hello designer"

        kwargs = client._client.chat.completions.create.call_args.kwargs
        assert kwargs["model"] == "test-model"
        assert kwargs["messages"] == [{"role": "user", "content": "Say hi"}]
        assert kwargs["temperature"] == 0.7
        assert kwargs["max_tokens"] == 500

    def test_not_configured(self):
        client = make_client(api_key=None)

        assert client.is_configured is False
        with pytest.raises(LLMClientError) as exc_info:
            client.complete("Say hi")
        assert exc_info.value.code == "LLM_NOT_CONFIGURED"

    def test_provider_error_is_wrapped(self):
        client = make_client()
        client._client = MagicMock()
        client._client.chat.completions.create.side_effect = RuntimeError("connection reset")

        with pytest.raises(LLMClientError) as exc_info:
            client.complete("Say hi")

        assert exc_info.value.code == "LLM_API_ERROR"
        assert isinstance(exc_info.value.__cause__, RuntimeError)

    def test_no_choices(self):
        client = make_client()
        client._client = MagicMock()
        response = MagicMock()
        response.choices = []
        client._client.chat.completions.create.return_value = response

        with pytest.raises(LLMClientError) as exc_info:
            client.complete("Say hi")
        assert exc_info.value.code == "LLM_INVALID_RESPONSE"

    @pytest.mark.parametrize("content", [None, "", "   \n"])
    def test_empty_content(self, content):
        client = make_client()
        client._client = MagicMock()
        client._client.chat.completions.create.return_value = make_response(content)

        with pytest.raises(LLMClientError) as exc_info:
            client.complete("Say hi")
        assert exc_info.value.code == "LLM_INVALID_RESPONSE"


class TestClientFactories:

    def test_feedback_client_uses_deepseek_settings(self, monkeypatch):
        from app.config import settings

        monkeypatch.setattr(settings, "DEEPSEEK_API_KEY", "sk-deepseek")
        client = get_feedback_client()

        assert client.is_configured
        assert client.base_url == settings.DEEPSEEK_BASE_URL
        assert client.model == settings.DEEPSEEK_MODEL
        assert client.temperature == settings.FEEDBACK_TEMPERATURE

    def test_speech_client_falls_back_to_deepseek(self, monkeypatch):
        from app.config import settings

        monkeypatch.setattr(settings, "DEEPSEEK_API_KEY", "sk-deepseek")
        monkeypatch.setattr(settings, "SPEECH_API_KEY", None)
        monkeypatch.setattr(settings, "SPEECH_MODEL", None)
        client = get_speech_client()

        assert client.api_key == "sk-deepseek"
        assert client.model == settings.DEEPSEEK_MODEL
        assert client.temperature == settings.SPEECH_TEMPERATURE
