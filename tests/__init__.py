# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Ameo server:
# - test_response_parsing.py: JSON / list / Markdown extraction helpers
# - test_llm_client.py: OpenAI-compatible client wrapper
# - test_design_critic.py: Feedback prompt building, parsing and fallbacks
# - test_speech.py: Speech parsing, writer fallbacks and the daily memo
# - test_models.py: Pydantic model validation
# - test_feedback_service.py: Per-frame feedback with a mocked critic
# - test_messaging_service.py: Messaging service against in-memory SQLite
# - test_database.py: Database URL handling and engine lifecycle
# - test_api.py / test_messages_api.py: HTTP-level route tests
#
# Run tests with: pytest
# =============================================================================
