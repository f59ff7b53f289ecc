# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - llm_client.py: OpenAI-compatible chat completion client (DeepSeek)
# - response_parsing.py: JSON / list / Markdown extraction from model text
# - db_models.py: SQLAlchemy models for the messaging tables
# - database.py: Engine and session factory for the messaging store
# - utils.py: Shared utilities (error base class, UTC helpers)
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.llm_client import LLMClient, LLMClientError, get_feedback_client, get_speech_client
from lib.response_parsing import (
    extract_json_array,
    extract_json_object,
    has_json_span,
    opens_with_json,
    parse_numbered_list,
    strip_code_fences,
    strip_markdown,
)
from lib.utils import ApplicationError, as_utc, utc_now

__all__ = [
    # LLM
    "LLMClient",
    "LLMClientError",
    "get_feedback_client",
    "get_speech_client",
    # Parsing
    "extract_json_array",
    "extract_json_object",
    "has_json_span",
    "opens_with_json",
    "parse_numbered_list",
    "strip_code_fences",
    "strip_markdown",
    # Utils
    "ApplicationError",
    "as_utc",
    "utc_now",
]
