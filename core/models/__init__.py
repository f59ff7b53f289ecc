# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - feedback.py: Design feedback request/response schemas
# - speech.py: Mascot speech schemas
# - messaging.py: Direct messaging schemas
#
# These models define the "contract" between API and clients.
# =============================================================================

# -----------------------------------------------------------------------------
# Feedback Models - Figma frame critique
# -----------------------------------------------------------------------------
from .feedback import (
    FeedbackCategory,
    FeedbackFrame,
    FeedbackItem,
    FeedbackRequest,
    FrameData,
    FrameFeedback,
)

# -----------------------------------------------------------------------------
# Speech Models - Mascot one-liners
# -----------------------------------------------------------------------------
from .speech import (
    DailySpeechResponse,
    SpeechRequest,
    SpeechResponse,
    SpeechSource,
)

# -----------------------------------------------------------------------------
# Messaging Models - Two-party chat
# -----------------------------------------------------------------------------
from .messaging import (
    CheckNameResponse,
    ConversationList,
    ConversationSummary,
    ConversationThread,
    MessageOut,
    OtherUserInfo,
    RegisterRequest,
    RegisterResponse,
    SendMessageRequest,
    SendMessageResponse,
    TypingStatusResponse,
    TypingUpdateRequest,
    UnreadCountResponse,
)

__all__ = [
    # Feedback
    "FeedbackCategory",
    "FeedbackFrame",
    "FeedbackItem",
    "FeedbackRequest",
    "FrameData",
    "FrameFeedback",
    # Speech
    "DailySpeechResponse",
    "SpeechRequest",
    "SpeechResponse",
    "SpeechSource",
    # Messaging
    "CheckNameResponse",
    "ConversationList",
    "ConversationSummary",
    "ConversationThread",
    "MessageOut",
    "OtherUserInfo",
    "RegisterRequest",
    "RegisterResponse",
    "SendMessageRequest",
    "SendMessageResponse",
    "TypingStatusResponse",
    "TypingUpdateRequest",
    "UnreadCountResponse",
]
