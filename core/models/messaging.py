# =============================================================================
# core/models/messaging.py - Direct Messaging Schemas
# =============================================================================
# These models define the API contract for /api/messages:
# - Registration and name lookup
# - Conversation list and unread counts
# - Sending and reading messages
# - Typing status
#
# Users are identified by their cat name everywhere in the API; numeric IDs
# are returned for display only.
# =============================================================================

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Users
# =============================================================================

class RegisterRequest(BaseModel):
    """Body of POST /api/messages/register."""
    cat_name: str | None = Field(
        default=None,
        max_length=255,
        description="Unique cat name to register or look up",
        examples=["Whiskers"],
    )


class RegisterResponse(BaseModel):
    id: int
    cat_name: str
    created: bool


class CheckNameResponse(BaseModel):
    exists: bool
    id: int | None = None


# =============================================================================
# Conversations
# =============================================================================

class ConversationSummary(BaseModel):
    """One row of the conversation list."""
    id: int
    other_cat_name: str
    other_user_id: int
    last_message: str | None = None
    last_message_time: datetime | None = None
    unread_count: int = 0


class ConversationList(BaseModel):
    conversations: list[ConversationSummary]


class UnreadCountResponse(BaseModel):
    unread_count: int


# =============================================================================
# Messages
# =============================================================================

class SendMessageRequest(BaseModel):
    """
    Body of POST /api/messages/send.

    Fields are optional at the schema level; the service reports every
    missing one in a single 400.
    """
    sender_cat_name: str | None = None
    recipient_cat_name: str | None = None
    content: str | None = Field(default=None, max_length=10000)


class SendMessageResponse(BaseModel):
    id: int
    created_at: datetime


class MessageOut(BaseModel):
    """A message as shown in a conversation thread."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    content: str
    sender_id: int
    created_at: datetime
    cat_name: str


class OtherUserInfo(BaseModel):
    cat_name: str
    id: int


class ConversationThread(BaseModel):
    """Response of GET /api/messages/{user}/{other}."""

    model_config = ConfigDict(populate_by_name=True)

    messages: list[MessageOut]
    other_user_info: OtherUserInfo = Field(..., alias="otherUserInfo")


# =============================================================================
# Typing Status
# =============================================================================

class TypingUpdateRequest(BaseModel):
    """Body of POST /api/messages/typing."""
    cat_name: str | None = None
    other_cat_name: str | None = None
    is_typing: bool = True


class TypingStatusResponse(BaseModel):
    is_typing: bool
    updated_at: datetime | None = None
