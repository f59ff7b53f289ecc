# =============================================================================
# app/routers/messages.py - Direct Messaging Endpoints
# =============================================================================
# Cat-to-cat messaging for plugin users.
#
# Route order matters: the specific two-segment routes (list/, unread/,
# check-name/) and the typing routes must be registered before the generic
# /{user_cat_name}/{other_cat_name} route, otherwise it would swallow them.
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, Path

from app.dependencies import DbSessionDep
from core.models.messaging import (
    CheckNameResponse,
    ConversationList,
    ConversationSummary,
    ConversationThread,
    RegisterRequest,
    RegisterResponse,
    SendMessageRequest,
    SendMessageResponse,
    TypingStatusResponse,
    TypingUpdateRequest,
    UnreadCountResponse,
)
from core.services.messaging_service import MessagingService

router = APIRouter()

CatName = Annotated[str, Path(description="Registered cat name", max_length=255)]


# =============================================================================
# Users
# =============================================================================

@router.post("/register", response_model=RegisterResponse)
def register(db: DbSessionDep, request: RegisterRequest | None = None):
    """
    Register a cat name, or look up an existing one.

    `created` tells the plugin whether this is a new account.
    """
    request = request or RegisterRequest()
    user, created = MessagingService.register(db, request.cat_name)
    return RegisterResponse(id=user.id, cat_name=user.cat_name, created=created)


@router.get("/check-name/{name}", response_model=CheckNameResponse)
def check_name(name: CatName, db: DbSessionDep):
    """Check whether a cat name is taken."""
    user = MessagingService.find_user(db, name)
    return CheckNameResponse(exists=user is not None, id=user.id if user else None)


# =============================================================================
# Conversations
# =============================================================================

@router.get("/list/{user_cat_name}", response_model=ConversationList)
def list_conversations(user_cat_name: CatName, db: DbSessionDep):
    """
    List a user's conversations with the latest message and unread count.

    Newest activity first; conversations without messages last.
    """
    rows = MessagingService.list_conversations(db, user_cat_name)
    return ConversationList(conversations=[ConversationSummary(**row) for row in rows])


@router.get("/unread/{user_cat_name}", response_model=UnreadCountResponse)
def unread_count(user_cat_name: CatName, db: DbSessionDep):
    """Total unread messages addressed to a user."""
    return UnreadCountResponse(unread_count=MessagingService.unread_count(db, user_cat_name))


# =============================================================================
# Messages
# =============================================================================

@router.post("/send", response_model=SendMessageResponse)
def send_message(db: DbSessionDep, request: SendMessageRequest | None = None):
    """
    Send a message to another cat.

    The conversation is created on the first message between two users.
    """
    request = request or SendMessageRequest()
    message = MessagingService.send_message(
        db,
        sender_cat_name=request.sender_cat_name,
        recipient_cat_name=request.recipient_cat_name,
        content=request.content,
    )
    return SendMessageResponse(id=message.id, created_at=message.created_at)


# =============================================================================
# Typing Status
# =============================================================================

@router.post("/typing", response_model=TypingStatusResponse)
def set_typing(db: DbSessionDep, request: TypingUpdateRequest | None = None):
    """Set or clear the caller's typing flag towards another cat."""
    request = request or TypingUpdateRequest()
    status = MessagingService.set_typing(
        db,
        cat_name=request.cat_name,
        other_cat_name=request.other_cat_name,
        is_typing=request.is_typing,
    )
    return TypingStatusResponse(is_typing=status.is_typing, updated_at=status.updated_at)


@router.get("/typing/{user_cat_name}/{other_cat_name}", response_model=TypingStatusResponse)
def get_typing(user_cat_name: CatName, other_cat_name: CatName, db: DbSessionDep):
    """Whether other_cat_name is currently typing to user_cat_name."""
    status = MessagingService.is_typing(db, user_cat_name, other_cat_name)
    if status is None:
        return TypingStatusResponse(is_typing=False)
    return TypingStatusResponse(is_typing=True, updated_at=status.updated_at)


# =============================================================================
# Conversation Thread (generic route - keep last)
# =============================================================================

@router.get("/{user_cat_name}/{other_cat_name}", response_model=ConversationThread)
def get_conversation(user_cat_name: CatName, other_cat_name: CatName, db: DbSessionDep):
    """
    Get the conversation between two cats, oldest message first.

    Messages from other_cat_name are marked read.
    """
    return MessagingService.get_thread(db, user_cat_name, other_cat_name)
