# =============================================================================
# core/services/messaging_service.py - Direct Messaging Business Logic
# =============================================================================
# Handles users, two-party conversations, messages and typing status.
# Separates HTTP concerns from database logic: every method takes an open
# SQLAlchemy Session and commits its own writes.
#
# A conversation belongs to an unordered pair of users; whoever sends the
# first message becomes user1.
# =============================================================================

import logging
from datetime import timedelta
from typing import Any

from sqlalchemy import and_, case, func, or_, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, aliased

from app.config import settings
from app.exceptions import (
    CatNameRequiredError,
    MissingFieldsError,
    SelfConversationError,
    UserNotFoundError,
)
from lib.db_models import Conversation, Message, TypingStatus, User
from lib.utils import as_utc, utc_now

logger = logging.getLogger(__name__)


def _require_fields(**fields: str | None) -> dict[str, str]:
    """Strip the given values; raise one error naming every blank field."""
    missing = [name for name, value in fields.items() if not value or not value.strip()]
    if missing:
        raise MissingFieldsError(missing)
    return {name: value.strip() for name, value in fields.items()}


class MessagingService:
    """
    Service for direct messaging operations.

    Provides a clean interface between API routes and database.
    """

    # -------------------------------------------------------------------------
    # Users
    # -------------------------------------------------------------------------

    @staticmethod
    def find_user(db: Session, cat_name: str) -> User | None:
        return db.scalar(select(User).where(User.cat_name == cat_name))

    @staticmethod
    def get_user(db: Session, cat_name: str) -> User:
        """
        Get a user by cat name.

        Raises:
            UserNotFoundError: If the name isn't registered
        """
        user = MessagingService.find_user(db, cat_name)
        if user is None:
            raise UserNotFoundError(cat_name)
        return user

    @staticmethod
    def register(db: Session, cat_name: str | None) -> tuple[User, bool]:
        """
        Register a cat name, or return the existing user.

        Returns:
            (user, created)

        Raises:
            CatNameRequiredError: If the name is missing or blank
        """
        if not cat_name or not cat_name.strip():
            raise CatNameRequiredError()
        cat_name = cat_name.strip()

        existing = MessagingService.find_user(db, cat_name)
        if existing is not None:
            return existing, False

        user = User(cat_name=cat_name)
        db.add(user)
        try:
            db.commit()
        except IntegrityError:
            # Registered concurrently between the lookup and the insert
            db.rollback()
            return MessagingService.get_user(db, cat_name), False

        db.refresh(user)
        logger.info(f"Registered user: {cat_name} (id={user.id})")
        return user, True

    # -------------------------------------------------------------------------
    # Conversations
    # -------------------------------------------------------------------------

    @staticmethod
    def find_conversation(db: Session, user_id: int, other_id: int) -> Conversation | None:
        """The conversation between two users, in either direction."""
        return db.scalar(
            select(Conversation)
            .where(
                or_(
                    and_(Conversation.user1_id == user_id, Conversation.user2_id == other_id),
                    and_(Conversation.user1_id == other_id, Conversation.user2_id == user_id),
                )
            )
            .order_by(Conversation.id)
            .limit(1)
        )

    @staticmethod
    def get_or_create_conversation(db: Session, user_id: int, other_id: int) -> Conversation:
        conversation = MessagingService.find_conversation(db, user_id, other_id)
        if conversation is None:
            conversation = Conversation(user1_id=user_id, user2_id=other_id)
            db.add(conversation)
            db.flush()
        return conversation

    @staticmethod
    def list_conversations(db: Session, cat_name: str) -> list[dict[str, Any]]:
        """
        All conversations of a user with their latest message.

        Ordered by latest message time, newest first; conversations
        without messages come last.

        Raises:
            UserNotFoundError: If the name isn't registered
        """
        user = MessagingService.get_user(db, cat_name)
        user1 = aliased(User)
        user2 = aliased(User)

        def latest(column):
            return (
                select(column)
                .where(Message.conversation_id == Conversation.id)
                .order_by(Message.created_at.desc(), Message.id.desc())
                .limit(1)
                .correlate(Conversation)
                .scalar_subquery()
            )

        unread = (
            select(func.count(Message.id))
            .where(
                Message.conversation_id == Conversation.id,
                Message.is_read.is_(False),
                Message.sender_id != user.id,
            )
            .correlate(Conversation)
            .scalar_subquery()
        )

        rows = db.execute(
            select(
                Conversation.id,
                case((Conversation.user1_id == user.id, user2.cat_name), else_=user1.cat_name).label("other_cat_name"),
                case((Conversation.user1_id == user.id, Conversation.user2_id), else_=Conversation.user1_id).label("other_user_id"),
                latest(Message.content).label("last_message"),
                latest(Message.created_at).label("last_message_time"),
                unread.label("unread_count"),
            )
            .select_from(Conversation)
            .join(user1, Conversation.user1_id == user1.id)
            .join(user2, Conversation.user2_id == user2.id)
            .where(or_(Conversation.user1_id == user.id, Conversation.user2_id == user.id))
        ).mappings().all()

        conversations = [dict(row) for row in rows]
        for conversation in conversations:
            conversation["unread_count"] = int(conversation["unread_count"] or 0)

        with_messages = [c for c in conversations if c["last_message_time"] is not None]
        without_messages = [c for c in conversations if c["last_message_time"] is None]
        with_messages.sort(key=lambda c: as_utc(c["last_message_time"]), reverse=True)
        return with_messages + without_messages

    @staticmethod
    def unread_count(db: Session, cat_name: str) -> int:
        """
        Unread messages sent to a user across all conversations.

        Raises:
            UserNotFoundError: If the name isn't registered
        """
        user = MessagingService.get_user(db, cat_name)
        count = db.scalar(
            select(func.count(Message.id))
            .select_from(Message)
            .join(Conversation, Message.conversation_id == Conversation.id)
            .where(
                or_(Conversation.user1_id == user.id, Conversation.user2_id == user.id),
                Message.sender_id != user.id,
                Message.is_read.is_(False),
            )
        )
        return int(count or 0)

    # -------------------------------------------------------------------------
    # Messages
    # -------------------------------------------------------------------------

    @staticmethod
    def send_message(
        db: Session,
        sender_cat_name: str | None,
        recipient_cat_name: str | None,
        content: str | None,
    ) -> Message:
        """
        Send a message, creating the conversation if needed.

        Also clears the sender's typing flag for the recipient.

        Raises:
            MissingFieldsError: If any field is missing or blank
            SelfConversationError: If sender and recipient are the same
            UserNotFoundError: If either user isn't registered
        """
        fields = _require_fields(
            sender_cat_name=sender_cat_name,
            recipient_cat_name=recipient_cat_name,
            content=content,
        )
        if fields["sender_cat_name"] == fields["recipient_cat_name"]:
            raise SelfConversationError(fields["sender_cat_name"])

        sender = MessagingService.get_user(db, fields["sender_cat_name"])
        recipient = MessagingService.get_user(db, fields["recipient_cat_name"])

        conversation = MessagingService.get_or_create_conversation(db, sender.id, recipient.id)
        message = Message(
            conversation_id=conversation.id,
            sender_id=sender.id,
            content=content,
        )
        db.add(message)
        db.execute(
            update(TypingStatus)
            .where(TypingStatus.user_id == sender.id, TypingStatus.other_user_id == recipient.id)
            .values(is_typing=False, updated_at=utc_now())
        )
        db.commit()
        db.refresh(message)

        logger.info(
            f"Message {message.id} sent: {sender.cat_name} -> {recipient.cat_name} "
            f"(conversation {conversation.id})"
        )
        return message

    @staticmethod
    def get_thread(db: Session, cat_name: str, other_cat_name: str) -> dict[str, Any]:
        """
        All messages between two users, oldest first.

        Marks every message the other user sent in this conversation as read.

        Raises:
            UserNotFoundError: If either user isn't registered
        """
        user = MessagingService.get_user(db, cat_name)
        other = MessagingService.get_user(db, other_cat_name)
        other_info = {"cat_name": other.cat_name, "id": other.id}

        conversation = MessagingService.find_conversation(db, user.id, other.id)
        if conversation is None:
            return {"messages": [], "otherUserInfo": other_info}

        rows = db.execute(
            select(
                Message.id,
                Message.content,
                Message.sender_id,
                Message.created_at,
                User.cat_name,
            )
            .select_from(Message)
            .join(User, Message.sender_id == User.id)
            .where(Message.conversation_id == conversation.id)
            .order_by(Message.created_at.asc(), Message.id.asc())
        ).mappings().all()

        db.execute(
            update(Message)
            .where(
                Message.conversation_id == conversation.id,
                Message.sender_id == other.id,
                Message.is_read.is_(False),
            )
            .values(is_read=True)
        )
        db.commit()

        return {"messages": [dict(row) for row in rows], "otherUserInfo": other_info}

    # -------------------------------------------------------------------------
    # Typing Status
    # -------------------------------------------------------------------------

    @staticmethod
    def set_typing(
        db: Session,
        cat_name: str | None,
        other_cat_name: str | None,
        is_typing: bool,
    ) -> TypingStatus:
        """
        Record whether cat_name is typing to other_cat_name.

        Raises:
            MissingFieldsError: If either name is missing or blank
            UserNotFoundError: If either user isn't registered
        """
        fields = _require_fields(cat_name=cat_name, other_cat_name=other_cat_name)
        user = MessagingService.get_user(db, fields["cat_name"])
        other = MessagingService.get_user(db, fields["other_cat_name"])

        status = db.scalar(
            select(TypingStatus).where(
                TypingStatus.user_id == user.id,
                TypingStatus.other_user_id == other.id,
            )
        )
        if status is None:
            status = TypingStatus(user_id=user.id, other_user_id=other.id)
            db.add(status)

        status.is_typing = is_typing
        status.updated_at = utc_now()
        db.commit()
        db.refresh(status)
        return status

    @staticmethod
    def is_typing(db: Session, cat_name: str, other_cat_name: str) -> TypingStatus | None:
        """
        The fresh typing flag other_cat_name has set towards cat_name.

        Returns None when there is no flag, it is off, or it is older than
        TYPING_STATUS_TTL_SECONDS.

        Raises:
            UserNotFoundError: If either user isn't registered
        """
        user = MessagingService.get_user(db, cat_name)
        other = MessagingService.get_user(db, other_cat_name)

        status = db.scalar(
            select(TypingStatus).where(
                TypingStatus.user_id == other.id,
                TypingStatus.other_user_id == user.id,
            )
        )
        if status is None or not status.is_typing:
            return None

        ttl = timedelta(seconds=settings.TYPING_STATUS_TTL_SECONDS)
        if utc_now() - as_utc(status.updated_at) > ttl:
            return None
        return status
