"""Message store backed by SQLAlchemy."""

import logging
from typing import List, Optional

from sqlalchemy import desc
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from creditportal.core.errors import StorageError

from .models import ChatMessage


logger = logging.getLogger("portal.chat.messages")


class MessageStore:
    """Append-only access to chat messages for one database session."""

    def __init__(self, db: Session):
        self.db = db

    def create(
        self,
        user_id: str,
        message: str,
        is_from_team: bool = False,
        team_member_name: Optional[str] = None,
    ) -> ChatMessage:
        """Persist a new message and return it with its id and timestamp."""
        record = ChatMessage(
            user_id=user_id,
            message=message,
            is_from_team=is_from_team,
            team_member_name=team_member_name,
        )
        try:
            self.db.add(record)
            self.db.commit()
            self.db.refresh(record)
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.error("Failed to persist chat message for user_id=%s: %s", user_id, exc)
            raise StorageError("failed to persist chat message") from exc

        logger.info(
            "Message created: message_id=%s, user_id=%s, is_from_team=%s",
            record.id,
            user_id,
            is_from_team,
        )
        return record

    def list_by_user(self, user_id: str, limit: int = 50) -> List[ChatMessage]:
        """Return the newest ``limit`` messages for a user, newest first."""
        try:
            return (
                self.db.query(ChatMessage)
                .filter(ChatMessage.user_id == user_id)
                .order_by(desc(ChatMessage.timestamp), desc(ChatMessage.id))
                .limit(limit)
                .all()
            )
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise StorageError("failed to read chat messages") from exc

    def detach(self, record: ChatMessage) -> ChatMessage:
        """Take a stored message out of the session.

        Its loaded attributes stay readable after a later rollback expires
        everything still attached to the session.
        """
        self.db.expunge(record)
        return record

    def history(self, user_id: str, limit: int = 50) -> List[ChatMessage]:
        """Latest ``limit`` messages for a user in chronological order."""
        return list(reversed(self.list_by_user(user_id, limit)))
