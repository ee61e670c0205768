"""Chat message model for member <-> team conversations."""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from creditportal.models.base import SerialModel, utcnow


class ChatMessage(SerialModel):
    """A single chat message. Rows are append-only."""

    __tablename__ = "chat_messages"
    __table_args__ = (Index("ix_chat_messages_user_timestamp", "user_id", "timestamp"),)

    user_id: Mapped[str] = mapped_column(String(64), nullable=False)
    message: Mapped[str] = mapped_column(Text, nullable=False)
    is_from_team: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    team_member_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    timestamp: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utcnow)
