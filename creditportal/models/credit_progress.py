from datetime import datetime

from sqlalchemy import DateTime, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import SerialModel, utcnow


BUREAUS = ("experian", "equifax", "transunion")


class CreditProgress(SerialModel):
    """A score snapshot for one member at one bureau, recorded by the team."""

    __tablename__ = "credit_progress"
    __table_args__ = (Index("ix_credit_progress_user_recorded", "user_id", "recorded_at"),)

    user_id: Mapped[str] = mapped_column(String(64), nullable=False)
    bureau: Mapped[str] = mapped_column(String(20), nullable=False)
    score: Mapped[int | None] = mapped_column(Integer, nullable=True)
    previous_score: Mapped[int | None] = mapped_column(Integer, nullable=True)
    items_removed: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    disputes_active: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    recorded_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utcnow)
