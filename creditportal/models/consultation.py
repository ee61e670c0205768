from sqlalchemy import JSON, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import CreatedAtMixin, SerialModel


CONSULTATION_STATUSES = ("pending", "contacted", "scheduled", "completed")


class Consultation(CreatedAtMixin, SerialModel):
    """Free consultation request submitted from the public landing page."""

    __tablename__ = "consultations"

    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    phone: Mapped[str] = mapped_column(String(50), nullable=False)
    best_time_to_call: Mapped[str | None] = mapped_column(String(100), nullable=True)
    current_credit_score: Mapped[str | None] = mapped_column(String(50), nullable=True)
    primary_goal: Mapped[str | None] = mapped_column(String(255), nullable=True)
    timeline: Mapped[str | None] = mapped_column(String(100), nullable=True)
    negative_items: Mapped[list] = mapped_column(JSON, default=list)
    additional_comments: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="pending")
