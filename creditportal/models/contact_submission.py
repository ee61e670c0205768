from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import CreatedAtMixin, SerialModel


class ContactSubmission(CreatedAtMixin, SerialModel):
    __tablename__ = "contact_submissions"

    name: Mapped[str] = mapped_column(String(200), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    subject: Mapped[str | None] = mapped_column(String(200), nullable=True)
    message: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="new")  # new, responded, closed
