"""Member credit-score progress, one snapshot per bureau."""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from creditportal.api.dependencies import get_current_user_id
from creditportal.core.database import get_db
from creditportal.models.credit_progress import CreditProgress
from creditportal.schemas.progress import CreditProgressOut


router = APIRouter(prefix="/credit", tags=["credit"])


def _history(db: Session, user_id: str) -> List[CreditProgress]:
    return (
        db.query(CreditProgress)
        .filter(CreditProgress.user_id == user_id)
        .order_by(CreditProgress.recorded_at.desc(), CreditProgress.id.desc())
        .all()
    )


@router.get("/progress", response_model=list[CreditProgressOut])
def latest_progress(
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    """Newest snapshot for each bureau the member has, newest first."""
    latest: dict[str, CreditProgress] = {}
    for row in _history(db, user_id):
        latest.setdefault(row.bureau, row)
    return list(latest.values())


@router.get("/progress/history", response_model=list[CreditProgressOut])
def progress_history(
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    return _history(db, user_id)
