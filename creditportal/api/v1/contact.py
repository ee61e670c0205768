from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from creditportal.api.dependencies import get_current_user_id
from creditportal.core.database import get_db
from creditportal.models.contact_submission import ContactSubmission
from creditportal.schemas.forms import ContactCreate, ContactOut


router = APIRouter(prefix="/contact", tags=["contact"])


@router.post("", response_model=ContactOut)
def create_contact_submission(payload: ContactCreate, db: Session = Depends(get_db)):
    submission = ContactSubmission(**payload.model_dump())
    db.add(submission)
    db.commit()
    db.refresh(submission)
    return submission


@router.get("", response_model=list[ContactOut])
def list_contact_submissions(
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    return (
        db.query(ContactSubmission)
        .order_by(ContactSubmission.created_at.desc(), ContactSubmission.id.desc())
        .all()
    )
