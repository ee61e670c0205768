import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from creditportal.api.dependencies import get_current_user_id
from creditportal.core.database import get_db
from creditportal.core.messages import CONSULTATION_NOT_FOUND
from creditportal.models.consultation import Consultation
from creditportal.schemas.forms import ConsultationCreate, ConsultationOut, ConsultationStatusUpdate


logger = logging.getLogger("portal.api.consultations")

router = APIRouter(prefix="/consultations", tags=["consultations"])


@router.post("", response_model=ConsultationOut)
def create_consultation(payload: ConsultationCreate, db: Session = Depends(get_db)):
    """Public free-consultation request from the landing page."""
    consultation = Consultation(**payload.model_dump())
    db.add(consultation)
    db.commit()
    db.refresh(consultation)
    logger.info("Consultation requested: consultation_id=%s", consultation.id)
    return consultation


@router.get("", response_model=list[ConsultationOut])
def list_consultations(
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    return (
        db.query(Consultation)
        .order_by(Consultation.created_at.desc(), Consultation.id.desc())
        .all()
    )


@router.patch("/{consultation_id}/status", response_model=ConsultationOut)
def update_consultation_status(
    consultation_id: int,
    payload: ConsultationStatusUpdate,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    consultation = db.get(Consultation, consultation_id)
    if consultation is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=CONSULTATION_NOT_FOUND)

    consultation.status = payload.status
    db.commit()
    db.refresh(consultation)
    logger.info(
        "Consultation status changed: consultation_id=%s, status=%s, by=%s",
        consultation_id,
        payload.status,
        user_id,
    )
    return consultation
