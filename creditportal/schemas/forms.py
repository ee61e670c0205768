"""Pydantic schemas for the public consultation and contact forms."""

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel


ConsultationStatus = Literal["pending", "contacted", "scheduled", "completed"]


class FormModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class ConsultationCreate(FormModel):
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    phone: str = Field(..., min_length=7, max_length=50)
    best_time_to_call: Optional[str] = Field(None, max_length=100)
    current_credit_score: Optional[str] = Field(None, max_length=50)
    primary_goal: Optional[str] = Field(None, max_length=255)
    timeline: Optional[str] = Field(None, max_length=100)
    negative_items: List[str] = Field(default_factory=list)
    additional_comments: Optional[str] = None


class ConsultationOut(FormModel):
    """Stored consultation as returned to staff; no input constraints."""
    id: int
    first_name: str
    last_name: str
    email: str
    phone: str
    best_time_to_call: Optional[str] = None
    current_credit_score: Optional[str] = None
    primary_goal: Optional[str] = None
    timeline: Optional[str] = None
    negative_items: Optional[List[str]] = None
    additional_comments: Optional[str] = None
    status: str
    created_at: datetime


class ConsultationStatusUpdate(BaseModel):
    status: ConsultationStatus


class ContactCreate(FormModel):
    name: str = Field(..., min_length=1, max_length=200)
    email: EmailStr
    phone: Optional[str] = Field(None, max_length=50)
    subject: Optional[str] = Field(None, max_length=200)
    message: str = Field(..., min_length=1)


class ContactOut(FormModel):
    id: int
    name: str
    email: str
    phone: Optional[str] = None
    subject: Optional[str] = None
    message: str
    status: str
    created_at: datetime
