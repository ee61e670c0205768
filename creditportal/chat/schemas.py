"""Pydantic schemas for chat endpoints and realtime frames."""

from datetime import datetime
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class ChatMessageCreate(BaseModel):
    """Body of ``POST /chat/messages``. Length rules live in the pipeline."""
    message: str


class ChatMessageOut(CamelModel):
    id: int
    user_id: str
    message: str
    is_from_team: bool
    team_member_name: Optional[str] = None
    timestamp: datetime


class SentimentRequest(BaseModel):
    message: str = Field(..., min_length=1)


class SentimentOut(BaseModel):
    sentiment: Literal["positive", "neutral", "negative"]
    score: float


BroadcastType = Literal["new_message", "ai_response", "escalation_notice"]


class BroadcastPayload(BaseModel):
    """Frame pushed by the server to every open realtime connection."""
    type: BroadcastType
    data: Any


class ClientFrame(BaseModel):
    type: str
    data: Any = None


def message_payload(kind: BroadcastType, message: Any) -> dict:
    """Build a JSON-ready broadcast frame for a stored ChatMessage."""
    data = ChatMessageOut.model_validate(message).model_dump(mode="json", by_alias=True)
    return BroadcastPayload(type=kind, data=data).model_dump(mode="json")
