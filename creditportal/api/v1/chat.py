"""Member chat endpoints."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from creditportal.api.dependencies import get_broadcast_hub, get_current_user_id, get_responder
from creditportal.chat import BroadcastHub, ChatPipeline, MessageStore
from creditportal.chat.schemas import (
    ChatMessageCreate,
    ChatMessageOut,
    SentimentOut,
    SentimentRequest,
)
from creditportal.core.config import settings
from creditportal.core.database import get_db
from creditportal.core.errors import MessageValidationError, StorageError
from creditportal.core.messages import CHAT_FETCH_FAILED, CHAT_STORAGE_FAILED
from creditportal.services.openai_service import Responder


logger = logging.getLogger("portal.api.chat")

router = APIRouter(prefix="/chat", tags=["chat"])


@router.get("/messages", response_model=list[ChatMessageOut], response_model_by_alias=True)
def list_messages(
    limit: int = Query(settings.CHAT_HISTORY_LIMIT, ge=1, le=200),
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    """Return the member's latest messages, oldest first."""
    try:
        return MessageStore(db).history(user_id, limit=limit)
    except StorageError:
        logger.exception("Error fetching chat messages for user_id=%s", user_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=CHAT_FETCH_FAILED,
        )


@router.post("/messages", response_model=ChatMessageOut, response_model_by_alias=True)
async def create_message(
    payload: ChatMessageCreate,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
    responder: Responder = Depends(get_responder),
    hub: BroadcastHub = Depends(get_broadcast_hub),
):
    """Store a member message; the AI reply or escalation notice goes out over the websocket."""
    pipeline = ChatPipeline(MessageStore(db), responder, hub)
    try:
        return await pipeline.handle(user_id, payload.message)
    except MessageValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except StorageError:
        logger.exception("Error creating chat message for user_id=%s", user_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=CHAT_STORAGE_FAILED,
        )


@router.post("/sentiment", response_model=SentimentOut)
async def analyze_sentiment(
    payload: SentimentRequest,
    user_id: str = Depends(get_current_user_id),
    responder: Responder = Depends(get_responder),
):
    result = await responder.analyze_sentiment(payload.message)
    return SentimentOut(sentiment=result.sentiment, score=result.score)
