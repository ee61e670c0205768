"""Chat relay: persist a member message, answer or escalate it, broadcast the follow-up."""

from __future__ import annotations

import logging
from typing import Any, Optional, Protocol

from tenacity import retry, retry_if_exception_type, stop_after_attempt

from creditportal.core.config import settings
from creditportal.core.errors import MessageValidationError, StorageError
from creditportal.core.messages import (
    AI_ASSISTANT_NAME,
    CHAT_MESSAGE_EMPTY,
    CHAT_MESSAGE_TOO_LONG,
    ESCALATION_NOTICE,
    SYSTEM_SENDER_NAME,
)
from creditportal.services.ai_service import ResponderOutcome, ResponderResult

from .messages import MessageStore
from .models import ChatMessage
from .schemas import BroadcastType, message_payload
from .websocket import BroadcastHub


logger = logging.getLogger("portal.chat.pipeline")


class SupportsRespond(Protocol):
    async def try_respond(self, user_message: str, context: Optional[Any] = None) -> ResponderOutcome:  # pragma: no cover - interface
        ...


class ChatPipeline:
    """Runs one inbound member message through store -> responder -> store -> hub.

    Every step is awaited in order: the user message is durable before the
    responder sees it and the follow-up is durable before it is broadcast.
    """

    def __init__(
        self,
        store: MessageStore,
        responder: SupportsRespond,
        hub: BroadcastHub,
        max_length: int = settings.CHAT_MAX_MESSAGE_LENGTH,
    ):
        self.store = store
        self.responder = responder
        self.hub = hub
        self.max_length = max_length

    def validate(self, message: Optional[str]) -> str:
        text = (message or "").strip()
        if not text:
            raise MessageValidationError(CHAT_MESSAGE_EMPTY)
        if len(text) > self.max_length:
            raise MessageValidationError(CHAT_MESSAGE_TOO_LONG.format(max_length=self.max_length))
        return text

    @staticmethod
    def follow_up_for(result: ResponderResult) -> tuple[BroadcastType, str, str]:
        """Broadcast tag, sender name and text of the team message for a result."""
        if result.classification == "automated":
            return "ai_response", AI_ASSISTANT_NAME, result.message
        return "escalation_notice", SYSTEM_SENDER_NAME, ESCALATION_NOTICE

    @retry(
        retry=retry_if_exception_type(StorageError),
        stop=stop_after_attempt(2),
        reraise=True,
    )
    def _persist_follow_up(self, user_id: str, sender: str, text: str) -> ChatMessage:
        return self.store.create(user_id, text, is_from_team=True, team_member_name=sender)

    async def handle(self, user_id: str, message: Optional[str], context: Optional[Any] = None) -> ChatMessage:
        """Process a member message and return the stored user ChatMessage.

        Raises MessageValidationError for empty/oversized text and StorageError
        when the user message cannot be stored. Responder failures turn into
        an escalation notice instead of an error.
        """
        text = self.validate(message)
        user_message = self.store.detach(self.store.create(user_id, text, is_from_team=False))

        outcome = await self.responder.try_respond(user_message.message, context)
        if not outcome.ok:
            logger.warning(
                "Responder failed for message_id=%s, escalating: %s",
                user_message.id,
                outcome.error,
            )
        result = outcome.unwrap_or(ResponderResult.fallback())

        kind, sender, reply = self.follow_up_for(result)
        try:
            follow_up = self._persist_follow_up(user_id, sender, reply)
        except StorageError:
            logger.error(
                "Dropping %s for message_id=%s: follow-up could not be stored",
                kind,
                user_message.id,
                exc_info=True,
            )
            return user_message

        await self.hub.broadcast(message_payload(kind, follow_up))
        return user_message
