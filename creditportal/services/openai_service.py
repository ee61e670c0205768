from __future__ import annotations

import asyncio
import json
import logging
from typing import Any, Dict, List, Literal, Optional

from openai import AsyncOpenAI, RateLimitError
from pydantic import BaseModel, ValidationError
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential_jitter,
)

from creditportal.core.config import Settings, settings as default_settings
from creditportal.core.errors import ResponderError
from creditportal.core.messages import AI_DEFAULT_REPLY
from creditportal.services.ai_service import ResponderOutcome, ResponderResult, SentimentResult
from creditportal.services.prompts import (
    CREDIT_REPAIR_SYSTEM_PROMPT,
    SENTIMENT_SYSTEM_PROMPT,
    build_member_prompt,
)


logger = logging.getLogger("portal.ai.openai")


class _ReplyPayload(BaseModel):
    message: Optional[str] = None
    type: Optional[Literal["automated", "escalate"]] = None
    confidence: Optional[float] = None


class _SentimentPayload(BaseModel):
    sentiment: Optional[Literal["positive", "neutral", "negative"]] = None
    score: Optional[float] = None


def _clamp(value: float) -> float:
    return min(1.0, max(0.0, value))


def _decode_json_object(content: Optional[str]) -> Dict[str, Any]:
    if not content or not content.strip():
        raise ResponderError("empty completion")
    try:
        data = json.loads(content)
    except json.JSONDecodeError as exc:
        raise ResponderError(f"completion is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise ResponderError("completion JSON is not an object")
    return data


def parse_reply(content: Optional[str]) -> ResponderResult:
    """Turn the model's JSON reply into a ResponderResult.

    Missing fields fall back to an automated prompt for more details; anything
    that is not a JSON object or names an unknown type raises ResponderError.
    """
    data = _decode_json_object(content)
    try:
        payload = _ReplyPayload.model_validate(data)
    except ValidationError as exc:
        raise ResponderError(f"unexpected reply shape: {exc.errors()}") from exc

    return ResponderResult(
        message=payload.message or AI_DEFAULT_REPLY,
        classification=payload.type or "automated",
        confidence=_clamp(payload.confidence if payload.confidence is not None else 0.8),
    )


def parse_sentiment(content: Optional[str]) -> SentimentResult:
    data = _decode_json_object(content)
    try:
        payload = _SentimentPayload.model_validate(data)
    except ValidationError as exc:
        raise ResponderError(f"unexpected sentiment shape: {exc.errors()}") from exc
    return SentimentResult(
        sentiment=payload.sentiment or "neutral",
        score=_clamp(payload.score if payload.score is not None else 0.5),
    )


class Responder:
    """Answers member chat messages through the OpenAI chat completions API.

    ``try_respond`` reports failures as a ResponderOutcome carrying the error;
    ``respond`` and ``analyze_sentiment`` never raise and fall back to an
    escalation / neutral result instead.
    """

    def __init__(
        self,
        client: Optional[AsyncOpenAI],
        model: str = "gpt-4o",
        timeout: float = 20.0,
        temperature: float = 0.7,
        max_tokens: int = 500,
    ) -> None:
        self.client = client
        self.model = model
        self.timeout = timeout
        self.temperature = temperature
        self.max_tokens = max_tokens

    @classmethod
    def from_settings(cls, settings: Settings = default_settings) -> "Responder":
        client = None
        if settings.OPENAI_API_KEY:
            client = AsyncOpenAI(api_key=settings.OPENAI_API_KEY, timeout=settings.RESPONDER_TIMEOUT_SECONDS)
        else:
            logger.warning("OPENAI_API_KEY is not configured; every chat message will be escalated")
        return cls(
            client,
            model=settings.OPENAI_MODEL,
            timeout=settings.RESPONDER_TIMEOUT_SECONDS,
            temperature=settings.RESPONDER_TEMPERATURE,
            max_tokens=settings.RESPONDER_MAX_TOKENS,
        )

    @retry(
        retry=retry_if_exception_type(RateLimitError),
        wait=wait_exponential_jitter(initial=1, max=10),
        stop=stop_after_attempt(3),
        reraise=True,
    )
    async def _create_completion(self, **kwargs: Any):
        return await self.client.chat.completions.create(**kwargs)

    async def _complete(self, messages: List[Dict[str, str]], temperature: float, max_tokens: int) -> Optional[str]:
        if self.client is None:
            raise ResponderError("OpenAI client is not configured")
        try:
            completion = await asyncio.wait_for(
                self._create_completion(
                    model=self.model,
                    messages=messages,
                    response_format={"type": "json_object"},
                    temperature=temperature,
                    max_tokens=max_tokens,
                ),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError as exc:
            raise ResponderError(f"completion timed out after {self.timeout}s") from exc
        except Exception as exc:
            raise ResponderError(f"completion failed: {exc}") from exc

        try:
            return completion.choices[0].message.content
        except (AttributeError, IndexError) as exc:
            raise ResponderError("completion has no choices") from exc

    async def try_respond(self, user_message: str, context: Optional[Any] = None) -> ResponderOutcome:
        messages = [
            {"role": "system", "content": CREDIT_REPAIR_SYSTEM_PROMPT},
            {"role": "user", "content": build_member_prompt(user_message=user_message, context=context)},
        ]
        try:
            content = await self._complete(messages, self.temperature, self.max_tokens)
            result = parse_reply(content)
        except ResponderError as exc:
            return ResponderOutcome(error=exc)

        logger.info(
            "responder_reply",
            extra={
                "model": self.model,
                "classification": result.classification,
                "confidence": result.confidence,
            },
        )
        return ResponderOutcome(result=result)

    async def respond(self, user_message: str, context: Optional[Any] = None) -> ResponderResult:
        outcome = await self.try_respond(user_message, context)
        if not outcome.ok:
            logger.warning("Responder failed, escalating: %s", outcome.error)
        return outcome.unwrap_or(ResponderResult.fallback())

    async def analyze_sentiment(self, text: str) -> SentimentResult:
        messages = [
            {"role": "system", "content": SENTIMENT_SYSTEM_PROMPT},
            {"role": "user", "content": text},
        ]
        try:
            content = await self._complete(messages, temperature=0.3, max_tokens=100)
            return parse_sentiment(content)
        except ResponderError as exc:
            logger.warning("Sentiment analysis failed, defaulting to neutral: %s", exc)
            return SentimentResult.neutral()
