from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional

from creditportal.core.errors import ResponderError
from creditportal.core.messages import AI_FALLBACK_REPLY


Classification = Literal["automated", "escalate"]
Sentiment = Literal["positive", "neutral", "negative"]


@dataclass(frozen=True)
class ResponderResult:
    message: str
    classification: Classification
    confidence: float

    @classmethod
    def fallback(cls) -> "ResponderResult":
        """Hand-off result used whenever the text-generation call fails."""
        return cls(message=AI_FALLBACK_REPLY, classification="escalate", confidence=0.0)


@dataclass(frozen=True)
class ResponderOutcome:
    """Either a ResponderResult or the ResponderError that prevented one."""

    result: Optional[ResponderResult] = None
    error: Optional[ResponderError] = None

    @property
    def ok(self) -> bool:
        return self.result is not None

    def unwrap_or(self, default: ResponderResult) -> ResponderResult:
        return self.result if self.result is not None else default


@dataclass(frozen=True)
class SentimentResult:
    sentiment: Sentiment
    score: float

    @classmethod
    def neutral(cls) -> "SentimentResult":
        return cls(sentiment="neutral", score=0.5)
