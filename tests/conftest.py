import os
import tempfile

# Settings are read at import time, so the environment has to be ready first
_db_dir = tempfile.mkdtemp(prefix="credit-portal-tests-")
os.environ.setdefault("SECRET_KEY", "test-secret-key-not-for-production")
os.environ["DATABASE_URL"] = f"sqlite:///{_db_dir}/portal.db"
os.environ.pop("OPENAI_API_KEY", None)

import json  # noqa: E402
from typing import Any, List, Optional  # noqa: E402
from unittest.mock import AsyncMock, MagicMock  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from starlette.websockets import WebSocketState  # noqa: E402

from creditportal.api.dependencies import get_broadcast_hub, get_responder  # noqa: E402
from creditportal.chat import BroadcastHub  # noqa: E402
from creditportal.core.database import SessionLocal, engine  # noqa: E402
from creditportal.core.errors import ResponderError  # noqa: E402
from creditportal.core.security import create_access_token  # noqa: E402
from creditportal.models.base import Base  # noqa: E402
import creditportal.chat.models  # noqa: E402,F401
import creditportal.models  # noqa: E402,F401
from creditportal.services.ai_service import ResponderOutcome, ResponderResult, SentimentResult  # noqa: E402


class FakeResponder:
    """Stands in for the OpenAI-backed Responder."""

    def __init__(self, result: Optional[ResponderResult] = None, error: Optional[str] = None):
        self.result = result or ResponderResult(
            message="Start by pulling all three bureau reports.",
            classification="automated",
            confidence=0.9,
        )
        self.error = error
        self.calls: List[tuple] = []

    async def try_respond(self, user_message: str, context: Optional[Any] = None) -> ResponderOutcome:
        self.calls.append((user_message, context))
        if self.error:
            return ResponderOutcome(error=ResponderError(self.error))
        return ResponderOutcome(result=self.result)

    async def respond(self, user_message: str, context: Optional[Any] = None) -> ResponderResult:
        outcome = await self.try_respond(user_message, context)
        return outcome.unwrap_or(ResponderResult.fallback())

    async def analyze_sentiment(self, text: str) -> SentimentResult:
        return SentimentResult(sentiment="positive", score=0.8)


class FakeSocket:
    """Minimal object with the WebSocket surface the hub uses."""

    def __init__(self, fail: bool = False):
        self.client_state = WebSocketState.CONNECTED
        self.application_state = WebSocketState.CONNECTED
        self.fail = fail
        self.sent: List[dict] = []

    def close(self):
        self.client_state = WebSocketState.DISCONNECTED

    async def send_json(self, payload: dict) -> None:
        if self.fail:
            raise RuntimeError("socket is closed")
        self.sent.append(payload)


def make_completion(content: Optional[str]) -> MagicMock:
    completion = MagicMock()
    completion.choices = [MagicMock(message=MagicMock(content=content))]
    return completion


def make_openai_client(content: Optional[str] = None, side_effect: Any = None) -> MagicMock:
    client = MagicMock()
    if side_effect is not None:
        client.chat.completions.create = AsyncMock(side_effect=side_effect)
    else:
        client.chat.completions.create = AsyncMock(return_value=make_completion(content))
    return client


def reply_json(message: str, type_: str, confidence: float) -> str:
    return json.dumps({"message": message, "type": type_, "confidence": confidence})


@pytest.fixture(autouse=True)
def reset_database():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db_session():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def hub():
    return BroadcastHub()


@pytest.fixture
def fake_responder():
    return FakeResponder()


@pytest.fixture
def app(hub, fake_responder):
    from main import app as fastapi_app

    fastapi_app.dependency_overrides[get_responder] = lambda: fake_responder
    fastapi_app.dependency_overrides[get_broadcast_hub] = lambda: hub
    yield fastapi_app
    fastapi_app.dependency_overrides.clear()


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


def token_for(user_id: str) -> str:
    return create_access_token(user_id)


def auth_headers(user_id: str = "member-1") -> dict:
    return {"Authorization": f"Bearer {token_for(user_id)}"}
