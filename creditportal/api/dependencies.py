from __future__ import annotations

from functools import lru_cache
from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError

from creditportal.chat.websocket import BroadcastHub, broadcast_hub
from creditportal.core.messages import AUTH_TOKEN_INVALID, AUTH_TOKEN_PAYLOAD_INVALID
from creditportal.core.security import decode_token
from creditportal.services.openai_service import Responder


# Tokens are issued by the external auth service
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/login")


def user_id_from_token(token: str) -> str:
    """Return the ``sub`` claim of a valid access token or raise JWTError."""
    payload = decode_token(token, expected_type="access")
    user_id = payload.get("sub")
    if not user_id:
        raise JWTError(AUTH_TOKEN_PAYLOAD_INVALID)
    return str(user_id)


def get_current_user_id(token: Annotated[str, Depends(oauth2_scheme)]) -> str:
    try:
        return user_id_from_token(token)
    except JWTError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=AUTH_TOKEN_INVALID,
            headers={"WWW-Authenticate": "Bearer"},
        )


@lru_cache
def get_responder() -> Responder:
    return Responder.from_settings()


def get_broadcast_hub() -> BroadcastHub:
    return broadcast_hub
