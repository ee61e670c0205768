"""WebSocket endpoint for realtime chat updates."""

import json
import logging

from fastapi import APIRouter, Depends, Query, WebSocket, WebSocketDisconnect, status
from jose import JWTError
from pydantic import ValidationError

from creditportal.api.dependencies import get_broadcast_hub, user_id_from_token
from creditportal.chat import BroadcastHub
from creditportal.chat.schemas import ClientFrame
from creditportal.core.messages import CHAT_INVALID_JSON, CHAT_UNSUPPORTED_FRAME


logger = logging.getLogger("portal.chat.websocket")

router = APIRouter()


@router.websocket("/ws")
async def chat_websocket(
    websocket: WebSocket,
    token: str = Query(""),
    hub: BroadcastHub = Depends(get_broadcast_hub),
):
    """
    Realtime chat channel.

    Connection URL: ws://localhost:8000/ws?token={access_token}

    Client -> Server:
        {"type": "chat_message", "data": {...}}   mirrored to every other client as new_message

    Server -> Client:
        {"type": "status", "status": "connected"}
        {"type": "new_message" | "ai_response" | "escalation_notice", "data": {...ChatMessage...}}
        {"type": "error", "message": "..."}
    """
    try:
        user_id = user_id_from_token(token)
    except JWTError as e:
        logger.warning("WebSocket authentication failed: %s", e)
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION, reason="Invalid token")
        return

    await websocket.accept()
    handle = hub.register(websocket)
    logger.info("WebSocket connected: user_id=%s", user_id)

    try:
        await websocket.send_json({"type": "status", "status": "connected"})

        while True:
            raw = await websocket.receive_text()

            try:
                frame = ClientFrame.model_validate(json.loads(raw))
            except (json.JSONDecodeError, ValidationError):
                await websocket.send_json({"type": "error", "message": CHAT_INVALID_JSON})
                continue

            if frame.type != "chat_message":
                await websocket.send_json({"type": "error", "message": CHAT_UNSUPPORTED_FRAME})
                continue

            await hub.broadcast({"type": "new_message", "data": frame.data}, exclude=handle)

    except WebSocketDisconnect:
        logger.info("WebSocket disconnected: user_id=%s", user_id)
    finally:
        hub.unregister(handle)
