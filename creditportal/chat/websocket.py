"""Broadcast hub for realtime chat connections."""

import logging
import uuid
from typing import Any, Dict, Optional

from fastapi import WebSocket
from starlette.websockets import WebSocketState

from creditportal.core.errors import BroadcastError


logger = logging.getLogger("portal.chat.websocket")


class BroadcastHub:
    """Tracks open WebSocket connections and fans payloads out to all of them.

    Connections are keyed by opaque handles returned from ``register``.
    Broadcasts iterate over a snapshot, so registering or unregistering while
    a broadcast is in flight is safe.
    """

    def __init__(self):
        self._connections: Dict[str, WebSocket] = {}

    def register(self, websocket: WebSocket) -> str:
        handle = uuid.uuid4().hex
        self._connections[handle] = websocket
        logger.info("WebSocket registered: handle=%s, total_connections=%d", handle, len(self._connections))
        return handle

    def unregister(self, handle: str) -> None:
        if self._connections.pop(handle, None) is not None:
            logger.info("WebSocket unregistered: handle=%s, total_connections=%d", handle, len(self._connections))

    @property
    def connection_count(self) -> int:
        return len(self._connections)

    @staticmethod
    def _is_writable(websocket: WebSocket) -> bool:
        return (
            websocket.client_state == WebSocketState.CONNECTED
            and websocket.application_state == WebSocketState.CONNECTED
        )

    async def _deliver(self, handle: str, websocket: WebSocket, payload: Dict[str, Any]) -> None:
        try:
            await websocket.send_json(payload)
        except Exception as exc:
            raise BroadcastError(handle, exc) from exc

    async def broadcast(self, payload: Dict[str, Any], exclude: Optional[str] = None) -> int:
        """
        Send ``payload`` to every writable connection except ``exclude``.

        Returns:
            Number of connections that received the payload
        """
        sent_count = 0
        for handle, websocket in list(self._connections.items()):
            if handle == exclude:
                continue
            if not self._is_writable(websocket):
                self.unregister(handle)
                continue
            try:
                await self._deliver(handle, websocket, payload)
                sent_count += 1
            except BroadcastError as e:
                logger.warning("Failed to broadcast %s: %s", payload.get("type"), e)
                self.unregister(handle)

        logger.info("Broadcast %s delivered to %d connection(s)", payload.get("type"), sent_count)
        return sent_count


# Global hub instance for the process
broadcast_hub = BroadcastHub()
