"""Member chat: storage, realtime fan-out and the AI relay pipeline."""

from .models import ChatMessage
from .messages import MessageStore
from .websocket import BroadcastHub, broadcast_hub
from .pipeline import ChatPipeline

__all__ = [
    "ChatMessage",
    "MessageStore",
    "BroadcastHub",
    "broadcast_hub",
    "ChatPipeline",
]
