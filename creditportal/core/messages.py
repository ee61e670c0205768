"""User-facing text for the backend."""

# Authentication
AUTH_TOKEN_INVALID = "Could not validate credentials"
AUTH_TOKEN_PAYLOAD_INVALID = "Invalid token payload"

# Chat
CHAT_MESSAGE_EMPTY = "Message cannot be empty"
CHAT_MESSAGE_TOO_LONG = "Message must be at most {max_length} characters"
CHAT_STORAGE_FAILED = "Failed to save message"
CHAT_FETCH_FAILED = "Failed to fetch messages"
CHAT_INVALID_JSON = "Invalid JSON format"
CHAT_UNSUPPORTED_FRAME = "Only 'chat_message' frames are supported"

# Automated replies
AI_ASSISTANT_NAME = "AI Assistant"
SYSTEM_SENDER_NAME = "System"
AI_DEFAULT_REPLY = (
    "I'm here to help with your credit repair questions. "
    "Could you please provide more details?"
)
AI_FALLBACK_REPLY = (
    "I'm having trouble processing your request right now. "
    "Let me connect you with a live agent who can assist you better."
)
ESCALATION_NOTICE = (
    "\U0001F514 This conversation has been escalated to a live agent. "
    "A team member will respond shortly."
)

# Public forms
CONSULTATION_NOT_FOUND = "Consultation not found"
