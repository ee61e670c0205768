"""Domain exceptions raised by the chat pipeline and its collaborators."""


class PortalError(Exception):
    """Base class for portal errors."""


class MessageValidationError(PortalError):
    """Inbound chat message is empty or too long."""


class StorageError(PortalError):
    """The message store could not persist or read a record."""


class ResponderError(PortalError):
    """The text-generation service failed, timed out or returned garbage.

    Never surfaced to HTTP callers.
    """


class BroadcastError(PortalError):
    """Sending a payload to a single realtime connection failed."""

    def __init__(self, handle: str, cause: BaseException):
        super().__init__(f"send to connection {handle} failed: {cause}")
        self.handle = handle
        self.cause = cause
