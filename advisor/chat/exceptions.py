class ChatError(Exception):
    """Base exception for all chat-related errors."""


class InvalidChatRequestError(ChatError):
    """Raised when a chat request carries a payload that cannot be processed.

    The message is user-safe and is returned to the caller as-is.
    """
