class LLMError(Exception):
    """Raised when a language-model call fails."""


class LLMUnavailableError(LLMError):
    """Raised when the provider is unreachable, rejects the call, or has no credential."""


class LLMTimeoutError(LLMUnavailableError):
    """Raised when the provider does not answer within the configured timeout."""


class LLMResponseError(LLMError):
    """Raised when the provider answers with an unusable response."""
