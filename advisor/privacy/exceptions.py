class PrivacyError(Exception):
    """Base exception for the privacy layer."""


class ScrubError(PrivacyError):
    """Raised when the scrubber fails unexpectedly."""


class PiiLeakError(PrivacyError):
    """Raised when blocked text is requested as cleared text."""
