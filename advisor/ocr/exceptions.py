class OcrError(Exception):
    """Base exception for all OCR-related errors."""


class OcrUnavailableError(OcrError):
    """Raised when the OCR service is unreachable, times out, or is not configured."""


class InvalidDocumentError(OcrError):
    """Raised when a document payload is rejected before any external call."""
