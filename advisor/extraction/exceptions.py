class ExtractionError(Exception):
    """Raised when structured salary extraction fails."""


class ExtractionValidationError(ExtractionError):
    """Raised when the model output breaks the salary schema contract."""


class NotASalaryDocumentError(ExtractionError):
    """Raised when the model marks the document as not a salary document."""
