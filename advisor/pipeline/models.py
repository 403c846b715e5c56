from dataclasses import dataclass
from enum import StrEnum

from advisor.extraction.models import SalaryExtraction


class FailureReason(StrEnum):
    OCR_UNAVAILABLE = "ocr_unavailable"
    PII_DETECTED_AFTER_SCRUB = "pii_detected_after_scrub"
    MALFORMED_MODEL_OUTPUT = "malformed_model_output"
    NOT_A_SALARY_DOCUMENT = "not_a_salary_document"
    INVALID_INPUT = "invalid_input"
    MODEL_UNAVAILABLE = "model_unavailable"


USER_MESSAGES: dict[FailureReason, str] = {
    FailureReason.OCR_UNAVAILABLE: (
        "I couldn't read that document right now. Please try again in a moment."
    ),
    FailureReason.PII_DETECTED_AFTER_SCRUB: (
        "For your privacy I stopped processing this document because it still "
        "contained personal details after redaction. Please try a different "
        "copy or type your monthly salary instead."
    ),
    FailureReason.MALFORMED_MODEL_OUTPUT: (
        "I couldn't safely extract salary data. Please try another document."
    ),
    FailureReason.NOT_A_SALARY_DOCUMENT: (
        "This doesn't look like a salary slip or salary certificate. Please "
        "upload a salary document or tell me your monthly income."
    ),
    FailureReason.INVALID_INPUT: (
        "That file couldn't be accepted. Please upload a PDF or image of your "
        "salary slip."
    ),
    FailureReason.MODEL_UNAVAILABLE: (
        "I couldn't analyse the document right now. Please try again in a moment."
    ),
}


def message_for(reason: FailureReason) -> str:
    """User-safe text for a failure reason. Never contains document content."""
    return USER_MESSAGES[reason]


@dataclass(frozen=True)
class PipelineSuccess:
    extraction: SalaryExtraction


@dataclass(frozen=True)
class PipelineFailure:
    """Terminal failure of the document pipeline.

    ``message`` is user-safe and never carries matched PII or document text.
    """

    reason: FailureReason
    message: str

    @classmethod
    def of(cls, reason: FailureReason) -> "PipelineFailure":
        return cls(reason=reason, message=message_for(reason))


PipelineResult = PipelineSuccess | PipelineFailure
