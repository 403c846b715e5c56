from dataclasses import dataclass, field

from advisor.ocr.exceptions import InvalidDocumentError

ACCEPTED_MIME_TYPES: frozenset[str] = frozenset(
    {
        "application/pdf",
        "image/png",
        "image/jpeg",
        "image/jpg",
        "image/webp",
        "image/gif",
        "image/heic",
        "image/heif",
    }
)


@dataclass(frozen=True)
class DocumentPayload:
    """Uploaded document bytes plus declared MIME type. Lives for one request."""

    data: bytes = field(repr=False)
    mime_type: str

    @property
    def normalized_mime_type(self) -> str:
        return self.mime_type.split(";", 1)[0].strip().lower()

    @property
    def is_pdf(self) -> bool:
        return self.normalized_mime_type == "application/pdf"


def validate_payload(payload: DocumentPayload, max_bytes: int) -> None:
    """Reject malformed payloads.

    Raises:
        InvalidDocumentError: if the payload is empty, too large, or of an
            unsupported type.
    """
    if not payload.data:
        raise InvalidDocumentError("Document is empty")
    if len(payload.data) > max_bytes:
        raise InvalidDocumentError(
            f"Document is {len(payload.data)} bytes (max {max_bytes})"
        )
    if payload.normalized_mime_type not in ACCEPTED_MIME_TYPES:
        raise InvalidDocumentError(
            f"Unsupported MIME type '{payload.normalized_mime_type}'"
        )
