from abc import ABC, abstractmethod

from advisor.ocr.models import DocumentPayload


class BaseOcrClient(ABC):
    """Contract for all OCR adapters."""

    @abstractmethod
    def extract_text(self, payload: DocumentPayload) -> str:
        """Extract raw text from a document.

        The returned text is untrusted: it may contain PII or garbage.

        Raises:
            OcrUnavailableError: if the service cannot be used.
        """
