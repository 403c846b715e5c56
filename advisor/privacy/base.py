from abc import ABC, abstractmethod

from advisor.privacy.models import ScrubResult


class BaseScrubber(ABC):
    """Contract for all PII scrubbers."""

    @abstractmethod
    def scrub(self, text: str) -> ScrubResult:
        """Replace PII in text with typed placeholder tokens.

        Args:
            text: Raw OCR text (untrusted).

        Returns:
            ScrubResult with redacted text and one record per replacement.

        Raises:
            ScrubError: on any unexpected failure.
        """
