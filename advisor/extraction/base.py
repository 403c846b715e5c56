from abc import ABC, abstractmethod

from advisor.extraction.models import SalaryExtraction
from advisor.privacy.models import ClearedText


class BaseSalaryExtractor(ABC):
    """Contract for structured salary extraction."""

    @abstractmethod
    def extract(self, cleared: ClearedText) -> SalaryExtraction:
        """Turn gate-cleared redacted text into structured salary data.

        Args:
            cleared: Redacted text that passed the validation gate.

        Returns:
            SalaryExtraction with every amount found in the text.

        Raises:
            ExtractionValidationError: if the model output is malformed.
            NotASalaryDocumentError: if the model rejects the document.
            LLMUnavailableError: if the model cannot be reached.
        """
