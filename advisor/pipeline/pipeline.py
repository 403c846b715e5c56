from abc import ABC, abstractmethod
from dataclasses import dataclass

from advisor.extraction.models import SalaryExtraction
from advisor.ocr.models import DocumentPayload
from advisor.pipeline.models import PipelineFailure
from advisor.privacy.models import ClearedText, ScrubResult, ValidationResult


@dataclass(slots=True)
class PipelineContext:
    payload: DocumentPayload
    raw_text: str = ""
    scrub_result: ScrubResult | None = None
    validation: ValidationResult | None = None
    cleared: ClearedText | None = None
    extraction: SalaryExtraction | None = None
    failure: PipelineFailure | None = None

    @property
    def stopped(self) -> bool:
        return self.failure is not None


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
