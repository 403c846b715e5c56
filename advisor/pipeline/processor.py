from advisor.config.settings import Settings
from advisor.extraction.base import BaseSalaryExtractor
from advisor.extraction.exceptions import (
    ExtractionValidationError,
    NotASalaryDocumentError,
)
from advisor.extraction.extractor import SalaryExtractor
from advisor.llm.client_base import BaseLLMClient
from advisor.llm.exceptions import LLMUnavailableError
from advisor.logging.logger import Log
from advisor.ocr.base import BaseOcrClient
from advisor.ocr.exceptions import InvalidDocumentError, OcrError
from advisor.ocr.factory import OcrClientFactory
from advisor.ocr.models import DocumentPayload
from advisor.pipeline.models import (
    FailureReason,
    PipelineFailure,
    PipelineResult,
    PipelineSuccess,
)
from advisor.pipeline.pipeline import PipelineContext, PipelineStep
from advisor.pipeline.steps import (
    ExtractSalaryStep,
    GateStep,
    OcrStep,
    ScrubStep,
    ValidatePayloadStep,
)
from advisor.privacy.base import BaseScrubber
from advisor.privacy.exceptions import ScrubError
from advisor.privacy.gate import ValidationGate
from advisor.privacy.scrubber import PiiScrubber


class SalaryDocumentPipeline:
    """Runs a salary document through the privacy pipeline.

    Pipeline: validate -> OCR -> scrub -> gate -> extract.
    Strictly linear: no retries and no step is skipped. The first failure
    ends the run and is reported as a ``PipelineFailure``.
    """

    def __init__(
        self,
        ocr_client: BaseOcrClient,
        scrubber: BaseScrubber,
        gate: ValidationGate,
        extractor: BaseSalaryExtractor,
        max_document_bytes: int,
    ) -> None:
        self._steps: tuple[PipelineStep, ...] = (
            ValidatePayloadStep(max_document_bytes),
            OcrStep(ocr_client),
            ScrubStep(scrubber),
            GateStep(gate),
            ExtractSalaryStep(extractor),
        )

    def extract_salary_from_document(self, payload: DocumentPayload) -> PipelineResult:
        context = PipelineContext(payload=payload)
        try:
            for step in self._steps:
                context = step.run(context)
                if context.failure is not None:
                    Log.warning(f"Pipeline stopped: {context.failure.reason}")
                    return context.failure
        except InvalidDocumentError as exc:
            return self._fail(FailureReason.INVALID_INPUT, exc)
        except OcrError as exc:
            return self._fail(FailureReason.OCR_UNAVAILABLE, exc)
        except ScrubError as exc:
            return self._fail(FailureReason.PII_DETECTED_AFTER_SCRUB, exc)
        except NotASalaryDocumentError as exc:
            return self._fail(FailureReason.NOT_A_SALARY_DOCUMENT, exc)
        except ExtractionValidationError as exc:
            return self._fail(FailureReason.MALFORMED_MODEL_OUTPUT, exc)
        except LLMUnavailableError as exc:
            return self._fail(FailureReason.MODEL_UNAVAILABLE, exc)

        if context.extraction is None:
            raise ValueError("PipelineContext.extraction must be set after the final step")
        Log.info("Pipeline completed: salary extracted")
        return PipelineSuccess(extraction=context.extraction)

    @staticmethod
    def _fail(reason: FailureReason, exc: Exception) -> PipelineFailure:
        Log.warning(f"Pipeline failed: {reason} ({type(exc).__name__})")
        return PipelineFailure.of(reason)


def build_pipeline(settings: Settings, llm_client: BaseLLMClient) -> SalaryDocumentPipeline:
    """Build a SalaryDocumentPipeline with all required adapters."""
    ocr_client = OcrClientFactory.create(settings, llm_client)
    extractor = SalaryExtractor(
        client=llm_client,
        model=settings.extraction_model_name,
        temperature=settings.extraction_temperature,
        timeout_seconds=settings.extraction_timeout_seconds,
    )
    return SalaryDocumentPipeline(
        ocr_client=ocr_client,
        scrubber=PiiScrubber(),
        gate=ValidationGate(),
        extractor=extractor,
        max_document_bytes=settings.max_document_bytes,
    )
