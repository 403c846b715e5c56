from advisor.extraction.base import BaseSalaryExtractor
from advisor.logging.logger import Log
from advisor.ocr.base import BaseOcrClient
from advisor.ocr.models import validate_payload
from advisor.pipeline.models import FailureReason, PipelineFailure
from advisor.pipeline.pipeline import PipelineContext, PipelineStep
from advisor.privacy.base import BaseScrubber
from advisor.privacy.gate import ValidationGate


class ValidatePayloadStep(PipelineStep):
    def __init__(self, max_document_bytes: int) -> None:
        self._max_document_bytes = max_document_bytes

    def run(self, context: PipelineContext) -> PipelineContext:
        validate_payload(context.payload, self._max_document_bytes)
        Log.info(
            f"Accepted {len(context.payload.data)} byte document "
            f"({context.payload.normalized_mime_type})"
        )
        return context


class OcrStep(PipelineStep):
    def __init__(self, ocr_client: BaseOcrClient) -> None:
        self._ocr_client = ocr_client

    def run(self, context: PipelineContext) -> PipelineContext:
        context.raw_text = self._ocr_client.extract_text(context.payload)
        if not context.raw_text.strip():
            Log.warning("OCR returned no text")
            context.failure = PipelineFailure.of(FailureReason.NOT_A_SALARY_DOCUMENT)
            return context
        Log.info(f"OCR extracted {len(context.raw_text)} chars")
        return context


class ScrubStep(PipelineStep):
    def __init__(self, scrubber: BaseScrubber) -> None:
        self._scrubber = scrubber

    def run(self, context: PipelineContext) -> PipelineContext:
        result = self._scrubber.scrub(context.raw_text)
        context.scrub_result = result
        context.raw_text = ""
        counts = ", ".join(f"{kind}={n}" for kind, n in result.count_by_kind().items())
        Log.info(f"Scrubbed {len(result.redactions)} values ({counts or 'none'})")
        return context


class GateStep(PipelineStep):
    def __init__(self, gate: ValidationGate) -> None:
        self._gate = gate

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.scrub_result is None:
            raise ValueError("PipelineContext.scrub_result must be set before validation")
        validation = self._gate.check(context.scrub_result.redacted_text)
        context.validation = validation
        if validation.blocked:
            kinds = ", ".join(str(kind) for kind in validation.triggered_kinds)
            Log.error(f"Validation gate blocked document: PII kinds [{kinds}] remain")
            context.failure = PipelineFailure.of(FailureReason.PII_DETECTED_AFTER_SCRUB)
            return context
        context.cleared = validation.cleared_text
        Log.info("Validation gate passed")
        return context


class ExtractSalaryStep(PipelineStep):
    def __init__(self, extractor: BaseSalaryExtractor) -> None:
        self._extractor = extractor

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.cleared is None:
            raise ValueError("PipelineContext.cleared must be set before salary extraction")
        context.extraction = self._extractor.extract(context.cleared)
        return context
