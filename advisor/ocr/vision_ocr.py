from advisor.llm.client_base import BaseLLMClient
from advisor.llm.exceptions import LLMError
from advisor.logging.logger import Log
from advisor.ocr.base import BaseOcrClient
from advisor.ocr.exceptions import OcrUnavailableError
from advisor.ocr.models import DocumentPayload

OCR_INSTRUCTION = (
    "Extract ALL text from this document. Return ONLY the raw text, exactly "
    "as it appears. Do not analyze or interpret - just extract the text verbatim."
)


class VisionOcrClient(BaseOcrClient):
    """Uses a hosted vision model as an untrusted OCR service."""

    def __init__(
        self,
        *,
        client: BaseLLMClient,
        model: str,
        timeout_seconds: float,
    ) -> None:
        self._client = client
        self._model = model
        self._timeout_seconds = timeout_seconds

    def extract_text(self, payload: DocumentPayload) -> str:
        try:
            text = self._client.read_document(
                model=self._model,
                instruction=OCR_INSTRUCTION,
                data=payload.data,
                mime_type=payload.normalized_mime_type,
                timeout_seconds=self._timeout_seconds,
            )
        except LLMError as exc:
            raise OcrUnavailableError(f"Vision OCR failed: {type(exc).__name__}") from exc
        Log.info(f"Vision OCR returned {len(text)} chars")
        return text
