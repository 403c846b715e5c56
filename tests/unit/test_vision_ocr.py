from unittest.mock import MagicMock

import pytest

from advisor.llm.exceptions import LLMResponseError, LLMTimeoutError, LLMUnavailableError
from advisor.ocr.exceptions import OcrUnavailableError
from advisor.ocr.models import DocumentPayload
from advisor.ocr.vision_ocr import OCR_INSTRUCTION, VisionOcrClient

PAYLOAD = DocumentPayload(data=b"\x89PNG", mime_type="IMAGE/PNG")


def _make_client(llm: MagicMock) -> VisionOcrClient:
    return VisionOcrClient(client=llm, model="vision-model", timeout_seconds=12)


class TestVisionOcrClient:
    def test_returns_model_text(self) -> None:
        llm = MagicMock()
        llm.read_document.return_value = "Basic Salary: AED 12,000"
        assert _make_client(llm).extract_text(PAYLOAD) == "Basic Salary: AED 12,000"

    def test_sends_fixed_instruction_and_normalized_mime(self) -> None:
        llm = MagicMock()
        llm.read_document.return_value = "x"
        _make_client(llm).extract_text(PAYLOAD)
        kwargs = llm.read_document.call_args.kwargs
        assert kwargs["instruction"] == OCR_INSTRUCTION
        assert kwargs["mime_type"] == "image/png"
        assert kwargs["model"] == "vision-model"
        assert kwargs["timeout_seconds"] == 12

    @pytest.mark.parametrize(
        "error",
        [
            LLMUnavailableError("AI provider credential is not configured"),
            LLMTimeoutError("timed out"),
            LLMResponseError("no choices"),
        ],
    )
    def test_model_errors_become_ocr_unavailable(self, error: Exception) -> None:
        llm = MagicMock()
        llm.read_document.side_effect = error
        with pytest.raises(OcrUnavailableError, match=type(error).__name__):
            _make_client(llm).extract_text(PAYLOAD)
