from advisor.config.settings import Settings
from advisor.llm.client_base import BaseLLMClient
from advisor.ocr.base import BaseOcrClient
from advisor.ocr.pdf_text import PdfTextLayerOcrClient
from advisor.ocr.vision_ocr import VisionOcrClient


class OcrClientFactory:
    """Creates the OCR adapter selected by ``ocr_engine``."""

    ENGINES: tuple[str, ...] = ("vision", "pdf_text")

    @classmethod
    def create(cls, settings: Settings, llm_client: BaseLLMClient) -> BaseOcrClient:
        engine = settings.ocr_engine.lower()
        if engine not in cls.ENGINES:
            raise ValueError(
                f"Unknown OCR engine '{engine}'. Choose from: {list(cls.ENGINES)}"
            )
        vision = VisionOcrClient(
            client=llm_client,
            model=settings.ocr_model_name,
            timeout_seconds=settings.ocr_timeout_seconds,
        )
        if engine == "vision":
            return vision
        return PdfTextLayerOcrClient(
            fallback=vision,
            engine=settings.pdf_engine,
            min_chars=settings.pdf_text_min_chars,
        )
