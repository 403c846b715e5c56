"""Local text-layer extraction for PDFs.

Digitally generated salary certificates usually carry a text layer. Reading
it locally keeps the document off the external OCR service; scanned PDFs and
images fall back to the vision client.
"""

import io
from collections.abc import Callable

import pdfplumber
import pymupdf

from advisor.logging.logger import Log
from advisor.ocr.base import BaseOcrClient
from advisor.ocr.models import DocumentPayload


def read_with_pdfplumber(pdf_bytes: bytes) -> str:
    with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
        pages = [page.extract_text() or "" for page in pdf.pages]
    return "\n".join(pages).strip()


def read_with_pymupdf(pdf_bytes: bytes) -> str:
    with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
        pages = [page.get_text() for page in doc]
    return "\n".join(pages).strip()


PDF_READERS: dict[str, Callable[[bytes], str]] = {
    "pdfplumber": read_with_pdfplumber,
    "pymupdf": read_with_pymupdf,
}


class PdfTextLayerOcrClient(BaseOcrClient):
    """Reads the PDF text layer locally, otherwise defers to *fallback*."""

    def __init__(
        self,
        *,
        fallback: BaseOcrClient,
        engine: str = "pdfplumber",
        min_chars: int = 40,
    ) -> None:
        reader = PDF_READERS.get(engine.lower())
        if reader is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(PDF_READERS)}"
            )
        self._reader = reader
        self._fallback = fallback
        self._min_chars = min_chars

    def extract_text(self, payload: DocumentPayload) -> str:
        if not payload.is_pdf:
            return self._fallback.extract_text(payload)
        text = self._read_text_layer(payload.data)
        if len(text) >= self._min_chars:
            Log.info(f"Read {len(text)} chars from PDF text layer")
            return text
        Log.info("PDF text layer too short, falling back to vision OCR")
        return self._fallback.extract_text(payload)

    def _read_text_layer(self, pdf_bytes: bytes) -> str:
        try:
            return self._reader(pdf_bytes)
        except Exception as exc:
            Log.warning(f"PDF text layer unreadable: {type(exc).__name__}")
            return ""
