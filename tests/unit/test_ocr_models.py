import pytest

from advisor.ocr.exceptions import InvalidDocumentError
from advisor.ocr.models import DocumentPayload, validate_payload


class TestDocumentPayload:
    def test_normalized_mime_type_strips_parameters(self) -> None:
        payload = DocumentPayload(data=b"x", mime_type="Application/PDF; charset=binary")
        assert payload.normalized_mime_type == "application/pdf"

    def test_is_pdf(self) -> None:
        assert DocumentPayload(data=b"x", mime_type="application/pdf").is_pdf is True
        assert DocumentPayload(data=b"x", mime_type="image/png").is_pdf is False

    def test_bytes_hidden_from_repr(self) -> None:
        payload = DocumentPayload(data=b"secret-bytes", mime_type="image/png")
        assert "secret-bytes" not in repr(payload)


class TestValidatePayload:
    def test_accepts_supported_image(self) -> None:
        validate_payload(DocumentPayload(data=b"\x89PNG", mime_type="image/png"), max_bytes=10)

    def test_accepts_heic(self) -> None:
        validate_payload(DocumentPayload(data=b"x", mime_type="image/heic"), max_bytes=10)

    def test_rejects_empty_document(self) -> None:
        with pytest.raises(InvalidDocumentError, match="empty"):
            validate_payload(DocumentPayload(data=b"", mime_type="image/png"), max_bytes=10)

    def test_rejects_oversized_document(self) -> None:
        with pytest.raises(InvalidDocumentError, match="max 4"):
            validate_payload(DocumentPayload(data=b"12345", mime_type="image/png"), max_bytes=4)

    def test_rejects_unsupported_mime_type(self) -> None:
        with pytest.raises(InvalidDocumentError, match="Unsupported MIME type"):
            validate_payload(DocumentPayload(data=b"x", mime_type="text/plain"), max_bytes=10)
