# SPDX-License-Identifier: AGPL-3.0-only

"""
Tests for text extraction.

PDF bytes are built in memory with PyMuPDF; OCR is mocked.
"""

import fitz
import pytest
from unittest.mock import patch

from common.errors import ExtractionError, UnsupportedMediaError
from common.pdf_utils import extract_text_by_page
from extraction.models import MimeType, UploadedDocument
from extraction.text_service import NO_TEXT_MESSAGE, TextExtractionService


def make_pdf(*page_texts):
    """Build a PDF with one page per string (an empty string makes a blank page)."""
    doc = fitz.open()
    for text in page_texts:
        page = doc.new_page()
        if text:
            page.insert_text((72, 72), text)
    data = doc.tobytes()
    doc.close()
    return data


class TestPdfUtils:
    def test_extract_text_by_page(self):
        pages = extract_text_by_page(make_pdf("Residential lease", "Second page"))
        assert len(pages) == 2
        assert "lease" in pages[0].lower()
        assert "second" in pages[1].lower()

    def test_malformed_pdf(self):
        with pytest.raises(ExtractionError) as exc:
            extract_text_by_page(b"this is not a pdf")
        assert exc.value.reason == "pdf-parse-failure"


class TestTextExtractionService:
    """Test TextExtractionService class."""

    def test_plain_text(self, text_service):
        result = text_service.extract(b"Tenant pays rent.", MimeType.TEXT)
        assert result.content == "Tenant pays rent."
        assert result.source_mime is MimeType.TEXT
        assert result.used_ocr is False

    def test_plain_text_accepts_mimetype_string(self, text_service):
        result = text_service.extract(b"Tenant pays rent.", "text/plain")
        assert result.source_mime is MimeType.TEXT

    def test_invalid_utf8_is_replaced(self, text_service):
        result = text_service.extract(b"Rent \xff\xfe due", MimeType.TEXT)
        assert result.content.startswith("Rent ")
        assert "�" in result.content

    @pytest.mark.parametrize("data", [b"", b"   \n\t  "])
    def test_blank_text_raises_no_text(self, text_service, data):
        with pytest.raises(ExtractionError) as exc:
            text_service.extract(data, MimeType.TEXT)
        assert exc.value.reason == "no-text"
        assert exc.value.message == NO_TEXT_MESSAGE

    def test_unsupported_type(self, text_service, mock_ocr_service):
        with pytest.raises(UnsupportedMediaError) as exc:
            text_service.extract(b"PK\x03\x04", "application/zip")
        assert exc.value.reason == "unsupported-type"
        mock_ocr_service.extract_text_from_image.assert_not_called()

    def test_pdf_with_text_layer(self, text_service, mock_ocr_service):
        result = text_service.extract(make_pdf("The tenant shall pay rent"), MimeType.PDF)
        assert "tenant" in result.content.lower()
        assert result.used_ocr is False
        mock_ocr_service.extract_text_from_pdf.assert_not_called()

    def test_malformed_pdf(self, text_service):
        with pytest.raises(ExtractionError) as exc:
            text_service.extract(b"%PDF-1.4 garbage", MimeType.PDF)
        assert exc.value.reason == "pdf-parse-failure"

    def test_scanned_pdf_falls_back_to_ocr(self, text_service, mock_ocr_service):
        with patch("extraction.text_service.extract_text_by_page", return_value=["", "  "]):
            result = text_service.extract(b"%PDF-scanned", MimeType.PDF)
        assert result.used_ocr is True
        assert result.content == "Scanned lease page one\nScanned page two"
        mock_ocr_service.extract_text_from_pdf.assert_called_once_with(b"%PDF-scanned")

    def test_scanned_pdf_without_ocr_has_no_text(self):
        service = TextExtractionService(ocr_service=None)
        with patch("extraction.text_service.extract_text_by_page", return_value=[""]):
            with pytest.raises(ExtractionError) as exc:
                service.extract(b"%PDF-scanned", MimeType.PDF)
        assert exc.value.reason == "no-text"

    def test_image_uses_ocr(self, text_service, mock_ocr_service):
        result = text_service.extract(b"\x89PNG fake", MimeType.PNG)
        assert result.used_ocr is True
        assert "landlord" in result.content
        mock_ocr_service.extract_text_from_image.assert_called_once_with(b"\x89PNG fake")

    def test_image_with_blank_ocr_output(self, text_service, mock_ocr_service):
        mock_ocr_service.extract_text_from_image.return_value = "  \n "
        with pytest.raises(ExtractionError) as exc:
            text_service.extract(b"\xff\xd8 fake jpeg", "image/jpg")
        assert exc.value.reason == "no-text"

    def test_ocr_failure_propagates(self, text_service, mock_ocr_service):
        mock_ocr_service.extract_text_from_image.side_effect = ExtractionError("boom", reason="ocr-failure")
        with pytest.raises(ExtractionError) as exc:
            text_service.extract(b"\x89PNG fake", MimeType.PNG)
        assert exc.value.reason == "ocr-failure"

    def test_image_without_ocr_service(self):
        service = TextExtractionService(ocr_service=None)
        with pytest.raises(ExtractionError) as exc:
            service.extract(b"\x89PNG fake", MimeType.PNG)
        assert exc.value.reason == "ocr-failure"

    def test_extract_document(self, text_service):
        doc = UploadedDocument(raw_bytes=b"Loan terms", mime_type=MimeType.TEXT, filename="loan.txt")
        assert text_service.extract_document(doc).content == "Loan terms"


class TestOCRService:
    """OCRService with pytesseract mocked out."""

    def test_unreadable_image(self):
        from extraction.ocr_service import OCRService
        with pytest.raises(ExtractionError) as exc:
            OCRService().extract_text_from_image(b"not an image")
        assert exc.value.reason == "ocr-failure"

    def test_recognize_image(self):
        import io
        from PIL import Image
        from extraction.ocr_service import OCRService

        buf = io.BytesIO()
        Image.new("RGB", (40, 20), "white").save(buf, format="PNG")
        with patch("extraction.ocr_service.pytesseract.image_to_string", return_value="Lease text") as ocr:
            text = OCRService(language="eng").extract_text_from_image(buf.getvalue())
        assert text == "Lease text"
        assert ocr.call_args.kwargs["lang"] == "eng"

    def test_tesseract_missing(self):
        import io
        import pytesseract
        from PIL import Image
        from extraction.ocr_service import OCRService

        buf = io.BytesIO()
        Image.new("RGB", (40, 20), "white").save(buf, format="PNG")
        with patch("extraction.ocr_service.pytesseract.image_to_string",
                   side_effect=pytesseract.TesseractNotFoundError()):
            with pytest.raises(ExtractionError) as exc:
                OCRService().extract_text_from_image(buf.getvalue())
        assert exc.value.reason == "ocr-failure"
