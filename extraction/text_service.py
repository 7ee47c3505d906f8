# SPDX-License-Identifier: AGPL-3.0-only

"""
Text extraction service for uploaded documents.

This module turns an in-memory upload (PDF, plain text, PNG or JPEG) into text.
PDFs use their native text layer and fall back to OCR when the layer is empty,
which is the usual case for scanned documents.
"""

import logging
from typing import Optional

from common.errors import ExtractionError, UnsupportedMediaError
from common.pdf_utils import extract_text_by_page

from .models import ExtractedText, MimeType, UploadedDocument
from .ocr_service import OCRService

logger = logging.getLogger(__name__)

NO_TEXT_MESSAGE = "No text could be extracted from the document"


class TextExtractionService:
    """Service for extracting text from uploaded documents."""

    def __init__(self, ocr_service: Optional[OCRService] = None):
        """
        Initialize the text extraction service.

        Args:
            ocr_service: OCR service for images and scanned PDFs; when None,
                images cannot be processed and scanned PDFs yield no text
        """
        self.ocr_service = ocr_service

    def extract(self, data: bytes, mime_type) -> ExtractedText:
        """
        Extract text from raw upload bytes.

        Args:
            data: File contents
            mime_type: MimeType or a raw mimetype string

        Returns:
            ExtractedText with non-empty content

        Raises:
            UnsupportedMediaError: mime type is not pdf/text/png/jpeg
            ExtractionError: the document is malformed, OCR failed, or no text was found
        """
        mime = mime_type if isinstance(mime_type, MimeType) else MimeType.resolve(mime_type)
        if mime is None:
            raise UnsupportedMediaError(
                "Invalid file type. Only PDF, text, and image files are allowed.",
                reason="unsupported-type",
            )

        used_ocr = False
        if mime is MimeType.PDF:
            text, used_ocr = self._extract_pdf(data)
        elif mime is MimeType.TEXT:
            text = data.decode("utf-8", errors="replace")
        else:
            text = self._extract_image(data)
            used_ocr = True

        if not text or not text.strip():
            raise ExtractionError(NO_TEXT_MESSAGE, reason="no-text")

        logger.debug("Extracted %d characters from %s (ocr=%s)", len(text), mime.value, used_ocr)
        return ExtractedText(content=text, source_mime=mime, used_ocr=used_ocr)

    def extract_document(self, document: UploadedDocument) -> ExtractedText:
        return self.extract(document.raw_bytes, document.mime_type)

    def _extract_pdf(self, data: bytes):
        pages_text = extract_text_by_page(data)
        all_text = "\n".join(pages_text)
        if all_text.strip() or self.ocr_service is None:
            return all_text, False

        logger.info("PDF has no text layer, falling back to OCR for %d page(s)", len(pages_text))
        ocr_pages = self.ocr_service.extract_text_from_pdf(data)
        return "\n".join(ocr_pages), True

    def _extract_image(self, data: bytes) -> str:
        if self.ocr_service is None:
            raise ExtractionError("Image text extraction is disabled on this server", reason="ocr-failure")
        return self.ocr_service.extract_text_from_image(data)
