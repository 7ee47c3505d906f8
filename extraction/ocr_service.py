"""
Lightweight OCR service for images and scanned PDFs.

Uses pytesseract on Pillow images. Scanned PDFs are rasterized page by page
with PyMuPDF (fitz) first. Everything works on in-memory buffers.
"""

# SPDX-License-Identifier: AGPL-3.0-only

from __future__ import annotations

from typing import List
import io
import logging
import os

import fitz  # PyMuPDF
from PIL import Image, ImageFilter, ImageOps, UnidentifiedImageError
import pytesseract

from common.errors import ExtractionError

logger = logging.getLogger(__name__)


class OCRService:
    def __init__(self, language: str = "eng") -> None:
        self.language = language
        # Configure Tesseract path if needed (best-effort for Windows)
        if os.name == 'nt':
            guess = r"C:\\Program Files\\Tesseract-OCR\\tesseract.exe"
            if os.path.isfile(guess):
                pytesseract.pytesseract.tesseract_cmd = guess

    def extract_text_from_image(self, data: bytes) -> str:
        """OCR a PNG/JPEG image held in memory."""
        try:
            img = Image.open(io.BytesIO(data))
            img.load()
        except (UnidentifiedImageError, OSError) as e:
            raise ExtractionError(f"Failed to extract text from image: {e}", reason="ocr-failure") from e
        return self._recognize(img)

    def extract_text_from_pdf(self, data: bytes) -> List[str]:
        """Rasterize every page of a PDF and OCR it. Returns one string per page."""
        try:
            doc = fitz.open(stream=data, filetype="pdf")
        except Exception as e:
            raise ExtractionError(f"Failed to open PDF for OCR: {e}", reason="ocr-failure") from e

        pages: List[str] = []
        try:
            for page in doc:
                pix = page.get_pixmap(matrix=fitz.Matrix(2, 2))
                pil_img = Image.open(io.BytesIO(pix.tobytes("png")))
                pages.append(self._recognize(pil_img))
        finally:
            doc.close()
        return pages

    def _recognize(self, img: Image.Image) -> str:
        try:
            text = pytesseract.image_to_string(self._preprocess_image(img), lang=self.language, config='--psm 6')
        except (pytesseract.TesseractError, pytesseract.TesseractNotFoundError, RuntimeError) as e:
            logger.error("Tesseract failed: %s", e)
            raise ExtractionError(f"Failed to extract text from image: {e}", reason="ocr-failure") from e
        return text or ""

    def _preprocess_image(self, img: Image.Image) -> Image.Image:
        gray = ImageOps.grayscale(img)
        blurred = gray.filter(ImageFilter.MedianFilter(size=3))
        enhanced = ImageOps.autocontrast(blurred)
        return enhanced.point(lambda x: 255 if x > 160 else 0, mode='1')
