# SPDX-License-Identifier: AGPL-3.0-only

"""
PDF utility functions for in-memory text extraction and page handling.
"""
import io
from typing import List

import PyPDF2

from common.errors import ExtractionError


def _open_reader(data: bytes) -> PyPDF2.PdfReader:
    try:
        return PyPDF2.PdfReader(io.BytesIO(data))
    except Exception as e:
        raise ExtractionError(f"Failed to extract text from PDF: {e}", reason="pdf-parse-failure") from e


def extract_text_by_page(data: bytes) -> List[str]:
    """Extract text from each page of an in-memory PDF."""
    reader = _open_reader(data)
    pages = []
    try:
        for page in reader.pages:
            pages.append(page.extract_text() or "")
    except Exception as e:
        raise ExtractionError(f"Failed to extract text from PDF: {e}", reason="pdf-parse-failure") from e
    return pages
