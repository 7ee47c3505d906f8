# SPDX-License-Identifier: AGPL-3.0-only

"""
Pydantic models for document intake.

This module defines the request-scoped data that flows through the pipeline:
the uploaded document, the text extracted from it, and the enumerations used
to steer prompting (document type, prompt task, supported mime types).
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field, field_validator


class DocumentType(str, Enum):
    """Heuristic document categories. Declaration order breaks classifier ties."""
    LEASE_AGREEMENT = "lease_agreement"
    EMPLOYMENT_CONTRACT = "employment_contract"
    NDA = "nda"
    SERVICE_AGREEMENT = "service_agreement"
    PURCHASE_AGREEMENT = "purchase_agreement"
    LOAN_AGREEMENT = "loan_agreement"
    POWER_OF_ATTORNEY = "power_of_attorney"
    WILL_TESTAMENT = "will_testament"
    PRIVACY_POLICY = "privacy_policy"
    GENERAL_LEGAL = "general_legal"

    @property
    def label(self) -> str:
        """Human-readable name used inside prompts."""
        if self is DocumentType.NDA:
            return "non-disclosure agreement"
        if self is DocumentType.WILL_TESTAMENT:
            return "will and testament"
        if self is DocumentType.GENERAL_LEGAL:
            return "legal document"
        return self.value.replace("_", " ")


class PromptTask(str, Enum):
    """Selects the prompt template, result schema and fallback entry."""
    ANALYZE = "analyze"
    EXPLAIN_CLAUSE = "explain_clause"
    QA = "qa"
    COMPLIANCE_CHECK = "compliance_check"
    BENCHMARK = "benchmark"


class MimeType(str, Enum):
    """Upload types the text extractor understands."""
    PDF = "application/pdf"
    TEXT = "text/plain"
    PNG = "image/png"
    JPEG = "image/jpeg"

    @property
    def is_image(self) -> bool:
        return self in (MimeType.PNG, MimeType.JPEG)

    @classmethod
    def resolve(cls, mimetype: Optional[str], filename: Optional[str] = None) -> Optional["MimeType"]:
        """
        Map an upload's declared mimetype (or, failing that, its extension)
        to a supported MimeType. Returns None for anything unsupported.
        """
        declared = (mimetype or "").split(";")[0].strip().lower()
        if declared == "image/jpg":
            declared = MimeType.JPEG.value
        for member in cls:
            if member.value == declared:
                return member

        # Browsers sometimes send application/octet-stream; trust the extension then
        if declared in ("", "application/octet-stream"):
            name = (filename or "").lower()
            for ext, member in _EXTENSIONS.items():
                if name.endswith(ext):
                    return member
        return None


_EXTENSIONS = {
    ".pdf": MimeType.PDF,
    ".txt": MimeType.TEXT,
    ".png": MimeType.PNG,
    ".jpg": MimeType.JPEG,
    ".jpeg": MimeType.JPEG,
}


class UploadedDocument(BaseModel):
    """An uploaded file held in memory for the duration of one request."""
    raw_bytes: bytes = Field(repr=False, description="File contents")
    mime_type: MimeType = Field(description="Resolved mime type")
    filename: str = Field("", description="Client-supplied file name")

    @property
    def size_bytes(self) -> int:
        return len(self.raw_bytes)


class ExtractedText(BaseModel):
    """Text pulled out of an uploaded document. Never empty."""
    content: str = Field(description="Extracted text")
    source_mime: MimeType = Field(description="Mime type the text came from")
    used_ocr: bool = Field(False, description="Whether OCR produced the text")

    @field_validator("content")
    @classmethod
    def content_not_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("extracted text must not be empty")
        return v

    @property
    def length(self) -> int:
        return len(self.content)
