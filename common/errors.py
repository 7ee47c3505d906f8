# SPDX-License-Identifier: AGPL-3.0-only

"""
Error taxonomy for the document pipeline.

Extraction-side errors end the request with a 400; upstream and format errors
are recovered by the fallback generator and never reach the HTTP layer.
"""

from typing import Optional


class LexLinkError(Exception):
    """Base error carrying a short machine-readable reason."""

    reason = "error"

    def __init__(self, message: str, reason: Optional[str] = None):
        super().__init__(message)
        self.message = message
        if reason:
            self.reason = reason

    def to_dict(self) -> dict:
        return {"error": self.message, "reason": self.reason}


class ExtractionError(LexLinkError):
    """Text could not be extracted from an uploaded document."""

    reason = "extraction-failure"


class UnsupportedMediaError(LexLinkError):
    """Uploaded file type is not one of pdf, text, png or jpeg."""

    reason = "unsupported-type"


class FileTooLargeError(LexLinkError):
    reason = "file-too-large"


class UpstreamError(LexLinkError):
    """The generative model could not be reached or refused the call."""

    reason = "model-error"


class FormatError(LexLinkError):
    """The model replied, but not with a usable JSON object."""

    reason = "invalid-json"

    def __init__(self, message: str, reason: Optional[str] = None, raw: str = ""):
        super().__init__(message, reason)
        self.raw = raw
