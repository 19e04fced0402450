# resume_insight/core/errors.py
"""Error taxonomy for the analysis pipeline.

Each error carries the HTTP status it maps to; ``main`` registers a single
handler that renders any of them as ``{"error": message}``.
"""
from __future__ import annotations


class AnalysisError(Exception):
    status_code = 500
    default_message = "Internal error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class Unauthenticated(AnalysisError):
    status_code = 401
    default_message = "Unauthorized"


class NoFileSupplied(AnalysisError):
    status_code = 400
    default_message = "No file uploaded"


class UnsupportedFormat(AnalysisError):
    status_code = 400
    default_message = "Unsupported file type. Please upload PDF or DOCX only."


class ContentTooShort(AnalysisError):
    status_code = 400
    default_message = (
        "Resume content is too short or unreadable. If you uploaded a scanned PDF, "
        "please convert it to text using Google Docs or upload DOCX."
    )


class ExtractionError(AnalysisError):
    """The parser ran but could not produce usable text."""

    status_code = 422

    def __init__(self, reason: str | None = None):
        self.reason = reason or self.default_message
        super().__init__(f"Failed to read file: {self.reason}")


class ScannedOrEmptyDocument(ExtractionError):
    default_message = (
        "This PDF appears to be scanned (image-based). "
        "Please upload a text-based PDF or DOCX from Google Docs/Word."
    )


class EmptyOrUnreadableDocument(ExtractionError):
    default_message = "DOCX file appears to be empty or unreadable."


class ExtractionFailed(ExtractionError):
    default_message = "Unknown parser error"


class PersistenceFailed(AnalysisError):
    status_code = 500
    default_message = "Could not save analysis"


class NotFound(AnalysisError):
    status_code = 404
    default_message = "Analysis not found"
