# resume_insight/nlp/extractor.py
from __future__ import annotations

import logging
from enum import Enum
from io import BytesIO
from typing import Optional

from resume_insight.core.errors import (
    EmptyOrUnreadableDocument,
    ExtractionFailed,
    ScannedOrEmptyDocument,
    UnsupportedFormat,
)
from resume_insight.utils.docx_text import extract_docx_text
from resume_insight.utils.pdf import extract_pdf_text

logger = logging.getLogger(__name__)

# Minimum trimmed length of a parser's output before we trust it.
MIN_EXTRACTED_CHARS = 30

PDF_MIME = "application/pdf"
DOCX_MIME = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


class DocumentFormat(str, Enum):
    PDF = "pdf"
    DOCX = "docx"


_BY_MIME = {PDF_MIME: DocumentFormat.PDF, DOCX_MIME: DocumentFormat.DOCX}
_BY_SUFFIX = {".pdf": DocumentFormat.PDF, ".docx": DocumentFormat.DOCX}


def resolve_format(content_type: Optional[str], filename: Optional[str]) -> DocumentFormat:
    """MIME type first; filename suffix when the type is missing or generic."""
    mime = (content_type or "").split(";")[0].strip().lower()
    if mime in _BY_MIME:
        return _BY_MIME[mime]
    name = (filename or "").strip().lower()
    for suffix, fmt in _BY_SUFFIX.items():
        if name.endswith(suffix):
            return fmt
    raise UnsupportedFormat()


def _parse(fmt: DocumentFormat, data: bytes) -> str:
    if fmt is DocumentFormat.PDF:
        text, pages = extract_pdf_text(BytesIO(data))
        logger.debug("pdf: %d pages, %d chars", pages, len(text))
        return text
    return extract_docx_text(BytesIO(data))


def extract_text(data: bytes, content_type: Optional[str], filename: Optional[str]) -> str:
    """
    Raw document bytes -> plain text.

    Raises UnsupportedFormat before any parsing, ScannedOrEmptyDocument /
    EmptyOrUnreadableDocument when the parser yields almost nothing, and
    ExtractionFailed for any parser fault.
    """
    fmt = resolve_format(content_type, filename)
    try:
        text = _parse(fmt, data)
    except Exception as exc:
        logger.warning("Parsing %s as %s failed: %s", filename, fmt.value, exc)
        raise ExtractionFailed(str(exc) or type(exc).__name__) from exc

    if len(text.strip()) < MIN_EXTRACTED_CHARS:
        if fmt is DocumentFormat.PDF:
            raise ScannedOrEmptyDocument()
        raise EmptyOrUnreadableDocument()
    return text
