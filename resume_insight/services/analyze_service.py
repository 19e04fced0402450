# resume_insight/services/analyze_service.py
from __future__ import annotations

import logging
from typing import Optional

from resume_insight.nlp.extractor import extract_text
from resume_insight.nlp.job_matcher import match_jobs
from resume_insight.nlp.normalizer import normalize_text
from resume_insight.nlp.scorer import score_resume
from resume_insight.nlp.sections import detect_sections
from resume_insight.schemas.base import AnalysisResult

logger = logging.getLogger(__name__)


def analyze_text(text: str) -> AnalysisResult:
    """Score already-normalized text. Same input, same result."""
    sections = detect_sections(text)
    card = score_resume(text, sections)
    return AnalysisResult(
        score=card.score,
        summary=card.summary,
        pros=card.pros,
        cons=card.cons,
        recommendations=card.recommendations,
        jobs=match_jobs(text),
    )


def analyze_document(data: bytes, content_type: Optional[str], filename: Optional[str]) -> AnalysisResult:
    raw = extract_text(data, content_type, filename)
    text = normalize_text(raw)
    result = analyze_text(text)
    logger.info("Analyzed %s: %d chars, score=%d", filename, len(text), result.score)
    return result
