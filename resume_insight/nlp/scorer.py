# resume_insight/nlp/scorer.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence

# -----------------------
# Tunables
# -----------------------
BASE_SCORE = 50
POINTS_PER_SECTION = 8
MAX_SCORE = 99
# Verdict threshold for the summary line
WELL_STRUCTURED_ABOVE = 70
# Content length (characters of normalized text)
LONG_CONTENT_CHARS = 1500
SHORT_CONTENT_CHARS = 500
SHORT_CONTENT_PENALTY = 15

DEFAULT_PRO = "Basic contact information found"
DEFAULT_CON = "No major structural issues found"
DEFAULT_RECOMMENDATION = "Quantify your achievements with numbers (e.g., 'Increased sales by 20%')"


@dataclass
class ScoreCard:
    score: int
    summary: str
    pros: List[str] = field(default_factory=list)
    cons: List[str] = field(default_factory=list)
    recommendations: List[str] = field(default_factory=list)


def _summary(section_count: int, score: int) -> str:
    verdict = (
        "It is well-structured for ATS systems."
        if score > WELL_STRUCTURED_ABOVE
        else "It needs more optimization to pass automated filters."
    )
    return f"Local Analysis: Your resume contains {section_count} key professional sections. {verdict}"


def score_resume(text: str, found_sections: Sequence[str]) -> ScoreCard:
    """
    Rule-based quality score for normalized resume text.

    The result is clamped to MAX_SCORE from above only; a short resume with
    no recognised sections keeps its low value.
    """
    pros: List[str] = []
    cons: List[str] = []
    recs: List[str] = []

    score = BASE_SCORE + POINTS_PER_SECTION * len(found_sections)

    if "experience" in found_sections:
        pros.append("Professional experience section detected")
    else:
        cons.append("Missing clear work experience section")
        recs.append("Add a dedicated 'Experience' section to showcase your career history.")

    if "skills" in found_sections:
        pros.append("Technical skills are clearly listed")
    else:
        cons.append("Skills section is missing or poorly defined")
        recs.append("Create a 'Skills' section with keywords relevant to your target roles.")

    length = len(text)
    if length > LONG_CONTENT_CHARS:
        pros.append("Comprehensive content length")
    elif length < SHORT_CONTENT_CHARS:
        score -= SHORT_CONTENT_PENALTY
        cons.append("Resume is too short")
        recs.append("Expand on your achievements and responsibilities to provide more context.")

    return ScoreCard(
        score=min(score, MAX_SCORE),
        summary=_summary(len(found_sections), score),
        pros=pros or [DEFAULT_PRO],
        cons=cons or [DEFAULT_CON],
        recommendations=recs or [DEFAULT_RECOMMENDATION],
    )
