# resume_insight/nlp/sections.py
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Sequence, Tuple

# Section name -> keywords. Order matters: detection output follows it.
SECTION_KEYWORDS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "experience": ("experience", "work history", "employment"),
    "education": ("education", "academic", "university", "college"),
    "skills": ("skills", "technologies", "technical proficiencies"),
    "projects": ("projects", "personal work", "portfolio"),
    "contact": ("email", "phone", "linkedin", "github"),
})


def _has_any(body: str, keywords: Sequence[str]) -> bool:
    return any(kw in body for kw in keywords)


def detect_sections(
    text: str, table: Mapping[str, Sequence[str]] = SECTION_KEYWORDS
) -> Tuple[str, ...]:
    """
    Names of the sections whose keywords appear anywhere in `text`
    (case-insensitive substring match), in table order.
    """
    body = (text or "").lower()
    return tuple(name for name, keywords in table.items() if _has_any(body, keywords))
