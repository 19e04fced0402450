# resume_insight/nlp/normalizer.py
from __future__ import annotations
import re

from resume_insight.core.errors import ContentTooShort

MIN_CONTENT_CHARS = 50

_WS = re.compile(r"\s+")

def collapse_whitespace(text: str) -> str:
    return _WS.sub(" ", text or "").strip()

def normalize_text(text: str) -> str:
    t = collapse_whitespace(text)
    if len(t) < MIN_CONTENT_CHARS:
        raise ContentTooShort()
    return t
