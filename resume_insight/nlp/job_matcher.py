# resume_insight/nlp/job_matcher.py
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from resume_insight.schemas.base import JobMatch

MAX_MATCHES = 3


@dataclass(frozen=True)
class JobRule:
    keywords: Tuple[str, ...]
    title: str
    match_percentage: str   # fixed label, not a computed confidence
    reason: str

    def fires(self, body: str) -> bool:
        return any(kw in body for kw in self.keywords)

    def to_match(self) -> JobMatch:
        return JobMatch(title=self.title, matchPercentage=self.match_percentage, reason=self.reason)


JOB_RULES: Tuple[JobRule, ...] = (
    JobRule(
        keywords=("react", "javascript", "frontend"),
        title="Frontend Developer",
        match_percentage="92%",
        reason="Strong match for modern web technologies found in your profile.",
    ),
    JobRule(
        keywords=("python", "data", "sql"),
        title="Data Analyst",
        match_percentage="88%",
        reason="Your experience with data processing and databases aligns well.",
    ),
    JobRule(
        keywords=("manager", "lead", "agile"),
        title="Project Manager",
        match_percentage="85%",
        reason="Leadership and methodology keywords detected.",
    ),
)

FALLBACK_RULE = JobRule(
    keywords=(),
    title="General Associate",
    match_percentage="70%",
    reason="Based on your general professional profile.",
)


def match_jobs(text: str, rules: Sequence[JobRule] = JOB_RULES) -> List[JobMatch]:
    body = (text or "").lower()
    matches = [r.to_match() for r in rules if r.fires(body)]
    if not matches:
        matches.append(FALLBACK_RULE.to_match())
    return matches[:MAX_MATCHES]
