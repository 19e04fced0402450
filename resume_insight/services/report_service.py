# resume_insight/services/report_service.py
from __future__ import annotations
import logging
import secrets
import string
from typing import List, Optional, Tuple

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from resume_insight.core.errors import PersistenceFailed
from resume_insight.db.models import Analysis
from resume_insight.schemas.base import AnalysisResult

logger = logging.getLogger(__name__)

# short slug generator
_ALPH = string.ascii_lowercase + string.digits
def _slug(n: int = 12) -> str:
    return "".join(secrets.choice(_ALPH) for _ in range(n))

def save_analysis(db: Session, user_id: int, file_name: str, result: AnalysisResult) -> Analysis:
    rec = Analysis(
        slug=_slug(),
        user_id=user_id,
        file_name=file_name or "",
        score=result.score,
        payload=result.model_dump(),
    )
    try:
        db.add(rec); db.commit(); db.refresh(rec)
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error("DB insert failed for user %s: %s", user_id, exc)
        raise PersistenceFailed(str(exc)) from exc
    return rec

def get_analysis(db: Session, user_id: int, slug: str) -> Optional[Analysis]:
    return (
        db.query(Analysis)
        .filter(Analysis.slug == slug, Analysis.user_id == user_id)
        .first()
    )

def list_analyses(db: Session, user_id: int, page: int, page_size: int) -> Tuple[List[Analysis], int]:
    total = db.query(func.count(Analysis.id)).filter(Analysis.user_id == user_id).scalar() or 0
    rows = (
        db.query(Analysis)
        .filter(Analysis.user_id == user_id)
        .order_by(Analysis.created_at.desc(), Analysis.id.desc())
        .offset((page - 1) * page_size)
        .limit(page_size)
        .all()
    )
    return rows, total
