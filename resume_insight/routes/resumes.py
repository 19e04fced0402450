from io import BytesIO
from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import StreamingResponse
from sqlalchemy.orm import Session

from resume_insight.core.config import settings as cfg
from resume_insight.core.errors import NotFound
from resume_insight.core.security import current_user
from resume_insight.db.models import User
from resume_insight.db.session import get_db
from resume_insight.schemas.base import AnalysisPage, AnalysisSummary, AnalyzeResponse
from resume_insight.services.report_service import get_analysis, list_analyses
from resume_insight.utils.pdf_report import generate_report_pdf


router = APIRouter()


@router.get("", response_model=AnalysisPage, summary="List my analyses, newest first")
def history(
	page: int = Query(1, ge=1),
	page_size: Optional[int] = Query(None, ge=1, le=100),
	user: User = Depends(current_user),
	db: Session = Depends(get_db),
):
	page_size = page_size or cfg.history_page_size
	rows, total = list_analyses(db, user.id, page, page_size)
	pages = max(1, (total + page_size - 1) // page_size)
	return AnalysisPage(
		items=[
			AnalysisSummary(id=r.slug, file_name=r.file_name, score=r.score, created_at=r.created_at)
			for r in rows
		],
		page=page,
		page_size=page_size,
		total=total,
		pages=pages,
		has_prev=page > 1,
		has_next=page < pages,
	)


# declared before "/{slug}" so the suffix is not swallowed by it
@router.get("/{slug}.pdf", summary="Download an analysis as PDF")
def analysis_pdf(slug: str, user: User = Depends(current_user), db: Session = Depends(get_db)):
	rec = get_analysis(db, user.id, slug)
	if not rec:
		raise NotFound()
	buf = BytesIO()
	generate_report_pdf(buf, rec.payload, file_name=rec.file_name)
	headers = {"Content-Disposition": f'inline; filename="resume-insight-{slug}.pdf"'}
	return StreamingResponse(buf, headers=headers, media_type="application/pdf")


@router.get("/{slug}", response_model=AnalyzeResponse)
def analysis_detail(slug: str, user: User = Depends(current_user), db: Session = Depends(get_db)):
	rec = get_analysis(db, user.id, slug)
	if not rec:
		raise NotFound()
	return AnalyzeResponse(**rec.payload, id=rec.slug)
