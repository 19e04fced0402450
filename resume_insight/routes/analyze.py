import logging
from typing import Union

from fastapi import APIRouter, Depends, File, UploadFile
from sqlalchemy.orm import Session

from resume_insight.core.errors import NoFileSupplied
from resume_insight.core.security import current_user
from resume_insight.db.models import User
from resume_insight.db.session import get_db
from resume_insight.schemas.base import AnalyzeResponse, ErrorResponse
from resume_insight.services.analyze_service import analyze_document
from resume_insight.services.report_service import save_analysis


logger = logging.getLogger(__name__)

router = APIRouter()


# sync handler: FastAPI runs it in the threadpool
@router.post(
	"",
	response_model=AnalyzeResponse,
	responses={code: {"model": ErrorResponse} for code in (400, 401, 422, 500)},
)
def analyze(
	file: Union[UploadFile, str, None] = File(None),
	user: User = Depends(current_user),
	db: Session = Depends(get_db),
):
	# a text field named "file" is not a file part
	if file is None or isinstance(file, str):
		raise NoFileSupplied()

	logger.info("Upload from user %s: name=%s type=%s size=%s", user.id, file.filename, file.content_type, file.size)
	data = file.file.read()

	result = analyze_document(data, file.content_type, file.filename)
	rec = save_analysis(db, user.id, file.filename, result)
	return AnalyzeResponse(**result.model_dump(), id=rec.slug)
