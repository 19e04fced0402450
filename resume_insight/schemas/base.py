from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class JobMatch(BaseModel):
	model_config = ConfigDict(frozen=True)

	title: str
	matchPercentage: str
	reason: str


class AnalysisResult(BaseModel):
	model_config = ConfigDict(frozen=True)

	# upper bound only; penalties may push it below zero
	score: int = Field(le=99)
	summary: str
	pros: List[str]
	cons: List[str]
	recommendations: List[str]
	jobs: List[JobMatch] = Field(min_length=1, max_length=3)


class AnalyzeResponse(AnalysisResult):
	id: str


class ErrorResponse(BaseModel):
	error: str


class Credentials(BaseModel):
	email: str
	password: str


class UserOut(BaseModel):
	id: int
	email: str
	name: Optional[str] = None


class AnalysisSummary(BaseModel):
	id: str
	file_name: str
	score: int
	created_at: Optional[datetime] = None


class AnalysisPage(BaseModel):
	items: List[AnalysisSummary]
	page: int
	page_size: int
	total: int
	pages: int
	has_prev: bool
	has_next: bool
