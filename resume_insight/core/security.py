from fastapi import Depends, Request
from sqlalchemy.orm import Session

from resume_insight.core.errors import Unauthenticated
from resume_insight.db.models import User
from resume_insight.db.session import get_db


def session_user_id(request: Request):
	return (request.scope.get("session") or {}).get("user_id")


def current_user(request: Request, db: Session = Depends(get_db)) -> User:
	uid = session_user_id(request)
	user = db.get(User, uid) if uid else None
	if not user:
		# stale cookie pointing at a deleted user
		if uid:
			request.session.clear()
		raise Unauthenticated()
	return user
