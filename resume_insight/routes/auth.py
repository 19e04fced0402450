# resume_insight/routes/auth.py
from __future__ import annotations
import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from resume_insight.core.config import settings as cfg
from resume_insight.core.security import current_user
from resume_insight.db.models import User
from resume_insight.db.session import get_db
from resume_insight.schemas.base import Credentials, UserOut
from resume_insight.utils.passwords import hash_password, verify_password


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


def _error(status: int, message: str) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status)


def _login(request: Request, user: User) -> UserOut:
    request.session["user_id"] = user.id
    return UserOut(id=user.id, email=user.email, name=user.name)


# ---------- Email + Password ----------
# argon2 hashing and queries are blocking, so these are sync handlers
@router.post("/signup", response_model=UserOut, status_code=201)
def signup(payload: Credentials, request: Request, db: Session = Depends(get_db)):
    if not cfg.enable_email_signup:
        return _error(403, "Email signup is disabled.")

    email = (payload.email or "").strip().lower()
    if not email or "@" not in email:
        return _error(400, "Please enter a valid email.")
    if db.query(User).filter(User.email == email).first():
        return _error(400, "An account with this email already exists.")

    try:
        pw_hash = hash_password(payload.password)
    except ValueError as ve:
        return _error(400, str(ve))

    u = User(email=email, name=email.split("@")[0], password_hash=pw_hash)
    db.add(u); db.commit(); db.refresh(u)
    logger.info("New user %s", u.id)
    return _login(request, u)


@router.post("/login", response_model=UserOut)
def login(payload: Credentials, request: Request, db: Session = Depends(get_db)):
    email = (payload.email or "").strip().lower()
    user = db.query(User).filter(User.email == email).first()
    if not user or not verify_password(payload.password, user.password_hash):
        return _error(401, "Invalid email or password.")
    return _login(request, user)


@router.post("/logout", status_code=204)
async def logout(request: Request):
    request.session.clear()


@router.get("/me", response_model=UserOut)
def me(user: User = Depends(current_user)):
    return UserOut(id=user.id, email=user.email, name=user.name)
