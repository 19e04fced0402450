# resume_insight/db/session.py
from __future__ import annotations
import logging

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from resume_insight.core.config import settings as cfg

logger = logging.getLogger(__name__)

DEFAULT_DATABASE_URL = "sqlite:///./resume_insight.db"

def _normalize_url(url: str | None) -> str:
    # Treat None or empty/whitespace as unset and fall back to local SQLite
    if not url or not url.strip():
        return DEFAULT_DATABASE_URL
    return url.strip()

DATABASE_URL = _normalize_url(getattr(cfg, "database_url", None))

# SQLite needs special connect args; Postgres does not
connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(DATABASE_URL, echo=False, future=True, connect_args=connect_args)
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)
Base = declarative_base()

logger.info("[DB] Using %s", engine.url.render_as_string(hide_password=True))


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
