# resume_insight/core/config.py
from __future__ import annotations
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # API
    api_title: str = "Resume Insight API"
    api_version: str = "0.1.0"

    # DB
    database_url: str = "sqlite:///./resume_insight.db"

    # Auth / Sessions
    session_secret: str = "change-me"         # env: SESSION_SECRET
    session_https_only: bool = False          # env: SESSION_HTTPS_ONLY
    enable_email_signup: bool = True          # env: ENABLE_EMAIL_SIGNUP

    # History
    history_page_size: int = 20               # env: HISTORY_PAGE_SIZE

    # Observability
    log_level: str = "INFO"                   # env: LOG_LEVEL
    sentry_dsn: Optional[str] = None          # env: SENTRY_DSN

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="",
        case_sensitive=False,
    )

settings = Settings()
