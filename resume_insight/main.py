# resume_insight/main.py
from __future__ import annotations
import logging

import sentry_sdk
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.sessions import SessionMiddleware

from resume_insight.core.config import settings
from resume_insight.core.errors import AnalysisError
from resume_insight.db import models  # noqa: F401  (registers tables)
from resume_insight.db.session import Base, engine
from resume_insight.routes import analyze, auth, resumes

logging.basicConfig(level=settings.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)

# init DB
Base.metadata.create_all(bind=engine)

# observability
if settings.sentry_dsn:
    sentry_sdk.init(dsn=settings.sentry_dsn, traces_sample_rate=0.1)

app = FastAPI(title=settings.api_title, version=settings.api_version)

# sessions carry the authenticated user id
app.add_middleware(SessionMiddleware, secret_key=settings.session_secret, https_only=settings.session_https_only)


# -------------------- Errors --------------------
@app.exception_handler(AnalysisError)
async def analysis_error_handler(request: Request, exc: AnalysisError):
    if exc.status_code >= 500:
        logger.error("%s on %s: %s", type(exc).__name__, request.url.path, exc.message)
    else:
        logger.info("%s on %s: %s", type(exc).__name__, request.url.path, exc.message)
    return JSONResponse({"error": exc.message}, status_code=exc.status_code)

@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse({"error": str(exc.detail)}, status_code=exc.status_code, headers=exc.headers)

@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    first = (exc.errors() or [{}])[0]
    where = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
    msg = first.get("msg", "Invalid request")
    return JSONResponse({"error": f"{where}: {msg}" if where else msg}, status_code=422)

@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s", request.url.path)
    return JSONResponse({"error": str(exc) or type(exc).__name__}, status_code=500)


# routers
app.include_router(auth.router)
app.include_router(analyze.router, prefix="/api/analyze", tags=["analyze"])
app.include_router(resumes.router, prefix="/api/analyses", tags=["analyses"])

@app.get("/healthz")
def health():
    return {"ok": True, "version": settings.api_version}
