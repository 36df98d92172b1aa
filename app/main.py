"""FastAPI entrypoint for the CodeClimb API."""

from __future__ import annotations

import logging
import os
import re
import time
import uuid
from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from app.Core.config import get_settings
from app.Auth.routes import router as auth_router
from app.features.lists.endpoints import router as lists_router
from app.features.problems.endpoints import router as problems_router
from app.features.attempts.endpoints import router as attempts_router
from app.features.dashboard.endpoints import router as dashboard_router

_settings = get_settings()
app = FastAPI(title=_settings.app_name)
_START_TIME = datetime.now(timezone.utc)

logger = logging.getLogger("request")


# ------------------------
# CORS Setup
# ------------------------
def _split_env_csv(name: str, default: str = ""):
    raw = os.getenv(name, default)
    return [o.strip().rstrip("/") for o in raw.split(",") if o.strip()]


_FRONTEND_ORIGINS = _split_env_csv(
    "ALLOW_ORIGINS",
    "http://localhost:5173,http://localhost:3000,http://127.0.0.1:5173,http://127.0.0.1:3000",
)

_CORS_ORIGIN_REGEX = re.compile(r"https?://(localhost|127\.0\.0\.1)(:\d+)?", re.I)

app.add_middleware(
    CORSMiddleware,
    allow_origins=_FRONTEND_ORIGINS,
    allow_origin_regex=_CORS_ORIGIN_REGEX.pattern,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ------------------------
# Custom Middlewares
# ------------------------
@app.middleware("http")
async def request_id_middleware(request: Request, call_next):
    incoming = request.headers.get("X-Request-Id") or request.headers.get("X-Request-ID")
    req_id = incoming or str(uuid.uuid4())
    request.state.request_id = req_id
    logger.info("request.start", extra={"request_id": req_id, "path": request.url.path, "method": request.method})
    response = await call_next(request)
    response.headers["X-Request-Id"] = req_id
    logger.info("request.end", extra={"request_id": req_id, "path": request.url.path, "status_code": response.status_code})
    return response


@app.middleware("http")
async def timing_middleware(request: Request, call_next):
    t0 = time.perf_counter()
    resp = await call_next(request)
    dt = int((time.perf_counter() - t0) * 1000)
    logger.info("%s %s %dms %d", request.method, request.url.path, dt, resp.status_code)
    return resp


# ------------------------
# Routers
# ------------------------
app.include_router(auth_router)
app.include_router(lists_router)
app.include_router(problems_router)
app.include_router(attempts_router)
app.include_router(dashboard_router)


# ------------------------
# Meta endpoints
# ------------------------
@app.get("/", tags=["meta"], summary="API Root")
async def root():
    return {
        "name": _settings.app_name,
        "status": "ok",
        "docs": "/docs",
        "health": "/healthz",
    }


@app.get("/healthz", tags=["meta"], summary="Liveness / readiness probe")
def healthz() -> Dict[str, Any]:
    from app.DB.base import list_models
    from app.DB.session import engine
    from app.DB import models as _models  # noqa: F401

    now = datetime.now(timezone.utc)
    db_status: str = "unknown"
    db_latency_ms: float | None = None

    try:
        start = time.perf_counter()
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        db_latency_ms = round((time.perf_counter() - start) * 1000, 2)
        db_status = "ok"
    except SQLAlchemyError as e:
        db_status = f"error:{type(e).__name__}"

    return {
        "status": "ok" if db_status == "ok" else "degraded",
        "time_utc": now.isoformat(),
        "uptime_seconds": round((now - _START_TIME).total_seconds(), 2),
        "version": os.getenv("APP_VERSION", "dev"),
        "environment": "debug" if _settings.debug else "prod",
        "components": {
            "database": (
                {"status": db_status, "latency_ms": db_latency_ms}
                if db_status == "ok"
                else {"status": db_status}
            ),
        },
        "counts": {"routes": len(app.routes), "models": len(list_models())},
    }


@app.on_event("startup")
def _create_sqlite_schema():
    # Server databases are migrated with alembic; local SQLite files are created in place
    if not _settings.is_sqlite:
        return
    from app.DB.base import Base
    from app.DB.session import engine
    from app.DB import models as _models  # noqa: F401

    Base.metadata.create_all(bind=engine)
    logging.getLogger("startup").info("sqlite schema ensured")
