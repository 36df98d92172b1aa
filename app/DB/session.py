#app\DB\session.py
"""Session forge."""

from __future__ import annotations

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
import time
import logging

from app.Core.config import get_settings

settings = get_settings()


def get_database_url() -> str:
    return settings.get_database_url()

runtime_url = get_database_url()
if not runtime_url:
    raise RuntimeError("DATABASE_URL not configured")

logger = logging.getLogger("db.session")


def _engine_kwargs(url: str) -> dict:
    if url.startswith("sqlite"):
        # SQLite is used for local dev; a single file, no pool tunables
        return {"connect_args": {"check_same_thread": False}, "echo": settings.debug}

    connect_args = {"sslmode": "require"} if "sslmode=" not in url else {}
    # Add connect_timeout to driver connect args
    connect_args = {**connect_args, "connect_timeout": settings.db_connect_timeout}
    return {
        "pool_pre_ping": True,
        "pool_size": settings.db_pool_size,
        "max_overflow": settings.db_max_overflow,
        "pool_timeout": settings.db_pool_timeout,
        "pool_recycle": 300,
        "echo": settings.debug,
        "connect_args": connect_args,
    }


engine = create_engine(runtime_url, **_engine_kwargs(runtime_url))

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db():
    t0 = time.perf_counter()
    db = SessionLocal()
    acquire_ms = int((time.perf_counter() - t0) * 1000)
    # Lightweight visibility into pool waits
    if acquire_ms > 50:
        logger.warning("db_acquire_ms=%d", acquire_ms)
    try:
        yield db
    finally:
        db.close()
