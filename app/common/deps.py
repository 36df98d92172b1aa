"""Shared FastAPI dependencies for authentication and request context."""

from __future__ import annotations

import logging
from uuid import UUID

from fastapi import Depends, HTTPException, Request, status
from pydantic import BaseModel
from sqlalchemy.orm import Session

from app.Auth.deps import Claims, get_current_claims
from app.DB.session import get_db
from app.features.users.repository import user_repository


logger = logging.getLogger("auth.deps")


class CurrentUser(BaseModel):
    """Minimal user identity shared across endpoints."""
    id: UUID
    email: str
    timezone: str


def get_current_user(
    request: Request,
    claims: Claims = Depends(get_current_claims),
    db: Session = Depends(get_db),
) -> CurrentUser:
    """Resolve the token subject to a stored user.

    Caches the result on ``request.state.current_user`` so routers that also
    declare the dependency do not hit the database twice.
    """
    cached: CurrentUser | None = getattr(request.state, "current_user", None)
    if cached is not None:
        return cached

    subject = claims.get("sub")
    if not subject:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token: missing subject")
    try:
        user_id = UUID(subject)
    except ValueError:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token: bad subject") from None

    db_user = user_repository.get(db, user_id)
    if not db_user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="User no longer exists")

    current = CurrentUser(id=db_user.id, email=db_user.email, timezone=db_user.timezone)
    request.state.current_user = current

    request_id = getattr(request.state, "request_id", None)
    logger.info(
        "auth_resolved user_id=%s request_id=%s path=%s",
        current.id,
        request_id,
        request.url.path,
    )
    return current
