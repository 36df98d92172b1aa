"""Domain errors raised by services and translated to HTTP by endpoints."""

from __future__ import annotations

from fastapi import HTTPException, status


class ValidationError(ValueError):
    """Caller supplied something unusable (bad scope, empty attempt payload...)."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(ValueError):
    """Referenced resource does not exist or is not owned by the caller."""

    status_code = status.HTTP_404_NOT_FOUND


def to_http(exc: ValueError) -> HTTPException:
    """Map a domain error onto an HTTPException; plain ValueError is a 400."""
    code = getattr(exc, "status_code", status.HTTP_400_BAD_REQUEST)
    return HTTPException(status_code=code, detail=str(exc))
