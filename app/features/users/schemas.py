"""Pydantic models for user resources."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from app.common.schemas import CamelModel


class UserOut(CamelModel):
    """Represents a user stored in the database (no credentials)."""
    id: UUID
    email: str
    timezone: str
    created_at: datetime
