from datetime import date, datetime
from typing import Optional
from uuid import UUID

from app.common.schemas import CamelModel


class UpsertAttemptRequest(CamelModel):
    """Body for create and update; every field optional, at least one must be meaningful."""
    solved: Optional[bool] = None
    date_solved: Optional[date] = None
    time_minutes: Optional[int] = None
    attempts: Optional[int] = None
    confidence: Optional[str] = None
    time_complexity: Optional[str] = None
    space_complexity: Optional[str] = None
    notes: Optional[str] = None
    problem_url: Optional[str] = None


class AttemptResponse(CamelModel):
    id: UUID
    list_id: UUID
    neet250_id: int
    solved: Optional[bool] = None
    date_solved: Optional[date] = None
    time_minutes: Optional[int] = None
    attempts: Optional[int] = None
    confidence: Optional[str] = None
    time_complexity: Optional[str] = None
    space_complexity: Optional[str] = None
    notes: Optional[str] = None
    problem_url: Optional[str] = None
    updated_at: datetime
