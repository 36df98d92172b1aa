from datetime import date, datetime
from typing import Optional

from pydantic import Field, field_validator

from app.common.schemas import CamelModel
from .models import Difficulty


class ProblemSeedRow(CamelModel):
    """One catalog row as read from a seed file."""
    neet250_id: int = Field(ge=1)
    order_index: int = Field(ge=1)
    title: str = Field(min_length=1)
    leetcode_slug: str = Field(min_length=1)
    category: str = Field(min_length=1)
    difficulty: Difficulty

    @field_validator("difficulty", mode="before")
    @classmethod
    def _expand_short_difficulty(cls, value):
        # Older dataset exports store a single letter (E/M/H)
        if isinstance(value, str):
            short = {"E": Difficulty.easy, "M": Difficulty.medium, "H": Difficulty.hard}
            return short.get(value.strip().upper(), value.strip().capitalize())
        return value


class LatestAttempt(CamelModel):
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


class ProblemWithLatestAttempt(CamelModel):
    neet250_id: int
    order_index: int
    title: str
    leetcode_slug: str
    category: str
    difficulty: str
    latest_attempt: Optional[LatestAttempt] = None
