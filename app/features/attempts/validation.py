"""Attempt payload checks shared by the attempt CRUD and the dashboard engine."""

from __future__ import annotations

from typing import Any, Optional

from app.common.errors import ValidationError
from app.common.utils import normalize_nullable
from .models import ConfidenceLevel

_FLAG_FIELDS = ("solved", "date_solved", "time_minutes", "attempts")
_TEXT_FIELDS = ("confidence", "time_complexity", "space_complexity", "notes", "problem_url")


def is_meaningful(entry: Any) -> bool:
    """True when at least one substantive field is populated.

    Works on ORM rows and request payloads alike (attribute access only).
    Blank strings do not count.
    """
    for field in _FLAG_FIELDS:
        if getattr(entry, field, None) is not None:
            return True
    for field in _TEXT_FIELDS:
        if normalize_nullable(getattr(entry, field, None)) is not None:
            return True
    return False


def parse_confidence(value: Optional[str]) -> Optional[ConfidenceLevel]:
    raw = normalize_nullable(value)
    if raw is None:
        return None
    try:
        return ConfidenceLevel(raw.upper())
    except ValueError:
        raise ValidationError("Confidence must be LOW, MEDIUM, or HIGH") from None


def validate_payload(payload: Any) -> None:
    """Reject payloads the attempt log must never store."""
    attempts = getattr(payload, "attempts", None)
    if attempts is not None and attempts < 1:
        raise ValidationError("Attempts must be >= 1")
    time_minutes = getattr(payload, "time_minutes", None)
    if time_minutes is not None and time_minutes < 0:
        raise ValidationError("Time minutes must be >= 0")
    parse_confidence(getattr(payload, "confidence", None))
    if not is_meaningful(payload):
        raise ValidationError("Attempt payload must include at least one meaningful field")
