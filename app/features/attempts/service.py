"""Attempt log CRUD. Creating records a new attempt; updating edits one entry in place."""

from __future__ import annotations

import logging
from typing import List
from uuid import UUID

from sqlalchemy.orm import Session

from app.common.errors import NotFoundError
from app.common.utils import current_timestamp, normalize_nullable
from app.features.lists.repository import list_repository
from app.features.problems.repository import problem_repository
from .models import AttemptEntry
from .repository import attempt_repository
from .schemas import UpsertAttemptRequest
from .validation import parse_confidence, validate_payload

logger = logging.getLogger(__name__)


def _apply(entry: AttemptEntry, request: UpsertAttemptRequest) -> None:
    confidence = parse_confidence(request.confidence)
    entry.solved = request.solved
    entry.date_solved = request.date_solved
    entry.time_minutes = request.time_minutes
    entry.attempts = request.attempts
    entry.confidence = confidence.value if confidence else None
    entry.time_complexity = normalize_nullable(request.time_complexity)
    entry.space_complexity = normalize_nullable(request.space_complexity)
    entry.notes = request.notes
    entry.problem_url = request.problem_url


def create_attempt(db: Session, user_id: UUID, list_id: UUID, neet250_id: int, request: UpsertAttemptRequest) -> AttemptEntry:
    db_list = list_repository.find_owned(db, user_id, list_id)
    if not db_list:
        raise NotFoundError("List not found")
    if not problem_repository.exists_problem(db, db_list.template_version, neet250_id):
        raise NotFoundError("Problem not found")
    validate_payload(request)

    now = current_timestamp()
    entry = AttemptEntry(user_id=user_id, list_id=list_id, neet250_id=neet250_id, created_at=now, updated_at=now)
    _apply(entry, request)
    attempt_repository.add(db, entry)
    db.commit()
    db.refresh(entry)
    logger.info("attempt.created id=%s list=%s neet250_id=%s", entry.id, list_id, neet250_id)
    return entry


def update_attempt(db: Session, user_id: UUID, attempt_id: UUID, request: UpsertAttemptRequest) -> AttemptEntry:
    entry = attempt_repository.get_owned(db, user_id, attempt_id)
    if not entry:
        raise NotFoundError("Attempt not found")
    validate_payload(request)

    _apply(entry, request)
    entry.updated_at = current_timestamp()
    db.commit()
    db.refresh(entry)
    return entry


def delete_attempt(db: Session, user_id: UUID, attempt_id: UUID) -> None:
    entry = attempt_repository.get_owned(db, user_id, attempt_id)
    if not entry:
        raise NotFoundError("Attempt not found")
    attempt_repository.delete(db, entry)
    db.commit()
    logger.info("attempt.deleted id=%s", attempt_id)


def attempt_history(db: Session, user_id: UUID, list_id: UUID, neet250_id: int) -> List[AttemptEntry]:
    """All attempts for one problem in one list, newest first."""
    if not list_repository.find_owned(db, user_id, list_id):
        raise NotFoundError("List not found")
    return attempt_repository.history(db, user_id, list_id, neet250_id)
