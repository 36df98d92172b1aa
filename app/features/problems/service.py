"""Problem catalog service: listing with latest attempt, template seeding."""

from __future__ import annotations

import logging
from typing import Iterable, List
from uuid import UUID

from sqlalchemy.orm import Session

from app.common.errors import NotFoundError, ValidationError
from app.common.utils import ensure_utc
from app.features.attempts.repository import attempt_repository
from app.features.lists.repository import list_repository
from .models import Problem
from .repository import problem_repository
from .schemas import LatestAttempt, ProblemSeedRow, ProblemWithLatestAttempt

logger = logging.getLogger(__name__)


def list_with_latest_attempt(db: Session, user_id: UUID, list_id: UUID) -> List[ProblemWithLatestAttempt]:
    """Every catalog problem of the list's template, joined with its current attempt (if any)."""
    db_list = list_repository.find_owned(db, user_id, list_id)
    if not db_list:
        raise NotFoundError("List not found")

    problems = problem_repository.list_problems(db, db_list.template_version)
    current = attempt_repository.current_state_by_problem(db, user_id, db_list.template_version, list_id)

    out: List[ProblemWithLatestAttempt] = []
    for p in problems:
        row = current.get((list_id, p.neet250_id))
        latest = None
        if row is not None:
            latest = LatestAttempt.model_validate(row)
            latest.updated_at = ensure_utc(row.updated_at)
        out.append(
            ProblemWithLatestAttempt(
                neet250_id=p.neet250_id,
                order_index=p.order_index,
                title=p.title,
                leetcode_slug=p.leetcode_slug,
                category=p.category,
                difficulty=p.difficulty,
                latest_attempt=latest,
            )
        )
    return out


def _check_seed_rows(rows: List[ProblemSeedRow]) -> None:
    if not rows:
        raise ValidationError("Seed file contains no problems")
    orders = sorted(r.order_index for r in rows)
    if orders != list(range(1, len(rows) + 1)):
        raise ValidationError("order_index values must be dense and start at 1")
    for field in ("neet250_id", "leetcode_slug"):
        values = [getattr(r, field) for r in rows]
        if len(set(values)) != len(values):
            raise ValidationError(f"Duplicate {field} in seed file")


def seed_template(db: Session, template_version: str, rows: Iterable[ProblemSeedRow]) -> int:
    """Insert a complete template version. A template is seeded once and never edited."""
    rows = list(rows)
    if problem_repository.exists_template(db, template_version):
        raise ValidationError(f"Template {template_version} already seeded")
    _check_seed_rows(rows)

    inserted = problem_repository.bulk_insert(
        db,
        (
            Problem(
                template_version=template_version,
                neet250_id=r.neet250_id,
                order_index=r.order_index,
                title=r.title,
                leetcode_slug=r.leetcode_slug,
                category=r.category,
                difficulty=r.difficulty.value,
            )
            for r in rows
        ),
    )
    db.commit()
    logger.info("catalog.seeded template=%s problems=%d", template_version, inserted)
    return inserted
