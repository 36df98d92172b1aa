from typing import Dict, List, Optional, Tuple
from uuid import UUID

from sqlalchemy import select, func
from sqlalchemy.orm import Session

from app.features.lists.models import ProblemList
from .models import AttemptEntry

ProblemKey = Tuple[UUID, int]  # (list_id, neet250_id)


class AttemptRepository:
    """Attempt log access. Rows are append-only per problem; "current" = newest updated_at, then id."""

    def get_owned(self, db: Session, user_id: UUID, attempt_id: UUID) -> Optional[AttemptEntry]:
        stmt = select(AttemptEntry).where(AttemptEntry.id == attempt_id, AttemptEntry.user_id == user_id)
        return db.scalar(stmt)

    def add(self, db: Session, entry: AttemptEntry) -> AttemptEntry:
        db.add(entry)
        db.flush()
        return entry

    def delete(self, db: Session, entry: AttemptEntry) -> None:
        db.delete(entry)
        db.flush()

    def history(self, db: Session, user_id: UUID, list_id: UUID, neet250_id: int) -> List[AttemptEntry]:
        stmt = (
            select(AttemptEntry)
            .where(
                AttemptEntry.user_id == user_id,
                AttemptEntry.list_id == list_id,
                AttemptEntry.neet250_id == neet250_id,
            )
            .order_by(AttemptEntry.updated_at.desc(), AttemptEntry.id.desc())
        )
        return list(db.scalars(stmt))

    def find_most_recent_list_activity(self, db: Session, user_id: UUID) -> Optional[UUID]:
        """List owning the user's most recently updated attempt, if any."""
        stmt = (
            select(AttemptEntry.list_id)
            .where(AttemptEntry.user_id == user_id)
            .order_by(AttemptEntry.updated_at.desc(), AttemptEntry.id.desc())
            .limit(1)
        )
        return db.scalar(stmt)

    @staticmethod
    def _scope_filters(user_id: UUID, template_version: str, list_id: Optional[UUID]) -> list:
        filters = [
            AttemptEntry.user_id == user_id,
            ProblemList.user_id == user_id,
            ProblemList.template_version == template_version,
        ]
        if list_id is not None:
            filters.append(AttemptEntry.list_id == list_id)
        return filters

    def current_state_by_problem(
        self,
        db: Session,
        user_id: UUID,
        template_version: str,
        list_id: Optional[UUID] = None,
    ) -> Dict[ProblemKey, AttemptEntry]:
        """Latest row per (list, problem) inside the scope.

        ``list_id=None`` covers every list of ``user_id`` on ``template_version``.
        """
        ranked = (
            select(
                AttemptEntry.id.label("attempt_id"),
                func.row_number()
                .over(
                    partition_by=(AttemptEntry.list_id, AttemptEntry.neet250_id),
                    order_by=(AttemptEntry.updated_at.desc(), AttemptEntry.id.desc()),
                )
                .label("rn"),
            )
            .join(ProblemList, ProblemList.id == AttemptEntry.list_id)
            .where(*self._scope_filters(user_id, template_version, list_id))
            .subquery()
        )
        stmt = (
            select(AttemptEntry)
            .join(ranked, ranked.c.attempt_id == AttemptEntry.id)
            .where(ranked.c.rn == 1)
        )
        return {(row.list_id, row.neet250_id): row for row in db.scalars(stmt)}

    def all_attempts_in_scope(
        self,
        db: Session,
        user_id: UUID,
        template_version: str,
        list_id: Optional[UUID] = None,
    ) -> List[AttemptEntry]:
        """Every row in scope, superseded ones included (time averages, streak dates)."""
        stmt = (
            select(AttemptEntry)
            .join(ProblemList, ProblemList.id == AttemptEntry.list_id)
            .where(*self._scope_filters(user_id, template_version, list_id))
            .order_by(AttemptEntry.updated_at.asc(), AttemptEntry.id.asc())
        )
        return list(db.scalars(stmt))

attempt_repository = AttemptRepository()
