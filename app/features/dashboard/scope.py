"""Which list(s) and template version a dashboard request aggregates over."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional
from uuid import UUID

from sqlalchemy.orm import Session

from app.common.errors import NotFoundError, ValidationError
from app.features.attempts.repository import attempt_repository
from app.features.lists.repository import list_repository


class DashboardScope(str, Enum):
    LATEST = "latest"
    LIST = "list"
    ALL = "all"

    @classmethod
    def parse(cls, raw: Optional[str]) -> "DashboardScope":
        if raw is None or not raw.strip():
            return cls.LATEST
        try:
            return cls(raw.strip().lower())
        except ValueError:
            raise ValidationError("scope must be one of: latest, list, all") from None


@dataclass(frozen=True)
class ResolvedScope:
    scope: DashboardScope
    template_version: Optional[str] = None
    # None means every list the user owns on template_version
    list_id: Optional[UUID] = None
    resolved_list_id: Optional[UUID] = None
    # user owns no lists yet: zero dashboard, not an error
    empty: bool = False


def resolve_scope(
    db: Session,
    user_id: UUID,
    scope: DashboardScope,
    list_id: Optional[UUID],
    canonical_template_version: str,
) -> ResolvedScope:
    """Resolve a scope selector against the user's lists.

    ``all`` is pinned to ``canonical_template_version``; lists created on any
    other template version are left out of that view.
    """
    if scope is DashboardScope.LIST:
        if list_id is None:
            raise ValidationError("listId is required when scope=list")
        db_list = list_repository.find_owned(db, user_id, list_id)
        if not db_list:
            raise NotFoundError("List not found")
        return ResolvedScope(scope, db_list.template_version, db_list.id, db_list.id)

    if scope is DashboardScope.LATEST:
        target = None
        latest_list_id = attempt_repository.find_most_recent_list_activity(db, user_id)
        if latest_list_id is not None:
            target = list_repository.find_owned(db, user_id, latest_list_id)
        if target is None:
            owned = list_repository.list_owned_by_user(db, user_id)
            if not owned:
                return ResolvedScope(scope, empty=True)
            target = owned[0]
        return ResolvedScope(scope, target.template_version, target.id, target.id)

    if not list_repository.list_owned_by_user(db, user_id):
        return ResolvedScope(scope, empty=True)
    return ResolvedScope(scope, canonical_template_version, None, None)
