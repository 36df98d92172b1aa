"""Dashboard composer: resolves scope once, then derives progress, stats and streaks."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Callable, Optional, Tuple, Union
from uuid import UUID
from sqlalchemy.orm import Session

from app.Core.config import get_settings
from app.common.errors import NotFoundError
from app.common.utils import current_timestamp, ensure_utc, load_zone
from app.features.attempts.repository import attempt_repository
from app.features.attempts.validation import is_meaningful
from app.features.problems.repository import problem_repository
from app.features.users.repository import user_repository
from .progress import compute_progress
from .scope import DashboardScope, ResolvedScope, resolve_scope
from .state import ProblemRef, build_catalog_states
from .stats import CategoryAvgTime, CategorySolved, compute_stats
from .streaks import activity_dates, average_streak, current_streak, longest_streak

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DashboardSnapshot:
    scope: DashboardScope
    template_version: Optional[str]
    resolved_list_id: Optional[UUID]
    latest_list_id: Optional[UUID]
    list_id: Optional[UUID]
    last_activity_at: Optional[datetime]
    farthest_solved: Optional[ProblemRef]
    latest_solved_panel: Tuple[ProblemRef, ...]
    next_unsolved_panel: Tuple[ProblemRef, ...]
    total_solved: int
    per_category: Tuple[CategorySolved, ...]
    overall_avg_time_minutes: Optional[float]
    per_category_avg_time_minutes: Tuple[CategoryAvgTime, ...]
    current_streak: int
    average_streak: float
    longest_streak: int

    @classmethod
    def empty(cls, scope: DashboardScope) -> "DashboardSnapshot":
        return cls(
            scope=scope,
            template_version=None,
            resolved_list_id=None,
            latest_list_id=None,
            list_id=None,
            last_activity_at=None,
            farthest_solved=None,
            latest_solved_panel=(),
            next_unsolved_panel=(),
            total_solved=0,
            per_category=(),
            overall_avg_time_minutes=None,
            per_category_avg_time_minutes=(),
            current_streak=0,
            average_streak=0.0,
            longest_streak=0,
        )


def _zone(name: Optional[str]):
    if not name:
        return timezone.utc
    try:
        return load_zone(name)
    except ValueError:
        logger.warning("dashboard.bad_timezone tz=%s, falling back to UTC", name)
        return timezone.utc


class DashboardService:
    """Read-only aggregation over the attempt log. Holds no per-request state."""

    def __init__(self, now: Callable[[], datetime] = current_timestamp):
        self._now = now

    def today_for_user(self, db: Session, user_id: UUID) -> date:
        user = user_repository.get(db, user_id)
        if not user:
            raise NotFoundError("User not found")
        return self._now().astimezone(_zone(user.timezone)).date()

    def get_dashboard(
        self,
        db: Session,
        user_id: UUID,
        scope: Union[DashboardScope, str, None] = None,
        list_id: Optional[UUID] = None,
        today: Optional[date] = None,
    ) -> DashboardSnapshot:
        """Compose one dashboard snapshot.

        ``today`` overrides the user's local date; by default it is derived
        from the injected clock and the user's timezone.
        """
        if not isinstance(scope, DashboardScope):
            scope = DashboardScope.parse(scope)
        resolved = resolve_scope(db, user_id, scope, list_id, get_settings().default_template_version)
        if resolved.empty:
            logger.info("dashboard.empty user=%s scope=%s", user_id, scope.value)
            return DashboardSnapshot.empty(scope)
        if today is None:
            today = self.today_for_user(db, user_id)
        return self._compose(db, user_id, resolved, today)

    def _compose(self, db: Session, user_id: UUID, resolved: ResolvedScope, today: date) -> DashboardSnapshot:
        tv = resolved.template_version
        problems = problem_repository.list_problems(db, tv)
        current = attempt_repository.current_state_by_problem(db, user_id, tv, resolved.list_id)
        attempts = attempt_repository.all_attempts_in_scope(db, user_id, tv, resolved.list_id)

        catalog = build_catalog_states(problems, current)
        progress = compute_progress(catalog)
        stats = compute_stats(catalog, attempts)

        meaningful = [a for a in attempts if is_meaningful(a)]
        dates = activity_dates(meaningful)
        last_activity_at = max((ensure_utc(a.updated_at) for a in meaningful), default=None)

        snapshot = DashboardSnapshot(
            scope=resolved.scope,
            template_version=tv,
            resolved_list_id=resolved.resolved_list_id,
            latest_list_id=resolved.resolved_list_id if resolved.scope is DashboardScope.LATEST else None,
            list_id=resolved.resolved_list_id if resolved.scope is DashboardScope.LIST else None,
            last_activity_at=last_activity_at,
            farthest_solved=progress.farthest_solved,
            latest_solved_panel=progress.latest_solved_panel,
            next_unsolved_panel=progress.next_unsolved_panel,
            total_solved=stats.total_solved,
            per_category=stats.per_category,
            overall_avg_time_minutes=stats.overall_avg_time_minutes,
            per_category_avg_time_minutes=stats.per_category_avg_time_minutes,
            current_streak=current_streak(dates, today),
            average_streak=average_streak(dates),
            longest_streak=longest_streak(dates),
        )
        logger.info(
            "dashboard.composed user=%s scope=%s list=%s solved=%d streak=%d",
            user_id, resolved.scope.value, resolved.resolved_list_id, snapshot.total_solved, snapshot.current_streak,
        )
        return snapshot


dashboard_service = DashboardService()
