"""Day streaks over the dates a user solved something.

All functions are pure; "today" is passed in already resolved to the
user's timezone.
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import Iterable, List, Set

from app.features.attempts.validation import is_meaningful

_ONE_DAY = timedelta(days=1)


def activity_dates(attempts: Iterable) -> Set[date]:
    """Distinct date_solved values over meaningful rows."""
    return {a.date_solved for a in attempts if a.date_solved is not None and is_meaningful(a)}


def _runs(dates: Iterable[date]) -> List[int]:
    """Lengths of maximal runs of consecutive days, oldest first."""
    runs: List[int] = []
    previous = None
    for d in sorted(set(dates)):
        if previous is not None and d - previous == _ONE_DAY:
            runs[-1] += 1
        else:
            runs.append(1)
        previous = d
    return runs


def current_streak(dates: Iterable[date], today: date) -> int:
    """Consecutive days ending at today. Zero when today itself has no activity."""
    days = set(dates)
    streak = 0
    cursor = today
    while cursor in days:
        streak += 1
        cursor -= _ONE_DAY
    return streak


def average_streak(dates: Iterable[date]) -> float:
    runs = _runs(dates)
    if not runs:
        return 0.0
    return sum(runs) / len(runs)


def longest_streak(dates: Iterable[date]) -> int:
    return max(_runs(dates), default=0)
