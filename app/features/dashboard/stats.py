"""Solved counts and time-spent averages, per template category."""

from __future__ import annotations

import statistics
from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from app.features.attempts.models import AttemptEntry
from app.features.problems.models import Difficulty
from .state import CatalogStates


@dataclass(frozen=True)
class CategorySolved:
    category: str
    solved_count: int
    total_in_category: int
    easy_solved: int = 0
    medium_solved: int = 0
    hard_solved: int = 0


@dataclass(frozen=True)
class CategoryAvgTime:
    category: str
    avg_time_minutes: float


@dataclass(frozen=True)
class StatsResult:
    total_solved: int
    per_category: Tuple[CategorySolved, ...]
    overall_avg_time_minutes: Optional[float]
    per_category_avg_time_minutes: Tuple[CategoryAvgTime, ...]


def _solved_counts(catalog: CatalogStates) -> Tuple[int, Tuple[CategorySolved, ...]]:
    totals: Dict[str, int] = defaultdict(int)
    solved: Dict[str, Dict[str, int]] = defaultdict(lambda: defaultdict(int))
    for p in catalog.problems:
        totals[p.category] += 1
        if catalog.is_solved(p.neet250_id):
            solved[p.category][p.difficulty] += 1

    per_category = []
    for category in sorted(totals):
        by_difficulty = solved.get(category, {})
        per_category.append(
            CategorySolved(
                category=category,
                solved_count=sum(by_difficulty.values()),
                total_in_category=totals[category],
                easy_solved=by_difficulty.get(Difficulty.easy.value, 0),
                medium_solved=by_difficulty.get(Difficulty.medium.value, 0),
                hard_solved=by_difficulty.get(Difficulty.hard.value, 0),
            )
        )
    return sum(c.solved_count for c in per_category), tuple(per_category)


def _time_averages(
    catalog: CatalogStates, attempts: Sequence[AttemptEntry]
) -> Tuple[Optional[float], Tuple[CategoryAvgTime, ...]]:
    # every row in scope counts here, superseded history included
    timed = [a for a in attempts if a.time_minutes is not None]
    if not timed:
        return None, ()
    overall = statistics.fmean(a.time_minutes for a in timed)

    category_by_id = {p.neet250_id: p.category for p in catalog.problems}
    by_category: Dict[str, List[int]] = defaultdict(list)
    for a in timed:
        category = category_by_id.get(a.neet250_id)
        if category is not None:
            by_category[category].append(a.time_minutes)
    per_category = tuple(
        CategoryAvgTime(category=c, avg_time_minutes=statistics.fmean(by_category[c]))
        for c in sorted(by_category)
    )
    return overall, per_category


def compute_stats(catalog: CatalogStates, attempts: Sequence[AttemptEntry]) -> StatsResult:
    total_solved, per_category = _solved_counts(catalog)
    overall, per_category_avg = _time_averages(catalog, attempts)
    return StatsResult(
        total_solved=total_solved,
        per_category=per_category,
        overall_avg_time_minutes=overall,
        per_category_avg_time_minutes=per_category_avg,
    )
