"""Progress panels: farthest solved problem, last solved, next up."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from .state import CatalogStates, ProblemRef

LATEST_SOLVED_LIMIT = 2
NEXT_UNSOLVED_LIMIT = 4


@dataclass(frozen=True)
class ProgressResult:
    farthest_solved: Optional[ProblemRef]
    latest_solved_panel: Tuple[ProblemRef, ...]
    next_unsolved_panel: Tuple[ProblemRef, ...]


def compute_progress(catalog: CatalogStates) -> ProgressResult:
    """Progress is positional: "latest solved" means highest order_index, not most recent.

    Solving problem 5 after problem 10 leaves the frontier at 10.
    """
    solved_desc = sorted(catalog.solved(), key=lambda p: p.order_index, reverse=True)
    farthest = solved_desc[0] if solved_desc else None
    frontier = farthest.order_index if farthest else 0

    next_unsolved = [
        p for p in catalog.problems
        if p.order_index > frontier and not catalog.is_solved(p.neet250_id)
    ]
    return ProgressResult(
        farthest_solved=farthest,
        latest_solved_panel=tuple(solved_desc[:LATEST_SOLVED_LIMIT]),
        next_unsolved_panel=tuple(next_unsolved[:NEXT_UNSOLVED_LIMIT]),
    )
