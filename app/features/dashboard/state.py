"""Per-problem current state, derived once per request and shared by progress and stats."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, List, Mapping, Tuple

from app.features.attempts.models import AttemptEntry
from app.features.attempts.repository import ProblemKey
from app.features.problems.models import Problem


class ProblemState(str, Enum):
    SOLVED = "solved"
    UNSOLVED = "unsolved"
    NO_ATTEMPT = "no_attempt"


@dataclass(frozen=True)
class ProblemRef:
    neet250_id: int
    order_index: int
    title: str
    category: str
    difficulty: str

    @classmethod
    def from_model(cls, problem: Problem) -> "ProblemRef":
        return cls(
            neet250_id=problem.neet250_id,
            order_index=problem.order_index,
            title=problem.title,
            category=problem.category,
            difficulty=problem.difficulty,
        )


@dataclass(frozen=True)
class CatalogStates:
    """Catalog of one template (ascending order_index) plus the state of each problem."""

    problems: Tuple[ProblemRef, ...] = ()
    states: Mapping[int, ProblemState] = field(default_factory=dict)

    def state(self, neet250_id: int) -> ProblemState:
        return self.states.get(neet250_id, ProblemState.NO_ATTEMPT)

    def is_solved(self, neet250_id: int) -> bool:
        return self.state(neet250_id) is ProblemState.SOLVED

    def solved(self) -> List[ProblemRef]:
        return [p for p in self.problems if self.is_solved(p.neet250_id)]


def derive_states(current_rows: Mapping[ProblemKey, AttemptEntry]) -> Dict[int, ProblemState]:
    """Collapse the current row of every scoped list into one state per problem.

    A problem is SOLVED when any scoped list's current row says solved=True,
    UNSOLVED when it has current rows but none of them is solved.
    """
    states: Dict[int, ProblemState] = {}
    for (_, neet250_id), row in current_rows.items():
        if row.solved is True:
            states[neet250_id] = ProblemState.SOLVED
        elif states.get(neet250_id) is not ProblemState.SOLVED:
            states[neet250_id] = ProblemState.UNSOLVED
    return states


def build_catalog_states(problems: Iterable[Problem], current_rows: Mapping[ProblemKey, AttemptEntry]) -> CatalogStates:
    refs = tuple(sorted((ProblemRef.from_model(p) for p in problems), key=lambda p: p.order_index))
    known = {p.neet250_id for p in refs}
    # rows pointing outside the catalog never influence progress
    states = {k: v for k, v in derive_states(current_rows).items() if k in known}
    return CatalogStates(problems=refs, states=states)
