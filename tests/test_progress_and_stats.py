from types import SimpleNamespace
from uuid import uuid4

from app.features.dashboard.progress import compute_progress
from app.features.dashboard.state import ProblemState, build_catalog_states, derive_states
from app.features.dashboard.stats import compute_stats

from helpers import CATALOG_SIZE, category_for, neet

LIST_A = uuid4()
LIST_B = uuid4()

_DIFFICULTIES = ["Easy", "Medium", "Hard"]


def problems(size=CATALOG_SIZE):
    return [
        SimpleNamespace(
            neet250_id=neet(i),
            order_index=i,
            title=f"Problem {i}",
            category=category_for(i),
            difficulty=_DIFFICULTIES[(i - 1) % 3],
        )
        for i in range(1, size + 1)
    ]


def row(order_index, solved, list_id=LIST_A, time_minutes=None):
    return SimpleNamespace(neet250_id=neet(order_index), list_id=list_id, solved=solved, time_minutes=time_minutes)


def current(*rows):
    return {(r.list_id, r.neet250_id): r for r in rows}


def catalog(*rows):
    return build_catalog_states(problems(), current(*rows))


def test_state_solved_if_any_list_solved():
    states = derive_states(current(row(1, False, LIST_A), row(1, True, LIST_B), row(2, None)))
    assert states[neet(1)] is ProblemState.SOLVED
    assert states[neet(2)] is ProblemState.UNSOLVED
    assert catalog(row(1, True)).state(neet(3)) is ProblemState.NO_ATTEMPT


def test_rows_outside_catalog_are_ignored():
    cat = build_catalog_states(problems(), current(SimpleNamespace(neet250_id=9999, list_id=LIST_A, solved=True)))
    assert cat.solved() == []


def test_scenario_a_unsolved_after_solved():
    result = compute_progress(catalog(row(2, True), row(3, False)))
    assert result.farthest_solved.order_index == 2
    assert [p.order_index for p in result.latest_solved_panel] == [2]
    assert [p.order_index for p in result.next_unsolved_panel] == [3, 4, 5, 6]


def test_scenario_b_frontier_jumps_past_unsolved():
    result = compute_progress(catalog(row(2, True), row(5, True), row(3, False)))
    assert result.farthest_solved.order_index == 5
    assert [p.order_index for p in result.latest_solved_panel] == [5, 2]
    assert [p.order_index for p in result.next_unsolved_panel] == [6, 7, 8, 9]


def test_nothing_solved_starts_at_beginning():
    result = compute_progress(catalog())
    assert result.farthest_solved is None
    assert result.latest_solved_panel == ()
    assert [p.order_index for p in result.next_unsolved_panel] == [1, 2, 3, 4]


def test_next_unsolved_is_short_near_end_of_catalog():
    result = compute_progress(catalog(row(18, True)))
    assert [p.order_index for p in result.next_unsolved_panel] == [19, 20]
    done = compute_progress(catalog(*(row(i, True) for i in range(1, CATALOG_SIZE + 1))))
    assert done.next_unsolved_panel == ()
    assert done.farthest_solved.order_index == CATALOG_SIZE


def test_solved_counts_per_category_and_difficulty():
    # order 1 Easy, 2 Medium, 3 Hard, 13 Easy (Two Pointers)
    stats = compute_stats(catalog(row(1, True), row(2, True), row(3, True), row(13, True), row(4, False)), [])
    assert stats.total_solved == 4
    by_name = {c.category: c for c in stats.per_category}
    arrays = by_name["Arrays & Hashing"]
    assert (arrays.solved_count, arrays.total_in_category) == (3, 12)
    assert (arrays.easy_solved, arrays.medium_solved, arrays.hard_solved) == (1, 1, 1)
    pointers = by_name["Two Pointers"]
    assert (pointers.solved_count, pointers.total_in_category, pointers.easy_solved) == (1, 8, 1)
    assert sum(c.total_in_category for c in stats.per_category) == CATALOG_SIZE
    assert [c.category for c in stats.per_category] == sorted(by_name)


def test_time_averages_use_every_row_in_scope():
    attempts = [
        row(1, False, time_minutes=30),
        row(1, True, time_minutes=10),  # superseded rows still count
        row(13, True, time_minutes=50),
        row(14, None),
        SimpleNamespace(neet250_id=9999, list_id=LIST_A, solved=True, time_minutes=90),
    ]
    stats = compute_stats(catalog(), attempts)
    assert stats.overall_avg_time_minutes == 45.0
    averages = {c.category: c.avg_time_minutes for c in stats.per_category_avg_time_minutes}
    assert averages == {"Arrays & Hashing": 20.0, "Two Pointers": 50.0}


def test_time_averages_absent_without_timed_rows():
    stats = compute_stats(catalog(), [row(1, True)])
    assert stats.overall_avg_time_minutes is None
    assert stats.per_category_avg_time_minutes == ()
