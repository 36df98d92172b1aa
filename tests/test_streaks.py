from datetime import date, timedelta
from types import SimpleNamespace

from app.features.dashboard.streaks import (
    activity_dates,
    average_streak,
    current_streak,
    longest_streak,
)

TODAY = date(2026, 3, 10)


def days_ago(*offsets):
    return {TODAY - timedelta(days=n) for n in offsets}


def test_current_streak_counts_back_from_today():
    assert current_streak(days_ago(2, 1, 0), TODAY) == 3


def test_current_streak_is_zero_without_activity_today():
    dates = days_ago(2, 1)
    assert current_streak(dates, TODAY) == 0
    assert average_streak(dates) == 2.0


def test_average_streak_two_equal_runs():
    assert average_streak(days_ago(6, 5, 2, 1)) == 2.0


def test_average_streak_is_not_rounded():
    # runs of 1 and 2
    assert average_streak(days_ago(5, 2, 1)) == 1.5
    # runs of 1 and 3
    assert average_streak(days_ago(6, 2, 1, 0)) == 2.0


def test_empty_activity():
    assert current_streak(set(), TODAY) == 0
    assert average_streak(set()) == 0.0
    assert longest_streak(set()) == 0


def test_longest_streak_and_gap_breaks_current():
    dates = days_ago(9, 8, 7, 6, 2, 0)
    assert longest_streak(dates) == 4
    assert current_streak(dates, TODAY) == 1


def test_runs_cross_month_boundary():
    dates = {date(2026, 2, 27), date(2026, 2, 28), date(2026, 3, 1)}
    assert current_streak(dates, date(2026, 3, 1)) == 3
    assert longest_streak(dates) == 3


def test_current_never_exceeds_longest():
    for dates in (days_ago(0), days_ago(3, 2, 1, 0), days_ago(10, 9, 8, 1, 0), days_ago(4, 0)):
        assert current_streak(dates, TODAY) <= longest_streak(dates)


def test_activity_dates_skips_rows_without_date_and_dedupes():
    rows = [
        SimpleNamespace(solved=True, date_solved=TODAY, notes=None),
        SimpleNamespace(solved=False, date_solved=TODAY, notes=None),
        SimpleNamespace(solved=None, date_solved=None, notes="retry later"),
    ]
    assert activity_dates(rows) == {TODAY}


def test_activity_counts_unsolved_attempts():
    rows = [SimpleNamespace(solved=False, date_solved=TODAY - timedelta(days=1))]
    assert activity_dates(rows) == days_ago(1)
