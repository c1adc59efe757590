from datetime import date, timedelta

import pytest

from habit_tracker.models import Habit
from habit_tracker.services import HabitStore


def _complete(store: HabitStore, habit: Habit, today: date, *offsets: int) -> None:
    for offset in offsets:
        store.toggle_completion(habit.id, today - timedelta(days=offset))


def test_progress_three_of_seven_days(store: HabitStore, habit: Habit, today: date):
    _complete(store, habit, today, 6, 3, 0)

    assert store.progress(habit.id, 7, today) == 43


def test_progress_window_bounds_are_inclusive(store: HabitStore, habit: Habit, today: date):
    # today - 7 входит в окно, today - 8 нет
    _complete(store, habit, today, 8, 7)

    assert store.progress(habit.id, 7, today) == 14


def test_progress_ignores_future_days(store: HabitStore, habit: Habit, today: date):
    store.toggle_completion(habit.id, today + timedelta(days=1))

    assert store.progress(habit.id, 7, today) == 0


def test_progress_is_not_clamped(store: HabitStore, habit: Habit, today: date):
    """Окно включает window_days + 1 дней, поэтому процент может превышать 100."""
    _complete(store, habit, today, *range(7, -1, -1))

    assert store.progress(habit.id, 7, today) == 114


def test_progress_rounds_half_up(store: HabitStore, habit: Habit, today: date):
    _complete(store, habit, today, 0)

    # 100 * 1 / 8 = 12.5
    assert store.progress(habit.id, 8, today) == 13


@pytest.mark.parametrize("window_days", [0, -1, -30])
def test_progress_non_positive_window(store: HabitStore, habit: Habit, today: date, window_days: int):
    _complete(store, habit, today, 0)

    assert store.progress(habit.id, window_days, today) == 0


def test_progress_unknown_habit(store: HabitStore, today: date):
    assert store.progress("missing", 7, today) == 0


def test_progress_defaults_to_week(store: HabitStore, habit: Habit, today: date):
    _complete(store, habit, today, 1, 0)

    assert store.progress(habit.id, today=today) == 29


def test_progress_window_longer_than_calendar(store: HabitStore, habit: Habit, today: date):
    """Окно длиннее всего календаря не падает с OverflowError."""
    _complete(store, habit, today, *range(400))

    # 100 * 400 / 1_000_000 = 0.04
    assert store.progress(habit.id, 10**6, today) == 0
    # 100 * 400 / 2000 = 20
    assert store.progress(habit.id, 2000, today) == 20
