import json
from datetime import date, datetime

import pytest

from habit_tracker.core.exceptions import StorageException
from habit_tracker.models import Habit, HabitCompletion, HabitFrequency
from habit_tracker.repositories import HabitCompletionRepository, HabitRepository
from habit_tracker.services import HabitStore
from habit_tracker.storage import InMemoryStorage


class BrokenStorage:
    """Хранилище, которое не может ни читать, ни писать."""

    def read(self, key: str) -> bytes | None:
        raise StorageException(message=f"read {key} failed", error_type="storage_read_failed")

    def write(self, key: str, data: bytes) -> None:
        raise StorageException(message=f"write {key} failed", error_type="storage_write_failed")


def test_missing_key_gives_empty_collection(habit_repository: HabitRepository):
    assert habit_repository.get_all() == []


@pytest.mark.parametrize(
    "payload",
    [
        b"{not json",
        b'{"id": "1"}',
        b'[{"id": "1"}]',
        b'[{"id": "1", "name": "", "createdAt": "2026-10-01T09:00:00"}]',
    ],
)
def test_malformed_data_gives_empty_collection(storage: InMemoryStorage, payload: bytes):
    storage.write("habits", payload)

    assert HabitRepository(storage).get_all() == []


def test_store_over_malformed_data_starts_empty(storage: InMemoryStorage):
    storage.write("habits", b"garbage")
    store = HabitStore(HabitRepository(storage))

    assert store.get_all() == []

    # Первая же запись заменяет поврежденные данные
    habit = store.create("Fresh start")
    assert [item.id for item in store.get_all()] == [habit.id]


def test_storage_read_failure_gives_empty_collection():
    assert HabitRepository(BrokenStorage()).get_all() == []


def test_storage_write_failure_is_raised():
    store = HabitStore(HabitRepository(BrokenStorage()))

    with pytest.raises(StorageException):
        store.create("Will not persist")


def test_persisted_format(store: HabitStore, storage: InMemoryStorage, today: date):
    habit = store.create("Water 2L", reminder=True, now=datetime(2026, 10, 1, 9, 0))
    store.toggle_completion(habit.id, today)

    records = json.loads(storage.read("habits"))

    assert records == [
        {
            "id": habit.id,
            "name": "Water 2L",
            "frequency": "daily",
            "reminder": True,
            "createdAt": "2026-10-01T09:00:00",
            "streak": 1,
            "completedDates": ["2026-10-19"],
            "lastCompleted": "2026-10-19",
        }
    ]


def test_reads_records_written_by_web_client(storage: InMemoryStorage):
    """Даты в формате Date.toDateString() и метки времени ISO с "Z" читаются."""
    storage.write(
        "habits",
        json.dumps(
            [
                {
                    "id": "1760860800000",
                    "name": "Read",
                    "frequency": "weekly",
                    "reminder": False,
                    "createdAt": "2026-10-01T09:00:00.000Z",
                    "streak": 2,
                    "completedDates": ["Sun Oct 18 2026", "Mon Oct 19 2026", "Mon Oct 19 2026"],
                    "lastCompleted": "Mon Oct 19 2026",
                }
            ]
        ).encode(),
    )

    habits = HabitRepository(storage).get_all()

    assert len(habits) == 1
    assert habits[0].frequency == HabitFrequency.WEEKLY
    assert habits[0].completed_dates == [date(2026, 10, 18), date(2026, 10, 19)]
    assert habits[0].last_completed == date(2026, 10, 19)
    assert habits[0].created_at.year == 2026


def test_get_by_id(habit_repository: HabitRepository, habit: Habit):
    assert habit_repository.get_by_id(habit.id) == habit
    assert habit_repository.get_by_id("missing") is None


def test_find_in_loaded_collection(habit: Habit):
    assert HabitRepository.find([habit], habit.id) is habit
    assert HabitRepository.find([], habit.id) is None


def test_completion_repository_add_and_filter(completion_repository: HabitCompletionRepository, today: date):
    completion_repository.add(HabitCompletion(habit_id="1", date=today, completed=True))
    completion_repository.add(HabitCompletion(habit_id="2", date=today, completed=True))

    assert [event.habit_id for event in completion_repository.get_all()] == ["1", "2"]
    assert completion_repository.get_by_habit_id("2") == [HabitCompletion(habit_id="2", date=today, completed=True)]


def test_completion_records_use_separate_key(
    completion_repository: HabitCompletionRepository, storage: InMemoryStorage, today: date
):
    completion_repository.add(HabitCompletion(habit_id="1", date=today, completed=False))

    assert storage.read("habits") is None
    assert json.loads(storage.read("habit_completions")) == [
        {"habitId": "1", "date": "2026-10-19", "completed": False}
    ]
