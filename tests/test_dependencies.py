from datetime import date
from pathlib import Path

from habit_tracker.core.config import Settings
from habit_tracker.core.dependencies import get_habit_store, get_report_service, get_storage_backend
from habit_tracker.storage import FileStorage, InMemoryStorage, SQLiteStorage


def test_default_backend_is_memory():
    storage = get_storage_backend(Settings(STORAGE_BACKEND="memory"))

    assert isinstance(storage, InMemoryStorage)


def test_file_backend(tmp_path: Path):
    storage = get_storage_backend(Settings(STORAGE_BACKEND="file", STORAGE_PATH=str(tmp_path / "data")))

    assert isinstance(storage, FileStorage)
    assert storage.directory == str(tmp_path / "data")


def test_sqlite_backend_in_directory(tmp_path: Path):
    storage = get_storage_backend(Settings(STORAGE_BACKEND="sqlite", STORAGE_PATH=str(tmp_path)))

    assert isinstance(storage, SQLiteStorage)
    assert storage.db_path == str(tmp_path / "habits.db")
    storage.close()


def test_sqlite_backend_with_file_path(tmp_path: Path):
    storage = get_storage_backend(Settings(STORAGE_BACKEND="sqlite", STORAGE_PATH=str(tmp_path / "custom.sqlite")))

    assert isinstance(storage, SQLiteStorage)
    assert storage.db_path == str(tmp_path / "custom.sqlite")
    storage.close()


def test_habit_store_uses_configured_keys_and_events():
    app_settings = Settings(
        HABITS_KEY="my_habits",
        COMPLETIONS_KEY="my_events",
        RECORD_COMPLETION_EVENTS=True,
        TIMEZONE="UTC",
    )
    storage = InMemoryStorage()
    store = get_habit_store(storage, app_settings)

    habit = store.create("Configured")
    store.toggle_completion(habit.id, date(2026, 10, 19))

    assert store.timezone_name == "UTC"
    assert storage.read("habits") is None
    assert storage.read("my_habits") is not None
    assert storage.read("my_events") is not None
    assert len(store.get_completion_events(habit.id)) == 1


def test_report_service_uses_configured_windows():
    app_settings = Settings(WEEKLY_WINDOW_DAYS=5, MONTHLY_WINDOW_DAYS=28, STREAK_GOAL_DAYS=21)

    service = get_report_service(InMemoryStorage(), app_settings)

    assert service.window_for("weekly") == 5
    assert service.window_for("monthly") == 28
    assert service.streak_goal_days == 21
