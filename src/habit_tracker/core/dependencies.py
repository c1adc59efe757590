"""Фабрики хранилища, репозиториев и сервисов на основе настроек."""

import os

from habit_tracker.repositories import HabitCompletionRepository, HabitRepository
from habit_tracker.services import HabitStore, ReportService
from habit_tracker.storage import FileStorage, InMemoryStorage, SQLiteStorage, StorageBackend

from .config import Settings, settings
from .logging import store_log as log

# --- Фабрика хранилища ---


def get_storage_backend(app_settings: Settings = settings) -> StorageBackend:
    """
    Создает хранилище по настройке STORAGE_BACKEND.

    Для "sqlite" путь STORAGE_PATH без расширения дополняется именем файла habits.db.
    """
    backend = app_settings.STORAGE_BACKEND

    if backend == "file":
        storage: StorageBackend = FileStorage(app_settings.STORAGE_PATH)
    elif backend == "sqlite":
        db_path = app_settings.STORAGE_PATH
        if not os.path.splitext(db_path)[1] and db_path != ":memory:":
            db_path = os.path.join(db_path, "habits.db")
        storage = SQLiteStorage(db_path)
    else:
        storage = InMemoryStorage()

    log.debug(f"Используется хранилище '{backend}' ({type(storage).__name__}).")
    return storage


# --- Фабрики Репозиториев ---


def get_habit_repository(storage: StorageBackend, app_settings: Settings = settings) -> HabitRepository:
    return HabitRepository(storage, key=app_settings.HABITS_KEY)


def get_completion_repository(
    storage: StorageBackend, app_settings: Settings = settings
) -> HabitCompletionRepository:
    return HabitCompletionRepository(storage, key=app_settings.COMPLETIONS_KEY)


# --- Фабрики Сервисов ---


def get_habit_store(storage: StorageBackend | None = None, app_settings: Settings = settings) -> HabitStore:
    """
    Собирает HabitStore.

    Args:
        storage (StorageBackend | None): Хранилище. Если None, создается по настройкам.
        app_settings (Settings): Настройки.

    Returns:
        HabitStore: Готовое хранилище привычек.
    """
    storage = storage if storage is not None else get_storage_backend(app_settings)

    return HabitStore(
        habit_repository=get_habit_repository(storage, app_settings),
        completion_repository=get_completion_repository(storage, app_settings),
        timezone_name=app_settings.TIMEZONE,
        record_completion_events=app_settings.RECORD_COMPLETION_EVENTS,
    )


def get_report_service(storage: StorageBackend, app_settings: Settings = settings) -> ReportService:
    return ReportService(
        habit_repository=get_habit_repository(storage, app_settings),
        weekly_window_days=app_settings.WEEKLY_WINDOW_DAYS,
        monthly_window_days=app_settings.MONTHLY_WINDOW_DAYS,
        streak_goal_days=app_settings.STREAK_GOAL_DAYS,
        timezone_name=app_settings.TIMEZONE,
    )
