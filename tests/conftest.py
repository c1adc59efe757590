from datetime import date, datetime

import pytest

from habit_tracker.core.config import settings
from habit_tracker.models import Habit
from habit_tracker.repositories import HabitCompletionRepository, HabitRepository
from habit_tracker.services import HabitStore, ReportService
from habit_tracker.storage import InMemoryStorage

# "Сегодня" для всех тестов (понедельник)
TODAY = date(2026, 10, 19)

# --- ФИКСТУРА БЕЗОПАСНОСТИ ---


@pytest.fixture(scope="session", autouse=True)
def verify_test_environment():
    """
    Проверяет, что тесты запускаются с хранилищем в памяти.

    Эта фикстура выполняется автоматически перед началом тестовой сессии.
    """
    assert settings.STORAGE_BACKEND == "memory", (
        f"❌ ОШИБКА КОНФИГУРАЦИИ: Тесты должны использовать хранилище в памяти, получено '{settings.STORAGE_BACKEND}'. "
        "Проверьте настройки [tool.pytest.ini_options] в pyproject.toml"
    )


# --- ГЛОБАЛЬНЫЕ ФИКСТУРЫ ---


@pytest.fixture
def today() -> date:
    """Фиксированная дата "сегодня"."""
    return TODAY


@pytest.fixture
def storage() -> InMemoryStorage:
    """Чистое хранилище в памяти для каждого теста."""
    return InMemoryStorage()


@pytest.fixture
def habit_repository(storage: InMemoryStorage) -> HabitRepository:
    return HabitRepository(storage)


@pytest.fixture
def completion_repository(storage: InMemoryStorage) -> HabitCompletionRepository:
    return HabitCompletionRepository(storage)


@pytest.fixture
def store(habit_repository: HabitRepository, completion_repository: HabitCompletionRepository) -> HabitStore:
    """Хранилище привычек поверх хранилища в памяти (журнал выполнений выключен)."""
    return HabitStore(habit_repository, completion_repository)


@pytest.fixture
def report_service(habit_repository: HabitRepository) -> ReportService:
    return ReportService(habit_repository)


@pytest.fixture
def habit(store: HabitStore) -> Habit:
    """Созданная ежедневная привычка без отметок."""
    return store.create("Drink Water", now=datetime(2026, 10, 1, 9, 0))
