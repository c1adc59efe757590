"""Репозиторий для записей о выполнении привычек."""

from habit_tracker.core.logging import store_log as log
from habit_tracker.models import HabitCompletion
from habit_tracker.storage import StorageBackend

from .base_repository import BaseRepository


class HabitCompletionRepository(BaseRepository[HabitCompletion]):
    """Репозиторий журнала выполнений (отдельный ключ хранилища)."""

    def __init__(self, storage: StorageBackend, key: str = "habit_completions"):
        super().__init__(HabitCompletion, storage=storage, key=key)

    def get_by_habit_id(self, habit_id: str) -> list[HabitCompletion]:
        """Возвращает записи о выполнении конкретной привычки в порядке добавления."""
        return [event for event in self.get_all() if event.habit_id == habit_id]

    def add(self, event: HabitCompletion) -> HabitCompletion:
        """
        Добавляет запись в конец журнала.

        Args:
            event (HabitCompletion): Запись о выполнении.

        Returns:
            HabitCompletion: Добавленная запись.
        """
        events = self.get_all()
        events.append(event)
        self.save_all(events)

        log.debug(f"Записано выполнение привычки ID {event.habit_id} на {event.date}: {event.completed}.")
        return event
