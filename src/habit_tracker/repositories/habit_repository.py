"""Репозиторий для работы с привычками."""

from typing import Sequence

from habit_tracker.core.logging import store_log as log
from habit_tracker.models import Habit
from habit_tracker.storage import StorageBackend

from .base_repository import BaseRepository


class HabitRepository(BaseRepository[Habit]):
    """Репозиторий коллекции привычек."""

    def __init__(self, storage: StorageBackend, key: str = "habits"):
        super().__init__(Habit, storage=storage, key=key)

    @staticmethod
    def find(habits: Sequence[Habit], habit_id: str) -> Habit | None:
        """Ищет привычку по ID в уже загруженной коллекции."""
        return next((habit for habit in habits if habit.id == habit_id), None)

    def get_by_id(self, habit_id: str) -> Habit | None:
        """
        Получает привычку по ID.

        Args:
            habit_id (str): Идентификатор привычки.

        Returns:
            Habit | None: Привычка или None, если она не найдена.
        """
        habit = self.find(self.get_all(), habit_id)

        status = "найдена" if habit else "не найдена"
        log.debug(f"Привычка с ID {habit_id} {status}.")

        return habit
