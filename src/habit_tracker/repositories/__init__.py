"""Инициализация модуля репозиториев."""

from .base_repository import BaseRepository
from .habit_completion_repository import HabitCompletionRepository
from .habit_repository import HabitRepository

__all__ = [
    "BaseRepository",
    "HabitRepository",
    "HabitCompletionRepository",
]
