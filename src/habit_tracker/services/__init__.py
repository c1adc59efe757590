"""Инициализация модуля сервисов."""

from .habit_store import HabitStore, calculate_progress
from .report_service import ReportService, streak_progress_bar

__all__ = [
    "HabitStore",
    "ReportService",
    "calculate_progress",
    "streak_progress_bar",
]
