"""Трекер привычек: привычки, отметки выполнения, серии и отчеты о прогрессе."""

from habit_tracker.core.dependencies import get_habit_store, get_report_service, get_storage_backend
from habit_tracker.core.exceptions import HabitTrackerException, HabitValidationException, StorageException
from habit_tracker.core.logging import configure_logging
from habit_tracker.models import Habit, HabitCompletion, HabitFrequency
from habit_tracker.services import HabitStore, ReportService

__version__ = "0.1.0"

__all__ = [
    "Habit",
    "HabitCompletion",
    "HabitFrequency",
    "HabitStore",
    "ReportService",
    "HabitTrackerException",
    "HabitValidationException",
    "StorageException",
    "configure_logging",
    "get_habit_store",
    "get_report_service",
    "get_storage_backend",
]
