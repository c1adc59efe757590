from .base import DomainModel
from .habit import Habit, HabitCompletion, HabitFrequency, parse_calendar_day

__all__ = [
    "DomainModel",
    "Habit",
    "HabitCompletion",
    "HabitFrequency",
    "parse_calendar_day",
]
