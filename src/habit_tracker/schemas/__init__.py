"""Инициализация модуля схем Pydantic."""

from .base_schema import BaseSchema
from .habit_schema import HabitSchemaCreate, HabitSchemaUpdate
from .report_schema import DashboardSummary, HabitStats, PeriodReport, ReportPeriod

__all__ = [
    "BaseSchema",
    "HabitSchemaCreate",
    "HabitSchemaUpdate",
    "ReportPeriod",
    "HabitStats",
    "PeriodReport",
    "DashboardSummary",
]
