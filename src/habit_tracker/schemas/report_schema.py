"""Схемы Pydantic для отчетов и сводки."""

from enum import StrEnum

from pydantic import Field

from .base_schema import BaseSchema


class ReportPeriod(StrEnum):
    """Период отчета."""

    WEEKLY = "weekly"
    MONTHLY = "monthly"


class HabitStats(BaseSchema):
    """Статистика одной привычки за окно в N дней."""

    habit_id: str = Field(..., description="ID привычки")
    name: str = Field(..., description="Название привычки")
    streak: int = Field(..., description="Текущая серия")
    progress: int = Field(..., description="Процент выполнения за окно")
    completed_days: int = Field(..., description="Количество дней выполнения в окне")


class PeriodReport(BaseSchema):
    """Отчет по всем привычкам за неделю или месяц."""

    period: ReportPeriod
    window_days: int
    total_habits: int
    average_progress: int = Field(..., description="Средний процент выполнения (округленный)")
    total_completed_days: int
    perfect_habits: int = Field(..., description="Количество привычек с выполнением 100% и выше")
    habits: list[HabitStats] = Field(default_factory=list)


class DashboardSummary(BaseSchema):
    """Сводка для главного экрана."""

    total_habits: int
    completed_today: int
    total_streak: int
    average_progress: int = Field(..., description="Средний процент шкалы серии (без ограничения сверху)")
