"""Схемы Pydantic для создания и изменения привычки."""

from datetime import date
from typing import Any

from pydantic import Field, field_validator

from habit_tracker.models import HabitFrequency, parse_calendar_day

from .base_schema import BaseSchema


class HabitSchemaCreate(BaseSchema):
    """Схема для создания новой привычки."""

    name: str = Field(..., description="Название привычки")
    frequency: HabitFrequency = Field(HabitFrequency.DAILY, description="Периодичность привычки")
    reminder: bool = Field(False, description="Включить напоминание")
    # id, created_at, streak и completed_dates назначаются хранилищем

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise ValueError("Название привычки не может быть пустым")
        return stripped


class HabitSchemaUpdate(BaseSchema):
    """
    Схема для обновления существующей привычки.
    Все поля опциональны, применяются только явно переданные.
    """

    name: str | None = Field(None, description="Новое название привычки")
    frequency: HabitFrequency | None = Field(None, description="Новая периодичность")
    reminder: bool | None = Field(None, description="Новый флаг напоминания")
    streak: int | None = Field(None, ge=0, description="Новое значение серии")
    completed_dates: list[date] | None = Field(None, alias="completedDates", description="Новый набор дней")
    last_completed: date | None = Field(None, alias="lastCompleted", description="Новый последний день")

    @field_validator("completed_dates", mode="before")
    @classmethod
    def _parse_completed_dates(cls, value: Any) -> Any:
        # Веб-клиент присылает дни в формате "Mon Oct 19 2026"
        if isinstance(value, (list, tuple, set)):
            return [parse_calendar_day(item) for item in value]
        return value

    @field_validator("last_completed", mode="before")
    @classmethod
    def _parse_last_completed(cls, value: Any) -> Any:
        return parse_calendar_day(value)
