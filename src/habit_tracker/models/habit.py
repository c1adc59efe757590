"""Модели привычки и записи о выполнении."""

from datetime import date, datetime
from enum import StrEnum
from typing import Any

from pydantic import Field, field_validator

from .base import DomainModel

# Формат Date.toDateString() ("Mon Oct 19 2026"), в котором даты хранил веб-клиент
LEGACY_DATE_FORMAT = "%a %b %d %Y"


def parse_calendar_day(value: Any) -> Any:
    """
    Приводит строку с датой к объекту date.

    Понимает ISO формат (YYYY-MM-DD), полную ISO метку времени и формат веб-клиента.
    Остальные значения возвращаются как есть, чтобы их проверил Pydantic.
    """
    if isinstance(value, datetime):
        return value.date()

    if not isinstance(value, str):
        return value

    try:
        return date.fromisoformat(value)
    except ValueError:
        pass

    try:
        return datetime.fromisoformat(value).date()
    except ValueError:
        pass

    try:
        return datetime.strptime(value, LEGACY_DATE_FORMAT).date()
    except ValueError:
        return value


class HabitFrequency(StrEnum):
    """Целевая периодичность привычки."""

    DAILY = "daily"
    WEEKLY = "weekly"


class Habit(DomainModel):
    """
    Представляет отслеживаемую привычку.

    Attributes:
        id: Уникальный стабильный идентификатор, назначается при создании.
        name: Название привычки.
        frequency: Периодичность (daily / weekly).
        reminder: Включено ли напоминание.
        created_at: Время создания привычки.
        streak: Текущая серия выполнений.
        completed_dates: Дни, в которые привычка отмечена выполненной (без повторов).
        last_completed: Последний добавленный день выполнения.
    """

    id: str
    name: str = Field(..., min_length=1)
    frequency: HabitFrequency = HabitFrequency.DAILY
    reminder: bool = False
    created_at: datetime
    streak: int = Field(default=0, ge=0)
    completed_dates: list[date] = Field(default_factory=list)
    last_completed: date | None = None

    @field_validator("completed_dates", mode="before")
    @classmethod
    def _parse_completed_dates(cls, value: Any) -> Any:
        if isinstance(value, (list, tuple, set)):
            return [parse_calendar_day(item) for item in value]
        return value

    @field_validator("completed_dates", mode="after")
    @classmethod
    def _drop_duplicate_dates(cls, value: list[date]) -> list[date]:
        # Один день - одна запись, порядок первого появления сохраняется
        return list(dict.fromkeys(value))

    @field_validator("last_completed", mode="before")
    @classmethod
    def _parse_last_completed(cls, value: Any) -> Any:
        return parse_calendar_day(value)

    def is_completed_on(self, day: date) -> bool:
        """Отмечена ли привычка выполненной в указанный день."""
        return day in self.completed_dates


class HabitCompletion(DomainModel):
    """Запись о переключении отметки выполнения привычки за день."""

    habit_id: str
    date: date
    completed: bool

    @field_validator("date", mode="before")
    @classmethod
    def _parse_date(cls, value: Any) -> Any:
        return parse_calendar_day(value)
