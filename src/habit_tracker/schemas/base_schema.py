"""Базовая схема Pydantic для входных данных и отчетов."""

from pydantic import BaseModel, ConfigDict


class BaseSchema(BaseModel):
    """Базовая схема: неизменяемая, строки без пробелов по краям."""

    model_config = ConfigDict(
        populate_by_name=True,  # Позволяет использовать alias для полей
        str_strip_whitespace=True,  # Убираем пробелы по краям строк
        frozen=True,  # Схемы только передают данные, не изменяются
        extra="ignore",  # Игнорировать лишние поля при парсинге
    )
