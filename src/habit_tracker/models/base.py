"""Базовая модель Pydantic для сохраняемых сущностей."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class DomainModel(BaseModel):
    """
    Базовая модель сохраняемых записей.

    В хранилище поля записываются в camelCase (createdAt, completedDates, ...),
    в коде используются имена в snake_case.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,  # Имена полей в хранилище
        populate_by_name=True,  # Позволяет создавать модели по именам полей
        extra="ignore",  # Игнорировать лишние поля при чтении
    )
