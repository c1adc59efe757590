"""Конфигурация приложения."""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Основные настройки трекера привычек.

    Наследуется от Pydantic BaseSettings для автоматической валидации и загрузки переменных окружения.
    """

    # --- Статические настройки ---

    # Название приложения
    PROJECT_NAME: str = "Habit Tracker"
    # Версия пакета
    VERSION: str = "0.1.0"

    # --- Настройки, читаемые из .env ---

    # Настройки режима разработки/тестирования (для продакшен - False)
    DEVELOPMENT: bool = Field(default=False, description="Режим разработки/тестирования")

    # Настройки логирования
    LOG_LEVEL: str = Field(default="INFO", description="Уровень логирования")
    LOG_TO_FILE: bool = Field(default=False, description="Писать логи в файл (с ротацией)")

    # Настройки хранилища
    STORAGE_BACKEND: Literal["memory", "file", "sqlite"] = Field(
        default="memory",
        description="Тип хранилища: в памяти, JSON-файлы в каталоге или SQLite",
    )
    STORAGE_PATH: str = Field(
        default="data",
        description="Каталог для файлового хранилища или путь к файлу SQLite",
    )
    HABITS_KEY: str = Field(default="habits", description="Ключ, под которым хранится коллекция привычек")
    COMPLETIONS_KEY: str = Field(
        default="habit_completions",
        description="Ключ, под которым хранятся записи о выполнениях",
    )
    RECORD_COMPLETION_EVENTS: bool = Field(
        default=False,
        description="Сохранять запись о выполнении при каждом переключении отметки",
    )

    # Часовой пояс для вычисления "сегодня". Если None, используется локальное время системы
    TIMEZONE: str | None = Field(default=None, description="Часовой пояс IANA (например, Europe/Moscow)")

    # Бизнес-константы проекта
    STREAK_GOAL_DAYS: int = Field(
        default=30,
        gt=0,
        description="Длина серии, соответствующая заполненной шкале прогресса",
    )
    WEEKLY_WINDOW_DAYS: int = Field(default=7, gt=0, description="Окно недельного отчета в днях")
    MONTHLY_WINDOW_DAYS: int = Field(default=30, gt=0, description="Окно месячного отчета в днях")

    # Продакшен режим
    @property
    def PRODUCTION(self) -> bool:
        # Считаем режим продакшеном, если не DEVELOPMENT (разработка/тестирование)
        return not self.DEVELOPMENT

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,  # Имена переменных окружения не чувствительны к регистру
        extra="ignore",  # Игнорировать лишние переменные .env
    )


# Создаем глобальный экземпляр настроек
settings = Settings()
