"""Исключения трекера привычек."""


class HabitTrackerException(Exception):
    """
    Базовое исключение пакета.

    Attributes:
        message (str): Человекочитаемое описание ошибки.
        error_type (str): Машиночитаемый код ошибки.
    """

    default_message = "Ошибка трекера привычек."
    default_error_type = "habit_tracker_error"

    def __init__(self, message: str | None = None, error_type: str | None = None):
        self.message = message or self.default_message
        self.error_type = error_type or self.default_error_type
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, error_type={self.error_type!r})"


class HabitValidationException(HabitTrackerException):
    """Некорректные входные данные (например, пустое название привычки)."""

    default_message = "Некорректные данные привычки."
    default_error_type = "habit_validation_error"


class StorageException(HabitTrackerException):
    """Ошибка чтения или записи в хранилище."""

    default_message = "Ошибка хранилища."
    default_error_type = "storage_error"
