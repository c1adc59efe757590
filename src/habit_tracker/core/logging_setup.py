"""Подключение обработчиков Loguru для пакета habit_tracker."""

import os
import sys
from typing import TYPE_CHECKING

from loguru import logger as global_loguru_logger
from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from loguru import Logger, Record

PACKAGE_NAME = "habit_tracker"

# Идентификаторы обработчиков, добавленных пакетом
_handler_ids: list[int] = []


class LogConfig(BaseModel):
    """Параметры обработчиков логов хранилища привычек."""

    level: str = Field(default="INFO", description="Минимальный уровень записей")
    format: str = Field(
        default=(
            "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
            "<level>{level: <8}</level> | "
            "<magenta>{extra[service_name]}</magenta> | "
            "<cyan>{name}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
        ),
        description="Формат записи",
    )
    to_stderr: bool = Field(default=True, description="Писать записи в stderr")
    to_file: bool = Field(default=False, description="Писать записи в файл")
    file_path: str = Field(default="logs/{service_name}.log", description="Путь к файлу логов")
    rotation: str = Field(default="10 MB", description="Ротация файла по размеру")
    retention: str = Field(default="7 days", description="Срок хранения файлов")
    serialize: bool = Field(default=False, description="Записи в формате JSON")


def _is_package_record(record: "Record") -> bool:
    """Пропускает только записи, привязанные к сервису пакета."""
    return "service_name" in record["extra"]


def reset_logger() -> None:
    """Убирает обработчики пакета и снова отключает его записи."""
    while _handler_ids:
        global_loguru_logger.remove(_handler_ids.pop())
    global_loguru_logger.disable(PACKAGE_NAME)


def setup_logger(
    service_name: str,
    log_config: LogConfig | None = None,
    log_level_override: str | None = None,
) -> "Logger":
    """
    Включает логи пакета и подключает к ним собственные обработчики.

    По умолчанию пакет молчит: приложение само решает, нужны ли ему эти записи.
    Обработчики приложения не удаляются. Обработчики пакета принимают только
    записи с service_name в extra, поэтому формат с {extra[service_name]}
    не ломается на записях приложения. Повторный вызов заменяет обработчики,
    добавленные предыдущим вызовом.

    Args:
        service_name: Имя сервиса в записях (например, "HabitStore").
        log_config: Параметры обработчиков. Если None, используются значения по умолчанию.
        log_level_override: Уровень, заменяющий уровень из log_config.

    Returns:
        Логгер с привязанным service_name.
    """
    config = log_config or LogConfig()
    level = (log_level_override or config.level).upper()

    reset_logger()
    global_loguru_logger.enable(PACKAGE_NAME)
    service_logger = global_loguru_logger.bind(service_name=service_name)

    if config.to_stderr:
        _handler_ids.append(
            global_loguru_logger.add(
                sys.stderr,
                level=level,
                format=config.format,
                filter=_is_package_record,
                serialize=config.serialize,
            )
        )

    if config.to_file:
        file_path = config.file_path.replace("{service_name}", service_name.lower())
        log_dir = os.path.dirname(file_path.split("{time")[0])

        try:
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)
        except OSError as exc:
            service_logger.warning(f"Не удалось создать директорию логов '{log_dir}': {exc}. Запись в файл отключена.")
        else:
            _handler_ids.append(
                global_loguru_logger.add(
                    file_path,
                    level=level,
                    format=config.format,
                    filter=_is_package_record,
                    rotation=config.rotation,
                    retention=config.retention,
                    serialize=config.serialize,
                    encoding="utf-8",
                )
            )

    service_logger.debug(f"Логи пакета включены. Уровень: {level}")
    return service_logger


__all__ = ["LogConfig", "PACKAGE_NAME", "reset_logger", "setup_logger"]
