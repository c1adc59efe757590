"""Логгер хранилища привычек.

Импорт пакета не трогает обработчики Loguru приложения, а записи пакета
отключены, пока не вызван configure_logging (или setup_logger).
"""

from loguru import logger

from .config import Settings, settings
from .logging_setup import PACKAGE_NAME, LogConfig, setup_logger

SERVICE_NAME = "HabitStore"

store_log = logger.bind(service_name=SERVICE_NAME)
logger.disable(PACKAGE_NAME)


def configure_logging(app_settings: Settings = settings):
    """Включает логи пакета с уровнем и файловым обработчиком из настроек."""
    return setup_logger(
        service_name=SERVICE_NAME,
        log_config=LogConfig(to_file=app_settings.LOG_TO_FILE),
        log_level_override=app_settings.LOG_LEVEL,
    )
