"""Файловое хранилище: каждый ключ - отдельный JSON файл в каталоге."""

import os
import re
import tempfile

from habit_tracker.core.exceptions import StorageException
from habit_tracker.core.logging import store_log as log

# Допустимые символы в имени ключа, остальные заменяются на "_"
_UNSAFE_KEY_CHARS = re.compile(r"[^A-Za-z0-9_.-]")


class FileStorage:
    """
    Хранилище "ключ-значение" на файловой системе.

    Attributes:
        directory (str): Каталог, в котором лежат файлы ключей.
    """

    def __init__(self, directory: str):
        """
        Инициализирует хранилище и создает каталог, если его нет.

        Args:
            directory (str): Путь к каталогу хранилища.

        Raises:
            StorageException: Если каталог не удалось создать.
        """
        self.directory = directory

        try:
            os.makedirs(directory, exist_ok=True)
        except OSError as exc:
            log.error(f"Не удалось создать каталог хранилища '{directory}': {exc}")
            raise StorageException(
                message=f"Не удалось создать каталог хранилища '{directory}'.",
                error_type="storage_init_failed",
            ) from exc

    def _path_for(self, key: str) -> str:
        safe_key = _UNSAFE_KEY_CHARS.sub("_", key)
        return os.path.join(self.directory, f"{safe_key}.json")

    def read(self, key: str) -> bytes | None:
        """
        Читает файл ключа.

        Raises:
            StorageException: При ошибке чтения существующего файла.
        """
        path = self._path_for(key)

        if not os.path.exists(path):
            log.debug(f"Файл ключа '{key}' ({path}) отсутствует.")
            return None

        try:
            with open(path, "rb") as file:
                data = file.read()
        except OSError as exc:
            log.error(f"Ошибка чтения файла '{path}': {exc}")
            raise StorageException(message=f"Не удалось прочитать ключ '{key}'.", error_type="storage_read_failed") from exc

        log.debug(f"Прочитано {len(data)} байт из '{path}'.")
        return data

    def write(self, key: str, data: bytes) -> None:
        """
        Атомарно перезаписывает файл ключа (через временный файл и замену).

        Raises:
            StorageException: При ошибке записи.
        """
        path = self._path_for(key)

        try:
            fd, tmp_path = tempfile.mkstemp(dir=self.directory, suffix=".tmp")
            try:
                with os.fdopen(fd, "wb") as tmp_file:
                    tmp_file.write(data)
                os.replace(tmp_path, path)
            except BaseException:
                # Не оставляем временный файл при неудачной записи
                if os.path.exists(tmp_path):
                    os.remove(tmp_path)
                raise
        except OSError as exc:
            log.error(f"Ошибка записи файла '{path}': {exc}")
            raise StorageException(message=f"Не удалось записать ключ '{key}'.", error_type="storage_write_failed") from exc

        log.debug(f"Записано {len(data)} байт в '{path}'.")
