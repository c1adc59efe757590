"""Хранилище в памяти процесса (используется по умолчанию и в тестах)."""

from habit_tracker.core.logging import store_log as log


class InMemoryStorage:
    """Хранит значения в словаре, живет до конца процесса."""

    def __init__(self, initial: dict[str, bytes] | None = None):
        self._data: dict[str, bytes] = dict(initial or {})

    def read(self, key: str) -> bytes | None:
        value = self._data.get(key)
        log.debug(f"Чтение ключа '{key}' из памяти: {'найден' if value is not None else 'отсутствует'}.")
        return value

    def write(self, key: str, data: bytes) -> None:
        log.debug(f"Запись ключа '{key}' в память ({len(data)} байт).")
        self._data[key] = bytes(data)

    def clear(self) -> None:
        """Удаляет все ключи."""
        self._data.clear()
