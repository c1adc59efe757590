"""Контракт хранилища "ключ-значение"."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class StorageBackend(Protocol):
    """
    Протокол хранилища "ключ-значение".

    Значения хранятся как байты, интерпретация (JSON) остается на стороне репозиториев.
    """

    def read(self, key: str) -> bytes | None:
        """Возвращает значение по ключу или None, если ключ отсутствует."""
        ...

    def write(self, key: str, data: bytes) -> None:
        """Полностью перезаписывает значение по ключу."""
        ...
