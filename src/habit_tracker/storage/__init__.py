"""Инициализация модуля хранилищ."""

from .base import StorageBackend
from .file import FileStorage
from .memory import InMemoryStorage
from .sqlite import SQLiteStorage

__all__ = [
    "StorageBackend",
    "InMemoryStorage",
    "FileStorage",
    "SQLiteStorage",
]
