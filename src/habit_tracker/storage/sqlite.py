"""Хранилище "ключ-значение" в SQLite на базе SQLAlchemy."""

import os
from contextlib import contextmanager
from datetime import datetime
from typing import Any, Generator

from sqlalchemy import DateTime, LargeBinary, MetaData, String, create_engine, func, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, Mapped, Session, mapped_column, sessionmaker

from habit_tracker.core.exceptions import StorageException
from habit_tracker.core.logging import store_log as log

# Соглашение об именовании для ограничений и индексов
# https://docs.sqlalchemy.org/en/20/core/constraints.html#constraint-naming-conventions
convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "pk": "pk_%(table_name)s",
}

metadata_obj = MetaData(naming_convention=convention)


class Base(DeclarativeBase):
    """Базовый класс для декларативных моделей SQLAlchemy."""

    metadata = metadata_obj


class KeyValueEntry(Base):
    """
    Одна запись хранилища.

    Attributes:
        key: Ключ (первичный ключ таблицы).
        value: Сериализованное значение.
        updated_at: Время последней перезаписи.
    """

    __tablename__ = "kv_storage"

    key: Mapped[str] = mapped_column(String(255), primary_key=True)
    value: Mapped[bytes] = mapped_column(LargeBinary, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(key={self.key!r})>"


class SQLiteStorage:
    """
    Хранилище "ключ-значение" в таблице SQLite.

    Отвечает за:
    - Создание движка и таблицы
    - Чтение и полную перезапись значений по ключу
    """

    def __init__(self, db_path: str, **engine_kwargs: Any):
        """
        Создает движок и таблицу хранилища.

        Args:
            db_path (str): Путь к файлу базы данных или ":memory:".
            **engine_kwargs: Дополнительные параметры для create_engine.

        Raises:
            StorageException: Если не удалось подготовить базу данных.
        """
        self.db_path = db_path

        if db_path != ":memory:":
            db_dir = os.path.dirname(db_path)
            if db_dir:
                os.makedirs(db_dir, exist_ok=True)

        self.engine = create_engine(f"sqlite:///{db_path}", **engine_kwargs)
        self.session_factory = sessionmaker(bind=self.engine, expire_on_commit=False, autoflush=False)

        try:
            Base.metadata.create_all(self.engine)
            with self.engine.connect() as connection:
                connection.execute(text("SELECT 1"))
        except SQLAlchemyError as exc:
            log.critical(f"Ошибка подготовки базы данных '{db_path}': {exc}", exc_info=True)
            raise StorageException(
                message=f"Не удалось подготовить базу данных '{db_path}'.",
                error_type="storage_init_failed",
            ) from exc

        log.debug(f"SQLite хранилище готово: {db_path}")

    @contextmanager
    def session(self) -> Generator[Session, None, None]:
        """
        Контекстный менеджер для работы с сессией.

        Yields:
            Session: Экземпляр сессии БД.
        """
        session: Session = self.session_factory()

        try:
            yield session
        except Exception as exc:
            log.error(f"Ошибка во время сессии БД, выполняется откат: {exc}")
            session.rollback()
            raise
        finally:
            session.close()

    def read(self, key: str) -> bytes | None:
        """
        Читает значение по ключу.

        Raises:
            StorageException: При ошибке базы данных.
        """
        try:
            with self.session() as session:
                entry = session.get(KeyValueEntry, key)
                value = entry.value if entry else None
        except SQLAlchemyError as exc:
            raise StorageException(message=f"Не удалось прочитать ключ '{key}'.", error_type="storage_read_failed") from exc

        log.debug(f"Чтение ключа '{key}' из SQLite: {'найден' if value is not None else 'отсутствует'}.")
        return value

    def write(self, key: str, data: bytes) -> None:
        """
        Создает или перезаписывает значение по ключу.

        Raises:
            StorageException: При ошибке базы данных.
        """
        try:
            with self.session() as session:
                entry = session.get(KeyValueEntry, key)

                if entry:
                    entry.value = data
                else:
                    session.add(KeyValueEntry(key=key, value=data))

                session.commit()
        except SQLAlchemyError as exc:
            raise StorageException(message=f"Не удалось записать ключ '{key}'.", error_type="storage_write_failed") from exc

        log.debug(f"Записано {len(data)} байт в SQLite по ключу '{key}'.")

    def close(self) -> None:
        """Закрывает пул соединений."""
        self.engine.dispose()
