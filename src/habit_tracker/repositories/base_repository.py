"""Базовый репозиторий коллекции, целиком хранящейся под одним ключом."""

from typing import Generic, Sequence, TypeVar

from pydantic import TypeAdapter, ValidationError

from habit_tracker.core.exceptions import StorageException
from habit_tracker.core.logging import store_log as log
from habit_tracker.models import DomainModel
from habit_tracker.storage import StorageBackend

# Определяем обобщенный (Generic) тип для моделей коллекции
ModelType = TypeVar("ModelType", bound=DomainModel)


class BaseRepository(Generic[ModelType]):
    """
    Базовый класс репозитория.

    Вся коллекция хранится как JSON массив под одним ключом,
    читается целиком и целиком перезаписывается при каждом изменении.

    Attributes:
        model: Класс модели Pydantic, с которым работает репозиторий.
        storage: Хранилище "ключ-значение".
        key: Ключ, под которым лежит коллекция.
    """

    def __init__(self, model: type[ModelType], storage: StorageBackend, key: str):
        """
        Инициализирует базовый репозиторий.

        Args:
            model (type[ModelType]): Класс модели Pydantic.
            storage (StorageBackend): Хранилище.
            key (str): Ключ коллекции в хранилище.
        """
        self.model = model
        self.storage = storage
        self.key = key
        self._adapter: TypeAdapter[list[ModelType]] = TypeAdapter(list[model])  # type: ignore[valid-type]

    def get_all(self) -> list[ModelType]:
        """
        Читает всю коллекцию.

        Отсутствующий ключ, ошибка хранилища или поврежденные данные
        дают пустую коллекцию, ошибка при этом логируется.

        Returns:
            list[ModelType]: Список записей.
        """
        model_name = self.model.__name__

        try:
            raw = self.storage.read(self.key)
        except StorageException as exc:
            log.error(f"Ошибка чтения коллекции {model_name} (ключ '{self.key}'): {exc.message}")
            return []

        if raw is None:
            log.debug(f"Ключ '{self.key}' отсутствует, коллекция {model_name} пуста.")
            return []

        try:
            items = self._adapter.validate_json(raw)
        except ValidationError as exc:
            log.error(
                f"Поврежденные данные коллекции {model_name} (ключ '{self.key}'), используется пустая коллекция: "
                f"{exc.error_count()} ошибок, первая: {exc.errors()[0]['msg'] if exc.errors() else 'N/A'}"
            )
            return []

        log.debug(f"Прочитано {len(items)} записей {model_name}.")
        return items

    def save_all(self, items: Sequence[ModelType]) -> None:
        """
        Полностью перезаписывает коллекцию.

        Args:
            items (Sequence[ModelType]): Новая коллекция.

        Raises:
            StorageException: Если запись в хранилище не удалась.
        """
        data = self._adapter.dump_json(list(items), by_alias=True)

        try:
            self.storage.write(self.key, data)
        except StorageException as exc:
            log.error(f"Ошибка записи коллекции {self.model.__name__} (ключ '{self.key}'): {exc.message}")
            raise

        log.debug(f"Сохранено {len(items)} записей {self.model.__name__}.")
