"""Хранилище привычек: создание, отметки выполнения, серии и прогресс."""

from datetime import date, datetime, timedelta
from typing import Any, Mapping

from pydantic import ValidationError

from habit_tracker.core.exceptions import HabitValidationException
from habit_tracker.core.logging import store_log as log
from habit_tracker.models import Habit, HabitCompletion, HabitFrequency
from habit_tracker.repositories import HabitCompletionRepository, HabitRepository
from habit_tracker.schemas import HabitSchemaCreate, HabitSchemaUpdate
from habit_tracker.utils import count_days_in_window, get_now, percentage, resolve_today


def calculate_progress(habit: Habit, window_days: int, today: date) -> int:
    """
    Процент выполнения привычки за окно [today - window_days, today].

    Args:
        habit (Habit): Привычка.
        window_days (int): Длина окна в днях.
        today (date): Правая граница окна.

    Returns:
        int: round(100 * дней_в_окне / window_days), 0 для window_days <= 0.
             Значение не ограничивается 100, так как окно включает window_days + 1 дней.
    """
    if window_days <= 0:
        return 0
    return percentage(count_days_in_window(habit.completed_dates, today, window_days), window_days)


def _validation_message(exc: ValidationError) -> str:
    """Собирает текст ошибок валидации Pydantic в одну строку."""
    return "; ".join(
        f"{'.'.join(str(part) for part in error['loc']) or 'value'}: {error['msg']}" for error in exc.errors()
    )


class HabitStore:
    """
    Хранилище привычек.

    Каждая операция читает всю коллекцию привычек, изменяет ее и целиком записывает обратно.
    Операции с несуществующей привычкой ничего не делают и возвращают None / False / 0.

    "Сегодня" можно передать явно в каждую операцию, иначе оно вычисляется
    по часовому поясу хранилища (или по локальному времени системы).

    Attributes:
        habit_repository (HabitRepository): Репозиторий коллекции привычек.
        completion_repository (HabitCompletionRepository | None): Журнал выполнений.
        timezone_name (str | None): Часовой пояс для вычисления "сегодня".
        record_completion_events (bool): Писать ли запись в журнал при каждом переключении отметки.
    """

    def __init__(
        self,
        habit_repository: HabitRepository,
        completion_repository: HabitCompletionRepository | None = None,
        *,
        timezone_name: str | None = None,
        record_completion_events: bool = False,
    ):
        """
        Инициализирует хранилище привычек.

        Args:
            habit_repository (HabitRepository): Репозиторий коллекции привычек.
            completion_repository (HabitCompletionRepository | None): Репозиторий журнала выполнений.
            timezone_name (str | None): Часовой пояс IANA для вычисления "сегодня".
            record_completion_events (bool): Писать ли журнал выполнений.
        """
        self.habit_repository = habit_repository
        self.completion_repository = completion_repository
        self.timezone_name = timezone_name
        self.record_completion_events = record_completion_events

    def _resolve_today(self, today: date | None) -> date:
        return resolve_today(today, self.timezone_name)

    @staticmethod
    def _generate_id(habits: list[Habit], created_at: datetime) -> str:
        # Метка времени в миллисекундах, увеличивается до первого свободного значения
        existing_ids = {habit.id for habit in habits}
        candidate = int(created_at.timestamp() * 1000)

        while str(candidate) in existing_ids:
            candidate += 1

        return str(candidate)

    # --- Чтение ---

    def get_all(self) -> list[Habit]:
        """Возвращает все привычки."""
        return self.habit_repository.get_all()

    def get_by_id(self, habit_id: str) -> Habit | None:
        """Возвращает привычку по ID или None."""
        return self.habit_repository.get_by_id(habit_id)

    def is_completed_today(self, habit_id: str, today: date | None = None) -> bool:
        """
        Проверяет, отмечена ли привычка выполненной сегодня.

        Args:
            habit_id (str): ID привычки.
            today (date | None): "Сегодня", по умолчанию текущая дата.

        Returns:
            bool: True, если сегодняшний день есть среди дней выполнения. False для неизвестной привычки.
        """
        habit = self.habit_repository.get_by_id(habit_id)

        if habit is None:
            return False

        return habit.is_completed_on(self._resolve_today(today))

    def progress(self, habit_id: str, window_days: int = 7, today: date | None = None) -> int:
        """
        Процент выполнения привычки за последние `window_days` дней.

        Учитываются дни выполнения в окне [today - window_days, today] (обе границы включены).

        Args:
            habit_id (str): ID привычки.
            window_days (int): Длина окна в днях.
            today (date | None): Правая граница окна, по умолчанию текущая дата.

        Returns:
            int: Процент (округленный), 0 для window_days <= 0 или неизвестной привычки.
        """
        if window_days <= 0:
            return 0

        habit = self.habit_repository.get_by_id(habit_id)

        if habit is None:
            log.debug(f"Прогресс для неизвестной привычки ID {habit_id}: 0.")
            return 0

        return calculate_progress(habit, window_days, self._resolve_today(today))

    def get_completion_events(self, habit_id: str | None = None) -> list[HabitCompletion]:
        """
        Возвращает журнал выполнений (всех привычек или одной).

        Args:
            habit_id (str | None): ID привычки. Если None, возвращаются все записи.

        Returns:
            list[HabitCompletion]: Записи в порядке добавления.
        """
        if self.completion_repository is None:
            return []

        if habit_id is None:
            return self.completion_repository.get_all()

        return self.completion_repository.get_by_habit_id(habit_id)

    # --- Изменение ---

    def create(
        self,
        name: str,
        frequency: HabitFrequency | str = HabitFrequency.DAILY,
        reminder: bool = False,
        *,
        now: datetime | None = None,
    ) -> Habit:
        """
        Создает новую привычку.

        Args:
            name (str): Название привычки (не пустое).
            frequency (HabitFrequency | str): Периодичность (daily / weekly).
            reminder (bool): Включить напоминание.
            now (datetime | None): Время создания, по умолчанию текущее.

        Returns:
            Habit: Созданная привычка с нулевой серией и пустым набором дней.

        Raises:
            HabitValidationException: Если название пустое или периодичность неизвестна.
        """
        try:
            habit_in = HabitSchemaCreate(name=name, frequency=frequency, reminder=reminder)
        except ValidationError as exc:
            message = _validation_message(exc)
            log.warning(f"Отклонено создание привычки: {message}")
            raise HabitValidationException(message=message, error_type="habit_invalid_input") from exc

        created_at = now or get_now(self.timezone_name)
        habits = self.habit_repository.get_all()

        habit = Habit(
            id=self._generate_id(habits, created_at),
            created_at=created_at,
            streak=0,
            completed_dates=[],
            **habit_in.model_dump(),
        )

        habits.append(habit)
        self.habit_repository.save_all(habits)

        log.info(f"Привычка ID {habit.id} ('{habit.name}', {habit.frequency}) успешно создана.")
        return habit

    def toggle_completion(self, habit_id: str, today: date | None = None) -> Habit | None:
        """
        Переключает отметку выполнения привычки за сегодня.

        Если сегодня уже отмечено, отметка снимается и серия уменьшается на 1 (не ниже 0),
        без пересчета по всей истории.
        Иначе сегодняшний день добавляется, last_completed становится сегодняшним днем,
        а серия увеличивается на 1, если она была нулевой или вчерашний день отмечен,
        и сбрасывается в 1 при пропуске.

        Args:
            habit_id (str): ID привычки.
            today (date | None): "Сегодня", по умолчанию текущая дата.

        Returns:
            Habit | None: Обновленная привычка или None, если привычка не найдена.
        """
        habits = self.habit_repository.get_all()
        habit = self.habit_repository.find(habits, habit_id)

        if habit is None:
            log.warning(f"Переключение отметки: привычка ID {habit_id} не найдена.")
            return None

        today = self._resolve_today(today)

        # Сценарий A: отметка за сегодня уже есть - снимаем ее
        if habit.is_completed_on(today):
            habit.completed_dates = [day for day in habit.completed_dates if day != today]
            habit.streak = max(0, habit.streak - 1)
            completed = False
            log.debug(f"Снята отметка привычки ID {habit_id} за {today}, серия: {habit.streak}.")

        # Сценарий B: отметки нет - добавляем и пересчитываем серию
        else:
            habit.completed_dates.append(today)
            habit.last_completed = today

            if habit.streak == 0 or habit.is_completed_on(today - timedelta(days=1)):
                habit.streak += 1
            else:
                # Пропуск: серия начинается заново
                habit.streak = 1

            completed = True
            log.debug(f"Привычка ID {habit_id} отмечена за {today}, серия: {habit.streak}.")

        self.habit_repository.save_all(habits)

        if self.record_completion_events and self.completion_repository is not None:
            self.completion_repository.add(HabitCompletion(habit_id=habit_id, date=today, completed=completed))

        log.info(f"Отметка привычки ID {habit_id} за {today}: {'выполнено' if completed else 'отменено'}.")
        return habit

    def update(self, habit_id: str, updates: HabitSchemaUpdate | Mapping[str, Any]) -> Habit | None:
        """
        Объединяет переданные поля с сохраненной привычкой.

        Проверяется только существование привычки. ID не меняется, неизвестные поля игнорируются.

        Args:
            habit_id (str): ID привычки.
            updates (HabitSchemaUpdate | Mapping[str, Any]): Поля для обновления
                                                          (snake_case или camelCase).

        Returns:
            Habit | None: Обновленная привычка или None, если привычка не найдена.

        Raises:
            HabitValidationException: Если значения полей имеют неверный тип.
        """
        habits = self.habit_repository.get_all()
        position = next((index for index, habit in enumerate(habits) if habit.id == habit_id), None)

        # Для несуществующей привычки обновление ничего не делает, даже с неверными полями
        if position is None:
            log.warning(f"Обновление: привычка ID {habit_id} не найдена.")
            return None

        if isinstance(updates, HabitSchemaUpdate):
            update_schema = updates
        else:
            known_keys = set(HabitSchemaUpdate.model_fields) | {
                field.alias for field in HabitSchemaUpdate.model_fields.values() if field.alias
            }
            ignored_keys = sorted(set(updates) - known_keys)

            if ignored_keys:
                log.warning(f"Обновление привычки ID {habit_id}: поля {ignored_keys} проигнорированы.")

            try:
                update_schema = HabitSchemaUpdate.model_validate(dict(updates))
            except ValidationError as exc:
                message = _validation_message(exc)
                log.warning(f"Отклонено обновление привычки ID {habit_id}: {message}")
                raise HabitValidationException(message=message, error_type="habit_invalid_update") from exc

        update_data = update_schema.model_dump(exclude_unset=True)

        try:
            # Повторная валидация модели убирает повторяющиеся дни из нового набора
            updated_habit = Habit.model_validate({**habits[position].model_dump(), **update_data})
        except ValidationError as exc:
            message = _validation_message(exc)
            log.warning(f"Отклонено обновление привычки ID {habit_id}: {message}")
            raise HabitValidationException(message=message, error_type="habit_invalid_update") from exc

        habits[position] = updated_habit
        self.habit_repository.save_all(habits)

        log.info(f"Привычка ID {habit_id} обновлена: {sorted(update_data)}.")
        return updated_habit

    def delete(self, habit_id: str) -> bool:
        """
        Удаляет привычку по ID.

        Args:
            habit_id (str): ID привычки.

        Returns:
            bool: True, если привычка была удалена, False, если она не найдена.
        """
        habits = self.habit_repository.get_all()
        remaining = [habit for habit in habits if habit.id != habit_id]

        if len(remaining) == len(habits):
            log.warning(f"Удаление: привычка ID {habit_id} не найдена.")
            return False

        self.habit_repository.save_all(remaining)

        log.info(f"Привычка ID {habit_id} удалена.")
        return True
