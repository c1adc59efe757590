"""Модуль вспомогательных утилит для работы с датами/таймзонами."""

from datetime import date, datetime, timedelta, timezone
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from habit_tracker.core.logging import store_log as log


def resolve_timezone(timezone_name: str | None) -> ZoneInfo | None:
    """
    Возвращает объект часового пояса по названию IANA.

    Args:
        timezone_name (str | None): Название часового пояса (например, "Europe/Moscow").

    Returns:
        ZoneInfo | None: Часовой пояс, UTC для некорректного названия или None,
                         если название не задано (используется локальное время системы).
    """
    if not timezone_name:
        return None

    try:
        # Пытаемся создать объект информации о часовом поясе (IANA time zone)
        return ZoneInfo(timezone_name)

    except (ZoneInfoNotFoundError, ValueError):
        # Несуществующая таймзона (например, опечатка) не должна ронять операцию,
        # логируем проблему и откатываемся к UTC
        log.warning(f"Некорректный часовой пояс '{timezone_name}'. Используется UTC по умолчанию.")
        return ZoneInfo("UTC")


def get_now(timezone_name: str | None = None) -> datetime:
    """Текущее время с учетом часового пояса (локальное, если пояс не задан)."""
    tz = resolve_timezone(timezone_name)

    if tz is None:
        return datetime.now().astimezone()

    # Метод astimezone() сохраняет абсолютный момент времени,
    # но пересчитывает year, month, day, hour под смещение таймзоны
    return datetime.now(timezone.utc).astimezone(tz)


def get_today_date(timezone_name: str | None = None) -> date:
    """
    Вычисляет текущую дату ("сегодня").

    Если часовой пояс не задан, используется локальное время системы.
    Если часовой пояс некорректен, используется UTC.

    Args:
        timezone_name (str | None): Название часового пояса IANA.

    Returns:
        date: Объект даты (YYYY-MM-DD), соответствующий "сегодня".
    """
    return get_now(timezone_name).date()


def is_within_window(day: date, today: date, window_days: int) -> bool:
    """
    Проверяет, попадает ли день в окно [today - window_days, today] (границы включены).

    Args:
        day (date): Проверяемый день.
        today (date): Правая граница окна.
        window_days (int): Длина окна в днях.

    Returns:
        bool: True, если день попадает в окно.
    """
    # Окно, уходящее дальше 1 января 1 года, начинается с date.min
    if window_days >= (today - date.min).days:
        window_start = date.min
    else:
        window_start = today - timedelta(days=window_days)

    return window_start <= day <= today


def count_days_in_window(days: list[date], today: date, window_days: int) -> int:
    """Количество дней из списка, попадающих в окно (см. is_within_window)."""
    return sum(1 for day in days if is_within_window(day, today, window_days))


def resolve_today(today: date | None, timezone_name: str | None = None) -> date:
    """
    Возвращает переданный день или текущую дату, если он не передан.

    Переданный datetime приводится к календарному дню.
    """
    # datetime является подклассом date
    if isinstance(today, datetime):
        return today.date()
    return today if today is not None else get_today_date(timezone_name)
