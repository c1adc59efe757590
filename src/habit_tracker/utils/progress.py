"""Вспомогательные функции для расчета процентов."""

import math


def round_half_up(value: float) -> int:
    """Округляет до целого, половины округляются вверх (2.5 -> 3, 42.857 -> 43)."""
    return math.floor(value + 0.5)


def percentage(part: int | float, whole: int | float) -> int:
    """
    Процент `part` от `whole`, округленный до целого.

    Результат не ограничивается сверху 100. Для `whole <= 0` возвращает 0.
    """
    if whole <= 0:
        return 0
    return round_half_up(part / whole * 100)
