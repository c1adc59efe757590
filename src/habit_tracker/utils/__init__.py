from .date_utils import (
    count_days_in_window,
    get_now,
    get_today_date,
    is_within_window,
    resolve_timezone,
    resolve_today,
)
from .progress import percentage, round_half_up

__all__ = [
    "resolve_timezone",
    "get_now",
    "get_today_date",
    "resolve_today",
    "is_within_window",
    "count_days_in_window",
    "round_half_up",
    "percentage",
]
