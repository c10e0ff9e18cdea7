"""Time units, weekdays and calendar intervals."""

from .interval import (
    Interval,
    IntervalLike,
    as_relativedelta,
    as_shift,
    get_unit,
    register_unit_alias,
    validate_positive,
)
from .types import TimeUnit, Weekday

__all__ = [
    "Interval",
    "IntervalLike",
    "TimeUnit",
    "Weekday",
    "as_relativedelta",
    "as_shift",
    "get_unit",
    "register_unit_alias",
    "validate_positive",
]
