"""Date periods and calendar iteration.

This package provides an ordered pair of datetimes (``Period``) that can be
measured, shifted and split into sub-periods by a calendar interval.

Key modules:
- period: the Period value and its iteration engine
- conventions: time units, weekdays and intervals
- utils: date coercion, parsing and calendar helpers
- config: library-wide defaults (clock, week start, parser flags)
"""

from .conventions.interval import Interval
from .conventions.types import TimeUnit, Weekday
from .errors import DateParseError, InvalidIntervalError
from .period import STOP, Period, Visit

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "Period",
    "Interval",
    "TimeUnit",
    "Weekday",
    "STOP",
    "Visit",
    "DateParseError",
    "InvalidIntervalError",
]
