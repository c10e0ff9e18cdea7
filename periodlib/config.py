"""
Library-wide defaults.

Holds the clock used by relative factories (``Period.today()`` and friends),
the first day of the week and the flags handed to the date parser.
"""

from datetime import datetime
from typing import Callable, Dict, Optional

from periodlib.conventions.types import Weekday

Clock = Callable[[], datetime]

# Default settings
_DEFAULT_CLOCK: Optional[Clock] = None  # None means datetime.now
_DEFAULT_WEEK_START = Weekday.MONDAY
_DEFAULT_DAYFIRST = False
_DEFAULT_YEARFIRST = False


def get_now() -> datetime:
    """Current moment according to the configured clock."""
    if _DEFAULT_CLOCK is None:
        return datetime.now()
    return _DEFAULT_CLOCK()


def set_clock(clock: Optional[Clock]) -> None:
    """Replace the clock; pass None to go back to the system clock."""
    global _DEFAULT_CLOCK
    if clock is not None and not callable(clock):
        raise TypeError(f"clock must be callable, got {type(clock)}")
    _DEFAULT_CLOCK = clock


def get_week_start() -> Weekday:
    """First day of the week used by ``Period.this_week()``."""
    return _DEFAULT_WEEK_START


def set_week_start(weekday: int) -> None:
    """Set the first day of the week."""
    global _DEFAULT_WEEK_START
    _DEFAULT_WEEK_START = Weekday(weekday)


def get_parser_options() -> Dict[str, bool]:
    """Keyword arguments forwarded to ``dateutil.parser.parse``."""
    return {"dayfirst": _DEFAULT_DAYFIRST, "yearfirst": _DEFAULT_YEARFIRST}


def set_parser_options(dayfirst: Optional[bool] = None, yearfirst: Optional[bool] = None) -> None:
    """Set how ambiguous textual dates such as ``01/02/03`` are read."""
    global _DEFAULT_DAYFIRST, _DEFAULT_YEARFIRST
    if dayfirst is not None:
        _DEFAULT_DAYFIRST = bool(dayfirst)
    if yearfirst is not None:
        _DEFAULT_YEARFIRST = bool(yearfirst)


def reset_defaults() -> None:
    """Restore every default to its initial value."""
    global _DEFAULT_CLOCK, _DEFAULT_WEEK_START, _DEFAULT_DAYFIRST, _DEFAULT_YEARFIRST
    _DEFAULT_CLOCK = None
    _DEFAULT_WEEK_START = Weekday.MONDAY
    _DEFAULT_DAYFIRST = False
    _DEFAULT_YEARFIRST = False
