"""
Basic types and enums used across the period system.
"""

from enum import Enum, IntEnum


class TimeUnit(Enum):
    """Calendar units an interval or a length can be expressed in."""

    YEARS = "years"
    MONTHS = "months"
    WEEKS = "weeks"
    DAYS = "days"
    HOURS = "hours"
    MINUTES = "minutes"
    SECONDS = "seconds"

    def keyword(self) -> str:
        """relativedelta keyword for this unit."""
        return self.value


class Weekday(IntEnum):
    """Days of the week, numbered like datetime.weekday()."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6
