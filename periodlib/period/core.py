"""
Core Period value.

A Period is an ordered pair of datetimes. The constructor accepts the
endpoints in either order and swaps them once; shifts re-order them the same
way, so ``start <= end`` holds for every other operation.
"""

from __future__ import annotations

from datetime import datetime
from typing import Iterator, Optional

import logging

from dateutil.relativedelta import relativedelta

from periodlib import config
from periodlib.conventions.interval import Interval, IntervalLike, as_shift
from periodlib.conventions.types import TimeUnit
from periodlib.utils.date import (
    DateLike,
    diff_in,
    end_of_day,
    previous_weekday,
    start_of_day,
    to_datetime,
)

from . import iteration

logger = logging.getLogger(__name__)


class Period:
    """Represents the span of time between two datetimes."""

    __hash__ = None  # mutable through add/sub

    def __init__(self, start: Optional[DateLike] = None, end: Optional[DateLike] = None):
        start_dt = config.get_now() if start is None else to_datetime(start)
        if end is None:
            end_dt = start_of_day(start_dt) + relativedelta(days=1)
        else:
            end_dt = to_datetime(end)

        self._start = start_dt
        self._end = end_dt
        self._order()

    def _order(self) -> None:
        """Swap the endpoints if start is after end."""
        if self._start > self._end:
            logger.debug("Swapping start/end for Period: %s, %s", self._start, self._end)
            self._start, self._end = self._end, self._start

    # ------------------------------------------------------------------ factories

    @classmethod
    def instance(cls, start: Optional[DateLike] = None, end: Optional[DateLike] = None) -> "Period":
        """Alias of the constructor for fluent use: ``Period.instance(a, b).add_days(1)``."""
        return cls(start, end)

    @classmethod
    def parse(cls, start: str, end: str) -> "Period":
        """Create a period from two date strings."""
        return cls(to_datetime(start), to_datetime(end))

    @classmethod
    def today(cls) -> "Period":
        """From the start of today to now."""
        now = config.get_now()
        return cls(start_of_day(now), now)

    @classmethod
    def this_day(cls) -> "Period":
        """The whole of today."""
        now = config.get_now()
        return cls(start_of_day(now), end_of_day(now))

    @classmethod
    def last_week(cls) -> "Period":
        """Seven days starting at midnight one week ago."""
        start = start_of_day(config.get_now() - relativedelta(weeks=1))
        return cls(start, start + relativedelta(weeks=1))

    @classmethod
    def last_month(cls) -> "Period":
        """The whole previous calendar month."""
        start = start_of_day(config.get_now()).replace(day=1) - relativedelta(months=1)
        return cls(start, start + relativedelta(months=1))

    @classmethod
    def this_week(cls) -> "Period":
        """From the start of the current week to tomorrow."""
        today = start_of_day(config.get_now())
        start = today
        week_start = config.get_week_start()
        if start.weekday() != week_start:
            start = previous_weekday(start, week_start)
        return cls(start, today + relativedelta(days=1))

    @classmethod
    def this_month(cls) -> "Period":
        """From the first day of the current month to tomorrow."""
        today = start_of_day(config.get_now())
        return cls(today.replace(day=1), today + relativedelta(days=1))

    @classmethod
    def this_year(cls) -> "Period":
        """From 1 January of the current year to tomorrow."""
        today = start_of_day(config.get_now())
        return cls(today.replace(month=1, day=1), today + relativedelta(days=1))

    # ------------------------------------------------------------------ accessors

    @property
    def start(self) -> datetime:
        return self._start

    @property
    def end(self) -> datetime:
        return self._end

    def copy(self) -> "Period":
        return type(self)(self._start, self._end)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Period):
            return NotImplemented
        return self._start == other._start and self._end == other._end

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._start.isoformat()}, {self._end.isoformat()})"

    def __contains__(self, point) -> bool:
        return self.contains(point)

    # ------------------------------------------------------------------ measurement

    def length_in(self, unit: TimeUnit) -> int:
        """Whole units between start and end (floored)."""
        return diff_in(self._start, self._end, unit)

    def length_in_years(self) -> int:
        return self.length_in(TimeUnit.YEARS)

    def length_in_months(self) -> int:
        return self.length_in(TimeUnit.MONTHS)

    def length_in_weeks(self) -> int:
        return self.length_in(TimeUnit.WEEKS)

    def length_in_days(self) -> int:
        return self.length_in(TimeUnit.DAYS)

    def length_in_hours(self) -> int:
        return self.length_in(TimeUnit.HOURS)

    def length_in_minutes(self) -> int:
        return self.length_in(TimeUnit.MINUTES)

    def length_in_seconds(self) -> int:
        return self.length_in(TimeUnit.SECONDS)

    def contains(self, point: DateLike, inclusive: bool = True) -> bool:
        """
        Check whether ``point`` lies within the period.

        Args:
            point: Datetime, date or parseable string
            inclusive: Count the endpoints as contained

        Raises:
            DateParseError: If ``point`` is a string that cannot be parsed
        """
        point = to_datetime(point)
        if inclusive:
            return self._start <= point <= self._end
        return self._start < point < self._end

    # ------------------------------------------------------------------ shifting

    def add(self, interval: IntervalLike) -> "Period":
        """Move both endpoints forward by ``interval`` in place.

        Month and year steps clip to the last day of a shorter month, which can
        land both endpoints on the same day in reverse order; they are
        re-ordered afterwards.

        Raises:
            InvalidIntervalError: If the interval sets absolute fields such as ``day=1``
        """
        delta = as_shift(interval)
        self._start = self._start + delta
        self._end = self._end + delta
        self._order()
        return self

    def sub(self, interval: IntervalLike) -> "Period":
        """Move both endpoints back by ``interval`` in place; see ``add``."""
        delta = as_shift(interval)
        self._start = self._start - delta
        self._end = self._end - delta
        self._order()
        return self

    def add_years(self, value: int) -> "Period":
        return self.add(Interval(value, TimeUnit.YEARS))

    def sub_years(self, value: int) -> "Period":
        return self.sub(Interval(value, TimeUnit.YEARS))

    def add_months(self, value: int) -> "Period":
        return self.add(Interval(value, TimeUnit.MONTHS))

    def sub_months(self, value: int) -> "Period":
        return self.sub(Interval(value, TimeUnit.MONTHS))

    def add_weeks(self, value: int) -> "Period":
        return self.add(Interval(value, TimeUnit.WEEKS))

    def sub_weeks(self, value: int) -> "Period":
        return self.sub(Interval(value, TimeUnit.WEEKS))

    def add_days(self, value: int) -> "Period":
        return self.add(Interval(value, TimeUnit.DAYS))

    def sub_days(self, value: int) -> "Period":
        return self.sub(Interval(value, TimeUnit.DAYS))

    def set_time_to_start_end_points(self) -> "Period":
        """Stretch the period to 00:00 of its first day and 23:59:59.999999 of its last."""
        self._start = start_of_day(self._start)
        self._end = end_of_day(self._end)
        return self

    # ------------------------------------------------------------------ iteration

    def segments(self, interval: IntervalLike) -> Iterator["Period"]:
        return iteration.segments(self, interval)

    def dates(self) -> Iterator[datetime]:
        return iteration.dates(self)

    def each(self, interval: IntervalLike, visitor: iteration.Visitor) -> "Period":
        return iteration.each(self, interval, visitor)

    def each_days(self, days: int, visitor: iteration.Visitor) -> "Period":
        return iteration.each_days(self, days, visitor)

    def each_weeks(self, weeks: int, visitor: iteration.Visitor, only_full_week: bool = False) -> "Period":
        return iteration.each_weeks(self, weeks, visitor, only_full_week)

    def each_months(self, months: int, visitor: iteration.Visitor, only_full_month: bool = False) -> "Period":
        return iteration.each_months(self, months, visitor, only_full_month)

    def each_day_of_week(self, weekday: int, visitor: iteration.Visitor) -> "Period":
        return iteration.each_day_of_week(self, weekday, visitor)

    def iterate_dates(self, visitor: iteration.Visitor) -> "Period":
        return iteration.iterate_dates(self, visitor)
