"""
Iteration engine.

Splits a period into consecutive segments of a calendar interval. The last
segment is clamped to the parent's end, so segments cover the parent exactly,
sharing only their boundary points.

Visitors are plain callables receiving one segment. Returning ``STOP`` halts
the walk; returning ``Visit.CONTINUE``, None or any other value continues it.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, Callable, Iterator, Tuple

import logging

from dateutil.relativedelta import relativedelta

from periodlib.conventions.interval import Interval, IntervalLike, validate_positive
from periodlib.conventions.types import TimeUnit, Weekday
from periodlib.utils.date import next_weekday, start_of_day

from .filters import forward_if, full_units

logger = logging.getLogger(__name__)

DAYS_PER_WEEK = 7
_ONE_DAY = relativedelta(days=1)


class Visit(Enum):
    """Signals a visitor may return.

    ``CONTINUE`` is the explicit form of returning None.
    """

    CONTINUE = "CONTINUE"
    STOP = "STOP"


STOP = Visit.STOP

Visitor = Callable[[Any], Any]


class SegmentCursor:
    """
    Iterator over ``(segment_start, segment_end)`` pairs covering ``[start, end]``.

    The k-th segment starts at ``start + delta * k`` rather than at the previous
    start plus ``delta``, so month steps from the 31st do not drift to the 28th.
    At least one pair is always produced; a zero-length range gives
    ``(start, start)``.
    """

    def __init__(self, start: datetime, end: datetime, delta: relativedelta):
        self._start = start
        self._end = end
        self._delta = delta
        self._index = 0
        self._exhausted = False

    def __iter__(self) -> "SegmentCursor":
        return self

    def __next__(self) -> Tuple[datetime, datetime]:
        if self._exhausted:
            raise StopIteration

        cursor_start = self._start + self._delta * self._index
        cursor_end = self._start + self._delta * (self._index + 1)
        self._index += 1

        # cursor_end is where the next segment would start
        if cursor_end >= self._end:
            self._exhausted = True
            return cursor_start, self._end
        return cursor_start, cursor_end


def _segments(period, delta: relativedelta) -> Iterator:
    factory = type(period)
    for segment_start, segment_end in SegmentCursor(period.start, period.end, delta):
        yield factory(segment_start, segment_end)


def segments(period, interval: IntervalLike) -> Iterator:
    """Lazily yield the segments of ``period``.

    The interval is validated immediately, not on the first ``next()``.
    """
    delta = validate_positive(interval)
    return _segments(period, delta)


def each(period, interval: IntervalLike, visitor: Visitor):
    """
    Call ``visitor`` with every segment of ``period`` split by ``interval``.

    Args:
        period: Parent period, left unchanged
        interval: Positive step (Interval, ISO/human string, timedelta or relativedelta)
        visitor: Callable receiving a fresh Period per segment

    Returns:
        The parent period

    Raises:
        InvalidIntervalError: If the interval does not move forward
    """
    delta = validate_positive(interval)

    count = 0
    for segment in _segments(period, delta):
        count += 1
        if visitor(segment) is STOP:
            logger.debug("Visitor stopped iteration at segment %s", count)
            break

    logger.debug("Visited %s segments of %r over %s - %s", count, delta, period.start, period.end)
    return period


def each_days(period, days: int, visitor: Visitor):
    """Iterate ``period`` in steps of ``days`` days."""
    return each(period, Interval(days, TimeUnit.DAYS), visitor)


def _each_unit(period, count: int, unit: TimeUnit, visitor: Visitor, only_full: bool):
    interval = Interval(count, unit)
    validate_positive(interval)

    if period.length_in(unit) == 0:
        logger.debug("Period %s - %s is shorter than one %s; nothing to iterate", period.start, period.end, unit.value)
        return period

    if only_full:
        visitor = forward_if(full_units(count, unit), visitor)
    return each(period, interval, visitor)


def each_weeks(period, weeks: int, visitor: Visitor, only_full_week: bool = False):
    """Iterate in steps of ``weeks`` weeks.

    Does nothing when the period is shorter than a week. With
    ``only_full_week`` the clamped tail segment is skipped unless it happens to
    be exactly ``weeks`` long.
    """
    return _each_unit(period, weeks, TimeUnit.WEEKS, visitor, only_full_week)


def each_months(period, months: int, visitor: Visitor, only_full_month: bool = False):
    """Iterate in steps of ``months`` months; see ``each_weeks``."""
    return _each_unit(period, months, TimeUnit.MONTHS, visitor, only_full_month)


def each_day_of_week(period, weekday: int, visitor: Visitor):
    """
    Call ``visitor`` with a one-day period for every ``weekday`` in ``period``.

    If the period starts on that weekday its start time is kept; otherwise the
    first occurrence is taken at 00:00.
    """
    weekday = Weekday(weekday)
    factory = type(period)

    aligned = period.start
    if aligned.weekday() != weekday:
        aligned = next_weekday(aligned, weekday)

    if aligned >= period.end:
        logger.debug("No %s between %s and %s", weekday.name, period.start, period.end)
        return period

    def visit_day(segment):
        return visitor(factory(segment.start, segment.start + _ONE_DAY))

    each_days(factory(aligned, period.end), DAYS_PER_WEEK, visit_day)
    return period


def dates(period) -> Iterator[datetime]:
    """Yield midnight of every calendar day in ``[start day, end day)``."""
    current = start_of_day(period.start)
    last = start_of_day(period.end)
    while current < last:
        yield current
        current = current + _ONE_DAY


def iterate_dates(period, visitor: Visitor):
    """Call ``visitor`` with midnight of each calendar day the period spans."""
    count = 0
    for day in dates(period):
        count += 1
        if visitor(day) is STOP:
            break
    logger.debug("Visited %s days over %s - %s", count, period.start, period.end)
    return period
