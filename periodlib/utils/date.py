from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Union

import logging

import numpy as np
from dateutil import parser as date_parser
from dateutil.relativedelta import FR, MO, SA, SU, TH, TU, WE, relativedelta
from pandas import NaT, Timestamp

from periodlib import config
from periodlib.conventions.types import TimeUnit, Weekday
from periodlib.errors import DateParseError

logger = logging.getLogger(__name__)

DateLike = Union[str, date, datetime, Timestamp, np.datetime64]

_WEEKDAYS = (MO, TU, WE, TH, FR, SA, SU)

_UNIT_SPAN = {
    TimeUnit.WEEKS: timedelta(weeks=1),
    TimeUnit.DAYS: timedelta(days=1),
    TimeUnit.HOURS: timedelta(hours=1),
    TimeUnit.MINUTES: timedelta(minutes=1),
    TimeUnit.SECONDS: timedelta(seconds=1),
}


def to_datetime(date_like: DateLike) -> datetime:
    """
    Convert a date-like value into a python datetime.

    Dates become midnight of that day, pandas/numpy timestamps are converted to
    python datetimes and strings are parsed with ``parse_datetime``.
    """
    if date_like is NaT:
        raise DateParseError("NaT is not a point in time")
    if isinstance(date_like, Timestamp):
        return date_like.to_pydatetime()
    if isinstance(date_like, np.datetime64):
        if np.isnat(date_like):
            raise DateParseError("NaT is not a point in time")
        return Timestamp(date_like).to_pydatetime()
    if isinstance(date_like, datetime):
        return date_like
    if isinstance(date_like, date):
        return datetime.combine(date_like, time.min)
    if isinstance(date_like, str):
        return parse_datetime(date_like)
    raise TypeError(f"Unsupported type for date: {type(date_like)}")


def parse_datetime(text: str) -> datetime:
    """
    Parse a textual date.

    Accepts anything ``dateutil`` understands plus the keywords ``now``,
    ``today``, ``tomorrow`` and ``yesterday``, which are resolved against the
    configured clock. Missing components default to today at midnight.
    """
    key = text.strip().lower()
    now = config.get_now()
    if key == "now":
        return now
    if key == "today":
        return start_of_day(now)
    if key == "tomorrow":
        return start_of_day(now) + relativedelta(days=1)
    if key == "yesterday":
        return start_of_day(now) - relativedelta(days=1)

    try:
        return date_parser.parse(text, default=start_of_day(now), **config.get_parser_options())
    except (ValueError, OverflowError) as exc:
        raise DateParseError(f"Failed to parse date string {text!r}: {exc}") from exc


def start_of_day(dt: datetime) -> datetime:
    """Midnight of the given day, keeping tzinfo."""
    return dt.replace(hour=0, minute=0, second=0, microsecond=0)


def end_of_day(dt: datetime) -> datetime:
    """Last representable instant of the given day."""
    return dt.replace(hour=23, minute=59, second=59, microsecond=999999)


def next_weekday(dt: datetime, weekday: int) -> datetime:
    """Midnight of the next given weekday strictly after dt."""
    return start_of_day(dt) + relativedelta(days=1, weekday=_WEEKDAYS[Weekday(weekday)])


def previous_weekday(dt: datetime, weekday: int) -> datetime:
    """Midnight of the last given weekday strictly before dt's day."""
    return start_of_day(dt) + relativedelta(days=-1, weekday=_WEEKDAYS[Weekday(weekday)](-1))


def diff_in(start: datetime, end: datetime, unit: TimeUnit) -> int:
    """
    Whole units elapsed between two datetimes.

    The result is always non-negative and floored, so 23 hours is 0 days.
    Years and months follow calendar arithmetic (Jan 15 -> Feb 15 is one month).
    """
    if end < start:
        logger.debug("Swapping start/end for diff_in: %s, %s", start, end)
        start, end = end, start

    unit = TimeUnit(unit)
    if unit in (TimeUnit.YEARS, TimeUnit.MONTHS):
        delta = relativedelta(end, start)
        if unit == TimeUnit.YEARS:
            return delta.years
        return delta.years * 12 + delta.months

    return (end - start) // _UNIT_SPAN[unit]
