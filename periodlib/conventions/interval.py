"""Calendar intervals: a magnitude plus a unit."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import timedelta
from typing import Dict, Union

import logging

from dateutil.relativedelta import relativedelta

from periodlib.conventions.types import TimeUnit
from periodlib.errors import InvalidIntervalError

logger = logging.getLogger(__name__)

_ALIASES: Dict[str, TimeUnit] = {}
for _unit in TimeUnit:
    _ALIASES[_unit.value] = _unit
    _ALIASES[_unit.value[:-1]] = _unit
_ALIASES.update(
    {
        "Y": TimeUnit.YEARS,
        "MO": TimeUnit.MONTHS,
        "W": TimeUnit.WEEKS,
        "D": TimeUnit.DAYS,
        "H": TimeUnit.HOURS,
        "MIN": TimeUnit.MINUTES,
        "S": TimeUnit.SECONDS,
    }
)
_ALIASES = {key.upper(): unit for key, unit in _ALIASES.items()}

_ISO_DATE_UNITS = {"Y": TimeUnit.YEARS, "M": TimeUnit.MONTHS, "W": TimeUnit.WEEKS, "D": TimeUnit.DAYS}
_ISO_TIME_UNITS = {"H": TimeUnit.HOURS, "M": TimeUnit.MINUTES, "S": TimeUnit.SECONDS}
_ISO_CODES = {
    TimeUnit.YEARS: "P{}Y",
    TimeUnit.MONTHS: "P{}M",
    TimeUnit.WEEKS: "P{}W",
    TimeUnit.DAYS: "P{}D",
    TimeUnit.HOURS: "PT{}H",
    TimeUnit.MINUTES: "PT{}M",
    TimeUnit.SECONDS: "PT{}S",
}

_ISO_RE = re.compile(r"^(-)?P(?:(\d+)([YMWD])|T(\d+)([HMS]))$")
_HUMAN_RE = re.compile(r"^([+-]?\d+)\s*([A-Za-z]+)$")

# Fields of relativedelta that set a calendar position instead of moving by an amount
_ABSOLUTE_FIELDS = ("year", "month", "day", "weekday", "hour", "minute", "second", "microsecond")
_RELATIVE_FIELDS = ("years", "months", "days", "hours", "minutes", "seconds", "microseconds")


def get_unit(alias: Union[str, TimeUnit]) -> TimeUnit:
    """Resolve a unit alias such as ``"day"``, ``"W"`` or ``"months"``."""
    if isinstance(alias, TimeUnit):
        return alias
    key = str(alias).strip().upper()
    try:
        return _ALIASES[key]
    except KeyError as exc:
        available = ", ".join(unit.value for unit in TimeUnit)
        raise InvalidIntervalError(f"Unknown time unit: {alias!r}. Available: {available}") from exc


def register_unit_alias(alias: str, unit: TimeUnit) -> None:
    """Register an extra spelling for a time unit."""
    key = alias.strip().upper()
    if key in _ALIASES:
        raise ValueError(f"Unit alias '{alias}' already registered")
    _ALIASES[key] = TimeUnit(unit)


@dataclass(frozen=True)
class Interval:
    """An amount of one calendar unit, e.g. 3 days or 1 month."""

    magnitude: int
    unit: TimeUnit

    def __post_init__(self):
        if isinstance(self.magnitude, bool) or not isinstance(self.magnitude, int):
            raise InvalidIntervalError(f"Interval magnitude must be an integer, got {self.magnitude!r}")
        object.__setattr__(self, "unit", get_unit(self.unit))

    @classmethod
    def of(cls, magnitude: int, unit: Union[str, TimeUnit]) -> "Interval":
        return cls(magnitude, get_unit(unit))

    @classmethod
    def parse(cls, text: str) -> "Interval":
        """
        Parse an interval.

        Supports single-unit ISO-8601 durations (``P3D``, ``P1W``, ``PT6H``) and
        the human form ``"3 days"``.
        """
        value = text.strip()
        match = _ISO_RE.match(value.upper())
        if match:
            sign, date_amount, date_code, time_amount, time_code = match.groups()
            if date_amount is not None:
                magnitude, unit = int(date_amount), _ISO_DATE_UNITS[date_code]
            else:
                magnitude, unit = int(time_amount), _ISO_TIME_UNITS[time_code]
            return cls(-magnitude if sign else magnitude, unit)

        match = _HUMAN_RE.match(value)
        if match:
            return cls(int(match.group(1)), get_unit(match.group(2)))

        raise InvalidIntervalError(f"Unsupported interval format: {text!r}")

    def to_relativedelta(self) -> relativedelta:
        return relativedelta(**{self.unit.keyword(): self.magnitude})

    def __neg__(self) -> "Interval":
        return Interval(-self.magnitude, self.unit)

    def __str__(self) -> str:
        code = _ISO_CODES[self.unit].format(abs(self.magnitude))
        return f"-{code}" if self.magnitude < 0 else code


IntervalLike = Union[Interval, str, timedelta, relativedelta]


def as_relativedelta(interval: IntervalLike) -> relativedelta:
    """Coerce any supported interval form into a relativedelta."""
    if isinstance(interval, relativedelta):
        return interval
    if isinstance(interval, Interval):
        return interval.to_relativedelta()
    if isinstance(interval, timedelta):
        return relativedelta(
            days=interval.days, seconds=interval.seconds, microseconds=interval.microseconds
        )
    if isinstance(interval, str):
        return Interval.parse(interval).to_relativedelta()
    raise TypeError(f"Unsupported type for interval: {type(interval)}")


def as_shift(interval: IntervalLike) -> relativedelta:
    """
    Coerce an interval meant to move a date by an amount.

    Absolute fields (``day=31``, ``weekday=FR``) set a calendar position
    instead of moving by an amount, so they are rejected.
    """
    delta = as_relativedelta(interval)

    absolute = [name for name in _ABSOLUTE_FIELDS if getattr(delta, name) is not None]
    if absolute:
        raise InvalidIntervalError(
            f"Interval {delta!r} sets absolute fields {absolute}; only relative amounts can shift a date"
        )
    return delta


def validate_positive(interval: IntervalLike) -> relativedelta:
    """
    Return the interval as a relativedelta, rejecting anything that does not
    strictly move a date forward.

    Every relative component must be non-negative and at least one of them
    other than ``leapdays`` positive; leap days alone add nothing outside a
    leap year.
    """
    delta = as_shift(interval)

    normalized = delta.normalized()
    amounts = [getattr(normalized, name) for name in _RELATIVE_FIELDS]
    if normalized.leapdays < 0 or any(amount < 0 for amount in amounts) or not any(amount > 0 for amount in amounts):
        raise InvalidIntervalError(f"Interval must be positive, got {interval!r}")

    logger.debug("Validated interval %r", delta)
    return delta
