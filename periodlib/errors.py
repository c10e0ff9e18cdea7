"""Exceptions raised by periodlib."""


class DateParseError(ValueError):
    """Raised when a textual date cannot be converted to a datetime."""

    pass


class InvalidIntervalError(ValueError):
    """Raised when an interval cannot drive iteration (zero, negative or malformed)."""

    pass
