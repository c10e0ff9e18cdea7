"""Date helpers shared across the package."""

from .date import (
    DateLike,
    diff_in,
    end_of_day,
    next_weekday,
    parse_datetime,
    previous_weekday,
    start_of_day,
    to_datetime,
)
