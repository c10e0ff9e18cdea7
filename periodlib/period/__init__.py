# Re-export period components
from .core import Period
from .filters import forward_if, full_units
from .iteration import (
    DAYS_PER_WEEK,
    STOP,
    SegmentCursor,
    Visit,
    dates,
    each,
    each_day_of_week,
    each_days,
    each_months,
    each_weeks,
    iterate_dates,
    segments,
)
