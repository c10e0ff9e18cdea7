from datetime import date, datetime, timezone

import numpy as np
import pandas as pd
import pytest

from periodlib import config
from periodlib.conventions.types import TimeUnit, Weekday
from periodlib.errors import DateParseError
from periodlib.utils.date import (
    diff_in,
    end_of_day,
    next_weekday,
    parse_datetime,
    previous_weekday,
    start_of_day,
    to_datetime,
)


class TestToDatetime:
    def test_datetime_unchanged(self):
        dt = datetime(2024, 1, 15, 12, 30)
        assert to_datetime(dt) is dt

    def test_date_becomes_midnight(self):
        assert to_datetime(date(2024, 1, 15)) == datetime(2024, 1, 15)

    def test_pandas_timestamp(self):
        result = to_datetime(pd.Timestamp("2024-01-15 08:00"))
        assert type(result) is datetime
        assert result == datetime(2024, 1, 15, 8)

    def test_numpy_datetime64(self):
        assert to_datetime(np.datetime64("2024-01-15T08:00")) == datetime(2024, 1, 15, 8)

    @pytest.mark.parametrize("value", [pd.NaT, np.datetime64("NaT")])
    def test_nat_rejected(self, value):
        with pytest.raises(DateParseError):
            to_datetime(value)

    def test_string_is_parsed(self):
        assert to_datetime("2024-01-15T08:00:00") == datetime(2024, 1, 15, 8)

    def test_unsupported_type(self):
        with pytest.raises(TypeError):
            to_datetime(20240115)


class TestParseDatetime:
    """The clock is pinned to 2024-03-13 15:30:45."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("now", datetime(2024, 3, 13, 15, 30, 45)),
            ("today", datetime(2024, 3, 13)),
            (" Tomorrow ", datetime(2024, 3, 14)),
            ("yesterday", datetime(2024, 3, 12)),
        ],
    )
    def test_keywords_follow_clock(self, text, expected):
        assert parse_datetime(text) == expected

    def test_missing_fields_default_to_today(self):
        assert parse_datetime("10:15") == datetime(2024, 3, 13, 10, 15)

    def test_malformed_text(self):
        with pytest.raises(DateParseError) as excinfo:
            parse_datetime("wtf")
        assert isinstance(excinfo.value.__cause__, ValueError)

    def test_dayfirst_option(self):
        assert parse_datetime("01/02/2024") == datetime(2024, 1, 2)
        config.set_parser_options(dayfirst=True)
        assert parse_datetime("01/02/2024") == datetime(2024, 2, 1)


class TestCalendarHelpers:
    def test_start_and_end_of_day(self):
        dt = datetime(2024, 1, 15, 12, 30, 5, 42)
        assert start_of_day(dt) == datetime(2024, 1, 15)
        assert end_of_day(dt) == datetime(2024, 1, 15, 23, 59, 59, 999999)

    def test_truncation_keeps_tzinfo(self):
        dt = datetime(2024, 1, 15, 12, tzinfo=timezone.utc)
        assert start_of_day(dt).tzinfo is timezone.utc

    def test_next_weekday_is_strictly_after(self):
        friday = datetime(2024, 2, 2, 10)
        assert next_weekday(friday, Weekday.FRIDAY) == datetime(2024, 2, 9)
        assert next_weekday(datetime(2024, 2, 1, 23), Weekday.FRIDAY) == datetime(2024, 2, 2)

    def test_previous_weekday_is_strictly_before(self):
        monday = datetime(2024, 3, 11, 9)
        assert previous_weekday(monday, Weekday.MONDAY) == datetime(2024, 3, 4)
        assert previous_weekday(datetime(2024, 3, 13), Weekday.MONDAY) == datetime(2024, 3, 11)


class TestDiffIn:
    @pytest.mark.parametrize(
        "unit, expected",
        [
            (TimeUnit.YEARS, 1),
            (TimeUnit.MONTHS, 13),
            (TimeUnit.WEEKS, 57),
            (TimeUnit.DAYS, 402),
            (TimeUnit.HOURS, 402 * 24 + 6),
            (TimeUnit.MINUTES, (402 * 24 + 6) * 60),
            (TimeUnit.SECONDS, (402 * 24 + 6) * 3600),
        ],
    )
    def test_units(self, unit, expected):
        assert diff_in(datetime(2024, 1, 1), datetime(2025, 2, 6, 6), unit) == expected

    def test_absolute_value(self):
        assert diff_in(datetime(2024, 2, 1), datetime(2024, 1, 1), TimeUnit.DAYS) == 31

    def test_floor_not_round(self):
        assert diff_in(datetime(2024, 1, 1), datetime(2024, 1, 1, 23, 59, 59), TimeUnit.DAYS) == 0
        assert diff_in(datetime(2024, 1, 31), datetime(2024, 2, 29), TimeUnit.MONTHS) == 1
        assert diff_in(datetime(2024, 1, 30), datetime(2024, 2, 28), TimeUnit.MONTHS) == 0
