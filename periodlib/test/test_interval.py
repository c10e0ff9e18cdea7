from datetime import timedelta

import pytest
from dateutil.relativedelta import relativedelta

from periodlib.conventions import interval as interval_module
from periodlib.conventions import (
    Interval,
    TimeUnit,
    as_relativedelta,
    as_shift,
    get_unit,
    register_unit_alias,
    validate_positive,
)
from periodlib.errors import InvalidIntervalError


class TestIntervalParse:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("P3D", Interval(3, TimeUnit.DAYS)),
            ("P1W", Interval(1, TimeUnit.WEEKS)),
            ("P2M", Interval(2, TimeUnit.MONTHS)),
            ("P1Y", Interval(1, TimeUnit.YEARS)),
            ("PT6H", Interval(6, TimeUnit.HOURS)),
            ("PT30M", Interval(30, TimeUnit.MINUTES)),
            ("PT45S", Interval(45, TimeUnit.SECONDS)),
            ("-P2D", Interval(-2, TimeUnit.DAYS)),
            ("3 days", Interval(3, TimeUnit.DAYS)),
            ("1 week", Interval(1, TimeUnit.WEEKS)),
            ("12 Months", Interval(12, TimeUnit.MONTHS)),
            ("5d", Interval(5, TimeUnit.DAYS)),
        ],
    )
    def test_supported_forms(self, text, expected):
        assert Interval.parse(text) == expected

    @pytest.mark.parametrize("text", ["", "P", "P1D2M", "three days", "3 fortnights", "3 m"])
    def test_unsupported_forms(self, text):
        with pytest.raises(InvalidIntervalError):
            Interval.parse(text)

    def test_iso_string_round_trip(self):
        assert str(Interval(3, TimeUnit.DAYS)) == "P3D"
        assert str(Interval(6, TimeUnit.HOURS)) == "PT6H"
        assert str(-Interval(1, TimeUnit.MONTHS)) == "-P1M"


class TestInterval:
    def test_of_resolves_alias(self):
        assert Interval.of(2, "weeks") == Interval(2, TimeUnit.WEEKS)

    def test_string_unit_is_normalized(self):
        assert Interval(1, "day").unit is TimeUnit.DAYS

    def test_non_integer_magnitude_rejected(self):
        with pytest.raises(InvalidIntervalError):
            Interval(1.5, TimeUnit.DAYS)
        with pytest.raises(InvalidIntervalError):
            Interval(True, TimeUnit.DAYS)

    def test_to_relativedelta(self):
        assert Interval(2, TimeUnit.WEEKS).to_relativedelta() == relativedelta(days=14)
        assert Interval(3, TimeUnit.MONTHS).to_relativedelta() == relativedelta(months=3)


class TestUnitRegistry:
    def test_unknown_unit_lists_available(self):
        with pytest.raises(InvalidIntervalError, match="Available: years, months"):
            get_unit("fortnight")

    def test_register_alias(self, monkeypatch):
        monkeypatch.setattr(interval_module, "_ALIASES", dict(interval_module._ALIASES))
        register_unit_alias("sennight", TimeUnit.WEEKS)
        assert get_unit("Sennight") is TimeUnit.WEEKS

    def test_register_existing_alias_fails(self):
        with pytest.raises(ValueError, match="already registered"):
            register_unit_alias("day", TimeUnit.HOURS)


class TestCoercion:
    def test_as_relativedelta(self):
        assert as_relativedelta("P1D") == relativedelta(days=1)
        assert as_relativedelta(timedelta(days=1, hours=2)) == relativedelta(days=1, hours=2)
        delta = relativedelta(months=1)
        assert as_relativedelta(delta) is delta

    def test_unsupported_type(self):
        with pytest.raises(TypeError):
            as_relativedelta(3)

    def test_validate_positive_accepts_forward_steps(self):
        assert validate_positive("PT1S") == relativedelta(seconds=1)
        assert validate_positive(relativedelta(months=1, days=2)) == relativedelta(months=1, days=2)

    def test_validate_positive_rejects_absolute_fields(self):
        with pytest.raises(InvalidIntervalError, match="absolute"):
            validate_positive(relativedelta(days=1, weekday=4))

    def test_leapdays_alone_do_not_count_as_forward(self):
        with pytest.raises(InvalidIntervalError, match="positive"):
            validate_positive(relativedelta(leapdays=1))
        assert validate_positive(relativedelta(years=1, leapdays=1)) == relativedelta(years=1, leapdays=1)

    def test_as_shift_allows_negative_amounts(self):
        assert as_shift("-P2D") == relativedelta(days=-2)
        with pytest.raises(InvalidIntervalError, match="absolute"):
            as_shift(relativedelta(month=2))
