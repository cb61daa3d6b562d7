"""
Tests for the Duration value type: construction, parsing, formatting
and text serialization.
"""
import dataclasses

import pytest
from dateutil.parser import isoparse

from rfc3339_duration import Duration
from rfc3339_duration import format_rfc3339
from rfc3339_duration import FormatError
from rfc3339_duration import parse_rfc3339


class TestDurationConstruction:
    """Tests for creating Duration objects directly"""

    def test_defaults(self):
        d = Duration()
        assert d.years == d.months == d.weeks == d.days == 0
        assert d.hours == d.minutes == d.seconds == 0

    def test_immutable(self):
        d = Duration(days=1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            d.days = 2

    def test_negative(self):
        with pytest.raises(ValueError):
            Duration(hours=-1)

    @pytest.mark.parametrize("value", [1.5, "3", None, True])
    def test_not_int(self, value):
        with pytest.raises(TypeError):
            Duration(years=value)

    def test_equality_and_hash(self):
        assert Duration(weeks=5) == Duration(weeks=5)
        assert Duration(weeks=5) != Duration(days=35)
        assert len({Duration(days=1), Duration(days=1), Duration(hours=24)}) == 2

    def test_is_week_duration(self):
        assert Duration(weeks=5).is_week_duration
        assert not Duration().is_week_duration
        assert not Duration(days=35).is_week_duration
        assert not Duration(weeks=5, seconds=1).is_week_duration


class TestParseRfc3339:
    """Tests for Duration.parse_rfc3339() and parse_rfc3339()"""

    def test_full(self):
        assert Duration.parse_rfc3339("P3Y6M4DT12H30M5S") == Duration(
            years=3, months=6, days=4, hours=12, minutes=30, seconds=5
        )

    def test_weeks(self):
        assert Duration.parse_rfc3339("P5W") == Duration(weeks=5)

    def test_zero(self):
        assert Duration.parse_rfc3339("P") == Duration()

    def test_months_and_minutes(self):
        assert parse_rfc3339("P2MT3M") == Duration(months=2, minutes=3)

    def test_weeks_mixed_with_date(self):
        with pytest.raises(FormatError):
            Duration.parse_rfc3339("P3Y5W")

    def test_missing_designator(self):
        with pytest.raises(FormatError):
            Duration.parse_rfc3339("123")

    def test_module_function(self):
        assert parse_rfc3339("PT12H") == Duration(hours=12)


class TestFormatRfc3339:
    """Tests for Duration.format_rfc3339() and friends"""

    @pytest.mark.parametrize(
        "duration,expected",
        [
            (
                Duration(years=3, months=6, days=4, hours=12, minutes=30, seconds=5),
                "P3Y6M4DT12H30M5S",
            ),
            (Duration(weeks=5), "P5W"),
            (Duration(), "P"),
            (Duration(months=1), "P1M"),
            (Duration(minutes=1), "PT1M"),
            (Duration(years=1, seconds=1), "P1YT1S"),
            (Duration(days=400), "P400D"),
        ],
    )
    def test_format(self, duration, expected):
        assert duration.format_rfc3339() == expected
        assert format_rfc3339(duration) == expected
        assert str(duration) == expected

    def test_weeks_mixed_with_date(self):
        """Formatting doesn't complain, but the result can't be parsed back"""
        d = Duration(years=3, weeks=5, hours=1)
        assert d.format_rfc3339() == "P3Y5WT1H"
        with pytest.raises(FormatError):
            Duration.parse_rfc3339(d.format_rfc3339())

    @pytest.mark.parametrize(
        "duration",
        [
            Duration(),
            Duration(weeks=52),
            Duration(years=1),
            Duration(months=13),
            Duration(days=1, hours=1),
            Duration(minutes=90),
            Duration(years=3, months=6, days=4, hours=12, minutes=30, seconds=5),
            Duration(seconds=2147483647),
        ],
    )
    def test_round_trip(self, duration):
        assert Duration.parse_rfc3339(duration.format_rfc3339()) == duration


class TestTextSerialization:
    """Tests for the text and icalendar style serialization methods"""

    def test_text(self):
        d = Duration(days=4, hours=12)
        assert d.to_text() == "P4DT12H"
        assert Duration.from_text("P4DT12H") == d

    def test_ical(self):
        d = Duration(weeks=5)
        assert d.to_ical() == b"P5W"
        assert Duration.from_ical(b"P5W") == d
        assert Duration.from_ical("P5W") == d

    def test_from_text_invalid(self):
        with pytest.raises(FormatError):
            Duration.from_text("P5W3D")


class TestOperators:
    """Tests for using a Duration with + and -"""

    def test_add(self):
        t = isoparse("2006-01-02T15:04:05Z")
        d = Duration(weeks=5)
        assert t + d == isoparse("2006-02-06T15:04:05Z")
        assert d + t == isoparse("2006-02-06T15:04:05Z")

    def test_subtract(self):
        t = isoparse("2006-01-02T15:04:05Z")
        d = Duration.parse_rfc3339("P3Y6M4DT12H30M5S")
        assert t - d == isoparse("2002-06-28T02:34:00Z")

    def test_no_duration_arithmetic(self):
        with pytest.raises(TypeError):
            Duration(days=1) + Duration(days=1)
        with pytest.raises(TypeError):
            Duration(days=1) + 1
