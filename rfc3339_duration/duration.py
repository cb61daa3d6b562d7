#!/usr/bin/env python
"""
The Duration value type.

A Duration holds the seven components of an RFC 3339 duration as
separate integers.  It is deliberately not a datetime.timedelta: a year
or a month has no fixed length, so "P1Y" can only be resolved against a
point in time (see lib/shift.py).
"""
import sys
from dataclasses import dataclass
from dataclasses import fields
from datetime import date
from typing import Union

from .lib.grammar import match_rfc3339
from .lib.shift import ADD
from .lib.shift import shift
from .lib.shift import SUBTRACT
from .lib.shift import Timestamp

if sys.version_info < (3, 11):
    from typing_extensions import Self
else:
    from typing import Self


@dataclass(frozen=True)
class Duration:
    """
    A duration as described in appendix A of RFC 3339.

    All components are non-negative integers and default to 0, the
    zero duration is formatted as "P".

    The grammar does not allow weeks to be combined with any other
    component, "P3Y5W" is not a valid duration.  Such a Duration can
    still be created directly, and it will be formatted without
    complaints - but the result can't be parsed back.  For all other
    durations, ``Duration.parse_rfc3339(d.format_rfc3339()) == d``.

    Attributes:
        years, months, weeks, days: calendar components
        hours, minutes, seconds: clock components
    """

    years: int = 0
    months: int = 0
    weeks: int = 0
    days: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: int = 0

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(
                    f"{f.name} must be an int, not {type(value).__name__}"
                )
            if value < 0:
                raise ValueError(f"{f.name} can't be negative: {value}")

    @classmethod
    def parse_rfc3339(cls, text: Union[str, bytes]) -> Self:
        """
        Parses a duration encoded as described in RFC 3339.

        Raises:
            FormatError: if text is not a valid RFC 3339 duration
        """
        return cls(**match_rfc3339(text))

    def format_rfc3339(self) -> str:
        """Returns the duration formatted as an RFC 3339 string"""
        ret = ["P"]
        if self.years:
            ret.append(f"{self.years}Y")
        if self.months:
            ret.append(f"{self.months}M")
        if self.weeks:
            ret.append(f"{self.weeks}W")
        if self.days:
            ret.append(f"{self.days}D")
        ## M is months before the T and minutes after it
        if self.hours or self.minutes or self.seconds:
            ret.append("T")
        if self.hours:
            ret.append(f"{self.hours}H")
        if self.minutes:
            ret.append(f"{self.minutes}M")
        if self.seconds:
            ret.append(f"{self.seconds}S")
        return "".join(ret)

    @property
    def is_week_duration(self) -> bool:
        """True if this is a "P<n>W" duration"""
        return bool(self.weeks) and not (
            self.years
            or self.months
            or self.days
            or self.hours
            or self.minutes
            or self.seconds
        )

    def __str__(self) -> str:
        return self.format_rfc3339()

    ## Text serialization.  The to_ical/from_ical pair follows the
    ## convention of the property types in the icalendar library.
    def to_text(self) -> str:
        return self.format_rfc3339()

    @classmethod
    def from_text(cls, text: Union[str, bytes]) -> Self:
        return cls.parse_rfc3339(text)

    def to_ical(self) -> bytes:
        return self.format_rfc3339().encode("utf-8")

    @classmethod
    def from_ical(cls, ical: Union[str, bytes]) -> Self:
        return cls.parse_rfc3339(ical)

    def add_to(self, timestamp: Timestamp) -> Timestamp:
        """Returns timestamp moved forward by this duration"""
        return shift(timestamp, self, ADD)

    def subtract_from(self, timestamp: Timestamp) -> Timestamp:
        """Returns timestamp moved backward by this duration"""
        return shift(timestamp, self, SUBTRACT)

    def __add__(self, other):
        if isinstance(other, date):
            return self.add_to(other)
        return NotImplemented

    __radd__ = __add__

    def __rsub__(self, other):
        if isinstance(other, date):
            return self.subtract_from(other)
        return NotImplemented


def parse_rfc3339(text: Union[str, bytes]) -> Duration:
    """Parses a duration encoded as described in RFC 3339"""
    return Duration.parse_rfc3339(text)


def format_rfc3339(duration: Duration) -> str:
    """Returns the duration formatted as an RFC 3339 string"""
    return duration.format_rfc3339()
