#!/usr/bin/env python
"""
Applying a duration to a point in time.

A duration is applied in two independent steps, always in this order:

1) the calendar part (years, months and days - weeks counting as seven
   days) is applied using dateutil's relativedelta, which deals with
   the varying length of months and years.  Adding one month to the
   31st of January gives the last day of February.

2) the clock part (hours, minutes, seconds) is applied as exact
   elapsed time.  For timezone-aware timestamps this is done in UTC, so
   "PT24H" across a daylight saving transition yields a different wall
   clock time than "P1D".  When the calendar part lands on a wall clock
   time that does not exist (skipped when DST starts), it is moved
   forward by the length of the gap, as dateutil.tz.resolve_imaginary
   does.

Subtracting a duration runs the very same steps with all amounts
negated.
"""
from datetime import date
from datetime import datetime
from datetime import timedelta
from datetime import timezone
from typing import TYPE_CHECKING
from typing import TypeVar

from dateutil import tz
from dateutil.relativedelta import relativedelta

if TYPE_CHECKING:
    from rfc3339_duration.duration import Duration

ADD = 1
SUBTRACT = -1

Timestamp = TypeVar("Timestamp", date, datetime)


def calendar_delta(duration: "Duration", direction: int = ADD) -> relativedelta:
    return relativedelta(
        years=direction * duration.years,
        months=direction * duration.months,
        days=direction * (duration.days + duration.weeks * 7),
    )


def elapsed_delta(duration: "Duration", direction: int = ADD) -> timedelta:
    return direction * timedelta(
        hours=duration.hours,
        minutes=duration.minutes,
        seconds=duration.seconds,
    )


def shift(timestamp: Timestamp, duration: "Duration", direction: int = ADD) -> Timestamp:
    """
    Returns timestamp shifted by duration.

    Args:
        timestamp: a datetime, naive or timezone-aware.  A plain date is
            accepted as long as the duration has no hours, minutes or
            seconds.
        duration: the Duration to apply
        direction: ADD or SUBTRACT

    Returns:
        a new object of the same type as timestamp
    """
    if direction not in (ADD, SUBTRACT):
        raise ValueError(f"direction must be ADD or SUBTRACT, not {direction!r}")

    ret = timestamp + calendar_delta(duration, direction)
    ## A wall clock time skipped by a DST transition is moved past the gap
    if isinstance(ret, datetime) and ret.tzinfo is not None:
        ret = tz.resolve_imaginary(ret)

    elapsed = elapsed_delta(duration, direction)
    if not elapsed:
        return ret
    if not isinstance(ret, datetime):
        raise TypeError(f"can't apply hours, minutes or seconds to a {type(ret).__name__}")
    if ret.utcoffset() is None:
        return ret + elapsed
    return (ret.astimezone(timezone.utc) + elapsed).astimezone(ret.tzinfo)
