#!/usr/bin/env python
"""
Matching of the RFC 3339 duration grammar.

The ABNF from appendix A of https://www.ietf.org/rfc/rfc3339.txt is::

    dur-second  = 1*DIGIT "S"
    dur-minute  = 1*DIGIT "M" [dur-second]
    dur-hour    = 1*DIGIT "H" [dur-minute]
    dur-time    = "T" (dur-hour / dur-minute / dur-second)
    dur-day     = 1*DIGIT "D"
    dur-week    = 1*DIGIT "W"
    dur-month   = 1*DIGIT "M" [dur-day]
    dur-year    = 1*DIGIT "Y" [dur-month]
    dur-date    = (dur-day / dur-month / dur-year) [dur-time]

    duration    = "P" (dur-date / dur-time / dur-week)

The pattern below is a bit more relaxed than the ABNF: every date and
time component is optional, so "P", "PT" and "P1Y1D" are accepted.  A
week duration can not be combined with anything else.

Everything in here is pure - no I/O, no state except the compiled
pattern, which is created once on import and never modified.
"""
import re
from typing import Dict
from typing import Optional
from typing import Union

from .error import ERR_INVALID_FORMAT
from .error import FormatError
from .error import log

## Largest value accepted for one component (signed 32 bits integer)
MAX_COMPONENT = 2**31 - 1

## Named groups of the pattern, in the order they may appear in the text
COMPONENTS = ("years", "months", "weeks", "days", "hours", "minutes", "seconds")

## DIGIT in the ABNF is ASCII only, \d would also match other unicode digits
RFC3339_DURATION_PATTERN = re.compile(
    r"P(?:"
    ## a number of weeks
    r"(?P<weeks>[0-9]+)W"
    r"|"
    ## date duration
    r"(?:(?P<years>[0-9]+)Y)?(?:(?P<months>[0-9]+)M)?(?:(?P<days>[0-9]+)D)?"
    r"(?:T(?:(?P<hours>[0-9]+)H)?(?:(?P<minutes>[0-9]+)M)?(?:(?P<seconds>[0-9]+)S)?)?"
    r")"
)


def to_component(value: str, text: Optional[str] = None) -> int:
    """Converts one matched group of digits to an integer"""
    try:
        ret = int(value, 10)
    except ValueError as e:
        raise FormatError(
            f"{ERR_INVALID_FORMAT}, found non-integer: {value}", text
        ) from e
    if ret > MAX_COMPONENT:
        raise FormatError(
            f"{ERR_INVALID_FORMAT}, found out of range integer: {value}", text
        )
    return ret


def match_rfc3339(text: Union[str, bytes, bytearray]) -> Dict[str, int]:
    """
    Matches text against the RFC 3339 duration grammar.

    The whole text has to match, partial matches are rejected.

    Args:
        text: the duration, i.e. "P3Y6M4DT12H30M5S".  Bytes are
            decoded as ASCII.

    Returns:
        dict with all the COMPONENTS as keys, absent components are 0

    Raises:
        FormatError: if the text does not match the grammar, or if one
            of the components is too big.
        TypeError: if text is neither a string nor bytes
    """
    if isinstance(text, (bytes, bytearray)):
        try:
            text = bytes(text).decode("ascii")
        except UnicodeDecodeError as e:
            log.debug(f"rejected duration {text!r}: not ascii")
            raise FormatError(text=bytes(text)) from e
    if not isinstance(text, str):
        raise TypeError(
            f"a duration can only be parsed from str or bytes, not {type(text).__name__}"
        )

    match = RFC3339_DURATION_PATTERN.fullmatch(text)
    if match is None:
        log.debug(f"rejected duration {text!r}: no match")
        raise FormatError(text=text)

    ret = {}
    for name in COMPONENTS:
        value = match.group(name)
        ret[name] = to_component(value, text) if value else 0
    return ret
