#!/usr/bin/env python
import logging
import os
from typing import Optional
from typing import Union

## Environmental variables prepended with "PYTHON_RFC3339_DURATION" are
## used for debug purposes.
## DEBUG gives debug logging, anything else only warnings
debugmode = os.environ.get("PYTHON_RFC3339_DURATION_DEBUGMODE") or "PRODUCTION"

log = logging.getLogger("rfc3339_duration")
if debugmode.startswith("DEBUG"):
    log.setLevel(logging.DEBUG)
else:
    log.setLevel(logging.WARNING)

ERR_INVALID_FORMAT: str = "must be RFC 3339 formatted duration"


class DurationError(Exception):
    """Base class for all errors raised by this library"""

    pass


class FormatError(DurationError, ValueError):
    """
    The text given to the parser is not a valid RFC 3339 duration.

    The text property holds the rejected input, the reason property a
    human readable explanation.  When a numeric component was matched
    by the grammar but could not be used (i.e. it does not fit in a
    signed 32 bits integer), the reason includes the offending digits.
    """

    reason: str = ERR_INVALID_FORMAT
    text: Optional[Union[str, bytes]] = None

    def __init__(
        self, reason: Optional[str] = None, text: Optional[Union[str, bytes]] = None
    ) -> None:
        if reason:
            self.reason = reason
        self.text = text
        super().__init__(self.reason)

    def __str__(self) -> str:
        return self.reason
