#!/usr/bin/env python
import logging

__version__ = "1.0.0"

from .duration import Duration
from .duration import format_rfc3339
from .duration import parse_rfc3339
from .lib.error import DurationError
from .lib.error import FormatError
from .lib.shift import ADD
from .lib.shift import SUBTRACT
from .lib.shift import shift

# Silence notification of no default logging handler
log = logging.getLogger("rfc3339_duration")


class NullHandler(logging.Handler):
    def emit(self, record) -> None:
        pass


log.addHandler(NullHandler())

__all__ = [
    "__version__",
    "ADD",
    "SUBTRACT",
    "Duration",
    "DurationError",
    "FormatError",
    "format_rfc3339",
    "parse_rfc3339",
    "shift",
]
