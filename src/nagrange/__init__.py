"""nagrange — Nagios/Icinga-style threshold ranges.

Parse a range spec such as ``@10:20`` and decide whether a measured value
should raise an alert::

    >>> from nagrange import parse_range
    >>> parse_range("10:20").check(25)
    True
"""

from nagrange.domain.errors import (
    InvalidOrderError,
    LowerBoundParseError,
    RangeParseError,
    UpperBoundParseError,
)
from nagrange.domain.range import Range, parse_range

__version__ = "0.1.0"

__all__ = [
    "InvalidOrderError",
    "LowerBoundParseError",
    "Range",
    "RangeParseError",
    "UpperBoundParseError",
    "__version__",
    "parse_range",
]
