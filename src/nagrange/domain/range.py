"""Threshold ranges in Nagios/Icinga plugin syntax.

A range spec has the general form ``[@][start:][end]``::

    10        alert if < 0 or > 10      (outside {0 .. 10})
    10:       alert if < 10             (outside {10 .. inf})
    ~:10      alert if > 10             (outside {-inf .. 10})
    10:20     alert if < 10 or > 20     (outside {10 .. 20})
    @10:20    alert if >= 10 and <= 20  (inside {10 .. 20})

Ranges are closed intervals. A leading ``@`` inverts the alert condition.

INVARIANT: ``start <= end`` for every constructed Range.
"""

from __future__ import annotations

import math
import re
from typing import Any

from pydantic import BaseModel, model_validator

from nagrange.domain.errors import (
    InvalidOrderError,
    LowerBoundParseError,
    UpperBoundParseError,
)

INVERT_PREFIX = "@"
NEG_INFINITY_TOKEN = "~"
SEPARATOR = ":"
TRIM_CHARS = " \n\r"

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

# Plain signed decimal/exponent notation or inf/infinity. Stricter than float(),
# which also takes surrounding whitespace, "_" separators and "nan".
_NUMBER_RE = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?)",
    re.IGNORECASE,
)


def _parse_number(token: str) -> float:
    """Convert a single bound token to float, raising ValueError on bad syntax."""
    if _NUMBER_RE.fullmatch(token) is None:
        msg = f"could not convert string to float: {token!r}"
        raise ValueError(msg)
    return float(token)


def _int_to_float(value: int) -> float:
    """Widen an int to float; ints beyond float range saturate to +/-inf."""
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def _format_bound(value: float) -> str:
    if value.is_integer() and abs(value) < 1e15:
        return str(int(value))
    return repr(value)


class Range(BaseModel):
    """Immutable threshold range: a closed interval plus an invert flag.

    Attributes:
        start: Lower bound (inclusive). May be ``-inf``.
        end: Upper bound (inclusive). May be ``+inf``.
        invert: When True, alert on values *inside* ``[start, end]``;
            otherwise alert on values outside it.
    """

    model_config = {"frozen": True}

    start: float = 0.0
    end: float = math.inf
    invert: bool = False

    @model_validator(mode="after")
    def _check_order(self) -> Range:
        if math.isnan(self.start) or math.isnan(self.end):
            msg = "range bounds must not be NaN"
            raise ValueError(msg)
        if self.end < self.start:
            msg = "min <= max violated"
            raise ValueError(msg)
        return self

    @classmethod
    def from_spec(cls, text: str) -> Range:
        """Parse a range spec. Alias for :func:`parse_range`."""
        return parse_range(text)

    # --- Checks ---

    def contains(self, value: float) -> bool:
        """Closed-interval membership, ignoring ``invert``."""
        return self.start <= value <= self.end

    def check(self, value: float) -> bool:
        """Return True when *value* should raise an alert.

        The result is ``inside XOR invert``. NaN compares false against
        both bounds, so it always counts as outside: ``check(nan) == not invert``.
        Ints are widened to float first, so ``check(n) == check_int(n)``.
        """
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            msg = f"check() expects int or float, got {type(value).__name__}"
            raise TypeError(msg)
        if isinstance(value, int):
            value = _int_to_float(value)
        if self.contains(value):
            return self.invert
        return not self.invert

    def check_int(self, value: int) -> bool:
        """Integer variant of :meth:`check`.

        Ints too large for a float count as +/-inf instead of raising.
        """
        if isinstance(value, bool) or not isinstance(value, int):
            msg = f"check_int() expects int, got {type(value).__name__}"
            raise TypeError(msg)
        return self.check(_int_to_float(value))

    def check_int32(self, value: int) -> bool:
        """Like :meth:`check_int`, restricted to the signed 32-bit range."""
        if isinstance(value, bool) or not isinstance(value, int):
            msg = f"check_int32() expects int, got {type(value).__name__}"
            raise TypeError(msg)
        if not INT32_MIN <= value <= INT32_MAX:
            msg = f"{value} does not fit in a signed 32-bit integer"
            raise OverflowError(msg)
        return self.check(float(value))

    # --- Rendering ---

    def to_spec(self) -> str:
        """Render a canonical spec that parses back to an equal Range."""
        parts: list[str] = []
        if self.invert:
            parts.append(INVERT_PREFIX)
        if self.start == -math.inf:
            parts.append(NEG_INFINITY_TOKEN + SEPARATOR)
        elif self.start != 0:
            parts.append(_format_bound(self.start) + SEPARATOR)
        if self.end != math.inf:
            parts.append(_format_bound(self.end))
        return "".join(parts)

    @property
    def violation(self) -> str:
        """Human-readable description of the alert condition."""
        start = NEG_INFINITY_TOKEN if self.start == -math.inf else _format_bound(self.start)
        end = "" if self.end == math.inf else _format_bound(self.end)
        where = "inside" if self.invert else "outside"
        return f"{where} range {start}{SEPARATOR}{end}"

    def to_dict(self) -> dict[str, Any]:
        """JSON-safe view: infinite bounds become the strings ``"inf"``/``"-inf"``."""
        return {
            "start": _json_bound(self.start),
            "end": _json_bound(self.end),
            "invert": self.invert,
            "spec": self.to_spec(),
        }

    def __str__(self) -> str:
        return self.to_spec()


def _json_bound(value: float) -> float | str:
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    return value


def parse_range(text: str) -> Range:
    """Parse a threshold range spec into a :class:`Range`.

    Raises:
        LowerBoundParseError: The token before ``:`` is not ``~`` or a number.
        UpperBoundParseError: The upper token is not a number.
        InvalidOrderError: The resolved end is below the start.
    """
    spec = text.strip(TRIM_CHARS)
    body = spec
    start = 0.0
    end = math.inf
    invert = False

    if body.startswith(INVERT_PREFIX):
        invert = True
        body = body[len(INVERT_PREFIX) :]

    lower, sep, upper = body.partition(SEPARATOR)
    if not sep:
        upper = body
    elif lower == NEG_INFINITY_TOKEN:
        start = -math.inf
    else:
        try:
            start = _parse_number(lower)
        except ValueError as exc:
            raise LowerBoundParseError(lower, str(exc), spec=spec) from exc

    if upper:
        try:
            end = _parse_number(upper)
        except ValueError as exc:
            raise UpperBoundParseError(upper, str(exc), spec=spec) from exc

    if end < start:
        raise InvalidOrderError(start, end, spec=spec)

    return Range(start=start, end=end, invert=invert)
