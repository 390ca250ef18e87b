"""Parse-error taxonomy for range specs.

All failures happen at parse time; checking a constructed Range cannot fail.
Every error is a ``ValueError`` so callers that only care about "bad input"
can catch the builtin.
"""

from __future__ import annotations


class RangeParseError(ValueError):
    """Base class for all range spec parse failures.

    Attributes:
        code: Stable machine-readable identifier, reused as the service error code.
        spec: The full (trimmed) spec text that failed to parse.
    """

    code = "RANGE_PARSE"

    def __init__(self, message: str, *, spec: str = "") -> None:
        super().__init__(message)
        self.spec = spec


class _BoundParseError(RangeParseError):
    bound = ""

    def __init__(self, token: str, reason: str, *, spec: str = "") -> None:
        super().__init__(f"failed to parse {self.bound} limit: {reason}", spec=spec)
        self.token = token
        self.reason = reason


class LowerBoundParseError(_BoundParseError):
    """The token before ``:`` is neither ``~`` nor a valid number."""

    code = "LOWER_BOUND"
    bound = "lower"


class UpperBoundParseError(_BoundParseError):
    """The token after ``:`` (or the whole body without ``:``) is not a valid number."""

    code = "UPPER_BOUND"
    bound = "upper"


class InvalidOrderError(RangeParseError):
    """The resolved end bound is below the start bound."""

    code = "INVALID_ORDER"

    def __init__(self, start: float, end: float, *, spec: str = "") -> None:
        super().__init__(
            f"Invalid range definition. min <= max violated ({start} > {end})",
            spec=spec,
        )
        self.start = start
        self.end = end
