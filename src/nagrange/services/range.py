"""RangeService — parse and evaluate threshold ranges for the CLI.

Parse failures never escape as exceptions: they are converted into
``ok=False`` results whose error code names the failing part of the spec.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable

from nagrange.domain.errors import RangeParseError
from nagrange.domain.range import Range, parse_range
from nagrange.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)


def _parse_error_result(op: str, exc: RangeParseError) -> ServiceResult:
    detail: dict[str, object] = {"spec": exc.spec}
    for attr in ("token", "reason"):
        if hasattr(exc, attr):
            detail[attr] = getattr(exc, attr)
    return ServiceResult.failure(op, ServiceError(code=exc.code, message=str(exc), detail=detail))


class RangeService:
    """Stateless facade over :func:`parse_range` and :meth:`Range.check`."""

    def _parse(self, op: str, spec: str) -> Range | ServiceResult:
        try:
            rng = parse_range(spec)
        except RangeParseError as exc:
            logger.warning("Range parse failed for %r: %s", spec, exc)
            return _parse_error_result(op, exc)
        logger.debug("Parsed range %r as %s", spec, rng.violation)
        return rng

    def parse(self, spec: str) -> ServiceResult:
        """Parse *spec* and report its resolved bounds."""
        parsed = self._parse("parse_range", spec)
        if isinstance(parsed, ServiceResult):
            return parsed
        data = parsed.to_dict()
        data["violation"] = parsed.violation
        return ServiceResult.success("parse_range", data)

    def check(self, spec: str, values: Iterable[float]) -> ServiceResult:
        """Evaluate each of *values* against *spec*.

        ``data["items"]`` holds one ``{"value", "alert"}`` entry per value,
        in input order.
        """
        parsed = self._parse("check_range", spec)
        if isinstance(parsed, ServiceResult):
            return parsed

        items: list[dict[str, object]] = []
        warnings: list[str] = []
        for value in values:
            alert = parsed.check(value)
            if isinstance(value, float) and math.isnan(value) and not warnings:
                warnings.append("NaN is outside every range")
            items.append({"value": _json_value(value), "alert": alert})
            logger.debug("Checked %s against %r: alert=%s", value, spec, alert)

        alert_count = sum(1 for item in items if item["alert"])
        return ServiceResult.success(
            "check_range",
            {
                "range": parsed.to_dict(),
                "violation": parsed.violation,
                "items": items,
                "count": len(items),
                "alert_count": alert_count,
            },
            warnings,
        )


def _json_value(value: float) -> float | str:
    if not isinstance(value, float):
        return value
    if math.isnan(value):
        return "nan"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    return value
