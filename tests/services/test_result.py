"""Tests for ServiceResult and ServiceError."""

import json

import pytest
from pydantic import ValidationError

from nagrange.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_constructor(self) -> None:
        result = ServiceResult.success("parse_range", {"spec": "10"})
        assert result.ok is True
        assert result.op == "parse_range"
        assert result.data == {"spec": "10"}
        assert result.warnings == []
        assert result.error is None
        assert "meta" not in result.model_dump()

    def test_failure_constructor(self) -> None:
        error = ServiceError(code="UPPER_BOUND", message="failed to parse upper limit")
        result = ServiceResult.failure("parse_range", error)
        assert result.data == {}
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "UPPER_BOUND"
        assert result.error.detail == {}

    def test_json_serialization(self) -> None:
        result = ServiceResult(ok=True, op="check_range", data={"alert_count": 1})
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is True
        assert parsed["data"]["alert_count"] == 1

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="test")
        with pytest.raises(ValidationError):
            result.ok = False  # type: ignore[misc]

    def test_success_keeps_warnings(self) -> None:
        result = ServiceResult.success("check_range", {}, ["NaN is outside every range"])
        assert result.warnings == ["NaN is outside every range"]
