"""Tests for RangeService parse/check results."""

from __future__ import annotations

import json
import logging
import math

import pytest

from nagrange.services.range import RangeService


@pytest.fixture
def svc() -> RangeService:
    return RangeService()


class TestParse:
    def test_parse_ok(self, svc: RangeService) -> None:
        result = svc.parse("@10:20")
        assert result.ok is True
        assert result.op == "parse_range"
        assert result.data == {
            "start": 10.0,
            "end": 20.0,
            "invert": True,
            "spec": "@10:20",
            "violation": "inside range 10:20",
        }

    def test_parse_infinite_bounds_serialize(self, svc: RangeService) -> None:
        result = svc.parse("~:")
        parsed = json.loads(result.model_dump_json())
        assert parsed["data"]["start"] == "-inf"
        assert parsed["data"]["end"] == "inf"

    @pytest.mark.parametrize(
        "spec,code,token",
        [
            ("abc:10", "LOWER_BOUND", "abc"),
            ("10:abc", "UPPER_BOUND", "abc"),
            ("abc", "UPPER_BOUND", "abc"),
        ],
    )
    def test_bound_errors(self, svc: RangeService, spec: str, code: str, token: str) -> None:
        result = svc.parse(spec)
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == code
        assert result.error.detail["token"] == token
        assert result.error.detail["spec"] == spec
        assert "abc" in result.error.detail["reason"]

    def test_invalid_order(self, svc: RangeService) -> None:
        result = svc.parse("20:10")
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "INVALID_ORDER"
        assert "min <= max violated" in result.error.message
        assert "token" not in result.error.detail

    def test_parse_failure_is_logged(
        self, svc: RangeService, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="nagrange"):
            svc.parse("oops")
        assert any("oops" in rec.getMessage() for rec in caplog.records)


class TestCheck:
    def test_items_in_input_order(self, svc: RangeService) -> None:
        result = svc.check("10:20", [5, 15, 25])
        assert result.ok is True
        assert result.op == "check_range"
        assert result.data["items"] == [
            {"value": 5, "alert": True},
            {"value": 15, "alert": False},
            {"value": 25, "alert": True},
        ]
        assert result.data["count"] == 3
        assert result.data["alert_count"] == 2
        assert result.data["violation"] == "outside range 10:20"
        assert result.warnings == []

    def test_inverted(self, svc: RangeService) -> None:
        result = svc.check("@10:20", [10.0, 20.0, 9.5])
        assert [item["alert"] for item in result.data["items"]] == [True, True, False]

    def test_nan_value_warns_once(self, svc: RangeService) -> None:
        result = svc.check("10", [math.nan, math.nan])
        assert result.ok is True
        assert [item["value"] for item in result.data["items"]] == ["nan", "nan"]
        assert result.data["alert_count"] == 2
        assert len(result.warnings) == 1

    def test_infinite_value_is_json_safe(self, svc: RangeService) -> None:
        result = svc.check("10:", [math.inf])
        parsed = json.loads(result.model_dump_json())
        assert parsed["data"]["items"] == [{"value": "inf", "alert": False}]

    def test_parse_error_short_circuits(self, svc: RangeService) -> None:
        result = svc.check("20:10", [15])
        assert result.ok is False
        assert result.op == "check_range"
        assert result.error is not None
        assert result.error.code == "INVALID_ORDER"

    def test_int_beyond_float_range(self, svc: RangeService) -> None:
        result = svc.check("10", [10**400, 5])
        assert result.ok is True
        assert result.warnings == []
        assert [item["alert"] for item in result.data["items"]] == [True, False]
        assert result.data["items"][0]["value"] == 10**400
