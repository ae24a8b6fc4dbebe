"""Tests for ServiceResult and ServiceError."""

import json

import pytest
from pydantic import ValidationError

from envperm.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="set", data={"name": "DUMMY"})
        assert result.ok is True
        assert result.op == "set"
        assert result.data == {"name": "DUMMY"}
        assert result.error is None
        assert result.meta is None

    def test_error_construction(self) -> None:
        error = ServiceError(code="NO_HOME", message="No home directory")
        result = ServiceResult(ok=False, op="set", error=error)
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "NO_HOME"

    def test_json_serialization(self) -> None:
        result = ServiceResult(ok=True, op="append", data={"path": "/h/.profile"})
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is True
        assert parsed["op"] == "append"
        assert parsed["data"]["path"] == "/h/.profile"

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="set")
        with pytest.raises(ValidationError):
            result.ok = False  # type: ignore[misc]


class TestServiceError:
    def test_with_detail(self) -> None:
        error = ServiceError(code="WRITE_FAILED", message="disk full", detail={"errno": 28})
        assert error.detail["errno"] == 28

    def test_default_detail(self) -> None:
        assert ServiceError(code="E", message="bad").detail == {}
