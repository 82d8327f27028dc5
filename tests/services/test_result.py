"""Tests for ServiceResult and ServiceError."""

import json

import pytest
from pydantic import ValidationError

from cakecollate.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="parse_name", data={"value": "Alex"})
        assert result.ok is True
        assert result.op == "parse_name"
        assert result.data == {"value": "Alex"}
        assert result.warnings == []
        assert result.error is None

    def test_error_construction(self) -> None:
        error = ServiceError(code="EMPTY_VALUE", message="Name cannot be empty.")
        result = ServiceResult(ok=False, op="parse_name", error=error)
        assert result.error is not None
        assert result.error.code == "EMPTY_VALUE"
        assert result.error.detail == {}

    def test_json_serialization(self) -> None:
        result = ServiceResult(ok=True, op="parse_indices", data={"indices": [3, 2, 1]})
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is True
        assert parsed["data"]["indices"] == [3, 2, 1]
        assert parsed["error"] is None

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="test")
        with pytest.raises(ValidationError):
            result.ok = False  # type: ignore[misc]
