"""Tests for ServiceResult and ServiceError."""

import json

import pytest
from pydantic import ValidationError

from storefront.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="render_page", data={"route": "/home"})
        assert result.ok is True
        assert result.success is True
        assert result.op == "render_page"
        assert result.data == {"route": "/home"}
        assert result.warnings == []
        assert result.error is None
        assert result.error_code is None
        assert result.meta is None

    def test_error_construction(self) -> None:
        error = ServiceError(code="payment_error", message="Payment was not accepted")
        result = ServiceResult(ok=False, op="submit_order", error=error)
        assert result.success is False
        assert result.error_code == "payment_error"
        assert result.error is not None
        assert result.error.message == "Payment was not accepted"

    def test_with_warnings(self) -> None:
        result = ServiceResult(
            ok=True,
            op="render_page",
            warnings=["Page view tracking failed: offline"],
        )
        assert len(result.warnings) == 1

    def test_json_serialization(self) -> None:
        result = ServiceResult(
            ok=True,
            op="get_discount",
            data={"discount": 0.2},
            meta={"duration_ms": 42},
        )
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is True
        assert parsed["op"] == "get_discount"
        assert parsed["data"]["discount"] == 0.2
        assert parsed["meta"]["duration_ms"] == 42

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="test")
        with pytest.raises(ValidationError):
            result.ok = False  # type: ignore[misc]


class TestServiceError:
    def test_with_detail(self) -> None:
        error = ServiceError(
            code="payment_error",
            message="declined",
            detail={"status": "failed"},
        )
        assert error.detail["status"] == "failed"

    def test_default_detail(self) -> None:
        error = ServiceError(code="invalid_email", message="bad")
        assert error.detail == {}
