"""ServiceResult and ServiceError — the outcome of every domain operation.

INVARIANT: Domain outcomes (declined payment, missing quote, bad email)
are ServiceResult values. Exceptions are reserved for programmer misuse
and for collaborator failures, which propagate unchanged.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"submit_order"``).
        data: Operation-specific payload.
        warnings: Non-fatal issues (failed analytics, plugin errors).
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (telemetry spans).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @property
    def success(self) -> bool:
        """Alias of ``ok`` matching the storefront API vocabulary."""
        return self.ok

    @property
    def error_code(self) -> str | None:
        return self.error.code if self.error else None
