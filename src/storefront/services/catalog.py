"""CatalogService — coupons and product publication."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from storefront.domain.coupons import get_coupons
from storefront.domain.orders import Product
from storefront.domain.validators import calculate_discount
from storefront.services.base import BaseService
from storefront.services.contracts import (
    AppliedCouponData,
    CouponListData,
    ProductData,
    dump_validated,
)
from storefront.services.result import ServiceError, ServiceResult
from storefront.services.telemetry import traced


class CatalogService(BaseService):
    @traced
    def list_coupons(self) -> ServiceResult:
        items = [c.model_dump() for c in get_coupons()]
        return ServiceResult(
            ok=True,
            op="list_coupons",
            data=dump_validated(CouponListData, {"count": len(items), "items": items}),
        )

    @traced
    def apply_coupon(self, price: Any, code: Any) -> ServiceResult:
        """Apply coupon *code* to *price*; unknown codes leave the price unchanged."""
        op = "apply_coupon"
        vr = calculate_discount(price, code)
        if not vr.valid:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(code="invalid_input", message=vr.message),
            )
        return ServiceResult(
            ok=True,
            op=op,
            data=dump_validated(
                AppliedCouponData, {"price": price, "code": code, "discounted": vr.value}
            ),
            warnings=vr.warnings,
        )

    @traced
    def create_product(self, product: Product | Mapping[str, Any] | None) -> ServiceResult:
        """Validate and publish *product*.

        Raises:
            ValueError: *product* is None. A missing payload is a calling
                error, unlike a present product with bad fields.
        """
        if product is None:
            raise ValueError("Empty product")

        op = "create_product"
        try:
            item = Product.model_validate(product)
        except ValidationError as exc:
            return _rejected_product(op, exc)
        if not item.name:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(code="invalid_name", message="Name is missing"),
            )
        if item.price <= 0:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(code="invalid_price", message="Price is missing"),
            )
        return ServiceResult(
            ok=True,
            op=op,
            data=dump_validated(
                ProductData,
                {
                    "name": item.name,
                    "price": item.price,
                    "message": "Product was published successfully",
                },
            ),
        )


def _rejected_product(op: str, exc: ValidationError) -> ServiceResult:
    """Map a malformed product field to the matching outcome; name errors win."""
    fields = {err["loc"][0] for err in exc.errors() if err["loc"]}
    if "name" in fields:
        error = ServiceError(code="invalid_name", message="Name is missing")
    else:
        error = ServiceError(code="invalid_price", message="Price is missing")
    return ServiceResult(ok=False, op=op, error=error)
