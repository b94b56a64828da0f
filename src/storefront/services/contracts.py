"""Typed payload contracts for service results.

Each model validates the ``data`` dict of one operation before it leaves
the service layer, so payload-shape regressions fail fast in tests.
"""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel

T = TypeVar("T", bound=BaseModel)


def dump_validated(model_cls: type[T], data: dict[str, Any]) -> dict[str, Any]:
    """Validate *data* against *model_cls* and return a normalized payload dict."""
    model = model_cls.model_validate(data)
    return model.model_dump(mode="python")


class PriceConversionData(BaseModel):
    """Payload contract for ``PricingService.get_price_in_currency``."""

    price: float
    currency: str
    rate: float
    converted: float


class DiscountData(BaseModel):
    """Payload contract for ``PricingService.get_discount``."""

    discount: float
    date: str


class ShippingInfoData(BaseModel):
    """Payload contract for ``ShippingService.get_shipping_info``."""

    destination: str
    available: bool
    message: str
    cost: float | None = None
    estimated_days: int | None = None


class PageData(BaseModel):
    """Payload contract for ``PageService.render_page``."""

    route: str
    content: str


class OrderData(BaseModel):
    """Payload contract for ``CheckoutService.submit_order``."""

    amount: float
    status: str | None


class SignUpData(BaseModel):
    """Payload contract for ``AccountService.sign_up``."""

    email: str
    registered: bool


class LoginData(BaseModel):
    """Payload contract for ``AccountService.login``; the code itself is never returned."""

    email: str
    code_sent: bool


class StoreStatusData(BaseModel):
    """Payload contract for ``StoreHoursService.is_online``."""

    online: bool
    now: str
    open_hour: int
    close_hour: int


class ProductData(BaseModel):
    """Payload contract for ``CatalogService.create_product``."""

    name: str
    price: float
    message: str


class CouponItem(BaseModel):
    code: str
    discount: float


class CouponListData(BaseModel):
    """Payload contract for ``CatalogService.list_coupons``."""

    count: int
    items: list[CouponItem]


class AppliedCouponData(BaseModel):
    """Payload contract for ``CatalogService.apply_coupon``."""

    price: float
    code: str
    discounted: float
