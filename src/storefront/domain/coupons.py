"""Static coupon catalog."""

from __future__ import annotations

from pydantic import BaseModel, Field


class Coupon(BaseModel):
    """A redeemable discount code."""

    model_config = {"frozen": True}

    code: str = Field(min_length=1)
    discount: float = Field(ge=0, le=1)


COUPONS: tuple[Coupon, ...] = (
    Coupon(code="SAVE10", discount=0.1),
    Coupon(code="SAVE20", discount=0.2),
)


def get_coupons() -> list[Coupon]:
    """Return the coupon catalog as a fresh list."""
    return list(COUPONS)


def find_coupon(code: str) -> Coupon | None:
    """Look up a coupon by exact code."""
    for coupon in COUPONS:
        if coupon.code == code:
            return coupon
    return None
