"""PricingService — currency conversion and the holiday discount."""

from __future__ import annotations

from storefront.domain.schedule import holiday_discount
from storefront.services.base import BaseService
from storefront.services.contracts import DiscountData, PriceConversionData, dump_validated
from storefront.services.result import ServiceResult
from storefront.services.telemetry import trace_span, traced


class PricingService(BaseService):
    """Prices in foreign currencies and date-based discounts."""

    @traced
    def get_price_in_currency(self, price: float, target_currency: str) -> ServiceResult:
        """Convert *price* at the collaborator's rate for *target_currency*.

        The rate is trusted as-is; an unknown currency is the collaborator's
        error to raise.
        """
        with trace_span("currency.get_exchange_rate") as span:
            rate = self._collaborators.currency.get_exchange_rate(target_currency)
            if span:
                span.annotate("currency", target_currency)

        return ServiceResult(
            ok=True,
            op="get_price_in_currency",
            data=dump_validated(
                PriceConversionData,
                {
                    "price": price,
                    "currency": target_currency,
                    "rate": rate,
                    "converted": price * rate,
                },
            ),
        )

    @traced
    def get_discount(self) -> ServiceResult:
        """Holiday discount for the clock's current date (``0`` on ordinary days)."""
        now = self._collaborators.clock.now()
        promo = self._settings.promotions
        discount = holiday_discount(
            now,
            month=promo.holiday_month,
            day=promo.holiday_day,
            rate=promo.holiday_discount,
        )
        return ServiceResult(
            ok=True,
            op="get_discount",
            data=dump_validated(
                DiscountData, {"discount": discount, "date": now.date().isoformat()}
            ),
        )
