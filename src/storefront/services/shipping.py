"""ShippingService — human-readable shipping quotes."""

from __future__ import annotations

from storefront.domain.orders import ShippingQuote
from storefront.services._helpers import format_days, format_money
from storefront.services.base import BaseService
from storefront.services.contracts import ShippingInfoData, dump_validated
from storefront.services.result import ServiceResult
from storefront.services.telemetry import trace_span, traced

UNAVAILABLE_MESSAGE = "Shipping Unavailable"


class ShippingService(BaseService):
    @traced
    def get_shipping_info(self, destination: str) -> ServiceResult:
        """Describe the shipping quote for *destination*.

        A missing quote is an ordinary outcome: the result is still ``ok``
        and its message says shipping is unavailable. No retry.
        """
        op = "get_shipping_info"

        with trace_span("shipping.get_shipping_quote"):
            raw = self._collaborators.shipping.get_shipping_quote(destination)

        if raw is None:
            return ServiceResult(
                ok=True,
                op=op,
                data=dump_validated(
                    ShippingInfoData,
                    {
                        "destination": destination,
                        "available": False,
                        "message": UNAVAILABLE_MESSAGE,
                    },
                ),
            )

        quote = ShippingQuote.model_validate(raw)
        cost = format_money(quote.cost, self._settings.store.currency_symbol)
        message = f"Shipping Cost: {cost} ({format_days(quote.estimated_days)})"
        return ServiceResult(
            ok=True,
            op=op,
            data=dump_validated(
                ShippingInfoData,
                {
                    "destination": destination,
                    "available": True,
                    "message": message,
                    "cost": quote.cost,
                    "estimated_days": quote.estimated_days,
                },
            ),
        )
