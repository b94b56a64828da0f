"""CheckoutService — charging the customer for an order."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from storefront.domain.orders import ChargeResult, CreditCard, Order
from storefront.services._helpers import resolve
from storefront.services.base import BaseService
from storefront.services.contracts import OrderData, dump_validated
from storefront.services.result import ServiceError, ServiceResult
from storefront.services.telemetry import trace_span, traced

PAYMENT_ERROR = "payment_error"


class CheckoutService(BaseService):
    @traced
    async def submit_order(
        self,
        order: Order | Mapping[str, Any],
        credit_card: CreditCard | Mapping[str, Any],
    ) -> ServiceResult:
        """Charge *credit_card* for the order total.

        The gateway receives exactly ``(credit_card, total_amount)``. A
        non-success status is returned as ``payment_error``; an exception
        raised by the gateway propagates unchanged.
        """
        op = "submit_order"
        warnings: list[str] = []
        amount = Order.model_validate(order).total_amount

        with trace_span("payment.charge"):
            raw = await resolve(self._collaborators.payment.charge(credit_card, amount))
        charge = ChargeResult.model_validate(raw)

        self._dispatch_event("post_order", {"amount": amount, "status": charge.status}, warnings)

        data = dump_validated(OrderData, {"amount": amount, "status": charge.status})
        if not charge.succeeded:
            return ServiceResult(
                ok=False,
                op=op,
                data=data,
                warnings=warnings,
                error=ServiceError(
                    code=PAYMENT_ERROR,
                    message=f"Payment was not accepted (status: {charge.status})",
                    detail={"status": charge.status},
                ),
            )
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)
