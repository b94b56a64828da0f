"""Default in-process collaborator implementations.

None of these talk to the network: rates and shipping come from the
configured tables, analytics and email are structured log sinks, and the
payment gateway is a sandbox that approves any Luhn-valid card.
"""

from __future__ import annotations

import asyncio
import secrets
from collections.abc import Mapping
from datetime import datetime
from typing import Any

import structlog

from storefront.config.models import ShippingRate
from storefront.domain.orders import PAYMENT_SUCCESS, ChargeResult, CreditCard, ShippingQuote
from storefront.infrastructure.collaborators import CollaboratorError

log = structlog.get_logger(__name__)


class StaticExchangeRates:
    """Exchange rates from a fixed table, keyed by ISO currency code."""

    def __init__(self, rates: Mapping[str, float]) -> None:
        self._rates = {code.upper(): rate for code, rate in rates.items()}

    def get_exchange_rate(self, currency_code: str) -> float:
        try:
            return self._rates[currency_code.upper()]
        except KeyError:
            msg = f"No exchange rate for currency: {currency_code}"
            raise CollaboratorError(msg) from None


class TableShippingQuotes:
    """Shipping quotes from a destination table; unknown destinations get no quote."""

    def __init__(self, destinations: Mapping[str, ShippingRate]) -> None:
        self._destinations = {name.casefold(): rate for name, rate in destinations.items()}

    def get_shipping_quote(self, destination: str) -> ShippingQuote | None:
        rate = self._destinations.get(destination.casefold())
        if rate is None:
            return None
        return ShippingQuote(cost=rate.cost, estimated_days=rate.estimated_days)


class LogAnalytics:
    """Analytics sink that records page views as structured log events."""

    def track_page_view(self, route: str) -> None:
        log.info("analytics.page_view", route=route)


class LogEmailSender:
    """Email sink that logs deliveries instead of sending them."""

    async def send_email(self, address: str, message: str) -> None:
        await asyncio.sleep(0)
        log.info("email.sent", to=address, length=len(message))


def luhn_valid(number: int | str) -> bool:
    """Luhn checksum over the digits of *number*.

    Examples:
        >>> luhn_valid("4111111111111111")
        True
        >>> luhn_valid("4111111111111112")
        False
    """
    digits = [int(ch) for ch in str(number) if ch.isdigit()]
    if len(digits) < 12:
        return False
    total = 0
    for index, digit in enumerate(reversed(digits)):
        if index % 2 == 1:
            digit *= 2
            if digit > 9:
                digit -= 9
        total += digit
    return total % 10 == 0


class SandboxPaymentGateway:
    """Approves positive charges on Luhn-valid cards; declines everything else."""

    async def charge(
        self, credit_card: CreditCard | Mapping[str, Any], amount: float
    ) -> ChargeResult:
        await asyncio.sleep(0)
        card = CreditCard.model_validate(credit_card)
        approved = amount > 0 and luhn_valid(card.credit_card_number)
        status = PAYMENT_SUCCESS if approved else "failed"
        log.info("payment.charge", card=card.credit_card_number, amount=amount, status=status)
        return ChargeResult(status=status)


class NumericCodeGenerator:
    """Cryptographically random one-time codes with a fixed number of digits."""

    def __init__(self, digits: int = 6) -> None:
        self._digits = digits

    def generate_code(self) -> int:
        low = 10 ** (self._digits - 1)
        return low + secrets.randbelow(9 * low)


class SystemClock:
    """Local wall-clock time."""

    def now(self) -> datetime:
        return datetime.now()


class FixedClock:
    """A clock pinned to one instant; ``set`` moves it."""

    def __init__(self, moment: datetime) -> None:
        self._moment = moment

    def set(self, moment: datetime) -> None:
        self._moment = moment

    def now(self) -> datetime:
        return self._moment
