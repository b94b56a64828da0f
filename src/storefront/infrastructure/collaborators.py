"""Collaborator protocols and the bundle injected into every service.

Each protocol names the single method a domain operation relies on.
``track_page_view``, ``charge`` and ``send_email`` may be coroutines or
plain callables; services resolve both.
"""

from __future__ import annotations

from collections.abc import Awaitable, Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from storefront.config.settings import StoreSettings
    from storefront.domain.orders import ChargeResult, CreditCard, ShippingQuote
    from storefront.plugins.event_bus import EventBus


class CollaboratorError(Exception):
    """Raised by an adapter that cannot serve a request (e.g. unknown currency)."""


@runtime_checkable
class CurrencyRates(Protocol):
    def get_exchange_rate(self, currency_code: str) -> float: ...


@runtime_checkable
class ShippingQuotes(Protocol):
    def get_shipping_quote(
        self, destination: str
    ) -> ShippingQuote | Mapping[str, Any] | None: ...


@runtime_checkable
class Analytics(Protocol):
    def track_page_view(self, route: str) -> Awaitable[None] | None: ...


@runtime_checkable
class PaymentGateway(Protocol):
    def charge(
        self, credit_card: CreditCard, amount: float
    ) -> Awaitable[ChargeResult | Mapping[str, Any]] | ChargeResult | Mapping[str, Any]: ...


@runtime_checkable
class EmailSender(Protocol):
    def send_email(self, address: str, message: str) -> Awaitable[None] | None: ...


@runtime_checkable
class CodeGenerator(Protocol):
    def generate_code(self) -> int | str: ...


@runtime_checkable
class Clock(Protocol):
    def now(self) -> datetime: ...


@dataclass
class Collaborators:
    """Every external dependency of the domain operations, in one place.

    The event bus is optional: without one, lifecycle events are skipped.
    """

    currency: CurrencyRates
    shipping: ShippingQuotes
    analytics: Analytics
    payment: PaymentGateway
    email: EmailSender
    security: CodeGenerator
    clock: Clock
    event_bus: EventBus | None = None

    @classmethod
    def from_settings(cls, settings: StoreSettings) -> Collaborators:
        """Build the default in-process adapters from *settings*."""
        from storefront.infrastructure.adapters import (
            FixedClock,
            LogAnalytics,
            LogEmailSender,
            NumericCodeGenerator,
            SandboxPaymentGateway,
            StaticExchangeRates,
            SystemClock,
            TableShippingQuotes,
        )

        clock: Clock = FixedClock(settings.at) if settings.at is not None else SystemClock()
        return cls(
            currency=StaticExchangeRates(settings.currency.rates),
            shipping=TableShippingQuotes(settings.shipping.destinations),
            analytics=LogAnalytics(),
            payment=SandboxPaymentGateway(),
            email=LogEmailSender(),
            security=NumericCodeGenerator(digits=settings.security.code_digits),
            clock=clock,
        )

    def init_event_bus(self, settings: StoreSettings) -> None:
        """Create a PluginManager, load plugins and wire up the EventBus.

        Built-in plugins follow the ``[plugins]`` section.
        """
        from storefront.plugins.event_bus import EventBus
        from storefront.plugins.manager import PluginManager

        pm = PluginManager()
        pm.discover_and_load()
        pm.load_builtins(settings.plugins, store_name=settings.store.name)

        self.event_bus = EventBus(pm, sync=settings.sync)

    def close(self) -> None:
        """Flush and stop the event bus, if any."""
        if self.event_bus is not None:
            self.event_bus.shutdown()
            self.event_bus = None
