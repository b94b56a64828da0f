"""BaseService — foundation for all storefront services.

Every service receives a :class:`Collaborators` bundle at construction
time and reaches the outside world only through it.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from storefront.config.settings import StoreSettings
    from storefront.infrastructure.collaborators import Collaborators

logger = logging.getLogger(__name__)


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class PricingService(BaseService):
            def get_price_in_currency(self, price, currency) -> ServiceResult:
                rate = self._collaborators.currency.get_exchange_rate(currency)
                ...
    """

    def __init__(
        self,
        collaborators: Collaborators,
        settings: StoreSettings | None = None,
    ) -> None:
        if settings is None:
            from storefront.config.settings import StoreSettings

            settings = StoreSettings()
        self._collaborators = collaborators
        self._settings = settings

    def _dispatch_event(
        self,
        hook_name: str,
        payload: dict[str, Any],
        warnings: list[str],
    ) -> None:
        """Dispatch a lifecycle event. No-op if event bus not initialized.

        INVARIANT: Plugin failures are warnings, never errors.
        """
        bus = self._collaborators.event_bus
        if bus is None:
            return
        try:
            delivered = bus.dispatch(hook_name, payload)
        except Exception:
            logger.debug("Event dispatch failed for %s", hook_name, exc_info=True)
            delivered = False
        if not delivered:
            warnings.append(f"Event dispatch failed for {hook_name}")
