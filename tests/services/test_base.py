"""Tests for BaseService and service inheritance."""

from unittest.mock import MagicMock

import pytest

from storefront.config.settings import StoreSettings
from storefront.infrastructure.collaborators import Collaborators
from storefront.services.accounts import AccountService
from storefront.services.base import BaseService
from storefront.services.catalog import CatalogService
from storefront.services.checkout import CheckoutService
from storefront.services.pages import PageService
from storefront.services.pricing import PricingService
from storefront.services.shipping import ShippingService
from storefront.services.store_hours import StoreHoursService


class TestBaseService:
    def test_collaborators_stored(
        self, collaborators: Collaborators, settings: StoreSettings
    ) -> None:
        service = BaseService(collaborators, settings)
        assert service._collaborators is collaborators
        assert service._settings is settings

    def test_default_settings(self, collaborators: Collaborators) -> None:
        service = BaseService(collaborators)
        assert isinstance(service._settings, StoreSettings)
        assert service._settings.store.open_hour == 8

    def test_subclass_pattern(self, collaborators: Collaborators) -> None:
        """Verify the intended subclass usage pattern works."""

        class MyService(BaseService):
            def stamp(self) -> str:
                return f"now is {self._collaborators.clock.now():%H:%M}"

        assert MyService(collaborators).stamp() == "now is 12:00"


class TestDispatchEvent:
    def test_no_bus_is_noop(self, collaborators: Collaborators) -> None:
        warnings: list[str] = []
        BaseService(collaborators)._dispatch_event("post_login", {"email": "a@b.co"}, warnings)
        assert warnings == []

    def test_delivered(self, collaborators: Collaborators) -> None:
        collaborators.event_bus = MagicMock()
        collaborators.event_bus.dispatch.return_value = True
        warnings: list[str] = []

        BaseService(collaborators)._dispatch_event("post_login", {"email": "a@b.co"}, warnings)

        collaborators.event_bus.dispatch.assert_called_once_with(
            "post_login", {"email": "a@b.co"}
        )
        assert warnings == []

    def test_failed_delivery_becomes_warning(self, collaborators: Collaborators) -> None:
        collaborators.event_bus = MagicMock()
        collaborators.event_bus.dispatch.return_value = False
        warnings: list[str] = []

        BaseService(collaborators)._dispatch_event("post_order", {}, warnings)

        assert warnings == ["Event dispatch failed for post_order"]

    def test_bus_exception_becomes_warning(self, collaborators: Collaborators) -> None:
        collaborators.event_bus = MagicMock()
        collaborators.event_bus.dispatch.side_effect = RuntimeError("pool closed")
        warnings: list[str] = []

        BaseService(collaborators)._dispatch_event("post_order", {}, warnings)

        assert warnings == ["Event dispatch failed for post_order"]


# ---------------------------------------------------------------------------
# Service inheritance — every storefront service extends BaseService
# ---------------------------------------------------------------------------

ALL_SERVICES = [
    PricingService,
    ShippingService,
    PageService,
    CheckoutService,
    AccountService,
    StoreHoursService,
    CatalogService,
]


class TestServiceInheritance:
    @pytest.mark.parametrize("service_cls", ALL_SERVICES, ids=lambda c: c.__name__)
    def test_inherits_base_service(self, service_cls: type) -> None:
        assert issubclass(service_cls, BaseService)

    @pytest.mark.parametrize("service_cls", ALL_SERVICES, ids=lambda c: c.__name__)
    def test_collaborator_injection(
        self, service_cls: type, collaborators: Collaborators, settings: StoreSettings
    ) -> None:
        svc = service_cls(collaborators, settings)
        assert svc._collaborators is collaborators
