"""Tests for typed payload contracts at the service boundary."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from storefront.config.settings import StoreSettings
from storefront.infrastructure.collaborators import Collaborators
from storefront.services.catalog import CatalogService
from storefront.services.contracts import (
    CouponListData,
    OrderData,
    PriceConversionData,
    ShippingInfoData,
    StoreStatusData,
    dump_validated,
)
from storefront.services.pricing import PricingService
from storefront.services.shipping import ShippingService
from storefront.services.store_hours import StoreHoursService


class TestPayloadContracts:
    def test_price_payload_conforms(
        self, collaborators: Collaborators, settings: StoreSettings
    ) -> None:
        collaborators.currency.get_exchange_rate.return_value = 0.92
        result = PricingService(collaborators, settings).get_price_in_currency(100, "EUR")
        payload = PriceConversionData.model_validate(result.data)
        assert payload.converted == pytest.approx(92)

    def test_shipping_payload_conforms(
        self, collaborators: Collaborators, settings: StoreSettings
    ) -> None:
        collaborators.shipping.get_shipping_quote.return_value = None
        result = ShippingService(collaborators, settings).get_shipping_info("Mars")
        payload = ShippingInfoData.model_validate(result.data)
        assert payload.cost is None
        assert payload.estimated_days is None

    def test_status_payload_conforms(
        self, collaborators: Collaborators, settings: StoreSettings
    ) -> None:
        result = StoreHoursService(collaborators, settings).is_online()
        payload = StoreStatusData.model_validate(result.data)
        assert payload.now == "2024-04-01T12:00"

    def test_coupon_list_conforms(
        self, collaborators: Collaborators, settings: StoreSettings
    ) -> None:
        result = CatalogService(collaborators, settings).list_coupons()
        payload = CouponListData.model_validate(result.data)
        assert payload.count == len(payload.items)

    def test_dump_validated_rejects_missing_key(self) -> None:
        with pytest.raises(ValidationError):
            dump_validated(OrderData, {"amount": 19})

    def test_dump_validated_normalizes(self) -> None:
        assert dump_validated(OrderData, {"amount": 19, "status": "success"}) == {
            "amount": 19.0,
            "status": "success",
        }
