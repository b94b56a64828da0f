"""Tests for config section models — defaults and sparse overrides."""

import pytest
from pydantic import ValidationError

from storefront.config.models import (
    CurrencyConfig,
    PluginsConfig,
    PromotionsConfig,
    SecurityConfig,
    ShippingConfig,
    StoreSection,
)


class TestDefaults:
    def test_section_defaults(self) -> None:
        """Every section works with no config file at all."""
        assert StoreSection().name == "my-store"
        assert StoreSection().currency_symbol == "$"
        assert PromotionsConfig().holiday_month == 12
        assert PromotionsConfig().holiday_day == 25
        assert CurrencyConfig().rates["AUD"] == 1.5
        assert ShippingConfig().destinations["UK"].cost == 15
        assert SecurityConfig().code_digits == 6
        assert PluginsConfig().audit == {"enabled": True}

    def test_sparse_override(self) -> None:
        """Only override fields you care about — rest keeps defaults."""
        section = StoreSection.model_validate({"name": "corner-shop"})
        assert section.name == "corner-shop"
        assert section.open_hour == 8
        assert section.close_hour == 20

    def test_json_round_trip(self) -> None:
        cfg = ShippingConfig()
        assert ShippingConfig.model_validate_json(cfg.model_dump_json()) == cfg


class TestStoreSection:
    def test_open_before_close(self) -> None:
        with pytest.raises(ValidationError, match="must be before"):
            StoreSection(open_hour=12, close_hour=12)

    def test_hour_bounds(self) -> None:
        with pytest.raises(ValidationError):
            StoreSection(open_hour=-1)

    def test_round_the_clock(self) -> None:
        section = StoreSection(open_hour=0, close_hour=24)
        assert section.close_hour == 24


class TestShippingConfig:
    def test_negative_cost_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ShippingConfig.model_validate(
                {"destinations": {"US": {"cost": -1, "estimated_days": 1}}}
            )


class TestSecurityConfig:
    @pytest.mark.parametrize("digits", [3, 11])
    def test_digit_bounds(self, digits: int) -> None:
        with pytest.raises(ValidationError):
            SecurityConfig(code_digits=digits)


class TestPromotionsConfig:
    def test_discount_bounds(self) -> None:
        with pytest.raises(ValidationError):
            PromotionsConfig(holiday_discount=1.5)
