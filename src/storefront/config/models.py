"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, storefront.toml only contains
overrides. A store runs with no config file at all.
"""

from __future__ import annotations

from typing import Any, Self

from pydantic import BaseModel, Field, model_validator

from storefront.domain.schedule import (
    CLOSE_HOUR,
    HOLIDAY_DAY,
    HOLIDAY_DISCOUNT,
    HOLIDAY_MONTH,
    OPEN_HOUR,
)

# --- storefront.toml sections ---


class StoreSection(BaseModel):
    """[store] section."""

    model_config = {"frozen": True}

    name: str = "my-store"
    open_hour: int = Field(default=OPEN_HOUR, ge=0, le=23)
    close_hour: int = Field(default=CLOSE_HOUR, ge=1, le=24)
    currency_symbol: str = "$"

    @model_validator(mode="after")
    def _check_hours(self) -> Self:
        if self.open_hour >= self.close_hour:
            msg = f"open_hour ({self.open_hour}) must be before close_hour ({self.close_hour})"
            raise ValueError(msg)
        return self


class PromotionsConfig(BaseModel):
    """[promotions] section."""

    model_config = {"frozen": True}

    holiday_month: int = Field(default=HOLIDAY_MONTH, ge=1, le=12)
    holiday_day: int = Field(default=HOLIDAY_DAY, ge=1, le=31)
    holiday_discount: float = Field(default=HOLIDAY_DISCOUNT, ge=0, le=1)


class CurrencyConfig(BaseModel):
    """[currency] section — exchange rates relative to the store currency."""

    model_config = {"frozen": True}

    rates: dict[str, float] = Field(
        default_factory=lambda: {
            "USD": 1.0,
            "EUR": 0.92,
            "GBP": 0.79,
            "AUD": 1.5,
            "CAD": 1.36,
        }
    )


class ShippingRate(BaseModel):
    """One row of the [shipping.destinations] table."""

    model_config = {"frozen": True}

    cost: float = Field(ge=0)
    estimated_days: int = Field(ge=0)


class ShippingConfig(BaseModel):
    """[shipping] section."""

    model_config = {"frozen": True}

    destinations: dict[str, ShippingRate] = Field(
        default_factory=lambda: {
            "US": ShippingRate(cost=5, estimated_days=3),
            "UK": ShippingRate(cost=15, estimated_days=5),
            "Egypt": ShippingRate(cost=25, estimated_days=10),
        }
    )


class SecurityConfig(BaseModel):
    """[security] section."""

    model_config = {"frozen": True}

    code_digits: int = Field(default=6, ge=4, le=10)


class PluginsConfig(BaseModel):
    """[plugins] section."""

    model_config = {"frozen": True}

    audit: dict[str, Any] = Field(default_factory=lambda: {"enabled": True})
