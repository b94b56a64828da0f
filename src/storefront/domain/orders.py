"""Order, payment and catalog entities.

Collaborators may hand back plain mappings or these models;
``model_validate`` accepts either.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

PAYMENT_SUCCESS = "success"


class Order(BaseModel):
    """An order awaiting payment."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, from_attributes=True)

    total_amount: float = Field(gt=0, alias="totalAmount")


class CreditCard(BaseModel):
    """Card details forwarded untouched to the payment gateway."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, from_attributes=True)

    credit_card_number: int | str = Field(alias="creditCardNumber")


class ShippingQuote(BaseModel):
    """A carrier quote for one destination."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, from_attributes=True)

    cost: float
    estimated_days: int = Field(alias="estimatedDays")


class ChargeResult(BaseModel):
    """Outcome reported by the payment gateway.

    A missing or non-string status is kept as None and counts as a decline.
    """

    model_config = ConfigDict(frozen=True, extra="allow", from_attributes=True)

    status: str | None = None

    @field_validator("status", mode="before")
    @classmethod
    def _drop_unusable_status(cls, value: Any) -> str | None:
        return value if isinstance(value, str) else None

    @property
    def succeeded(self) -> bool:
        return self.status == PAYMENT_SUCCESS


class Product(BaseModel):
    """A catalog product submitted for publication."""

    model_config = {"frozen": True}

    name: str = ""
    price: float = 0
