"""Commands: currency conversion, holiday discount, shipping quotes."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from storefront.commands._base import StoreCommand
from storefront.commands._context import collaborator_errors

if TYPE_CHECKING:
    from storefront.commands._context import AppContext


@click.command(
    cls=StoreCommand,
    examples="""\
  storefront price 10 AUD
  storefront --json price 99.90 EUR""",
)
@click.argument("amount", type=float)
@click.argument("currency")
@click.pass_obj
def price(app: AppContext, amount: float, currency: str) -> None:
    """Convert AMOUNT into CURRENCY."""
    from storefront.services.pricing import PricingService

    with collaborator_errors():
        result = app.service(PricingService).get_price_in_currency(amount, currency)
    app.emit(result)


@click.command(
    cls=StoreCommand,
    examples="""\
  storefront discount
  storefront --at 2023-12-25 discount""",
)
@click.pass_obj
def discount(app: AppContext) -> None:
    """Show today's holiday discount."""
    from storefront.services.pricing import PricingService

    app.emit(app.service(PricingService).get_discount())


@click.command(
    cls=StoreCommand,
    examples="""\
  storefront shipping Egypt
  storefront --json shipping US""",
)
@click.argument("destination")
@click.pass_obj
def shipping(app: AppContext, destination: str) -> None:
    """Quote shipping to DESTINATION."""
    from storefront.services.shipping import ShippingService

    with collaborator_errors():
        result = app.service(ShippingService).get_shipping_info(destination)
    app.emit(result)
