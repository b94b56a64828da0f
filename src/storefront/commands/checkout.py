"""Command: charge a card for an order."""

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
  storefront checkout --amount 19 --card 4111111111111111
  storefront --json checkout --amount 250.50 --card 5500005555555559""",
)
@click.option("--amount", type=click.FloatRange(min=0, min_open=True), required=True)
@click.option("--card", "card_number", required=True, help="Credit card number.")
@click.pass_obj
def checkout(app: AppContext, amount: float, card_number: str) -> None:
    """Submit an order of AMOUNT paid with CARD."""
    from storefront.domain.orders import CreditCard, Order
    from storefront.services.checkout import CheckoutService

    order = Order(total_amount=amount)
    card = CreditCard(credit_card_number=card_number)
    with collaborator_errors():
        result = app.run(app.service(CheckoutService).submit_order(order, card))
    app.emit(result)
