"""Commands: coupons and product publication."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from storefront.commands._base import StoreCommand

if TYPE_CHECKING:
    from storefront.commands._context import AppContext


@click.command(cls=StoreCommand, examples="  storefront coupons")
@click.pass_obj
def coupons(app: AppContext) -> None:
    """List the available coupon codes."""
    from storefront.services.catalog import CatalogService

    app.emit(app.service(CatalogService).list_coupons())


@click.command(
    "apply-coupon",
    cls=StoreCommand,
    examples="""\
  storefront apply-coupon 10 SAVE10
  storefront --json apply-coupon 49.99 SAVE20""",
)
@click.argument("amount", type=float)
@click.argument("code")
@click.pass_obj
def apply_coupon(app: AppContext, amount: float, code: str) -> None:
    """Apply coupon CODE to AMOUNT."""
    from storefront.services.catalog import CatalogService

    app.emit(app.service(CatalogService).apply_coupon(amount, code))


@click.command(
    cls=StoreCommand,
    examples="""\
  storefront product --name iPhone --price 1200""",
)
@click.option("--name", default="", help="Product name.")
@click.option("--price", "amount", type=float, default=0, help="Product price.")
@click.pass_obj
def product(app: AppContext, name: str, amount: float) -> None:
    """Validate and publish a product."""
    from storefront.services.catalog import CatalogService

    app.emit(app.service(CatalogService).create_product({"name": name, "price": amount}))
