"""Subcommand modules for storefront.

Provides register_commands() which uses deferred imports to keep
``storefront --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register every command on the root CLI group."""
    from storefront.commands.account import login, signup
    from storefront.commands.catalog import apply_coupon, coupons, product
    from storefront.commands.checkout import checkout
    from storefront.commands.pricing import discount, price, shipping
    from storefront.commands.store import render, status

    for command in (
        price,
        discount,
        shipping,
        status,
        render,
        checkout,
        signup,
        login,
        coupons,
        apply_coupon,
        product,
    ):
        cli.add_command(command)
