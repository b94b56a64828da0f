"""Commands: sign-up and one-time-code login."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from storefront.commands._base import StoreCommand
from storefront.commands._context import collaborator_errors

if TYPE_CHECKING:
    from storefront.commands._context import AppContext


@click.command(cls=StoreCommand, examples="  storefront signup ahmed@example.com")
@click.argument("email")
@click.pass_obj
def signup(app: AppContext, email: str) -> None:
    """Register EMAIL and send a welcome email."""
    from storefront.services.accounts import AccountService

    with collaborator_errors():
        result = app.run(app.service(AccountService).sign_up(email))
    app.emit(result)


@click.command(cls=StoreCommand, examples="  storefront login ahmed@example.com")
@click.argument("email")
@click.pass_obj
def login(app: AppContext, email: str) -> None:
    """Email a one-time login code to EMAIL."""
    from storefront.services.accounts import AccountService

    with collaborator_errors():
        result = app.run(app.service(AccountService).login(email))
    app.emit(result)
