"""Commands: opening hours and page rendering."""

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
  storefront status
  storefront --at "2024-04-01 19:59" status""",
)
@click.pass_obj
def status(app: AppContext) -> None:
    """Report whether the store is online."""
    from storefront.services.store_hours import StoreHoursService

    app.emit(app.service(StoreHoursService).is_online())


@click.command(cls=StoreCommand, examples="  storefront render")
@click.pass_obj
def render(app: AppContext) -> None:
    """Render the home page."""
    from storefront.services.pages import PageService

    with collaborator_errors():
        result = app.run(app.service(PageService).render_page())
    app.emit(result)
