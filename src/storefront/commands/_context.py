"""AppContext — shared Click context for all commands.

Created once by the root CLI group and passed to every subcommand via
``@click.pass_obj``. Builds the collaborators lazily, runs coroutines,
and routes results to stdout/stderr with the right exit code.
"""

from __future__ import annotations

import asyncio
from collections.abc import Coroutine, Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any, TypeVar

import click

from storefront.infrastructure.collaborators import CollaboratorError
from storefront.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from storefront.config.settings import StoreSettings
    from storefront.infrastructure.collaborators import Collaborators
    from storefront.services.base import BaseService
    from storefront.services.result import ServiceResult

S = TypeVar("S", bound="BaseService")


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Collaborators are created on first use so ``--help`` and ``--version``
    never load plugins.
    """

    def __init__(self, settings: StoreSettings) -> None:
        self.settings = settings
        self._collaborators: Collaborators | None = None

        from storefront.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from storefront.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def collaborators(self) -> Collaborators:
        """Default collaborators with the plugin event bus attached."""
        if self._collaborators is None:
            from storefront.infrastructure.collaborators import Collaborators

            self._collaborators = Collaborators.from_settings(self.settings)
            self._collaborators.init_event_bus(self.settings)
        return self._collaborators

    def service(self, service_cls: type[S]) -> S:
        return service_cls(self.collaborators, self.settings)

    def run(self, coro: Coroutine[Any, Any, ServiceResult]) -> ServiceResult:
        """Drive an async service operation to completion."""
        return asyncio.run(coro)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings go to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)

    def close(self) -> None:
        if self._collaborators is not None:
            self._collaborators.close()
            self._collaborators = None


@contextmanager
def collaborator_errors() -> Iterator[None]:
    """Report a failing collaborator as a Click error instead of a traceback."""
    try:
        yield
    except CollaboratorError as exc:
        raise click.ClickException(str(exc)) from exc
