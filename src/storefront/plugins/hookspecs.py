"""Pluggy hook specifications for storefront lifecycle events.

Events fire after a domain operation reaches its outcome; they observe
and never change that outcome.
"""

from __future__ import annotations

import pluggy

hookspec = pluggy.HookspecMarker("storefront")
hookimpl = pluggy.HookimplMarker("storefront")


class StorefrontHookSpec:
    """Hook specifications for the storefront plugin system."""

    @hookspec
    def post_page_view(self, route: str) -> None:
        """Called after a page is rendered."""

    @hookspec
    def post_order(self, amount: float, status: str | None) -> None:
        """Called after a charge attempt, whatever its status."""

    @hookspec
    def post_sign_up(self, email: str) -> None:
        """Called after a successful registration."""

    @hookspec
    def post_login(self, email: str) -> None:
        """Called after a one-time code has been sent."""
