"""Built-in audit plugin — one structured log line per lifecycle event."""

from __future__ import annotations

import structlog

from storefront.plugins.hookspecs import hookimpl


class AuditPlugin:
    """Writes an ``audit.*`` event for every storefront lifecycle hook."""

    def __init__(self, store_name: str = "my-store") -> None:
        self._log = structlog.get_logger("storefront.audit").bind(store=store_name)

    @hookimpl
    def post_page_view(self, route: str) -> None:
        self._log.info("audit.page_view", route=route)

    @hookimpl
    def post_order(self, amount: float, status: str | None) -> None:
        self._log.info("audit.order", amount=amount, status=status)

    @hookimpl
    def post_sign_up(self, email: str) -> None:
        self._log.info("audit.sign_up", email=email)

    @hookimpl
    def post_login(self, email: str) -> None:
        self._log.info("audit.login", email=email)
