"""PageService — page rendering with fire-and-forget analytics."""

from __future__ import annotations

import logging

from storefront.services._helpers import resolve
from storefront.services.base import BaseService
from storefront.services.contracts import PageData, dump_validated
from storefront.services.result import ServiceResult
from storefront.services.telemetry import trace_span, traced

logger = logging.getLogger(__name__)

HOME_ROUTE = "/home"
PAGE_CONTENT = "<div>content</div>"


class PageService(BaseService):
    @traced
    async def render_page(self) -> ServiceResult:
        """Render the home page and report one page view.

        INVARIANT: analytics never changes or aborts the render; a tracking
        failure becomes a warning.
        """
        route = HOME_ROUTE
        warnings: list[str] = []

        with trace_span("analytics.track_page_view"):
            try:
                await resolve(self._collaborators.analytics.track_page_view(route))
            except Exception as exc:
                logger.warning("Page view tracking failed for %s: %s", route, exc)
                warnings.append(f"Page view tracking failed: {exc}")

        self._dispatch_event("post_page_view", {"route": route}, warnings)

        return ServiceResult(
            ok=True,
            op="render_page",
            data=dump_validated(PageData, {"route": route, "content": PAGE_CONTENT}),
            warnings=warnings,
        )
