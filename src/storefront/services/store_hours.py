"""StoreHoursService — is the store taking orders right now?"""

from __future__ import annotations

from storefront.domain.schedule import is_within_hours
from storefront.services.base import BaseService
from storefront.services.contracts import StoreStatusData, dump_validated
from storefront.services.result import ServiceResult
from storefront.services.telemetry import traced


class StoreHoursService(BaseService):
    @traced
    def is_online(self) -> ServiceResult:
        """Online from ``open_hour`` (inclusive) to ``close_hour`` (exclusive)."""
        now = self._collaborators.clock.now()
        hours = self._settings.store
        online = is_within_hours(now, open_hour=hours.open_hour, close_hour=hours.close_hour)
        return ServiceResult(
            ok=True,
            op="is_online",
            data=dump_validated(
                StoreStatusData,
                {
                    "online": online,
                    "now": now.isoformat(timespec="minutes"),
                    "open_hour": hours.open_hour,
                    "close_hour": hours.close_hour,
                },
            ),
        )
