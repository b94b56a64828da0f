"""Lifecycle event dispatch via pluggy + ThreadPoolExecutor.

Events are fire-and-forget: in async mode they run on a small worker pool
and ``shutdown()`` waits for anything still in flight. Nothing is
persisted; an event whose hooks fail is logged and counted, not retried.

INVARIANT: Plugin failures are warnings, never errors.
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from storefront.plugins.manager import PluginManager

logger = logging.getLogger(__name__)


class EventBus:
    """Async event dispatch via pluggy + ThreadPoolExecutor.

    Parameters:
        plugin_manager: Loaded PluginManager for hook dispatch.
        sync: Force synchronous dispatch (useful for testing / ``--sync``).
        max_workers: ThreadPoolExecutor worker count.
    """

    def __init__(
        self,
        plugin_manager: PluginManager,
        *,
        sync: bool = False,
        max_workers: int = 2,
    ) -> None:
        self._pm = plugin_manager
        self._sync = sync
        self._executor: ThreadPoolExecutor | None = (
            None if sync else ThreadPoolExecutor(max_workers=max_workers)
        )
        self._futures: list[Future[bool]] = []
        self._lock = threading.Lock()
        self.delivered = 0
        self.failed = 0

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def dispatch(self, hook_name: str, payload: dict[str, Any]) -> bool:
        """Run *hook_name* with *payload* now (sync) or on the pool (async).

        Returns False only when a synchronous dispatch failed; queued
        events always report True.
        """
        if self._sync or self._executor is None:
            return self._execute_hook(hook_name, payload)

        future = self._executor.submit(self._execute_hook, hook_name, payload)
        self._futures.append(future)
        return True

    def drain(self) -> None:
        """Wait for every in-flight event to finish."""
        for future in self._futures:
            future.result(timeout=30)
        self._futures.clear()

    def shutdown(self) -> None:
        """Drain, then stop the ThreadPoolExecutor."""
        self.drain()
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _execute_hook(self, hook_name: str, payload: dict[str, Any]) -> bool:
        hook_fn = getattr(self._pm.hook, hook_name, None)
        if hook_fn is None:
            logger.debug("No hook spec for %s; event dropped", hook_name)
            return True

        try:
            hook_fn(**payload)
        except Exception as exc:
            logger.warning("Hook %s failed: %s", hook_name, exc)
            with self._lock:
                self.failed += 1
            return False

        with self._lock:
            self.delivered += 1
        return True
