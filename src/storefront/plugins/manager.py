"""Plugin discovery and loading.

Third-party plugins arrive through the ``storefront.plugins`` entry-point
group; built-in plugins are registered from the ``[plugins]`` config
section.
"""

from __future__ import annotations

import inspect
import logging
from typing import TYPE_CHECKING

import pluggy

from storefront.plugins.hookspecs import StorefrontHookSpec

if TYPE_CHECKING:
    from storefront.config.models import PluginsConfig

PROJECT_NAME = "storefront"
ENTRY_POINT_GROUP = "storefront.plugins"
AUDIT_PLUGIN_NAME = "audit-builtin"

logger = logging.getLogger(__name__)


class PluginManager:
    """Owns the pluggy manager and the set of registered storefront plugins."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(StorefrontHookSpec)

    def discover_and_load(self) -> list[str]:
        """Load entry-point plugins; returns the names of all registered plugins."""
        count = self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
        self._instantiate_plugin_classes()
        logger.debug("Loaded %d entry-point plugin(s)", count)
        return self.list_plugin_names()

    def load_builtins(self, config: PluginsConfig, *, store_name: str) -> list[str]:
        """Register the built-in plugins that *config* leaves enabled."""
        from storefront.plugins.builtins.audit import AuditPlugin

        registered: list[str] = []
        if config.audit.get("enabled", True):
            self.register_plugin(AuditPlugin(store_name=store_name), name=AUDIT_PLUGIN_NAME)
            registered.append(AUDIT_PLUGIN_NAME)
        return registered

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        resolved_name = name or plugin.__class__.__name__
        self._pm.register(plugin, name=resolved_name)
        logger.debug("Registered plugin: %s", resolved_name)

    @property
    def hook(self) -> pluggy.HookRelay:
        """Hook relay used by the EventBus to fire lifecycle events."""
        return self._pm.hook

    def list_plugin_names(self) -> list[str]:
        return [self._pm.get_name(p) or p.__class__.__name__ for p in self._pm.get_plugins()]

    def _instantiate_plugin_classes(self) -> None:
        """Swap plugin classes registered by an entry point for instances.

        A class registered as a plugin leaves ``self`` unbound in its hooks.
        Classes that cannot be built without arguments are dropped.
        """
        for plugin in list(self._pm.get_plugins()):
            if not inspect.isclass(plugin):
                continue

            plugin_name = self._pm.get_name(plugin) or plugin.__name__
            self._pm.unregister(plugin)
            try:
                instance = plugin()
            except Exception:
                logger.warning(
                    "Failed to instantiate entry-point plugin %s", plugin_name, exc_info=True
                )
                continue
            self._pm.register(instance, name=plugin_name)
