"""Extension layer — lifecycle hooks for storefront operations via pluggy.

Plugins observe outcomes (page views, orders, sign-ups, logins) and never
change them.
INVARIANT: Plugin failures are warnings, never errors.
"""

from storefront.plugins.event_bus import EventBus
from storefront.plugins.manager import PluginManager

__all__ = ["EventBus", "PluginManager"]
