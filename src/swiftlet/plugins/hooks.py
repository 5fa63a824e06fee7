"""Hook dispatch — broadcast a named hook to every plugin that answers it.

Firing order across plugins is ascending plugin name, taken from the
``CapabilitySet``. Each participating plugin is constructed fresh for the
firing, called once, and dropped.

There is no lock: a hook method may fire further hooks (re-entrantly)
through ``Context.register_hook`` or ``Plugin.fire``. Exceptions raised by
a plugin propagate to the caller untouched.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from swiftlet.plugins.capabilities import CapabilitySet
from swiftlet.registry import Registry

if TYPE_CHECKING:
    from swiftlet.context import Context

logger = logging.getLogger("swiftlet.hooks")


class HookDispatcher:
    """Fires hooks against a frozen capability set and plugin registry.

    Shared by every request of an app; holds no per-request state.
    """

    __slots__ = ("capabilities", "plugins")

    def __init__(self, plugins: Registry, capabilities: CapabilitySet) -> None:
        self.plugins = plugins
        self.capabilities = capabilities

    def fire(
        self,
        context: Context,
        hook: str,
        params: Mapping[str, Any] | None = None,
    ) -> None:
        """Record *hook* on *context* and call it on every answering plugin.

        Each plugin gets its own shallow copy of *params*. A hook nobody
        answers is recorded and otherwise ignored.
        """
        context.hooks.append(hook)
        params = params or {}

        for name in self.capabilities.answering(hook):
            logger.debug("Firing %s on plugin %s", hook, name)
            plugin = self.plugins.create(name, context, context.view, context.controller)
            getattr(plugin, hook)(dict(params))
            del plugin
