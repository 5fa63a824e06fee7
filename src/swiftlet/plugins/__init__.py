"""Plugins — independently loaded observers of lifecycle hooks.

A plugin answers a hook by defining a public method named after it.
``CapabilitySet`` records which plugin answers which hook (computed once
when the app freezes) and ``HookDispatcher`` broadcasts a hook to every
plugin that answers it, in ascending plugin-name order.
"""

from swiftlet.plugins.base import ACTION_AFTER, ACTION_BEFORE, Plugin
from swiftlet.plugins.capabilities import CapabilitySet, discover, plugin_capabilities
from swiftlet.plugins.hooks import HookDispatcher

__all__ = [
    "ACTION_AFTER",
    "ACTION_BEFORE",
    "CapabilitySet",
    "HookDispatcher",
    "Plugin",
    "discover",
    "plugin_capabilities",
]
