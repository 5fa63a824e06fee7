"""Compiled application state shared by every request.

Produced by ``App._freeze()``. Every field is immutable (or, for the kida
environment, treated as read-only) so requests can share one instance
without locks.
"""

from dataclasses import dataclass

from kida import Environment

from swiftlet.config import AppConfig
from swiftlet.plugins.capabilities import CapabilitySet
from swiftlet.plugins.hooks import HookDispatcher
from swiftlet.registry import Registry


@dataclass(frozen=True, slots=True)
class Runtime:
    """Frozen registries, capability set and template environment."""

    config: AppConfig
    controllers: Registry
    plugins: Registry
    models: Registry
    capabilities: CapabilitySet
    dispatcher: HookDispatcher
    templates: Environment
