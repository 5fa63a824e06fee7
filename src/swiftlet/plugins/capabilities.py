"""Capability discovery — which plugin answers which hook.

Built once at freeze time from the compiled plugin registry and never
mutated afterwards. Every plugin appears in the set, even one that
answers no hook, so lookups are plain membership tests.
"""

import logging
from collections.abc import Iterator, Mapping
from types import MappingProxyType

from swiftlet._internal.introspect import (
    is_coroutine_operation,
    is_operation,
    public_operations,
)
from swiftlet.errors import ConfigurationError
from swiftlet.registry import Registry

logger = logging.getLogger("swiftlet.discovery")


def plugin_capabilities(plugin_cls: type) -> frozenset[str]:
    """Return the hook names *plugin_cls* answers.

    An explicit ``hooks`` declaration is validated against the class;
    otherwise the public, non-final methods are the capabilities.

    Raises ``ConfigurationError`` for a declared hook that is not a
    public, non-final method, and for any hook declared ``async def``.
    """
    declared = getattr(plugin_cls, "hooks", None)
    if declared is None:
        return _synchronous(plugin_cls, public_operations(plugin_cls))

    if isinstance(declared, str):
        declared = (declared,)

    for hook in declared:
        if not is_operation(plugin_cls, hook):
            msg = (
                f"Plugin {plugin_cls.__name__} declares hook {hook!r} "
                f"but has no public, non-final method of that name"
            )
            raise ConfigurationError(msg)
    return _synchronous(plugin_cls, frozenset(declared))


def _synchronous(plugin_cls: type, hooks: frozenset[str]) -> frozenset[str]:
    for hook in sorted(hooks):
        if is_coroutine_operation(plugin_cls, hook):
            msg = (
                f"Plugin {plugin_cls.__name__} hook {hook!r} is async; "
                f"hooks must be plain (synchronous) methods"
            )
            raise ConfigurationError(msg)
    return hooks


class CapabilitySet(Mapping[str, frozenset[str]]):
    """Immutable mapping of plugin name → hook names.

    Iterates in ascending plugin-name order regardless of the order
    plugins were discovered in.
    """

    __slots__ = ("_capabilities",)

    def __init__(self, capabilities: Mapping[str, frozenset[str]]) -> None:
        self._capabilities = MappingProxyType(
            {name: frozenset(capabilities[name]) for name in sorted(capabilities)}
        )

    def __getitem__(self, name: str) -> frozenset[str]:
        return self._capabilities[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._capabilities)

    def __len__(self) -> int:
        return len(self._capabilities)

    def __repr__(self) -> str:
        items = ", ".join(f"{name!r}: {sorted(hooks)!r}" for name, hooks in self.items())
        return f"CapabilitySet({{{items}}})"

    def answering(self, hook: str) -> list[str]:
        """Plugin names that answer *hook*, in firing order."""
        return [name for name, hooks in self._capabilities.items() if hook in hooks]


def discover(plugins: Registry) -> CapabilitySet:
    """Introspect every registered plugin class into a ``CapabilitySet``."""
    capabilities: dict[str, frozenset[str]] = {}
    for name, plugin_cls in plugins.items():
        hooks = plugin_capabilities(plugin_cls)
        logger.debug("Plugin %s answers %s", name, sorted(hooks) or "no hooks")
        capabilities[name] = hooks
    return CapabilitySet(capabilities)
