"""Component registry — name-to-factory tables for controllers, plugins, models.

Mirrors the pending-then-compiled pattern used for routes: components are
registered during setup and compiled into an immutable ``Registry`` when
the app freezes. Dispatch constructs components by looking up a factory by
its canonical string name, never by importing a dynamically computed path.

Free-threading safety:
    - ``Registry._factories`` is a ``MappingProxyType`` built at freeze time
    - Nothing is mutated after compilation
"""

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from swiftlet.errors import ConfigurationError

Factory = Callable[..., Any]


@dataclass(frozen=True, slots=True)
class Registration:
    """A pending component registration waiting to be compiled."""

    name: str
    factory: Factory
    source: str = "<decorator>"


class Registry:
    """Compiled name → factory table. Created at freeze time, immutable at runtime.

    Iteration yields names in ascending lexical order.
    """

    __slots__ = ("_factories", "kind")

    def __init__(self, kind: str, factories: dict[str, Factory]) -> None:
        self.kind = kind
        self._factories = MappingProxyType(dict(sorted(factories.items())))

    def get(self, name: str) -> Factory | None:
        """Look up a factory by exact name. Returns ``None`` if not found."""
        return self._factories.get(name)

    def create(self, name: str, *args: Any) -> Any:
        """Construct the component registered as *name*.

        Raises ``KeyError`` if no component is registered under *name*.
        """
        factory = self._factories.get(name)
        if factory is None:
            msg = f"No {self.kind} registered as {name!r}"
            raise KeyError(msg)
        return factory(*args)

    def items(self) -> Iterator[tuple[str, Factory]]:
        return iter(self._factories.items())

    def __contains__(self, name: object) -> bool:
        return name in self._factories

    def __iter__(self) -> Iterator[str]:
        return iter(self._factories)

    def __len__(self) -> int:
        return len(self._factories)

    def __repr__(self) -> str:
        return f"<Registry {self.kind} {list(self._factories)!r}>"


def compile_registry(kind: str, pending: list[Registration]) -> Registry:
    """Compile pending registrations into a frozen ``Registry``.

    Called during ``App._freeze()``. Duplicate names surface here, at
    startup, rather than silently shadowing each other at runtime.
    """
    factories: dict[str, Factory] = {}
    sources: dict[str, str] = {}

    for registration in pending:
        if registration.name in factories:
            msg = (
                f"Duplicate {kind} name {registration.name!r} "
                f"(from {sources[registration.name]} and {registration.source})"
            )
            raise ConfigurationError(msg)
        factories[registration.name] = registration.factory
        sources[registration.name] = registration.source

    return Registry(kind, factories)
