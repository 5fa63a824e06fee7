"""Per-request application context.

One ``Context`` is built for every request and handed explicitly to the
view, the controller and every plugin instance. Nothing here is global:
config values, model singletons and the hook record die with the request.

Sharp edge: the singleton cache is keyed by the exact name passed to
``get_singleton()``. ``get_singleton("user")`` and
``get_singleton("User")`` build the same model class twice and cache two
independent instances.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from swiftlet.errors import ModelNotFound
from swiftlet.routing.route import Route

if TYPE_CHECKING:
    from swiftlet.controller import Controller
    from swiftlet.http.request import Request
    from swiftlet.runtime import Runtime
    from swiftlet.view import View


def model_name(name: str) -> str:
    """Canonical model name: first character upper-cased (``"post"`` → ``"Post"``)."""
    return name[:1].upper() + name[1:]


class Context:
    """State for one request.

    Attributes:
        runtime: The app's frozen registries and template environment.
        request: The inbound request, if the context was built from one.
        route: The resolved route (controller already rewritten on 404).
        hooks: Every hook fired so far, in firing order, duplicates kept.
        view: The render sink. Set by the lifecycle before any hook fires.
        controller: The selected controller. Set by the lifecycle.
    """

    __slots__ = (
        "_config",
        "_root_path",
        "_singletons",
        "controller",
        "hooks",
        "request",
        "route",
        "runtime",
        "view",
    )

    def __init__(
        self,
        runtime: Runtime,
        route: Route,
        *,
        root_path: str = "/",
        request: Request | None = None,
        settings: Mapping[str, Any] | None = None,
    ) -> None:
        self.runtime = runtime
        self.route = route
        self.request = request
        self.hooks: list[str] = []
        self.view: View | None = None
        self.controller: Controller | None = None
        self._root_path = root_path
        self._config: dict[str, Any] = dict(
            runtime.config.settings if settings is None else settings
        )
        self._singletons: dict[str, Any] = {}

    # -- Config --

    def set_config(self, key: str, value: Any) -> None:
        """Set a per-request configuration value. Last write wins."""
        self._config[key] = value

    def get_config(self, key: str, default: Any = None) -> Any:
        """Return a configuration value, or *default* when unset."""
        return self._config.get(key, default)

    # -- Route --

    @property
    def action(self) -> str:
        return self.route.action

    @property
    def args(self) -> tuple[str, ...]:
        return self.route.args

    @property
    def root_path(self) -> str:
        """Client-side path to the application root, for building links."""
        return self._root_path

    # -- Models --

    def get_model(self, name: str) -> Any:
        """Construct a new instance of the model registered as *name*.

        The name is canonicalised first, so ``"post"`` finds ``Post``.
        Raises ``ModelNotFound`` for an unknown model.
        """
        canonical = model_name(name)
        factory = self.runtime.models.get(canonical)
        if factory is None:
            raise ModelNotFound(canonical)
        return factory()

    def get_singleton(self, name: str) -> Any:
        """Return the request-wide instance for *name*, creating it on first use."""
        try:
            return self._singletons[name]
        except KeyError:
            model = self.get_model(name)
            self._singletons[name] = model
            return model

    # -- Hooks --

    def register_hook(self, hook: str, params: Mapping[str, Any] | None = None) -> None:
        """Fire *hook* on every plugin that answers it."""
        self.runtime.dispatcher.fire(self, hook, params)

    def __repr__(self) -> str:
        return f"<Context {self.route.controller}.{self.route.action} args={self.route.args!r}>"
