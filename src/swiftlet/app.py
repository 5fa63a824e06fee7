"""Swiftlet application class.

Mutable during setup (controller, plugin and model registration).
Frozen at runtime when ``app.run()`` or ``__call__()`` is first invoked.
"""

import threading
from dataclasses import replace
from collections.abc import Callable
from pathlib import Path
from typing import TypeVar

from kida import Environment

from swiftlet._internal.asgi import Receive, Scope, Send
from swiftlet.actions import check_controller
from swiftlet.config import AppConfig
from swiftlet.context import Context, model_name
from swiftlet.controller import Controller, Error404, Model
from swiftlet.discovery import component_name, discover_components
from swiftlet.errors import ConfigurationError
from swiftlet.lifecycle import bootstrap_route
from swiftlet.plugins.base import Plugin
from swiftlet.plugins.capabilities import CapabilitySet, discover
from swiftlet.plugins.hooks import HookDispatcher
from swiftlet.registry import Registration, compile_registry
from swiftlet.routing.route import NOT_FOUND_CONTROLLER
from swiftlet.runtime import Runtime
from swiftlet.server.handler import handle_request
from swiftlet.templating.integration import create_environment

T = TypeVar("T", bound=type)


class App:
    """The swiftlet application.

    Mutable during setup (registration decorators, directory mounting).
    Frozen at runtime when ``app.run()`` or ``__call__()`` is first invoked:
    registries are compiled, the plugin capability set is computed once,
    and the kida environment is created.

    Usage::

        app = App(AppConfig(template_dir="views"))
        app.mount("myapp")  # myapp/controllers, myapp/plugins, myapp/models

        @app.plugin()
        class Timer(Plugin):
            def action_before(self, params): ...

    Thread safety:
        The setup phase is single-threaded (decorators at import time).
        The freeze transition uses a Lock + double-check so exactly one
        thread compiles the app, even when several ASGI workers receive
        their first request at the same time.
    """

    __slots__ = (
        "_custom_kida_env",
        "_freeze_lock",
        "_frozen",
        "_pending_controllers",
        "_pending_models",
        "_pending_plugins",
        # Compiled state (populated by _freeze)
        "_runtime",
        "config",
    )

    def __init__(
        self,
        config: AppConfig | None = None,
        *,
        kida_env: Environment | None = None,
    ) -> None:
        self.config: AppConfig = config or AppConfig()
        self._pending_controllers: list[Registration] = []
        self._pending_plugins: list[Registration] = []
        self._pending_models: list[Registration] = []
        self._frozen: bool = False
        self._freeze_lock: threading.Lock = threading.Lock()
        self._custom_kida_env: Environment | None = kida_env
        self._runtime: Runtime | None = None

    # -- Registration --

    def controller(self, name: str | None = None) -> Callable[[T], T]:
        """Register a ``Controller`` subclass via decorator.

        Args:
            name: Registry name. Defaults to the class's ``name`` attribute,
                then its ``__name__``. Nested controllers use ``/``, e.g.
                ``"Blog/Post"`` for the route segment ``blog_post``.
        """
        return self._registrar(self._pending_controllers, Controller, name)

    def plugin(self, name: str | None = None) -> Callable[[T], T]:
        """Register a ``Plugin`` subclass via decorator.

        Plugins answering the same hook fire in ascending name order.
        """
        return self._registrar(self._pending_plugins, Plugin, name)

    def model(self, name: str | None = None) -> Callable[[T], T]:
        """Register a model class via decorator.

        Any zero-argument callable class works; subclassing ``Model`` is
        optional. ``Context.get_model("post")`` looks up ``"Post"``.
        """
        return self._registrar(self._pending_models, None, name, canonical=model_name)

    def _registrar(
        self,
        pending: list[Registration],
        base: type | None,
        name: str | None,
        *,
        canonical: Callable[[str], str] = str,
    ) -> Callable[[T], T]:
        def decorator(cls: T) -> T:
            self._check_not_frozen()
            if base is not None and not (isinstance(cls, type) and issubclass(cls, base)):
                msg = f"{cls!r} is not a {base.__name__} subclass"
                raise ConfigurationError(msg)
            registered = canonical(name or component_name(cls))
            pending.append(Registration(name=registered, factory=cls))
            return cls

        return decorator

    # -- Filesystem discovery --

    def mount_controllers(self, directory: str | Path) -> None:
        """Register every ``Controller`` subclass found under *directory*."""
        self._check_not_frozen()
        self._pending_controllers.extend(discover_components(directory, Controller))

    def mount_plugins(self, directory: str | Path) -> None:
        """Register every ``Plugin`` subclass found under *directory*."""
        self._check_not_frozen()
        self._pending_plugins.extend(discover_components(directory, Plugin))

    def mount_models(self, directory: str | Path) -> None:
        """Register every ``Model`` subclass found under *directory*."""
        self._check_not_frozen()
        self._pending_models.extend(
            replace(r, name=model_name(r.name)) for r in discover_components(directory, Model)
        )

    def mount(self, root: str | Path) -> None:
        """Mount the conventional ``controllers/``, ``plugins/`` and ``models/``
        sub-directories of *root*, skipping any that do not exist.
        """
        root = Path(root)
        for sub, mount in (
            ("controllers", self.mount_controllers),
            ("plugins", self.mount_plugins),
            ("models", self.mount_models),
        ):
            if (root / sub).is_dir():
                mount(root / sub)

    # -- Compiled state --

    @property
    def runtime(self) -> Runtime:
        """The frozen runtime state. Freezes the app on first access."""
        self._ensure_frozen()
        assert self._runtime is not None
        return self._runtime

    @property
    def capabilities(self) -> CapabilitySet:
        """Plugin name → hook names, sorted by plugin name."""
        return self.runtime.capabilities

    def bootstrap(self, route: str = "", *, request_uri: str = "") -> Context:
        """Run the lifecycle for *route* without HTTP, up to rendering.

        Handy in tests and scripts::

            context = app.bootstrap("blog/show/42")
            html = context.view.render()
        """
        return bootstrap_route(self.runtime, route, request_uri=request_uri)

    # -- Server --

    def run(self, host: str | None = None, port: int | None = None) -> None:
        """Start a development server (requires the ``server`` extra)."""
        self._ensure_frozen()

        from swiftlet.server.dev import run_dev_server

        run_dev_server(
            self,
            host or self.config.host,
            port or self.config.port,
            reload=self.config.debug,
            reload_include=self.config.reload_include,
            reload_dirs=self.config.reload_dirs,
        )

    # -- ASGI interface --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point."""
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return

        await handle_request(scope, receive, send, runtime=self.runtime)

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        """Freeze the app at startup so setup errors surface before serving."""
        while True:
            message = await receive()
            msg_type = message["type"]

            if msg_type == "lifespan.startup":
                try:
                    self._ensure_frozen()
                except Exception as exc:
                    await send({"type": "lifespan.startup.failed", "message": str(exc)})
                    return
                await send({"type": "lifespan.startup.complete"})

            elif msg_type == "lifespan.shutdown":
                await send({"type": "lifespan.shutdown.complete"})
                return

    # -- Internal --

    def _ensure_frozen(self) -> None:
        """Thread-safe freeze with double-check locking."""
        if self._frozen:
            return
        with self._freeze_lock:
            if self._frozen:
                return
            self._freeze()

    def _freeze(self) -> None:
        """Compile the app into its frozen runtime state.

        MUST only be called while holding _freeze_lock.
        """
        # 1. Registries. The built-in 404 controller fills in unless the
        #    app registered its own.
        pending_controllers = list(self._pending_controllers)
        if not any(r.name == NOT_FOUND_CONTROLLER for r in pending_controllers):
            pending_controllers.append(
                Registration(NOT_FOUND_CONTROLLER, Error404, source="<builtin>")
            )
        controllers = compile_registry("controller", pending_controllers)
        plugins = compile_registry("plugin", self._pending_plugins)
        models = compile_registry("model", self._pending_models)
        for _, controller_cls in controllers.items():
            check_controller(controller_cls)

        # 2. Capability set, computed once for the app's lifetime
        capabilities = discover(plugins)

        # 3. Template environment
        templates = self._custom_kida_env or create_environment(self.config)

        self._runtime = Runtime(
            config=self.config,
            controllers=controllers,
            plugins=plugins,
            models=models,
            capabilities=capabilities,
            dispatcher=HookDispatcher(plugins, capabilities),
            templates=templates,
        )
        self._frozen = True

    def _check_not_frozen(self) -> None:
        if self._frozen:
            msg = (
                "Cannot modify the app after it has started serving requests. "
                "Register controllers, plugins and models before calling app.run()."
            )
            raise RuntimeError(msg)

    def __repr__(self) -> str:
        state = "frozen" if self._frozen else "setup"
        return f"<App {state}>"

