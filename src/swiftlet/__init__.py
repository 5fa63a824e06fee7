"""Swiftlet — a small request-lifecycle bootstrap for web applications.

The first path segment picks a controller, the second an action, the rest
are arguments. Plugins observe the ``action_before`` and ``action_after``
hooks (and any custom hook) by defining like-named methods.

Basic usage::

    from swiftlet import App, Controller, Plugin

    app = App()

    @app.controller()
    class Index(Controller):
        def index(self):
            self.view.set("greeting", "Hello, World!")

    @app.plugin()
    class Banner(Plugin):
        def action_after(self, params):
            self.view.set("banner", "Welcome back")

    app.run()
"""

__version__ = "0.1.0.dev0"
__all__ = [
    "App",
    "AppConfig",
    "CapabilitySet",
    "ConfigurationError",
    "Context",
    "Controller",
    "Model",
    "ModelNotFound",
    "Plugin",
    "Request",
    "Response",
    "Route",
    "SwiftletError",
    "View",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import swiftlet`` fast while providing a clean top-level API.
    """
    if name == "App":
        from swiftlet.app import App

        return App

    if name == "AppConfig":
        from swiftlet.config import AppConfig

        return AppConfig

    if name == "Context":
        from swiftlet.context import Context

        return Context

    if name in ("Controller", "Model"):
        from swiftlet import controller as _controller

        return getattr(_controller, name)

    if name in ("Plugin", "CapabilitySet"):
        from swiftlet import plugins as _plugins

        return getattr(_plugins, name)

    if name == "View":
        from swiftlet.view import View

        return View

    if name == "Route":
        from swiftlet.routing.route import Route

        return Route

    if name == "Request":
        from swiftlet.http.request import Request

        return Request

    if name == "Response":
        from swiftlet.http.response import Response

        return Response

    if name in ("SwiftletError", "ConfigurationError", "ModelNotFound"):
        from swiftlet import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
