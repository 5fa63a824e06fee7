"""Plugin base class.

Subclasses define hook methods with the signature
``(self, params: Mapping[str, Any]) -> None``. Every helper on this base
class is ``@final``, so none of them counts as a hook.

Usage::

    @app.plugin()
    class Analytics(Plugin):
        def action_after(self, params):
            self.view.set("tracking_id", self.app.get_config("tracking_id"))
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, ClassVar, final

if TYPE_CHECKING:
    from swiftlet.context import Context
    from swiftlet.controller import Controller
    from swiftlet.view import View

ACTION_BEFORE = "action_before"
"""Fired immediately before the controller action runs."""

ACTION_AFTER = "action_after"
"""Fired immediately after the controller action returns."""


class Plugin:
    """Base class for plugins.

    A fresh instance is constructed for every hook firing it takes part
    in, then discarded; plugins keep no state between firings.

    Attributes:
        name: Registry name. Defaults to the class name. Hooks fire across
            plugins in ascending order of this name.
        hooks: Optional explicit hook list. When ``None`` the plugin's
            public, non-final methods are its hooks.
    """

    name: ClassVar[str | None] = None
    hooks: ClassVar[tuple[str, ...] | None] = None

    def __init__(self, app: Context, view: View, controller: Controller) -> None:
        self.app = app
        self.view = view
        self.controller = controller

    @final
    def fire(self, hook: str, params: Mapping[str, Any] | None = None) -> None:
        """Fire a further hook from inside this plugin's own hook."""
        self.app.register_hook(hook, params)
