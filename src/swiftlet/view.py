"""The view — the render sink at the end of every request.

Controllers and plugins stage data with ``view.set()``; after the
``action_after`` hook the lifecycle calls ``render()`` exactly once.
The template is ``<view name>.html``, looked up in the app's kida
environment. Besides the staged variables, every template receives
``root_path``, ``action`` and ``args``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from swiftlet.templating.integration import template_name

if TYPE_CHECKING:
    from kida import Environment

    from swiftlet.context import Context


class View:
    """Variable bag plus response metadata, rendered through kida.

    Attributes:
        name: Template stem; defaults to the lower-cased controller name.
            A controller may reassign it to render another template.
        status: HTTP status for the response.
        content_type: Content-Type for the response.
        headers: Extra response headers.
    """

    __slots__ = ("_env", "_variables", "app", "content_type", "headers", "name", "status")

    def __init__(self, app: Context, name: str, env: Environment) -> None:
        self.app = app
        self.name = name
        self.status = 200
        self.content_type = "text/html; charset=utf-8"
        self.headers: list[tuple[str, str]] = []
        self._env = env
        self._variables: dict[str, Any] = {}

    def set(self, name: str, value: Any) -> None:
        """Stage a template variable. Last write wins."""
        self._variables[name] = value

    def get(self, name: str, default: Any = None) -> Any:
        """Return a staged variable, or *default*."""
        return self._variables.get(name, default)

    def __contains__(self, name: str) -> bool:
        return name in self._variables

    @property
    def variables(self) -> dict[str, Any]:
        """A copy of the staged variables."""
        return dict(self._variables)

    @property
    def template(self) -> str:
        return template_name(self.name)

    def render(self) -> str:
        """Render the staged variables through ``<name>.html``."""
        context = {
            "root_path": self.app.root_path,
            "action": self.app.action,
            "args": self.app.args,
            **self._variables,
        }
        return self._env.get_template(self.template).render(context)
