"""Controller and model base classes.

A controller is the route target selected per request. Its public,
non-final methods are its actions; everything the base class offers is
``@final`` so it can never be reached from a URL.

Usage::

    @app.controller()
    class Blog(Controller):
        title = "Blog"

        def show(self) -> None:
            (post_id,) = self.app.args
            self.view.set("post", self.app.get_model("post").find(post_id))
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, final

from swiftlet.routing.route import NOT_FOUND_CONTROLLER

if TYPE_CHECKING:
    from swiftlet.context import Context
    from swiftlet.view import View

NOT_IMPLEMENTED_STATUS = 501


class Controller:
    """Base class for route handlers.

    Attributes:
        name: Registry name. Defaults to the class name; discovery prefixes
            it with the sub-directory the module lives in.
        title: Staged as ``page_title`` when the controller is constructed.
    """

    name: ClassVar[str | None] = None
    title: ClassVar[str] = ""

    def __init__(self, app: Context, view: View) -> None:
        self.app = app
        self.view = view
        view.set("page_title", self.title)

    @final
    def not_implemented(self) -> None:
        """Fallback when the requested action does not exist.

        Keeps a status another part of the request already chose (the 404
        controller's, for instance) and otherwise answers 501.
        """
        if self.view.status == 200:
            self.view.status = NOT_IMPLEMENTED_STATUS
        self.view.set("page_title", "Not implemented")
        self.view.set("error", f"Action {self.app.action!r} is not implemented")


class Error404(Controller):
    """Built-in target for unknown controllers. Apps may register their own."""

    name = NOT_FOUND_CONTROLLER
    title = "Page not found"

    def __init__(self, app: Context, view: View) -> None:
        super().__init__(app, view)
        view.status = 404

    def index(self) -> None:
        self.view.set("error", None)


class Model:
    """Base class for models.

    Models are constructed without arguments by ``Context.get_model()``.
    """

    name: ClassVar[str | None] = None
