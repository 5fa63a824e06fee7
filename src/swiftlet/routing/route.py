"""Route frozen dataclass."""

from dataclasses import dataclass, replace

DEFAULT_CONTROLLER = "Index"
DEFAULT_ACTION = "index"
NOT_FOUND_CONTROLLER = "Error404"


@dataclass(frozen=True, slots=True)
class Route:
    """The resolved target of one request.

    ``controller`` is a canonical identifier such as ``"Blog"`` or
    ``"Blog/Post"``. ``args`` are the remaining path segments, untouched.
    """

    controller: str = DEFAULT_CONTROLLER
    action: str = DEFAULT_ACTION
    args: tuple[str, ...] = ()

    @property
    def view_name(self) -> str:
        """Template stem for this route's controller (``"Blog/Post"`` → ``"blog/post"``)."""
        return self.controller.lower()

    def with_controller(self, controller: str) -> "Route":
        """Return a copy targeting another controller, keeping action and args."""
        return replace(self, controller=controller)
