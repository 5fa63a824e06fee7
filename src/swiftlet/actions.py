"""Action dispatch — resolve an action name on a controller, then call it.

Resolution happens once and yields either an ``Action`` (a routable
method) or ``NotImplementedAction`` (the controller's fallback). Callers
never probe attributes themselves.
"""

from dataclasses import dataclass
from typing import TypeAlias

from swiftlet._internal.introspect import is_coroutine_operation, is_operation, public_operations
from swiftlet.controller import Controller
from swiftlet.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class Action:
    """A public, non-final controller method named by the route."""

    name: str

    def __call__(self, controller: Controller) -> None:
        getattr(controller, self.name)()


@dataclass(frozen=True, slots=True)
class NotImplementedAction:
    """The route named something that is not a routable action."""

    requested: str

    def __call__(self, controller: Controller) -> None:
        controller.not_implemented()


ResolvedAction: TypeAlias = Action | NotImplementedAction


def resolve_action(controller: Controller, name: str) -> ResolvedAction:
    """Decide what calling *name* on *controller* means.

    Missing names, private names, ``@final`` helpers and plain attributes
    all resolve to ``NotImplementedAction``. An ``async def`` action raises
    ``ConfigurationError``; actions run synchronously.
    """
    if is_coroutine_operation(type(controller), name):
        raise ConfigurationError(_async_message(type(controller), name))
    if is_operation(type(controller), name):
        return Action(name)
    return NotImplementedAction(name)


def invoke_action(controller: Controller, name: str) -> ResolvedAction:
    """Resolve and call *name* on *controller* with no arguments.

    The action's return value is discarded; output goes through the view.
    Returns what was resolved so callers can log it.
    """
    action = resolve_action(controller, name)
    action(controller)
    return action


def check_controller(controller_cls: type) -> None:
    """Reject a controller class with ``async def`` actions at freeze time."""
    for name in sorted(public_operations(controller_cls)):
        if is_coroutine_operation(controller_cls, name):
            raise ConfigurationError(_async_message(controller_cls, name))


def _async_message(controller_cls: type, name: str) -> str:
    return (
        f"Controller {controller_cls.__name__} action {name!r} is async; "
        f"actions must be plain (synchronous) methods"
    )
