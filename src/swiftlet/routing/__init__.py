"""Routing — resolves a route string into a (controller, action, args) triple.

There is no route table: the first path segment names the controller,
the second names the action, and the rest are positional arguments.
"""

from swiftlet.routing.resolver import (
    controller_name,
    extract_route,
    parse_route,
    resolve,
    root_path,
)
from swiftlet.routing.route import DEFAULT_ACTION, DEFAULT_CONTROLLER, NOT_FOUND_CONTROLLER, Route

__all__ = [
    "DEFAULT_ACTION",
    "DEFAULT_CONTROLLER",
    "NOT_FOUND_CONTROLLER",
    "Route",
    "controller_name",
    "extract_route",
    "parse_route",
    "resolve",
    "root_path",
]
