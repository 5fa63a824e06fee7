"""Path resolution — route string to ``Route``, request URI to root path.

The route string is ``"<controller>/<action>/<arg>/<arg>..."``. It arrives
either as the ``?q=`` query parameter or as the request path itself (the
same thing a front-controller rewrite rule produces).

Resolution never fails: an unknown controller degrades to ``Error404``.
"""

import logging
import re
from collections.abc import Container

from swiftlet.routing.route import DEFAULT_ACTION, NOT_FOUND_CONTROLLER, Route

logger = logging.getLogger("swiftlet.routing")

DEFAULT_ROOT = "/"


def controller_name(segment: str) -> str:
    """Canonicalise a URL segment into a controller identifier.

    Underscores separate words; each word gets an upper-cased first
    character (the rest is left alone) and words are joined with ``/``::

        "blog"       -> "Blog"
        "blog_post"  -> "Blog/Post"
        "BlogPost"   -> "BlogPost"
    """
    words = segment.replace("_", " ").split(" ")
    return "/".join(word[:1].upper() + word[1:] for word in words)


def parse_route(route: str | None) -> Route:
    """Split a route string into a ``Route`` without checking the controller exists."""
    if not route:
        return Route()

    segments = route.split("/")
    controller = controller_name(segments.pop(0))
    action = segments.pop(0) if segments else ""

    return Route(
        controller=controller,
        action=action or DEFAULT_ACTION,
        args=tuple(segments),
    )


def resolve(route: str | None, controllers: Container[str]) -> Route:
    """Resolve a route string against the registered controllers.

    An unknown controller is replaced by ``Error404``. The parsed action
    and arguments are kept as they are, so the 404 controller sees the
    same action name the client asked for.
    """
    parsed = parse_route(route)
    if parsed.controller in controllers:
        return parsed

    logger.debug(
        "No controller %r for route %r, using %s",
        parsed.controller,
        route,
        NOT_FOUND_CONTROLLER,
    )
    return parsed.with_controller(NOT_FOUND_CONTROLLER)


def extract_route(
    path: str,
    *,
    query_value: str | None = None,
    mount_path: str = "",
    script_name: str = "",
) -> str:
    """Find the route string for a request.

    A non-empty ``query_value`` wins. Otherwise the route is the request
    path below ``mount_path`` with its leading slash removed; a bare
    script name counts as the empty route.
    """
    if query_value:
        return query_value

    if mount_path and path.startswith(mount_path):
        path = path[len(mount_path) :]
    relative = path.lstrip("/")
    if script_name and relative == script_name:
        return ""
    return relative


def root_path(request_uri: str, route: str | None, script_name: str = "") -> str:
    """Compute the client-side path to the application root.

    Strips a trailing script name and query string from the request URI,
    then the route string itself when the URI ends with it::

        root_path("/Blog/show/42", "Blog/show/42")        -> "/"
        root_path("/site/index.py?q=Blog", "Blog", "index.py") -> "/site/"
    """
    script = f"(?:{re.escape(script_name)})?" if script_name else ""
    result = re.sub(rf"{script}(?:\?.*)?$", "", request_uri, count=1)

    if route and result.endswith(route):
        result = result[: -len(route)]
    return result or DEFAULT_ROOT
