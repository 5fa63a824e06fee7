"""The request lifecycle.

``bootstrap()`` runs everything up to rendering, synchronously::

    resolve route -> build view + controller -> action_before
        -> controller action -> action_after

``serve()`` then calls the view's ``render()`` once. The capability set is
not rebuilt per request; it was computed when the app froze.
"""

import logging

from swiftlet.actions import invoke_action
from swiftlet.context import Context
from swiftlet.http.request import Request
from swiftlet.plugins.base import ACTION_AFTER, ACTION_BEFORE
from swiftlet.routing.resolver import extract_route, resolve, root_path
from swiftlet.runtime import Runtime
from swiftlet.view import View

logger = logging.getLogger("swiftlet.lifecycle")


def bootstrap_route(runtime: Runtime, route_string: str, *, request_uri: str = "") -> Context:
    """Run the lifecycle for a bare route string (no HTTP request)."""
    route = resolve(route_string, runtime.controllers)
    uri = request_uri or "/" + route_string
    context = Context(
        runtime,
        route,
        root_path=root_path(uri, route_string, runtime.config.script_name),
    )
    return _run(runtime, context)


def bootstrap(runtime: Runtime, request: Request) -> Context:
    """Run the lifecycle for an HTTP request, up to (not including) rendering."""
    config = runtime.config
    route_string = extract_route(
        request.path,
        query_value=request.query.get(config.route_param),
        mount_path=request.mount_path,
        script_name=config.script_name,
    )
    route = resolve(route_string, runtime.controllers)
    context = Context(
        runtime,
        route,
        request=request,
        root_path=root_path(request.request_uri, route_string, config.script_name),
    )
    return _run(runtime, context)


def _run(runtime: Runtime, context: Context) -> Context:
    route = context.route
    view = View(context, route.view_name, runtime.templates)
    context.view = view
    context.controller = runtime.controllers.create(route.controller, context, view)

    context.register_hook(ACTION_BEFORE)
    action = invoke_action(context.controller, route.action)
    logger.debug("%s -> %s", route, action)
    context.register_hook(ACTION_AFTER)

    return context


def serve(context: Context) -> str:
    """Render the request's view. Call once, after ``bootstrap()``."""
    assert context.view is not None
    return context.view.render()
