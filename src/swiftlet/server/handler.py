"""ASGI handler — translates ASGI scope/messages to swiftlet types.

The only component that touches raw ASGI HTTP messages. Converts the scope
to a typed Request, runs the synchronous lifecycle, renders the view and
sends the Response back through ASGI send().
"""

from swiftlet._internal.asgi import Receive, Scope, Send
from swiftlet.http.request import Request
from swiftlet.http.response import Response
from swiftlet.lifecycle import bootstrap, serve
from swiftlet.runtime import Runtime
from swiftlet.server.errors import handle_internal_error
from swiftlet.server.sender import send_response


def build_response(runtime: Runtime, request: Request) -> Response:
    """Run the lifecycle and render. Exceptions propagate."""
    context = bootstrap(runtime, request)
    body = serve(context)
    view = context.view
    assert view is not None
    return Response(
        body=body,
        status=view.status,
        content_type=view.content_type,
        headers=tuple(view.headers),
    )


async def handle_request(scope: Scope, receive: Receive, send: Send, *, runtime: Runtime) -> None:
    """Process a single HTTP request through the full pipeline."""
    if scope["type"] != "http":
        return

    request = Request.from_asgi(dict(scope))

    try:
        response = build_response(runtime, request)
    except Exception as exc:
        response = handle_internal_error(exc, request, debug=runtime.config.debug)

    await send_response(response, send)
