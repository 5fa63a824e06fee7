"""Top-level error boundary.

Anything that escapes the lifecycle (a failing plugin, a failing action, a
template error) ends up here and becomes a 500 response. Nothing below
this point catches exceptions.
"""

import html
import logging
import traceback

from swiftlet.http.request import Request
from swiftlet.http.response import Response

logger = logging.getLogger("swiftlet.server")


def render_debug_page(exc: BaseException, request: Request) -> str:
    """Minimal traceback page for ``debug=True``."""
    trace = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    return (
        "<!DOCTYPE html>\n"
        f"<title>500 {html.escape(type(exc).__name__)}</title>\n"
        f"<h1>{html.escape(type(exc).__name__)}: {html.escape(str(exc))}</h1>\n"
        f"<p>{html.escape(request.method)} {html.escape(request.request_uri)}</p>\n"
        f"<pre>{html.escape(trace)}</pre>\n"
    )


def handle_internal_error(exc: Exception, request: Request, *, debug: bool) -> Response:
    """Log an unexpected exception and turn it into a 500 response."""
    logger.exception("500 %s %s", request.method, request.request_uri)

    if debug:
        return Response(body=render_debug_page(exc, request), status=500)
    return Response(
        body="Internal Server Error",
        status=500,
        content_type="text/plain; charset=utf-8",
    )
