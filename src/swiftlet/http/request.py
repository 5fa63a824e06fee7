"""Immutable HTTP request.

Only the metadata the lifecycle reads: method, path, query string and the
mount point. Controllers reach it through ``Context.request``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from swiftlet.http.query import QueryParams


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request.

    ``path`` is the full request path; ``mount_path`` is the ASGI
    ``root_path`` the application is mounted under (``""`` at the top).
    """

    method: str
    path: str
    query: QueryParams
    mount_path: str = ""

    @property
    def request_uri(self) -> str:
        """Path plus query string, as the client sent it."""
        qs = self.query.raw
        if qs:
            return f"{self.path}?{qs}"
        return self.path

    @classmethod
    def from_asgi(cls, scope: dict[str, Any]) -> Request:
        """Create a Request from an ASGI HTTP scope."""
        return cls(
            method=scope["method"],
            path=scope["path"],
            query=QueryParams(scope.get("query_string", b"")),
            mount_path=scope.get("root_path", ""),
        )
