"""Swiftlet exception hierarchy.

Shared across the registries, resolver, dispatchers and server so every
module raises and catches the same types.
"""


class SwiftletError(Exception):
    """Base for all swiftlet-specific errors."""


class ConfigurationError(SwiftletError):
    """Raised when app setup is invalid.

    Typically raised during ``App._freeze()`` at startup: duplicate
    component names, bad ``hooks`` declarations, missing directories.
    """


class ModelNotFound(SwiftletError, LookupError):  # noqa: N818
    """No model is registered under the requested name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"No model registered as {name!r}")
