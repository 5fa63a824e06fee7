"""Operation introspection shared by the action and hook dispatchers.

An *operation* is a public, non-final function defined on a class
(inherited functions included). Base classes mark their own helpers with
``typing.final`` so they never become routable actions or plugin hooks.

Lookups use ``inspect.getattr_static`` so descriptors are never triggered
and instance attributes never count as operations.
"""

import inspect
from typing import Any


def _unwrap(attr: Any) -> Any:
    if isinstance(attr, (staticmethod, classmethod)):
        return attr.__func__
    return attr


def _is_final(attr: Any) -> bool:
    return bool(getattr(attr, "__final__", False)) or bool(
        getattr(_unwrap(attr), "__final__", False)
    )


def is_operation(cls: type, name: str) -> bool:
    """True if *name* is a public, non-final function on *cls*."""
    if not name or name.startswith("_"):
        return False
    try:
        attr = inspect.getattr_static(cls, name)
    except AttributeError:
        return False
    if not inspect.isfunction(_unwrap(attr)):
        return False
    return not _is_final(attr)


def public_operations(cls: type) -> frozenset[str]:
    """Return the names of every operation on *cls*."""
    return frozenset(name for name in dir(cls) if is_operation(cls, name))


def is_coroutine_operation(cls: type, name: str) -> bool:
    """True if *name* is an operation on *cls* declared ``async def``."""
    if not is_operation(cls, name):
        return False
    return inspect.iscoroutinefunction(_unwrap(inspect.getattr_static(cls, name)))
