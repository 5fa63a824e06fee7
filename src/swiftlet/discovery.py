"""Filesystem component discovery.

Walks a directory tree, loads every ``.py`` module, and collects the
classes defined in it that subclass a given base (``Controller``,
``Plugin`` or ``Model``). Files and directories starting with ``_`` or
``.`` are skipped.

Names come from the class (``name`` attribute, else ``__name__``),
prefixed by the sub-directories the module sits in, each with an
upper-cased first character::

    controllers/index.py        class Index  -> "Index"
    controllers/blog/post.py    class Post   -> "Blog/Post"

which matches what the path resolver produces for ``/blog_post``.
"""

from __future__ import annotations

import importlib.util
import inspect
import logging
from pathlib import Path

from swiftlet.errors import ConfigurationError
from swiftlet.registry import Registration

logger = logging.getLogger("swiftlet.discovery")


def component_name(cls: type, prefix: tuple[str, ...] = ()) -> str:
    """Registry name for *cls*, optionally under a directory prefix.

    A ``name`` attribute that is not a non-empty string (a property on a
    plain model class, say) is ignored in favour of ``__name__``.
    """
    base = getattr(cls, "name", None)
    if not isinstance(base, str) or not base:
        base = cls.__name__
    parts = [part[:1].upper() + part[1:] for part in prefix]
    return "/".join([*parts, base])


def discover_components(directory: str | Path, base: type) -> list[Registration]:
    """Walk *directory* and return a registration for every *base* subclass.

    Args:
        directory: Root directory to walk.
        base: Only strict subclasses of this class are collected.

    Returns:
        Registrations in walk order (files sorted, then sub-directories).

    Raises:
        ConfigurationError: If *directory* does not exist.
    """
    root = Path(directory).resolve()
    if not root.is_dir():
        msg = f"{base.__name__} directory not found: {root}"
        raise ConfigurationError(msg)

    registrations: list[Registration] = []
    _walk_directory(root, base, prefix=(), registrations=registrations)
    return registrations


def _walk_directory(
    directory: Path,
    base: type,
    *,
    prefix: tuple[str, ...],
    registrations: list[Registration],
) -> None:
    for item in sorted(directory.iterdir()):
        if not item.is_file() or item.suffix != ".py":
            continue
        if item.name.startswith("_"):
            continue
        registrations.extend(_load_module_components(item, base, prefix))

    for item in sorted(directory.iterdir()):
        if not item.is_dir():
            continue
        if item.name.startswith("_") or item.name.startswith("."):
            continue
        _walk_directory(
            item,
            base,
            prefix=(*prefix, item.name),
            registrations=registrations,
        )


def _load_module_components(
    file: Path,
    base: type,
    prefix: tuple[str, ...],
) -> list[Registration]:
    """Load one module and collect the *base* subclasses defined in it.

    Classes merely imported into the module are ignored, so a module can
    import a sibling's base class without registering it twice.
    """
    module_name = f"_swiftlet_{base.__name__.lower()}_{'_'.join(prefix)}_{file.stem}"
    spec = importlib.util.spec_from_file_location(module_name, file)
    if spec is None or spec.loader is None:
        return []
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)

    found: list[Registration] = []
    for _, obj in inspect.getmembers(module, inspect.isclass):
        if obj is base or not issubclass(obj, base):
            continue
        if obj.__module__ != module_name:
            continue
        name = component_name(obj, prefix)
        logger.debug("Discovered %s %s in %s", base.__name__, name, file)
        found.append(Registration(name=name, factory=obj, source=str(file)))
    return found
