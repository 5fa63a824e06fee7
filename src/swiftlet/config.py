"""Application configuration.

AppConfig is a frozen dataclass, immutable after creation.
Free-form per-request values live in ``settings`` and are copied into every
request context, where ``set_config()`` / ``get_config()`` operate on them.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = AppConfig(debug=True, port=3000, settings={"site": "Blog"})
    """

    # Server
    host: str = "127.0.0.1"
    port: int = 8000
    debug: bool = False

    # Reload (development mode, requires debug=True)
    reload_include: tuple[str, ...] = ()  # Extra extensions to watch (e.g. ".html")
    reload_dirs: tuple[str, ...] = ()

    # Routing
    route_param: str = "q"  # Query parameter carrying the route string
    script_name: str = "index.py"  # Stripped from the request URI for root_path

    # Templates
    template_dir: str | Path = "templates"
    autoescape: bool = True
    trim_blocks: bool = True
    lstrip_blocks: bool = True

    # Seed values for Context.get_config(), copied per request
    settings: Mapping[str, Any] = field(default_factory=dict)
