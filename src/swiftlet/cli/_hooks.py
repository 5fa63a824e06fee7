"""``swiftlet hooks`` — print the plugin capability set."""

import argparse
import sys

from swiftlet.cli._resolve import resolve_app
from swiftlet.errors import ConfigurationError
from swiftlet.plugins.capabilities import CapabilitySet


def format_capabilities(capabilities: CapabilitySet) -> str:
    """One line per plugin, in firing order, hooks sorted."""
    if not capabilities:
        return "No plugins registered.\n"
    width = max(len(name) for name in capabilities)
    lines = [
        f"{name:<{width}}  {', '.join(sorted(hooks)) or '-'}"
        for name, hooks in capabilities.items()
    ]
    return "\n".join(lines) + "\n"


def list_hooks(args: argparse.Namespace) -> None:
    try:
        app = resolve_app(args.app)
        capabilities = app.capabilities
    except (ModuleNotFoundError, AttributeError, TypeError, ConfigurationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    sys.stdout.write(format_capabilities(capabilities))
