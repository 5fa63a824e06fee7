"""Swiftlet CLI — dev server and plugin capability listing.

Entry point registered as ``swiftlet`` in ``pyproject.toml``::

    [project.scripts]
    swiftlet = "swiftlet.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``swiftlet`` command."""
    parser = argparse.ArgumentParser(
        prog="swiftlet",
        description="Swiftlet — a small request-lifecycle bootstrap for web applications.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- swiftlet run -----------------------------------------------------
    run_parser = subparsers.add_parser("run", help="Start the development server")
    run_parser.add_argument("app", help="Import string (e.g. myapp:app)")
    run_parser.add_argument("--host", default=None, help="Bind host address")
    run_parser.add_argument("--port", type=int, default=None, help="Bind port number")

    # -- swiftlet hooks ---------------------------------------------------
    hooks_parser = subparsers.add_parser("hooks", help="List plugins and the hooks they answer")
    hooks_parser.add_argument("app", help="Import string (e.g. myapp:app)")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "run":
        from swiftlet.cli._run import run_server

        run_server(args)
    elif args.command == "hooks":
        from swiftlet.cli._hooks import list_hooks

        list_hooks(args)
