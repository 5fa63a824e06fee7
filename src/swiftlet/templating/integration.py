"""Kida environment setup.

Creates a kida Environment from swiftlet's AppConfig. The environment is
created once during ``App._freeze()`` and shared by every request's view.
"""

from kida import ChoiceLoader, Environment, FileSystemLoader, PackageLoader

from swiftlet.config import AppConfig


def create_environment(config: AppConfig) -> Environment:
    """Create a kida Environment from app configuration.

    Application templates are searched first, so an app can override the
    built-in ``error404.html``.
    """
    loader = ChoiceLoader(
        [
            FileSystemLoader(str(config.template_dir)),
            PackageLoader("swiftlet.templating", "templates"),
        ]
    )
    return Environment(
        loader=loader,
        autoescape=config.autoescape,
        auto_reload=config.debug,
        trim_blocks=config.trim_blocks,
        lstrip_blocks=config.lstrip_blocks,
    )


def template_name(view_name: str) -> str:
    """Template file for a view (``"blog/post"`` → ``"blog/post.html"``)."""
    return f"{view_name}.html"
