"""Shared fixtures for swiftlet tests.

Templates live in a kida ``DictLoader`` so tests never touch the
filesystem unless they mean to.
"""

from collections.abc import Callable

import pytest
from kida import DictLoader, Environment

from swiftlet.app import App
from swiftlet.config import AppConfig

TEMPLATES = {
    "index.html": "<h1>{{ page_title }}</h1><p>{{ greeting }}</p>",
    "blog.html": "<h1>{{ page_title }}</h1><article>{{ post }}</article>",
    "error404.html": "<h1>{{ page_title }}</h1><p>{{ error }}</p>",
}


@pytest.fixture
def make_env() -> Callable[..., Environment]:
    """Factory for kida Environments over the shared templates plus extras."""

    def factory(**extra: str) -> Environment:
        return Environment(loader=DictLoader({**TEMPLATES, **extra}))

    return factory


@pytest.fixture
def app(make_env: Callable[..., Environment]) -> App:
    """A fresh App with in-memory templates and no components."""
    return App(AppConfig(), kida_env=make_env())
