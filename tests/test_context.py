"""Tests for swiftlet.context — per-request config, models and singletons."""

import pytest

from swiftlet.app import App
from swiftlet.config import AppConfig
from swiftlet.context import Context, model_name
from swiftlet.controller import Controller, Model
from swiftlet.errors import ModelNotFound
from swiftlet.routing.route import Route


@pytest.fixture
def context(app: App) -> Context:
    @app.model()
    class User(Model):
        pass

    @app.model("post")
    class BlogPost:
        pass

    return Context(app.runtime, Route("Index", "index", ()))


class TestModelName:
    def test_upper_cases_first_character(self) -> None:
        assert model_name("user") == "User"

    def test_rest_untouched(self) -> None:
        assert model_name("blogPost") == "BlogPost"
        assert model_name("USER") == "USER"

    def test_empty(self) -> None:
        assert model_name("") == ""


class TestConfig:
    def test_unset_returns_default(self, context: Context) -> None:
        assert context.get_config("missing") is None
        assert context.get_config("missing", 5) == 5

    def test_last_write_wins(self, context: Context) -> None:
        context.set_config("theme", "dark")
        context.set_config("theme", "light")
        assert context.get_config("theme") == "light"

    def test_seeded_from_app_settings(self, make_env) -> None:
        app = App(AppConfig(settings={"site": "Blog"}), kida_env=make_env())
        context = Context(app.runtime, Route("Index", "index", ()))
        assert context.get_config("site") == "Blog"

    def test_writes_stay_in_one_request(self, make_env) -> None:
        app = App(AppConfig(settings={"site": "Blog"}), kida_env=make_env())
        first = Context(app.runtime, Route("Index", "index", ()))
        second = Context(app.runtime, Route("Index", "index", ()))
        first.set_config("site", "Changed")
        assert second.get_config("site") == "Blog"
        assert app.config.settings["site"] == "Blog"

    def test_explicit_settings_override_app_settings(self, make_env) -> None:
        app = App(AppConfig(settings={"site": "Blog"}), kida_env=make_env())
        context = Context(app.runtime, Route("Index", "index", ()), settings={"other": 1})
        assert context.get_config("site") is None
        assert context.get_config("other") == 1


class TestRouteAccessors:
    def test_action_and_args(self, app: App) -> None:
        context = Context(app.runtime, Route("Blog", "show", ("42",)), root_path="/app/")
        assert context.action == "show"
        assert context.args == ("42",)
        assert context.root_path == "/app/"

    def test_repr(self, app: App) -> None:
        context = Context(app.runtime, Route("Blog", "show", ("42",)))
        assert repr(context) == "<Context Blog.show args=('42',)>"


class TestGetModel:
    def test_fresh_instance_each_call(self, context: Context) -> None:
        first = context.get_model("User")
        second = context.get_model("User")
        assert type(first).__name__ == "User"
        assert first is not second

    def test_name_is_canonicalised(self, context: Context) -> None:
        assert type(context.get_model("user")).__name__ == "User"

    def test_registered_under_custom_name(self, context: Context) -> None:
        assert type(context.get_model("post")).__name__ == "BlogPost"

    def test_unknown_model_raises(self, context: Context) -> None:
        with pytest.raises(ModelNotFound) as exc_info:
            context.get_model("ghost")
        assert exc_info.value.name == "Ghost"

    def test_model_not_found_is_lookup_error(self, context: Context) -> None:
        with pytest.raises(LookupError):
            context.get_model("ghost")


class TestGetSingleton:
    def test_same_instance_within_request(self, context: Context) -> None:
        assert context.get_singleton("User") is context.get_singleton("User")

    def test_distinct_from_get_model(self, context: Context) -> None:
        assert context.get_singleton("User") is not context.get_model("User")

    def test_keyed_by_exact_name(self, context: Context) -> None:
        lower = context.get_singleton("user")
        upper = context.get_singleton("User")
        assert type(lower) is type(upper)
        assert lower is not upper

    def test_not_shared_across_requests(self, app: App, context: Context) -> None:
        other = Context(app.runtime, Route("Index", "index", ()))
        assert context.get_singleton("User") is not other.get_singleton("User")

    def test_unknown_singleton_not_cached(self, context: Context) -> None:
        with pytest.raises(ModelNotFound):
            context.get_singleton("ghost")
        with pytest.raises(ModelNotFound):
            context.get_singleton("ghost")


class TestModelsFromControllers:
    def test_controller_uses_singleton(self, app: App) -> None:
        @app.model()
        class Counter(Model):
            def __init__(self) -> None:
                self.hits = 0

        @app.controller()
        class Index(Controller):
            def index(self) -> None:
                self.app.get_singleton("counter").hits += 1
                self.app.get_singleton("counter").hits += 1

        context = app.bootstrap()
        assert context.get_singleton("counter").hits == 2
