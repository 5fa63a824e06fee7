"""Tests for swiftlet.routing — route parsing, 404 rewrite, root path."""

import pytest

from swiftlet.routing import (
    Route,
    controller_name,
    extract_route,
    parse_route,
    resolve,
    root_path,
)

CONTROLLERS = frozenset({"Index", "Blog", "Blog/Post", "Error404"})


class TestControllerName:
    @pytest.mark.parametrize(
        ("segment", "expected"),
        [
            ("blog", "Blog"),
            ("Blog", "Blog"),
            ("blog_post", "Blog/Post"),
            ("blogPost", "BlogPost"),
            ("a_b_c", "A/B/C"),
        ],
    )
    def test_canonical_transform(self, segment: str, expected: str) -> None:
        assert controller_name(segment) == expected

    def test_rest_of_word_untouched(self) -> None:
        assert controller_name("hTML_pAGE") == "HTML/PAGE"


class TestParseRoute:
    def test_empty_route_is_index(self) -> None:
        assert parse_route("") == Route("Index", "index", ())
        assert parse_route(None) == Route("Index", "index", ())

    def test_single_segment_defaults_action(self) -> None:
        assert parse_route("blog") == Route("Blog", "index", ())

    def test_trailing_slash_defaults_action(self) -> None:
        assert parse_route("blog/") == Route("Blog", "index", ())

    def test_empty_action_keeps_args(self) -> None:
        assert parse_route("blog//42") == Route("Blog", "index", ("42",))

    def test_args_are_untransformed(self) -> None:
        route = parse_route("blog/show/42/some_slug/Mixed Case")
        assert route.action == "show"
        assert route.args == ("42", "some_slug", "Mixed Case")

    def test_view_name_is_lower_cased_controller(self) -> None:
        assert parse_route("blog_post").view_name == "blog/post"


class TestResolve:
    def test_known_controller(self) -> None:
        assert resolve("Blog/show/42", CONTROLLERS) == Route("Blog", "show", ("42",))

    def test_nested_controller(self) -> None:
        assert resolve("blog_post/edit", CONTROLLERS) == Route("Blog/Post", "edit", ())

    def test_unknown_controller_becomes_404(self) -> None:
        route = resolve("Nonexistent/foo/1/2", CONTROLLERS)
        assert route.controller == "Error404"

    def test_404_keeps_parsed_action_and_args(self) -> None:
        route = resolve("Nonexistent/foo/1/2", CONTROLLERS)
        assert route.action == "foo"
        assert route.args == ("1", "2")

    def test_empty_route(self) -> None:
        assert resolve("", CONTROLLERS) == Route("Index", "index", ())

    def test_missing_index_becomes_404(self) -> None:
        assert resolve("", {"Error404"}).controller == "Error404"

    def test_idempotent(self) -> None:
        first = resolve("blog/show/42", CONTROLLERS)
        second = resolve("blog/show/42", CONTROLLERS)
        assert first == second

    def test_route_is_frozen(self) -> None:
        route = resolve("blog", CONTROLLERS)
        with pytest.raises(AttributeError):
            route.action = "other"  # type: ignore[misc]


class TestExtractRoute:
    def test_query_value_wins(self) -> None:
        assert extract_route("/ignored", query_value="Blog/show") == "Blog/show"

    def test_path_without_leading_slash(self) -> None:
        assert extract_route("/Blog/show/42") == "Blog/show/42"

    def test_root_path_is_empty(self) -> None:
        assert extract_route("/") == ""

    def test_mount_path_is_removed(self) -> None:
        assert extract_route("/site/Blog", mount_path="/site") == "Blog"

    def test_bare_script_name_is_empty(self) -> None:
        assert extract_route("/index.py", script_name="index.py") == ""

    def test_empty_query_value_falls_back_to_path(self) -> None:
        assert extract_route("/Blog", query_value="") == "Blog"


class TestRootPath:
    def test_route_suffix_removed(self) -> None:
        assert root_path("/Blog/show/42", "Blog/show/42") == "/"

    def test_mounted_site(self) -> None:
        assert root_path("/site/Blog/show", "Blog/show") == "/site/"

    def test_script_and_query_removed(self) -> None:
        assert root_path("/site/index.py?q=Blog/show", "Blog/show", "index.py") == "/site/"

    def test_query_only(self) -> None:
        assert root_path("/?q=Blog", "Blog") == "/"

    def test_no_route(self) -> None:
        assert root_path("/site/", "") == "/site/"

    def test_empty_uri(self) -> None:
        assert root_path("", "") == "/"
