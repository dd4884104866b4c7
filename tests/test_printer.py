"""Tests for wren.routing.printer — pattern strings, URL generation, route tables."""

import sys

import pytest

from wren.config import RouterConfig
from wren.errors import ArgumentError, ConfigurationError
from wren.routing.matchers import matcher
from wren.routing.pattern import (
    TrailingSlash,
    bool_,
    capture,
    int32,
    int64,
    int_,
    method,
    nil,
    s,
    str_,
    wildcard,
)
from wren.routing.printer import format_routes, generate_path, string_of_pattern
from wren.routing.route import route
from wren.routing.router import Router

USER = s("user") / str_ / int64 / nil


class TestStringOfPattern:
    def test_root(self) -> None:
        assert string_of_pattern(nil) == "/"
        assert string_of_pattern(nil / nil) == "/"

    def test_literals_and_captures(self) -> None:
        assert string_of_pattern(s("sum") / int_ / int_ / nil) == "/sum/:int/:int"

    def test_placeholders_use_matcher_names(self) -> None:
        assert string_of_pattern(USER) == "/user/:string/:int64"
        assert string_of_pattern(s("f") / bool_ / int32) == "/f/:bool/:int32"

    def test_wildcard(self) -> None:
        assert string_of_pattern(s("docs") / wildcard) == "/docs/:wildcard"

    def test_custom_matcher(self) -> None:
        color = matcher("color", lambda v: v)
        assert string_of_pattern(s("paint") / capture(color)) == "/paint/:color"

    def test_double_slash_closer_prints_like_single(self) -> None:
        assert string_of_pattern(s("users") // nil) == "/users"
        assert string_of_pattern(s("users") / int_ // nil) == "/users/:int"

    def test_allow_mode_prints_like_strict(self) -> None:
        p = (s("users") / nil).with_trailing_slash(TrailingSlash.ALLOW)
        assert string_of_pattern(p) == "/users"

    def test_custom_placeholder(self) -> None:
        config = RouterConfig(placeholder="{{name}}")
        assert string_of_pattern(USER, config) == "/user/{string}/{int64}"

    def test_method_not_printed(self) -> None:
        assert string_of_pattern(method("GET", USER)) == "/user/:string/:int64"


class TestGeneratePath:
    def test_user(self) -> None:
        assert generate_path(USER, "foobar", 56121111) == "/user/foobar/56121111"

    def test_root(self) -> None:
        assert generate_path(nil) == "/"

    def test_literals_only(self) -> None:
        assert generate_path(s("a") / s("b") / nil) == "/a/b"

    def test_bool(self) -> None:
        assert generate_path(s("flag") / bool_ / nil, False) == "/flag/false"

    def test_negative_int(self) -> None:
        assert generate_path(s("n") / int_ / nil, -7) == "/n/-7"

    def test_wildcard(self) -> None:
        assert generate_path(s("files") / wildcard, "a/b.txt") == "/files/a/b.txt"

    def test_empty_wildcard_is_bare_prefix(self) -> None:
        assert generate_path(s("files") / wildcard, "") == "/files"

    def test_double_slash_closer_generates_like_single(self) -> None:
        assert generate_path(s("users") / int_ // nil, 3) == "/users/3"

    def test_custom_matcher_print(self) -> None:
        hexnum = matcher("hex", lambda v: int(v, 16), lambda v: format(v, "x"), int)
        assert generate_path(s("c") / capture(hexnum) / nil, 255) == "/c/ff"


class TestGeneratePathErrors:
    def test_too_few_arguments(self) -> None:
        with pytest.raises(ArgumentError, match="takes 2 arguments but 1 were given"):
            generate_path(USER, "foobar")

    def test_too_many_arguments(self) -> None:
        with pytest.raises(ArgumentError):
            generate_path(USER, "foobar", 1, 2)

    def test_wrong_type(self) -> None:
        with pytest.raises(ArgumentError, match="Argument 2"):
            generate_path(USER, "foobar", "56121111")

    def test_positional_order(self) -> None:
        with pytest.raises(ArgumentError, match="Argument 1"):
            generate_path(USER, 1, "foobar")

    def test_bool_for_int(self) -> None:
        with pytest.raises(ArgumentError):
            generate_path(s("n") / int_ / nil, True)

    def test_out_of_range(self) -> None:
        with pytest.raises(ArgumentError):
            generate_path(s("n") / int64 / nil, 2**63)

    @pytest.mark.skipif(sys.get_int_max_str_digits() == 0, reason="no int digit limit")
    def test_int_too_long_to_print(self) -> None:
        too_long = 10 ** sys.get_int_max_str_digits()
        with pytest.raises(ArgumentError, match="Argument 1"):
            generate_path(s("n") / int_ / nil, too_long)

    def test_string_with_slash(self) -> None:
        with pytest.raises(ArgumentError):
            generate_path(USER, "a/b", 1)

    def test_empty_string(self) -> None:
        with pytest.raises(ArgumentError):
            generate_path(USER, "", 1)

    def test_is_configuration_error(self) -> None:
        with pytest.raises(ConfigurationError):
            generate_path(USER)


class TestFormatRoutes:
    def test_empty(self) -> None:
        assert format_routes(Router()) == "No routes registered."

    def test_table(self) -> None:
        def show_user(name: str, user_id: int) -> str:
            return name

        def index() -> str:
            return "home"

        router = Router([
            nil @ index,
            route(method("GET", USER), show_user, name="user"),
        ])
        lines = format_routes(router).splitlines()
        assert lines[0].split() == ["METHOD", "PATH", "HANDLER"]
        assert set(lines[1]) == {"-"}
        assert lines[2].split() == ["*", "/", "TestFormatRoutes.test_table.<locals>.index"]
        assert lines[3].split()[:2] == ["GET", "/user/:string/:int64"]
        assert lines[3].endswith("(user)")

    def test_uses_router_config(self) -> None:
        router = Router([USER @ (lambda n, i: n)], config=RouterConfig(placeholder="<{name}>"))
        assert "/user/<string>/<int64>" in format_routes(router)
