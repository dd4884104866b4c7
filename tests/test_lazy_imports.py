"""Tests for wren.__init__ — the top-level API resolves lazily to its defining modules."""

from importlib import import_module

import pytest

import wren
from wren.errors import NoRouteError


@pytest.mark.parametrize(("name", "module_name"), sorted(wren._LAZY_IMPORTS.items()))
def test_name_is_the_defining_module_object(name: str, module_name: str) -> None:
    assert getattr(wren, name) is getattr(import_module(module_name), name)


def test_registry_and_all_agree() -> None:
    assert sorted(wren._LAZY_IMPORTS) == sorted(wren.__all__)


def test_registry_points_into_wren() -> None:
    assert all(module.startswith("wren.") for module in wren._LAZY_IMPORTS.values())


def test_unknown_name_raises_attribute_error() -> None:
    with pytest.raises(AttributeError, match="module 'wren' has no attribute 'NotFound'"):
        wren.__getattr__("NotFound")


def test_quickstart() -> None:
    """The example in the package docstring works as written."""
    from wren import FullMatch, MatchWithTrailingSlash, Router, generate_path, int_, nil, s

    add = s("sum") / int_ / int_ / nil
    router = Router([add @ (lambda a, b: a + b)])

    assert router.match("/sum/45/12") == FullMatch(57)
    assert router.match("/sum/45/12/") == MatchWithTrailingSlash(57)
    assert str(add) == "/sum/:int/:int"
    assert generate_path(add, 1, 2) == "/sum/1/2"


def test_method_routes_from_top_level() -> None:
    from wren import FullMatch, NoMatch, Router, int64, method, nil, s, str_

    user = s("user") / str_ / int64 / nil
    router = Router([
        method("GET", user) @ (lambda name, uid: f"show {name}#{uid}"),
        method("DELETE", user) @ (lambda name, uid: f"delete {name}#{uid}"),
    ])

    assert router.match("/user/ann/7", "DELETE") == FullMatch("delete ann#7")
    assert router.match("/user/ann/7", "PUT") == NoMatch()
    with pytest.raises(NoRouteError) as exc_info:
        router.match_or_raise("/user/ann/7", "PUT")
    assert exc_info.value.allowed_methods == frozenset({"DELETE", "GET"})
