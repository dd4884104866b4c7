"""Wren — typed URL-path routing.

Patterns are built from literal segments and typed captures; handlers
attached to them receive the captured values, already parsed, as
positional arguments. The same pattern prints itself and generates URLs,
so links never drift out of sync with routes.

Basic usage::

    from wren import Router, generate_path, int_, nil, s

    add = s("sum") / int_ / int_ / nil
    router = Router([add @ (lambda a, b: a + b)])

    router.match("/sum/45/12")    # FullMatch(value=57)
    router.match("/sum/45/12/")   # MatchWithTrailingSlash(value=57)
    str(add)                       # "/sum/:int/:int"
    generate_path(add, 1, 2)       # "/sum/1/2"
"""

# Declare free-threading support (PEP 703)
_Py_mod_gil = 0

__version__ = "0.1.0"
__all__ = [
    "ArgumentError",
    "ConfigurationError",
    "FullMatch",
    "MatchResult",
    "MatchWithTrailingSlash",
    "Matcher",
    "NoMatch",
    "NoRouteError",
    "Pattern",
    "Route",
    "RouteSignatureError",
    "Router",
    "RouterConfig",
    "TrailingSlash",
    "WrenError",
    "bool_",
    "capture",
    "format_routes",
    "generate_path",
    "int32",
    "int64",
    "int_",
    "literal",
    "matcher",
    "method",
    "nil",
    "root",
    "route",
    "s",
    "str_",
    "string_of_pattern",
    "wildcard",
]

# name -> module that defines it
_LAZY_IMPORTS: dict[str, str] = {
    # Errors
    "ArgumentError": "wren.errors",
    "ConfigurationError": "wren.errors",
    "NoRouteError": "wren.errors",
    "RouteSignatureError": "wren.errors",
    "WrenError": "wren.errors",
    # Configuration
    "RouterConfig": "wren.config",
    # Matchers
    "Matcher": "wren.routing.matchers",
    "matcher": "wren.routing.matchers",
    # Patterns
    "Pattern": "wren.routing.pattern",
    "TrailingSlash": "wren.routing.pattern",
    "bool_": "wren.routing.pattern",
    "capture": "wren.routing.pattern",
    "int32": "wren.routing.pattern",
    "int64": "wren.routing.pattern",
    "int_": "wren.routing.pattern",
    "literal": "wren.routing.pattern",
    "method": "wren.routing.pattern",
    "nil": "wren.routing.pattern",
    "root": "wren.routing.pattern",
    "s": "wren.routing.pattern",
    "str_": "wren.routing.pattern",
    "wildcard": "wren.routing.pattern",
    # Routes and routers
    "Route": "wren.routing.route",
    "route": "wren.routing.route",
    "Router": "wren.routing.router",
    # Match results
    "FullMatch": "wren.routing.result",
    "MatchResult": "wren.routing.result",
    "MatchWithTrailingSlash": "wren.routing.result",
    "NoMatch": "wren.routing.result",
    # Printing
    "format_routes": "wren.routing.printer",
    "generate_path": "wren.routing.printer",
    "string_of_pattern": "wren.routing.printer",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import wren`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    from importlib import import_module

    return getattr(import_module(module_name), name)
