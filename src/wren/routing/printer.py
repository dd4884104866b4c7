"""Pattern printing and URL generation.

Both walk the same node sequence the router matches against, so a
generated path always matches the pattern it came from.
"""

from typing import TYPE_CHECKING, Any

from wren._internal.signature import handler_name
from wren.config import DEFAULT_CONFIG, RouterConfig
from wren.errors import ArgumentError
from wren.routing.pattern import Capture, Literal, Pattern, Wildcard

if TYPE_CHECKING:
    from wren.routing.router import Router


def string_of_pattern(pattern: Pattern, config: RouterConfig = DEFAULT_CONFIG) -> str:
    """Render *pattern* with placeholders for its captures.

    Examples::

        s("sum") / int_ / int_ / nil   -> "/sum/:int/:int"
        s("docs") / wildcard           -> "/docs/:wildcard"
        s("users") // nil              -> "/users"
        nil                            -> "/"
    """
    parts: list[str] = []
    for node in pattern.nodes:
        if isinstance(node, Literal):
            parts.append(node.text)
        else:
            parts.append(config.render_placeholder(node.matcher.name))

    return "/" + "/".join(parts)


def _describe(value: Any) -> str:
    try:
        return repr(value)
    except ValueError:
        # ints past sys.get_int_max_str_digits() cannot be converted to str
        return f"an {type(value).__name__} too long to print"


def generate_path(pattern: Pattern, *args: Any) -> str:
    """Build a concrete path from *pattern* and one argument per capture.

    Arguments are checked against the captures before anything is printed::

        generate_path(s("user") / str_ / int64 / nil, "foobar", 56121111)
        # "/user/foobar/56121111"

    Raises ``ArgumentError`` on a wrong argument count or an argument the
    capture's matcher cannot print.
    """
    matchers = pattern.matchers
    if len(args) != len(matchers):
        msg = (
            f"Pattern {pattern} takes {len(matchers)} arguments "
            f"but {len(args)} were given."
        )
        raise ArgumentError(msg)

    for position, (matcher, value) in enumerate(zip(matchers, args, strict=True), start=1):
        if not matcher.accepts(value):
            msg = (
                f"Argument {position} for {pattern} must be a valid {matcher.name!r} "
                f"value, got {_describe(value)}."
            )
            raise ArgumentError(msg)

    values = iter(args)
    parts: list[str] = []
    for node in pattern.nodes:
        if isinstance(node, Literal):
            parts.append(node.text)
        elif isinstance(node, Capture):
            parts.append(node.matcher.print(next(values)))
        elif isinstance(node, Wildcard):
            rest = node.matcher.print(next(values))
            # An empty remainder is the bare prefix, not a trailing slash
            if rest:
                parts.append(rest)

    return "/" + "/".join(parts)


def format_routes(router: "Router[Any]", config: RouterConfig | None = None) -> str:
    """Render *router*'s routes as a METHOD / PATH / HANDLER table.

    Rows follow match order; method-agnostic routes show ``*``.
    """
    config = config or router.config
    routes = router.routes
    if not routes:
        return "No routes registered."

    # Build rows: (method, path, handler_name)
    rows: list[tuple[str, str, str]] = []
    for route in routes:
        name = handler_name(route.handler)
        if route.name:
            name = f"{name} ({route.name})"
        rows.append((route.method or "*", string_of_pattern(route.pattern, config), name))

    # Column widths
    max_method = max(max(len(r[0]) for r in rows), 6)  # "METHOD" header
    max_path = max(max(len(r[1]) for r in rows), 4)  # "PATH" header

    fmt = f"{{:<{max_method}}}  {{:<{max_path}}}  {{}}"
    lines = [fmt.format("METHOD", "PATH", "HANDLER")]
    sep_len = max_method + max_path + 4 + max(len(r[2]) for r in rows)
    lines.append("-" * min(sep_len, 80))
    lines.extend(fmt.format(*row).rstrip() for row in rows)
    return "\n".join(lines)
