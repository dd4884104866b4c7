"""Wren exception hierarchy.

Construction problems (bad patterns, handlers that do not line up with
their pattern, URL arguments of the wrong type) raise
``ConfigurationError`` subclasses while routes are being built. Matching
never raises: a path that fits no route is a ``NoMatch`` result.
``NoRouteError`` exists for callers who prefer the exception form via
``Router.match_or_raise()``.
"""


class WrenError(Exception):
    """Base for all wren-specific errors."""


class ConfigurationError(WrenError):
    """Raised when a pattern or route is built incorrectly.

    Always raised at construction time, never while matching.
    """


class RouteSignatureError(ConfigurationError):
    """A handler's parameters do not line up with its pattern's captures."""


class ArgumentError(ConfigurationError):
    """Arguments passed to ``generate_path()`` do not fit the pattern."""


class NoRouteError(WrenError):
    """No route accepted a path; raised only by ``Router.match_or_raise()``.

    ``allowed_methods`` lists the methods of method-restricted routes whose
    pattern fits the path. It is empty when no pattern fits at all.
    """

    def __init__(
        self,
        path: str,
        method: str | None = None,
        allowed_methods: frozenset[str] = frozenset(),
    ) -> None:
        self.path = path
        self.method = method
        self.allowed_methods = allowed_methods
        msg = f"No route matches {method or '*'} {path!r}"
        if allowed_methods:
            msg += f"; allowed methods: {', '.join(sorted(allowed_methods))}"
        super().__init__(msg)
