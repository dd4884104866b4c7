"""Router with declaration-order matching.

Routes are given once, when the router is built, and never change.
Matching is a flat scan: the first route (in declaration order) whose
method filter and pattern both fit the path wins.
"""

import logging
from collections.abc import Iterable, Iterator
from typing import Any

from wren.config import DEFAULT_CONFIG, RouterConfig
from wren.errors import ConfigurationError, NoRouteError
from wren.routing.pattern import Capture, Literal, Pattern, TrailingSlash, Wildcard
from wren.routing.result import NO_MATCH, FullMatch, MatchResult, MatchWithTrailingSlash
from wren.routing.route import Route, RouteMatch

logger = logging.getLogger("wren.routing")


def split_path(path: str) -> tuple[list[str], bool]:
    """Split a request path into segments and a trailing-slash flag.

    One leading ``/`` is removed; one trailing empty segment is dropped and
    reported as a trailing slash. Other empty segments are kept::

        "/"            -> ([], False)
        "/sum/45/12"   -> (["sum", "45", "12"], False)
        "/sum/45/12/"  -> (["sum", "45", "12"], True)
        "/sum//12"     -> (["sum", "", "12"], False)
    """
    value = path.removeprefix("/")
    if not value:
        return [], False

    parts = value.split("/")
    if parts[-1] == "":
        parts.pop()
        return parts, True
    return parts, False


def walk(pattern: Pattern, segments: list[str]) -> tuple[Any, ...] | None:
    """Match *segments* against *pattern*'s nodes, one node per segment.

    Returns the parsed values in order, or ``None`` if a literal differs, a
    capture fails to parse, or the segment count does not line up.
    """
    args: list[Any] = []
    index = 0

    for node in pattern.nodes:
        if isinstance(node, Wildcard):
            args.append(node.matcher.parse("/".join(segments[index:])))
            return tuple(args)

        if index == len(segments):
            return None
        segment = segments[index]

        if isinstance(node, Literal):
            if segment != node.text:
                return None
        elif isinstance(node, Capture):
            value = node.matcher.try_parse(segment)
            if value is None:
                return None
            args.append(value)
        index += 1

    if index != len(segments):
        return None
    return tuple(args)


def _slash_differs(pattern: Pattern, trailing: bool) -> bool:
    # The root path is its own trailing slash
    if not pattern.nodes:
        return False
    match pattern.trailing_slash:
        case TrailingSlash.ALLOW:
            return False
        case _:
            # Both closers degrade a trailing slash the same way
            return trailing


class Router[R]:
    """An immutable, ordered collection of routes sharing one result type.

    Usage::

        router = Router([
            s("sum") / int_ / int_ / nil @ (lambda a, b: a + b),
            method("GET", s("user") / str_ / int64 / nil) @ show_user,
        ])
        router.match("/sum/45/12")      # FullMatch(57)
        router.match("/sum/45/12/")     # MatchWithTrailingSlash(57)
        router.match("/sum/45/abc")     # NoMatch()
    """

    __slots__ = ("_config", "_routes")

    def __init__(
        self,
        routes: Iterable[Route[R]] = (),
        *,
        config: RouterConfig = DEFAULT_CONFIG,
    ) -> None:
        self._routes: tuple[Route[R], ...] = tuple(routes)
        self._config = config
        for route in self._routes:
            if not isinstance(route, Route):
                msg = f"Router expects Route instances, got {route!r}."
                raise ConfigurationError(msg)
        logger.debug("Router built with %d routes", len(self._routes))

    @property
    def routes(self) -> tuple[Route[R], ...]:
        """All routes, in match order."""
        return self._routes

    @property
    def config(self) -> RouterConfig:
        return self._config

    def __len__(self) -> int:
        return len(self._routes)

    def __iter__(self) -> Iterator[Route[R]]:
        return iter(self._routes)

    def __repr__(self) -> str:
        return f"Router({len(self._routes)} routes)"

    # -- Composition ------------------------------------------------------------

    def add(self, route: Route[R]) -> "Router[R]":
        """Return a new router with *route* appended (lowest priority)."""
        return Router((*self._routes, route), config=self._config)

    def union(self, other: "Router[R]") -> "Router[R]":
        """Return a router trying this router's routes first, then *other*'s."""
        return Router((*self._routes, *other.routes), config=self._config)

    __add__ = union

    def map[S](self, fn: Any) -> "Router[S]":
        """Return a router whose results are ``fn`` applied to each handler's result."""
        return Router((route.map(fn) for route in self._routes), config=self._config)

    # -- Matching ---------------------------------------------------------------

    def match_route(self, path: str, method: str | None = None) -> RouteMatch[R] | None:
        """Find the first route matching *path* without calling its handler.

        With ``method=None`` only method-agnostic routes are tried.
        """
        segments, trailing = split_path(path)
        for route in self._routes:
            if not route.accepts_method(method):
                continue
            args = walk(route.pattern, segments)
            if args is None:
                continue
            return RouteMatch(route, args, _slash_differs(route.pattern, trailing))
        return None

    def match(self, path: str, method: str | None = None) -> MatchResult[R]:
        """Match *path* and call the winning route's handler.

        Returns ``FullMatch(value)``, ``MatchWithTrailingSlash(value)`` or
        ``NoMatch()``. Handler exceptions propagate unchanged.
        """
        found = self.match_route(path, method)
        if found is None:
            if self._config.log_matches:
                logger.debug("%s %r -> no match", method or "*", path)
            return NO_MATCH

        if self._config.log_matches:
            logger.debug(
                "%s %r -> %s%s",
                method or "*",
                path,
                found.route.pattern,
                " (trailing slash)" if found.trailing_slash else "",
            )

        value = found.call()
        if found.trailing_slash:
            return MatchWithTrailingSlash(value)
        return FullMatch(value)

    def allowed_methods(self, path: str) -> frozenset[str]:
        """Methods of the method-restricted routes whose pattern fits *path*."""
        segments, _ = split_path(path)
        return frozenset(
            route.method
            for route in self._routes
            if route.method is not None and walk(route.pattern, segments) is not None
        )

    def match_or_raise(self, path: str, method: str | None = None) -> R:
        """Return the result of the matching route's handler.

        Trailing-slash matches count as matches. Raises ``NoRouteError``
        otherwise; its ``allowed_methods`` is non-empty when the path fits
        a route but the method does not.
        """
        result = self.match(path, method)
        if result:
            return result.get()
        raise NoRouteError(path, method, self.allowed_methods(path))
