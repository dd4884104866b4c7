"""Route and RouteMatch frozen dataclasses."""

import functools
from dataclasses import dataclass, field
from typing import Any

from wren._internal.signature import check_handler
from wren._internal.types import Handler, ResultMapper
from wren.routing.pattern import Pattern


@dataclass(frozen=True, slots=True)
class Route[R]:
    """A pattern bound to a handler.

    The handler's signature is checked against the pattern's captures when
    the route is created, so a route that exists can always be called with
    the values its pattern produces.
    """

    pattern: Pattern
    handler: Handler
    name: str | None = None
    check_annotations: bool = field(default=True, repr=False, compare=False)

    def __post_init__(self) -> None:
        check_handler(
            self.handler,
            self.pattern.param_types,
            where=str(self.pattern),
            check_annotations=self.check_annotations,
        )

    @property
    def method(self) -> str | None:
        """The HTTP method this route is restricted to, or None for any."""
        return self.pattern.method

    def accepts_method(self, method: str | None) -> bool:
        """Return True if a request with *method* may use this route.

        ``None`` (no method known) only reaches method-agnostic routes.
        """
        if self.pattern.method is None:
            return True
        return method is not None and self.pattern.method == method.upper()

    def url(self, *args: Any) -> str:
        """Generate a concrete path for this route from *args*."""
        from wren.routing.printer import generate_path

        return generate_path(self.pattern, *args)

    def map[S](self, fn: ResultMapper) -> "Route[S]":
        """Return a route whose result is ``fn`` applied to this route's result."""
        handler = self.handler

        @functools.wraps(handler)
        def mapped(*args: Any) -> Any:
            return fn(handler(*args))

        return Route(self.pattern, mapped, self.name, self.check_annotations)


@dataclass(frozen=True, slots=True)
class RouteMatch[R]:
    """A route whose pattern matched, with its parsed arguments.

    ``trailing_slash`` is True when the path differed from the pattern's
    trailing-slash mode (a ``MatchWithTrailingSlash`` outcome).
    """

    route: Route[R]
    args: tuple[Any, ...]
    trailing_slash: bool = False

    def call(self) -> R:
        """Invoke the route's handler with the captured arguments."""
        return self.route.handler(*self.args)


def route[R](
    pattern: Pattern,
    handler: Handler,
    *,
    name: str | None = None,
    check_annotations: bool = True,
) -> Route[R]:
    """Attach *handler* to *pattern*.

    Equivalent to ``pattern @ handler``::

        route(s("sum") / int_ / int_ / nil, lambda a, b: a + b)

    Raises ``RouteSignatureError`` if the handler cannot take the captured
    values positionally.
    """
    return Route(pattern, handler, name=name, check_annotations=check_annotations)
