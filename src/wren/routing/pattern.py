"""Path patterns and the ``/`` combinator.

A pattern is an immutable tuple of nodes — literal segments, typed
captures, and an optional terminal wildcard — plus a trailing-slash mode
and an optional HTTP method filter::

    from wren.routing.pattern import int_, nil, s, str_

    sum_path = s("sum") / int_ / int_ / nil       # /sum/:int/:int
    user_path = s("user") / str_ / "posts" / nil  # /user/:string/posts

The capture types, read left to right, are the positional parameter types
any handler attached to the pattern must accept.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import TYPE_CHECKING, Any

from wren.errors import ConfigurationError
from wren.routing.matchers import BOOL, INT, INT32, INT64, STRING, WILDCARD, Matcher

if TYPE_CHECKING:
    from collections.abc import Callable

    from wren.routing.route import Route


class TrailingSlash(Enum):
    """How a pattern treats one extra ``/`` at the end of the path."""

    # Exact length expected; a trailing slash degrades to MatchWithTrailingSlash
    STRICT = "strict"
    # With or without the slash, both are full matches
    ALLOW = "allow"
    # Closed with "//"; matched and printed exactly like STRICT
    REQUIRE = "require"


@dataclass(frozen=True, slots=True)
class Literal:
    """A segment that must equal ``text`` exactly (case-sensitive)."""

    text: str


@dataclass(frozen=True, slots=True)
class Capture:
    """A segment parsed into a typed value by ``matcher``."""

    matcher: Matcher[Any]


@dataclass(frozen=True, slots=True)
class Wildcard:
    """Consumes every remaining segment as one ``/``-joined string.

    Always the last node of a pattern.
    """

    matcher: Matcher[str] = WILDCARD


type Node = Literal | Capture | Wildcard


@dataclass(frozen=True, slots=True)
class Pattern:
    """An immutable sequence of path nodes.

    Build patterns with the combinators in this module rather than by
    hand; ``/`` validates every composition.
    """

    nodes: tuple[Node, ...] = ()
    trailing_slash: TrailingSlash = TrailingSlash.STRICT
    method: str | None = None
    closed: bool = False

    @property
    def matchers(self) -> tuple[Matcher[Any], ...]:
        """Matchers of the value-producing nodes, in order."""
        return tuple(node.matcher for node in self.nodes if not isinstance(node, Literal))

    @property
    def param_types(self) -> tuple[type, ...]:
        """Types of the captured values, in handler-parameter order."""
        return tuple(m.value_type for m in self.matchers)

    @property
    def has_wildcard(self) -> bool:
        return bool(self.nodes) and isinstance(self.nodes[-1], Wildcard)

    def with_trailing_slash(self, mode: TrailingSlash) -> "Pattern":
        """Return a closed copy of this pattern using *mode*."""
        return replace(self, trailing_slash=mode, closed=True)

    def __truediv__(self, other: "Pattern | Matcher[Any] | str") -> "Pattern":
        return self._join(_coerce(other))

    def __rtruediv__(self, other: str) -> "Pattern":
        if not isinstance(other, str):
            return NotImplemented
        return literal(other)._join(self)

    def __floordiv__(self, other: "Pattern | Matcher[Any] | str") -> "Pattern":
        right = _coerce(other)
        if right.closed:
            msg = f"Cannot close {self} with '//': the right-hand pattern is already closed."
            raise ConfigurationError(msg)
        return self._join(right).with_trailing_slash(TrailingSlash.REQUIRE)

    def __matmul__(self, handler: "Callable[..., Any]") -> "Route[Any]":
        from wren.routing.route import route

        return route(self, handler)

    def __str__(self) -> str:
        from wren.routing.printer import string_of_pattern

        return string_of_pattern(self)

    def _join(self, other: "Pattern") -> "Pattern":
        if self.closed:
            msg = f"Cannot extend {self}: the pattern is already closed."
            raise ConfigurationError(msg)
        if self.has_wildcard and other.nodes:
            msg = f"Cannot extend {self}: a wildcard must be the last segment."
            raise ConfigurationError(msg)
        if self.method and other.method and self.method != other.method:
            msg = f"Conflicting method filters: {self.method} and {other.method}."
            raise ConfigurationError(msg)

        return Pattern(
            nodes=self.nodes + other.nodes,
            trailing_slash=other.trailing_slash,
            method=self.method or other.method,
            # Joining with an empty pattern is the "/ nil" closer
            closed=other.closed or not other.nodes,
        )


def _coerce(value: "Pattern | Matcher[Any] | str") -> Pattern:
    if isinstance(value, Pattern):
        return value
    if isinstance(value, Matcher):
        return capture(value)
    if isinstance(value, str):
        return literal(value)
    msg = f"Cannot use {value!r} as a path pattern."
    raise ConfigurationError(msg)


# -- Combinators ---------------------------------------------------------------


def literal(text: str) -> Pattern:
    """A single literal segment. *text* may be empty but never contains ``/``."""
    if "/" in text:
        msg = f"Literal segment {text!r} must not contain '/'. Compose segments with '/' instead."
        raise ConfigurationError(msg)
    return Pattern(nodes=(Literal(text),))


s = literal


def capture(matcher: Matcher[Any]) -> Pattern:
    """A single capture using *matcher*.

    The wildcard matcher always produces the terminal node, whichever way
    it is passed in.
    """
    if matcher is WILDCARD:
        return wildcard
    return Pattern(nodes=(Capture(matcher),))


def method(http_method: str, pattern: Pattern) -> Pattern:
    """Restrict *pattern* to requests carrying *http_method*.

    Accepts plain strings or ``http.HTTPMethod`` members::

        method("POST", s("users") / nil) @ create_user
    """
    value = str(http_method or "").strip().upper()
    if not value:
        msg = "HTTP method must be a non-empty string."
        raise ConfigurationError(msg)
    if pattern.method is not None and pattern.method != value:
        msg = f"Pattern {pattern} is already restricted to {pattern.method}."
        raise ConfigurationError(msg)
    return replace(pattern, method=value)


nil = Pattern()
root = nil / nil

int_ = Pattern(nodes=(Capture(INT),))
int32 = Pattern(nodes=(Capture(INT32),))
int64 = Pattern(nodes=(Capture(INT64),))
str_ = Pattern(nodes=(Capture(STRING),))
bool_ = Pattern(nodes=(Capture(BOOL),))
wildcard = Pattern(nodes=(Wildcard(),))
