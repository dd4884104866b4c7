"""Match results — the three outcomes of ``Router.match()``.

Results are plain frozen dataclasses, so callers can use structural
pattern matching::

    match router.match("/sum/45/12"):
        case FullMatch(value):
            return value
        case MatchWithTrailingSlash(value):
            return redirect_without_slash(value)
        case NoMatch():
            return not_found()
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class NoMatch:
    """No route matched the path."""

    def get(self, default: Any = None) -> Any:
        return default

    def __bool__(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class FullMatch[R]:
    """A route matched the path exactly."""

    value: R

    def get(self, default: object = None) -> R:
        return self.value


@dataclass(frozen=True, slots=True)
class MatchWithTrailingSlash[R]:
    """A route matched, but the path's trailing slash differs from the route's.

    For the default strict mode this means the path carried one extra
    ``/``. The handler has already run; ``value`` is its result.
    """

    value: R

    def get(self, default: object = None) -> R:
        return self.value


type MatchResult[R] = NoMatch | FullMatch[R] | MatchWithTrailingSlash[R]

NO_MATCH = NoMatch()
