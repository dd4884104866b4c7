"""Segment matchers — typed parse/print pairs for single path segments.

A matcher turns one path segment into a typed value (``parse``) and a
value back into a segment (``print``). For every built-in matcher
``parse(print(v)) == v`` holds, which is what keeps URL generation in
sync with matching.
"""

import re
import sys
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from wren.errors import ConfigurationError

_INTEGER = re.compile(r"-?[0-9]+")

INT32_RANGE = (-(2**31), 2**31 - 1)
INT64_RANGE = (-(2**63), 2**63 - 1)


@dataclass(frozen=True, slots=True)
class Matcher[T]:
    """A typed single-segment matcher.

    ``parse`` returns ``None`` when the segment does not fit. ``value_type``
    is the Python type ``parse`` produces; handlers attached to a pattern
    are checked against it. ``validate`` narrows which values of that type
    can be printed (bounded integers use it for their range).
    """

    name: str
    parse: Callable[[str], T | None]
    print: Callable[[T], str]
    value_type: type = str
    validate: Callable[[Any], bool] | None = None

    def try_parse(self, segment: str) -> T | None:
        """Parse *segment*, treating conversion errors as a failed match."""
        try:
            return self.parse(segment)
        except (ValueError, TypeError):
            return None

    def accepts(self, value: object) -> bool:
        """Return True if *value* can be printed by this matcher."""
        if self.value_type is int and isinstance(value, bool):
            return False
        if not isinstance(value, self.value_type):
            return False
        return self.validate is None or self.validate(value)

    def __repr__(self) -> str:
        return f"Matcher({self.name!r})"


def matcher[T](
    name: str,
    parse: Callable[[str], T | None],
    print: Callable[[T], str] = str,  # noqa: A002 — mirrors the field name
    value_type: type = str,
    validate: Callable[[Any], bool] | None = None,
) -> Matcher[T]:
    """Build a custom matcher.

    Example::

        color = matcher(
            "color",
            lambda s: s if s in {"red", "green", "blue"} else None,
        )
    """
    if not name:
        msg = "Matcher name must not be empty."
        raise ConfigurationError(msg)
    return Matcher(name=name, parse=parse, print=print, value_type=value_type, validate=validate)


# -- Built-in parse/print functions ------------------------------------------


def _digit_limit() -> int:
    # int <-> str conversion refuses longer numbers; 0 means unlimited
    return sys.get_int_max_str_digits()


def _parse_int(segment: str) -> int | None:
    if _INTEGER.fullmatch(segment) is None:
        return None
    limit = _digit_limit()
    if limit and len(segment.lstrip("-")) > limit:
        return None
    return int(segment)


def _printable_int(value: int) -> bool:
    limit = _digit_limit()
    return not limit or abs(value) < 10**limit


def _bounded_int(low: int, high: int) -> Callable[[str], int | None]:
    def parse(segment: str) -> int | None:
        value = _parse_int(segment)
        if value is None or not low <= value <= high:
            return None
        return value

    return parse


def _in_range(low: int, high: int) -> Callable[[Any], bool]:
    return lambda value: low <= value <= high


def _print_int(value: int) -> str:
    return str(int(value))


def _parse_str(segment: str) -> str | None:
    return segment or None


def _valid_segment(value: str) -> bool:
    return bool(value) and "/" not in value


def _parse_bool(segment: str) -> bool | None:
    if segment == "true":
        return True
    if segment == "false":
        return False
    return None


def _print_bool(value: bool) -> str:
    return "true" if value else "false"


def _parse_rest(remainder: str) -> str:
    return remainder


def _valid_rest(value: str) -> bool:
    # Edge slashes would print as an empty segment or a trailing slash
    return not value.startswith("/") and not value.endswith("/")


# -- Built-in matchers --------------------------------------------------------

INT = Matcher("int", _parse_int, _print_int, int, _printable_int)
INT32 = Matcher("int32", _bounded_int(*INT32_RANGE), _print_int, int, _in_range(*INT32_RANGE))
INT64 = Matcher("int64", _bounded_int(*INT64_RANGE), _print_int, int, _in_range(*INT64_RANGE))
STRING = Matcher("string", _parse_str, str, str, _valid_segment)
BOOL = Matcher("bool", _parse_bool, _print_bool, bool)

# Consumes the rest of the path; only usable as the last node of a pattern.
WILDCARD = Matcher("wildcard", _parse_rest, str, str, _valid_rest)

# name -> matcher, for every built-in
MATCHERS: dict[str, Matcher[Any]] = {
    m.name: m for m in (INT, INT32, INT64, STRING, BOOL, WILDCARD)
}
