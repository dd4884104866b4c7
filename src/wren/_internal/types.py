"""Shared type aliases used across wren modules."""

from collections.abc import Callable
from typing import Any, TypeAlias

# Route handler — called positionally with the captured values
Handler: TypeAlias = Callable[..., Any]

# Applied to a handler's return value by Route.map() / Router.map()
ResultMapper: TypeAlias = Callable[[Any], Any]
