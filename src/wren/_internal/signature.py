"""Handler signature checks — run once, when a route is built.

A pattern's captures are passed to its handler positionally, so the
handler must accept exactly that many positional arguments and, where it
annotates them, with compatible types. Every check here happens at
construction; matching never inspects a signature.

Usage::

    from wren._internal.signature import check_handler

    check_handler(handler, pattern.param_types, where=str(pattern))
"""

import inspect
import types
import typing
from typing import Any

from wren._internal.types import Handler
from wren.errors import RouteSignatureError

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)

# Implicit numeric promotions accepted by type checkers
_PROMOTIONS: dict[type, tuple[type, ...]] = {
    float: (int,),
    complex: (int, float),
}


def handler_name(handler: Handler) -> str:
    """Return a readable name for *handler* in messages and route listings."""
    return getattr(handler, "__qualname__", None) or getattr(handler, "__name__", repr(handler))


def _signature(handler: Handler) -> inspect.Signature | None:
    try:
        return inspect.signature(handler, eval_str=True)
    except (NameError, AttributeError, SyntaxError):
        # String annotations that cannot be evaluated; check arity only
        return inspect.signature(handler)
    except (TypeError, ValueError):
        # Builtins and C callables without an introspectable signature
        return None


def check_handler(
    handler: Handler,
    param_types: tuple[type, ...],
    *,
    where: str = "",
    check_annotations: bool = True,
) -> None:
    """Verify that *handler* can be called with values of *param_types*.

    Raises ``RouteSignatureError`` on arity or annotation mismatch.
    """
    if not callable(handler):
        msg = f"Handler for {where or 'route'} is not callable: {handler!r}"
        raise RouteSignatureError(msg)

    sig = _signature(handler)
    if sig is None:
        return

    name = handler_name(handler)
    params = list(sig.parameters.values())
    positional = [p for p in params if p.kind in _POSITIONAL]
    required = [p for p in positional if p.default is inspect.Parameter.empty]
    var_positional = next(
        (p for p in params if p.kind is inspect.Parameter.VAR_POSITIONAL), None
    )
    keyword_required = [
        p.name
        for p in params
        if p.kind is inspect.Parameter.KEYWORD_ONLY and p.default is inspect.Parameter.empty
    ]

    count = len(param_types)
    if keyword_required:
        msg = (
            f"Handler {name!r} for {where} has required keyword-only parameters "
            f"{', '.join(keyword_required)}; captured values are passed positionally."
        )
        raise RouteSignatureError(msg)
    if count < len(required) or (count > len(positional) and var_positional is None):
        expected = _describe_arity(len(required), len(positional), var_positional is not None)
        msg = (
            f"Handler {name!r} for {where} takes {expected} positional arguments "
            f"but the pattern captures {count}."
        )
        raise RouteSignatureError(msg)

    if not check_annotations:
        return

    for index, capture_type in enumerate(param_types):
        param = positional[index] if index < len(positional) else var_positional
        if param is None:
            continue
        if not is_compatible(capture_type, param.annotation):
            msg = (
                f"Handler {name!r} for {where}: parameter {param.name!r} is annotated "
                f"{_describe_annotation(param.annotation)} but capture {index + 1} "
                f"produces {capture_type.__name__}."
            )
            raise RouteSignatureError(msg)


def is_compatible(capture_type: type, annotation: Any) -> bool:
    """Return True unless *annotation* provably rejects *capture_type*.

    Plain classes, unions of them, ``Any`` and ``object`` are decided;
    anything else (generics, ``Literal``, type aliases) is accepted.
    """
    if annotation is inspect.Parameter.empty or annotation is Any or annotation is object:
        return True

    origin = typing.get_origin(annotation)
    if origin is typing.Union or origin is types.UnionType:
        return any(is_compatible(capture_type, arg) for arg in typing.get_args(annotation))
    if origin is not None:
        return True

    if isinstance(annotation, type):
        if issubclass(capture_type, annotation):
            return True
        return capture_type in _PROMOTIONS.get(annotation, ())

    return True


def _describe_arity(required: int, positional: int, variadic: bool) -> str:
    if variadic:
        return f"at least {required}"
    if required == positional:
        return str(required)
    return f"{required} to {positional}"


def _describe_annotation(annotation: Any) -> str:
    if isinstance(annotation, type):
        return annotation.__name__
    return repr(annotation)
