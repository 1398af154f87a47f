from __future__ import annotations

import dataclasses
import inspect
import logging
import reprlib
from functools import wraps
from typing import Any, Callable, Iterable, MutableMapping, Optional, Sequence, Set, TypeVar, cast

import numpy as np

F = TypeVar("F", bound=Callable[..., Any])

_repr = reprlib.Repr()
_repr.maxother = 160
_repr.maxlist = 8
_repr.maxtuple = 8


def _format_float(value: float) -> str:
    return f"{value:.6g}"


def _compact_repr(value: Any, *, max_items: int = 6, max_length: int = 400) -> str:
    """Short single-line rendering of kernel values for DEBUG records."""

    if isinstance(value, float):
        return _format_float(value)

    if isinstance(value, np.ndarray):
        parts = [f"ndarray(shape={tuple(value.shape)}, dtype={value.dtype})"]
        if 0 < value.size <= max_items:
            parts.append("values=" + _repr.repr(value.tolist()))
        elif value.size and np.issubdtype(value.dtype, np.number):
            parts.append(f"min={float(value.min()):.6g}")
            parts.append(f"max={float(value.max()):.6g}")
        return ", ".join(parts)

    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        fields = []
        for idx, f in enumerate(dataclasses.fields(value)):
            if idx >= max_items:
                fields.append("...")
                break
            fields.append(f"{f.name}={_compact_repr(getattr(value, f.name), max_items=3)}")
        return f"{type(value).__name__}({', '.join(fields)})"

    if isinstance(value, (list, tuple)):
        items = []
        for idx, item in enumerate(value):
            if idx >= max_items:
                items.append(f"... (+{len(value) - max_items})")
                break
            items.append(_compact_repr(item, max_items=max_items))
        open_br, close_br = ("(", ")") if isinstance(value, tuple) else ("[", "]")
        return f"{open_br}{', '.join(items)}{close_br}"

    if isinstance(value, dict):
        items = []
        for idx, (key, val) in enumerate(value.items()):
            if idx >= max_items:
                items.append("...")
                break
            items.append(f"{key!r}: {_compact_repr(val)}")
        return "{" + ", ".join(items) + "}"

    if callable(value):
        return f"<callable {getattr(value, '__qualname__', type(value).__name__)}>"

    rendered = _repr.repr(value)
    if len(rendered) > max_length:
        return rendered[:max_length] + "... (truncated)"
    return rendered


def _format_arguments(args: Sequence[Any], kwargs: MutableMapping[str, Any]) -> str:
    parts = []
    if args:
        parts.append("args=[" + ", ".join(_compact_repr(arg) for arg in args) + "]")
    if kwargs:
        parts.append(
            "kwargs={" + ", ".join(f"{key}={_compact_repr(val)}" for key, val in kwargs.items()) + "}"
        )
    return ", ".join(parts) if parts else "no-args"


def debug_log_call(
    logger: logging.Logger, *, name: Optional[str] = None, log_result: bool = True
) -> Callable[[F], F]:
    """Return a decorator that emits DEBUG records on entry, exit and failure."""

    def decorator(func: F) -> F:
        if getattr(func, "_debug_logging_wrapped", False):
            return func

        qualname = name or getattr(func, "__qualname__", getattr(func, "__name__", "<callable>"))

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any):
            if not logger.isEnabledFor(logging.DEBUG):
                return func(*args, **kwargs)
            logger.debug("Entering %s (%s)", qualname, _format_arguments(args, kwargs))
            try:
                result = func(*args, **kwargs)
            except Exception:
                logger.debug("Exception in %s", qualname, exc_info=True)
                raise
            if log_result:
                logger.debug("Exiting %s -> %s", qualname, _compact_repr(result))
            else:
                logger.debug("Exiting %s", qualname)
            return result

        setattr(wrapper, "_debug_logging_wrapped", True)
        return cast(F, wrapper)

    return decorator


def apply_debug_logging(
    namespace: MutableMapping[str, Any],
    *,
    logger: Optional[logging.Logger] = None,
    skip: Optional[Iterable[str]] = None,
) -> None:
    """Wrap the public functions defined in a module namespace with :func:`debug_log_call`.

    Private helpers (leading underscore) stay unwrapped; they run inside the
    numeric inner loops.
    """

    module_name = namespace.get("__name__")
    if not isinstance(module_name, str):
        module_name = None
    logger = logger or logging.getLogger(module_name or __name__)
    skip_set: Set[str] = set(skip or [])

    for attr, value in list(namespace.items()):
        if attr.startswith("_") or attr in skip_set:
            continue
        if inspect.isfunction(value) and getattr(value, "__module__", None) == module_name:
            namespace[attr] = debug_log_call(logger, name=attr)(value)


__all__ = ["apply_debug_logging", "debug_log_call"]
