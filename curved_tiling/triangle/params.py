"""Validation of user-facing triangle parameters and tiling depth."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List, Mapping, Tuple, Union

_MIN_VALUE = 2
_EPS = 1e-12
DEPTH_MIN = 0
DEPTH_MAX = 10


@dataclass(frozen=True)
class ParamsValidation:
    ok: bool
    errors: Tuple[str, ...] = field(default_factory=tuple)


def _is_integer(value: object) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and math.isfinite(value) and value.is_integer()


def validate_triangle_params(
    params: Union[Mapping[str, float], Tuple[float, float, float]]
) -> ParamsValidation:
    """Check that ``(p, q, r)`` are integers >= 2 forming a hyperbolic triple.

    All problems are collected; nothing is raised.
    """

    if isinstance(params, Mapping):
        values = {key: params.get(key) for key in ("p", "q", "r")}
    else:
        values = dict(zip(("p", "q", "r"), params))

    errors: List[str] = []
    for key in ("p", "q", "r"):
        value = values.get(key)
        if not _is_integer(value) or value < _MIN_VALUE:
            errors.append(f"{key} must be an integer >= {_MIN_VALUE}")

    if not errors:
        total = 1.0 / values["p"] + 1.0 / values["q"] + 1.0 / values["r"]
        if not total < 1.0 - _EPS:
            errors.append("1/p + 1/q + 1/r must be < 1")

    return ParamsValidation(ok=not errors, errors=tuple(errors))


def normalize_depth(value: float) -> int:
    """Round half up and clamp into ``[DEPTH_MIN, DEPTH_MAX]``."""

    if not math.isfinite(value):
        return DEPTH_MIN
    rounded = math.floor(value + 0.5)
    return int(min(max(rounded, DEPTH_MIN), DEPTH_MAX))


__all__ = ["DEPTH_MAX", "DEPTH_MIN", "ParamsValidation", "normalize_depth", "validate_triangle_params"]
