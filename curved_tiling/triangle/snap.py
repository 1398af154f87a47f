"""Snapping continuous (p, q, r) values to integer pi/n angles."""

from __future__ import annotations

import logging
import math
from typing import Dict, Iterable, List, Mapping, NamedTuple, Optional, Tuple, Union

from ..config import DEFAULT_SNAP_CONFIG, SnapConfig

logger = logging.getLogger(__name__)

_EPS = 1e-12
HYPERBOLIC_THRESHOLD = 1.0 - _EPS

_KEYS = ("p", "q", "r")


class TriangleParams(NamedTuple):
    p: int
    q: int
    r: int


def _bounds(config: SnapConfig) -> Tuple[int, int]:
    n_min = max(2, int(math.floor(config.n_min)))
    n_max = max(n_min, int(math.floor(config.n_max)))
    return n_min, n_max


def snap_parameter_to_pi_over_n(value: float, config: SnapConfig = DEFAULT_SNAP_CONFIG) -> int:
    """Integer ``n`` in ``[n_min, n_max]`` whose ``pi/n`` is closest to ``pi/value``.

    Ties (within 1e-12) resolve toward the smaller ``n``. Non-finite or
    non-positive values snap to ``n_min``.
    """

    n_min, n_max = _bounds(config)
    if not math.isfinite(value) or value <= 0:
        return n_min
    theta = math.pi / min(max(value, n_min), n_max)

    best_n = n_min
    best_diff = math.inf
    for n in range(n_min, n_max + 1):
        diff = abs(math.pi / n - theta)
        if diff + _EPS < best_diff:
            best_diff = diff
            best_n = n
        elif abs(diff - best_diff) <= _EPS and n < best_n:
            best_n = n
    return best_n


def triangle_sum(params: Iterable[float]) -> float:
    return sum(1.0 / value for value in params)


def _next_adjustable_key(
    snapped: Mapping[str, int], adjustable: List[str], n_max: int
) -> Optional[str]:
    if "r" in adjustable and snapped["r"] < n_max:
        return "r"
    candidate = None
    for key in adjustable:
        if snapped[key] >= n_max:
            continue
        if candidate is None or snapped[key] < snapped[candidate]:
            candidate = key
    return candidate


def snap_triangle_params(
    values: Union[TriangleParams, Tuple[float, float, float], Mapping[str, float]],
    *,
    config: SnapConfig = DEFAULT_SNAP_CONFIG,
    locked: Optional[Mapping[str, bool]] = None,
) -> TriangleParams:
    """Snap ``(p, q, r)`` and grow unlocked entries until the triple is hyperbolic.

    ``r`` is grown first while it is below ``n_max``; after that the smallest
    adjustable entry below ``n_max`` is incremented. With every key locked the
    snapped triple is returned as is, hyperbolic or not.
    """

    if isinstance(values, Mapping):
        raw = [values[key] for key in _KEYS]
    else:
        raw = list(values)
    n_min, n_max = _bounds(config)
    bounded = SnapConfig(n_min=n_min, n_max=n_max)
    snapped: Dict[str, int] = {
        key: snap_parameter_to_pi_over_n(value, bounded) for key, value in zip(_KEYS, raw)
    }

    locked = locked or {}
    adjustable = [key for key in _KEYS if not locked.get(key, False)]
    if not adjustable:
        return TriangleParams(**snapped)

    total = triangle_sum(snapped.values())
    while total >= HYPERBOLIC_THRESHOLD:
        key = _next_adjustable_key(snapped, adjustable, n_max)
        if key is None:
            logger.warning(
                "Cannot reach a hyperbolic triple from %s within n_max=%d", snapped, n_max
            )
            break
        snapped[key] += 1
        total = triangle_sum(snapped.values())

    return TriangleParams(**snapped)


__all__ = [
    "HYPERBOLIC_THRESHOLD",
    "TriangleParams",
    "snap_parameter_to_pi_over_n",
    "snap_triangle_params",
    "triangle_sum",
]
