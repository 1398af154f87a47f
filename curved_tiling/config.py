"""Configuration records passed explicitly through kernel call signatures."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class Tolerance:
    """Scale-aware tolerance: ``abs + rel * max(1, scale)``."""

    abs: float = 1e-12
    rel: float = 1e-12

    def value(self, scale: float) -> float:
        return self.abs + self.rel * max(1.0, scale)

    def eq(self, a: float, b: float, scale: float) -> bool:
        return abs(a - b) <= self.value(scale)


@dataclass(frozen=True)
class ThirdMirrorConfig:
    """Root-finding constants for the third hyperbolic mirror.

    ``interval`` holds the root for moderate triples such as (2, 3, 7). Triples
    with several small angles, e.g. (20, 20, 20) or (2, 100, 100), put the
    x-axis vertex past 0.95, so a miss in ``interval`` is rescanned over
    ``fallback_interval`` before the clamped secant runs. Set
    ``fallback_interval`` to ``None`` to go straight to the secant.
    """

    interval: Tuple[float, float] = (0.1, 0.9)
    subdivisions: int = 20
    fallback_interval: Optional[Tuple[float, float]] = (1e-3, 1.0 - 1e-6)
    fallback_subdivisions: int = 200
    max_bisection_iter: int = 60
    residual_tol: float = 5e-4
    interval_tol: float = 1e-6
    secant_seeds: Tuple[float, float] = (0.5, 0.6)
    secant_iterations: int = 12
    secant_clamp: Tuple[float, float] = (0.05, 0.95)
    secant_min_denominator: float = 1e-6


@dataclass(frozen=True)
class SnapConfig:
    n_min: int = 2
    n_max: int = 200


@dataclass(frozen=True)
class TilingOptions:
    max_faces: Optional[int] = None
    quantum: float = 1e-9


DEFAULT_TOLERANCE = Tolerance()
DEFAULT_THIRD_MIRROR_CONFIG = ThirdMirrorConfig()
DEFAULT_SNAP_CONFIG = SnapConfig()
DEFAULT_TILING_OPTIONS = TilingOptions()


__all__ = [
    "DEFAULT_SNAP_CONFIG",
    "DEFAULT_THIRD_MIRROR_CONFIG",
    "DEFAULT_TILING_OPTIONS",
    "DEFAULT_TOLERANCE",
    "SnapConfig",
    "ThirdMirrorConfig",
    "TilingOptions",
    "Tolerance",
]
