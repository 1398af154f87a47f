"""One-call hyperbolic tiling: build the base triangle and expand it."""

from __future__ import annotations

import logging
from typing import Optional, Tuple

from ..config import DEFAULT_THIRD_MIRROR_CONFIG, DEFAULT_TILING_OPTIONS, ThirdMirrorConfig
from ..types import HyperbolicTriangle
from .group import TilingResult, expand_hyperbolic_triangle_group
from .hyperbolic import build_hyperbolic_triangle

logger = logging.getLogger(__name__)


def build_tiling(
    p: float,
    q: float,
    r: float,
    depth: int,
    *,
    max_faces: Optional[int] = DEFAULT_TILING_OPTIONS.max_faces,
    config: ThirdMirrorConfig = DEFAULT_THIRD_MIRROR_CONFIG,
) -> Tuple[HyperbolicTriangle, TilingResult]:
    base = build_hyperbolic_triangle(p, q, r, config=config)
    result = expand_hyperbolic_triangle_group(base, depth, max_faces=max_faces)
    logger.info(
        "Tiled (%s, %s, %s) to depth %d: %d faces", p, q, r, depth, result.stats.total
    )
    return base, result


__all__ = ["build_tiling"]
