"""Half-plane sets bounding regular Euclidean polygons."""

from __future__ import annotations

import numbers
from typing import List

import numpy as np

from ..types import GeometryError, HalfPlane
from .half_plane import normalize_half_plane


def regular_polygon_half_planes(sides: int, radius: float = 1.0) -> List[HalfPlane]:
    """Half-planes tangent to a regular ``sides``-gon centred on the origin.

    Plane ``i`` is anchored at angle ``2 pi i / sides`` on the circle of the
    given radius with a unit normal pointing back toward the origin.
    """

    if isinstance(sides, bool) or not isinstance(sides, numbers.Integral) or sides < 3:
        raise GeometryError("sides must be an integer >= 3")
    angles = np.arange(int(sides), dtype=float) * (2.0 * np.pi / int(sides))
    outward = np.stack([np.cos(angles), np.sin(angles)], axis=1)
    anchors = outward * float(radius)
    planes: List[HalfPlane] = []
    for anchor, direction in zip(anchors, outward):
        planes.append(
            normalize_half_plane(
                HalfPlane((float(anchor[0]), float(anchor[1])), (float(-direction[0]), float(-direction[1])))
            )
        )
    return planes


__all__ = ["regular_polygon_half_planes"]
