"""Two-point control handles for editing half-planes."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Dict, Iterable, List, Sequence, Tuple

from ..numeric import dot2, perp90, rotate90_cw, sub2
from ..types import DegenerateGeometryError, HalfPlane, Vec2
from .half_plane import normalize_half_plane

_EPS = 1e-12

ControlPointId = str


@dataclass(frozen=True)
class ControlPoint:
    id: ControlPointId
    x: float
    y: float
    fixed: bool = False

    @property
    def point(self) -> Vec2:
        return self.x, self.y


@dataclass(frozen=True)
class ControlPointAssignment:
    """Pins control point ``point_index`` of plane ``plane_index`` to ``id``."""

    plane_index: int
    point_index: int
    id: ControlPointId
    fixed: bool = False


HalfPlaneControlPoints = Tuple[ControlPoint, ControlPoint]


def half_plane_from_points(a: Vec2, b: Vec2) -> HalfPlane:
    """Half-plane whose boundary runs from ``a`` to ``b``; the normal points right."""

    tangent = sub2(b, a)
    length = math.hypot(tangent[0], tangent[1])
    if not length > _EPS:
        raise DegenerateGeometryError("Half-plane control points must not coincide")
    unit_tangent = (tangent[0] / length, tangent[1] / length)
    return normalize_half_plane(HalfPlane((float(a[0]), float(a[1])), rotate90_cw(unit_tangent)))


def points_from_half_plane(plane: HalfPlane, spacing: float) -> Tuple[Vec2, Vec2]:
    """Two boundary points ``spacing`` apart, starting at the foot of the origin."""

    if not spacing > _EPS:
        raise DegenerateGeometryError("Half-plane control spacing must be positive")
    unit = normalize_half_plane(plane)
    offset = -dot2(unit.normal, unit.anchor)
    origin = (-offset * unit.normal[0], -offset * unit.normal[1])
    tangent = perp90(unit.normal)
    return origin, (origin[0] + tangent[0] * spacing, origin[1] + tangent[1] * spacing)


def _register(
    registry: Dict[ControlPointId, ControlPoint],
    base: Vec2,
    cp_id: ControlPointId,
    fixed: bool,
) -> ControlPoint:
    existing = registry.get(cp_id)
    if existing is None:
        created = ControlPoint(cp_id, base[0], base[1], fixed)
        registry[cp_id] = created
        return created
    should_fix = existing.fixed or fixed
    if existing.point == base and should_fix == existing.fixed:
        return existing
    updated = replace(existing, x=base[0], y=base[1], fixed=should_fix)
    registry[cp_id] = updated
    return updated


def control_points_from_half_planes(
    planes: Sequence[HalfPlane],
    spacing: float,
    assignments: Iterable[ControlPointAssignment] = (),
) -> List[HalfPlaneControlPoints]:
    """Derive editable control points for every plane.

    Assignments let several planes share a handle id; the fixed flag is
    sticky and the last plane to touch a shared id sets its position.
    Unassigned handles get ``cp-<plane>-<point>`` ids.
    """

    by_slot = {(a.plane_index, a.point_index): a for a in assignments}
    registry: Dict[ControlPointId, ControlPoint] = {}
    controls: List[HalfPlaneControlPoints] = []
    for plane_index, plane in enumerate(planes):
        pair = []
        for point_index, base in enumerate(points_from_half_plane(plane, spacing)):
            assignment = by_slot.get((plane_index, point_index))
            cp_id = assignment.id if assignment else f"cp-{plane_index}-{point_index}"
            fixed = assignment.fixed if assignment else False
            pair.append(_register(registry, base, cp_id, fixed))
        controls.append((pair[0], pair[1]))
    # shared ids may have moved after an earlier plane captured them
    return [(registry[a.id], registry[b.id]) for a, b in controls]


def control_point_table(controls: Iterable[HalfPlaneControlPoints]) -> Dict[ControlPointId, ControlPoint]:
    table: Dict[ControlPointId, ControlPoint] = {}
    for a, b in controls:
        table[a.id] = a
        table[b.id] = b
    return table


def half_planes_from_controls(controls: Iterable[HalfPlaneControlPoints]) -> List[HalfPlane]:
    return [half_plane_from_points(a.point, b.point) for a, b in controls]


__all__ = [
    "ControlPoint",
    "ControlPointAssignment",
    "ControlPointId",
    "HalfPlaneControlPoints",
    "control_point_table",
    "control_points_from_half_planes",
    "half_plane_from_points",
    "half_planes_from_controls",
    "points_from_half_plane",
]
