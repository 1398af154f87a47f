"""Circle inversion of points and lines."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Union
from typing import Literal

from ..config import DEFAULT_TOLERANCE, Tolerance
from ..numeric import dot2, is_finite2
from ..types import Circle, DegenerateGeometryError, Vec2


@dataclass(frozen=True)
class InvertedLine:
    """Line image ``normal . p = offset``."""

    normal: Vec2
    offset: float
    kind: Literal["line"] = "line"


@dataclass(frozen=True)
class InvertedCircle:
    center: Vec2
    radius: float
    kind: Literal["circle"] = "circle"


InvertedLineImage = Union[InvertedLine, InvertedCircle]


def invert_unit(point: Vec2, tol: Tolerance = DEFAULT_TOLERANCE) -> Vec2:
    """Inversion in the unit circle; points near the origin come back unchanged."""

    x, y = point
    if not is_finite2(point):
        return x, y
    r2 = x * x + y * y
    if r2 <= tol.value(1.0):
        return x, y
    return x / r2, y / r2


def invert_in_circle(point: Vec2, circle: Circle) -> Vec2:
    """Inversion ``c + r^2 / |p - c|^2 (p - c)``.

    Only the exact centre is returned unchanged, so the map stays an exact
    involution everywhere else.
    """

    vx = point[0] - circle.center[0]
    vy = point[1] - circle.center[1]
    if not (math.isfinite(vx) and math.isfinite(vy)):
        return point[0], point[1]
    d2 = vx * vx + vy * vy
    if d2 == 0.0:
        return point[0], point[1]
    k = circle.radius * circle.radius / d2
    return circle.center[0] + k * vx, circle.center[1] + k * vy


def circle_through_points(
    a: Vec2, b: Vec2, c: Vec2, tol: Tolerance = DEFAULT_TOLERANCE
) -> Optional[Circle]:
    """Circumcircle of three points, ``None`` when they are collinear."""

    d = 2.0 * (a[0] * (b[1] - c[1]) + b[0] * (c[1] - a[1]) + c[0] * (a[1] - b[1]))
    if not math.isfinite(d) or abs(d) <= tol.value(1.0):
        return None
    a_sq = dot2(a, a)
    b_sq = dot2(b, b)
    c_sq = dot2(c, c)
    ux = (a_sq * (b[1] - c[1]) + b_sq * (c[1] - a[1]) + c_sq * (a[1] - b[1])) / d
    uy = (a_sq * (c[0] - b[0]) + b_sq * (a[0] - c[0]) + c_sq * (b[0] - a[0])) / d
    if not (math.isfinite(ux) and math.isfinite(uy)):
        return None
    radius = math.hypot(ux - a[0], uy - a[1])
    if not radius > 0.0:
        return None
    return Circle((ux, uy), radius)


def invert_line_in_circle(
    start: Vec2, end: Vec2, circle: Circle, tol: Tolerance = DEFAULT_TOLERANCE
) -> InvertedLineImage:
    """Image of the line through ``start`` and ``end`` under inversion in ``circle``.

    A line through the inversion centre maps to itself; any other line maps
    to the circle through the centre and the two inverted handles.
    """

    eps = tol.value(1.0)
    dx = end[0] - start[0]
    dy = end[1] - start[1]
    length = math.hypot(dx, dy)
    if not length > eps:
        raise DegenerateGeometryError("Line handles must not coincide")
    if not math.isfinite(length):
        raise DegenerateGeometryError("Line direction must be finite")
    normal = (-dy / length, dx / length)

    offset = dot2(normal, start)
    center_distance = dot2(normal, circle.center) - offset
    if abs(center_distance) <= tol.value(max(1.0, abs(offset))):
        return InvertedLine(normal, offset)

    image = circle_through_points(
        invert_in_circle(start, circle), invert_in_circle(end, circle), circle.center, tol
    )
    if image is None:
        return InvertedLine(normal, offset)
    return InvertedCircle(image.center, image.radius)


__all__ = [
    "InvertedCircle",
    "InvertedLine",
    "InvertedLineImage",
    "circle_through_points",
    "invert_in_circle",
    "invert_line_in_circle",
    "invert_unit",
]
