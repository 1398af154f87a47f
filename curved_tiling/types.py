"""Value types shared across the geometry kernel."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Generic, Optional, Tuple, TypeVar, Union
from typing import Literal

Vec2 = Tuple[float, float]
Vec3 = Tuple[float, float, float]
Transform2D = Callable[[Vec2], Vec2]

GeometryKind = Literal["hyperbolic", "euclidean"]
IntersectKind = Literal["none", "tangent", "two", "concentric", "coincident"]


class GeometryError(ValueError):
    """Base class for hard construction errors raised by the kernel."""


class DegenerateGeometryError(GeometryError):
    """Raised when an input collapses (zero normal, coincident handles, ...)."""


class TriangleConstructionError(GeometryError):
    """Raised when triangle parameters cannot produce the requested geometry."""


@dataclass(frozen=True)
class Circle:
    center: Vec2
    radius: float


@dataclass(frozen=True)
class IntersectResult:
    """Classification of two circles.

    ``points`` is empty for ``none``/``concentric``/``coincident``, holds one
    point for ``tangent`` and two points sorted by ``(x, y)`` for ``two``.
    """

    kind: IntersectKind
    points: Tuple[Vec2, ...] = ()


@dataclass(frozen=True)
class HalfPlane:
    """Boundary line through ``anchor`` with outward ``normal``."""

    anchor: Vec2
    normal: Vec2


@dataclass(frozen=True)
class DiameterGeodesic:
    dir: Vec2
    kind: Literal["diameter"] = "diameter"


@dataclass(frozen=True)
class CircleGeodesic:
    center: Vec2
    radius: float
    kind: Literal["circle"] = "circle"


@dataclass(frozen=True)
class HalfPlaneGeodesic:
    normal: Vec2
    offset: float
    kind: Literal["halfPlane"] = "halfPlane"


Geodesic = Union[DiameterGeodesic, CircleGeodesic, HalfPlaneGeodesic]


@dataclass(frozen=True)
class OrientedCircle:
    """Circle boundary; ``orientation=+1`` makes the exterior positive."""

    center: Vec2
    radius: float
    orientation: int = 1
    kind: Literal["circle"] = "circle"


@dataclass(frozen=True)
class OrientedLine:
    anchor: Vec2
    normal: Vec2
    kind: Literal["line"] = "line"


OrientedGeodesic = Union[OrientedCircle, OrientedLine]


M = TypeVar("M")


@dataclass(frozen=True)
class TrianglePrimitiveSet(Generic[M]):
    """Mirrors, vertices and interior angles of a fundamental triangle.

    ``boundaries`` and ``half_planes`` are derived conveniences filled in by
    the hyperbolic builder; ``warnings`` carries non-fatal diagnostics.
    """

    kind: GeometryKind
    mirrors: Tuple[M, M, M]
    vertices: Tuple[Vec2, Vec2, Vec2]
    angles: Tuple[float, float, float]
    boundaries: Tuple[OrientedGeodesic, ...] = ()
    half_planes: Tuple[Optional[HalfPlane], ...] = ()
    warnings: Tuple[str, ...] = field(default_factory=tuple)


HyperbolicTriangle = TrianglePrimitiveSet[Geodesic]
EuclideanTriangle = TrianglePrimitiveSet[HalfPlane]


__all__ = [
    "Circle",
    "CircleGeodesic",
    "DegenerateGeometryError",
    "DiameterGeodesic",
    "EuclideanTriangle",
    "Geodesic",
    "GeometryError",
    "GeometryKind",
    "HalfPlane",
    "HalfPlaneGeodesic",
    "HyperbolicTriangle",
    "IntersectKind",
    "IntersectResult",
    "OrientedCircle",
    "OrientedGeodesic",
    "OrientedLine",
    "Transform2D",
    "TriangleConstructionError",
    "TrianglePrimitiveSet",
    "Vec2",
    "Vec3",
]
