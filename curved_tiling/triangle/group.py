"""Breadth-first expansion of a reflection-group tiling."""

from __future__ import annotations

import logging
import math
from collections import deque
from dataclasses import dataclass
from typing import Callable, Deque, List, Optional, Sequence, Set, Tuple, TypeVar

import numpy as np

from ..config import DEFAULT_TILING_OPTIONS
from ..logging_utils import apply_debug_logging
from ..numeric import midpoint3
from ..primitives.half_plane import reflect_across_half_plane
from ..transforms.reflect import reflect_across_geodesic
from ..types import (
    EuclideanTriangle,
    GeometryError,
    HyperbolicTriangle,
    Transform2D,
    TrianglePrimitiveSet,
    Vec2,
)

logger = logging.getLogger(__name__)

M = TypeVar("M")
Triangle = Tuple[Vec2, Vec2, Vec2]


@dataclass(frozen=True)
class Aabb:
    min: Vec2
    max: Vec2


@dataclass(frozen=True)
class TriangleFace:
    """One tile: ``word`` lists the mirrors (1-based) reflected from the base."""

    id: str
    verts: Triangle
    aabb: Aabb
    word: str


@dataclass(frozen=True)
class TilingStats:
    depth: int
    total: int
    duplicates: int


@dataclass(frozen=True)
class TilingResult:
    faces: Tuple[TriangleFace, ...]
    stats: TilingStats


def _aabb(verts: Triangle) -> Aabb:
    xs = [v[0] for v in verts]
    ys = [v[1] for v in verts]
    return Aabb((min(xs), min(ys)), (max(xs), max(ys)))


def _quantize(value: float, quantum: float) -> int:
    # round half up, like Math.round
    return int(math.floor(value / quantum + 0.5))


def barycenter_key(verts: Triangle, quantum: float = DEFAULT_TILING_OPTIONS.quantum) -> str:
    """Dedup key ``"<qx>:<qy>"`` of the barycentre on a ``quantum`` grid."""

    cx, cy = midpoint3(*verts)
    return f"{_quantize(cx, quantum)}:{_quantize(cy, quantum)}"


def _face_sort_key(face: TriangleFace) -> Tuple[int, str, str]:
    return len(face.word), face.word, face.id


def expand_triangle_group(
    base: TrianglePrimitiveSet[M],
    depth: int,
    reflector: Callable[[M], Transform2D],
    *,
    max_faces: Optional[int] = DEFAULT_TILING_OPTIONS.max_faces,
    quantum: float = DEFAULT_TILING_OPTIONS.quantum,
) -> TilingResult:
    """Reflect ``base`` across its mirrors level by level up to ``depth``.

    Each queued face is reflected across the base triangle's three mirrors.
    A face whose quantised barycentre was already seen is dropped. The
    expansion stops as soon as ``max_faces`` faces exist. Faces are returned
    sorted by ``(len(word), word, id)`` so identical inputs give identical
    output.
    """

    if depth < 0:
        raise GeometryError(f"Tiling depth must be non-negative, got {depth}")
    if max_faces is not None and max_faces < 1:
        raise GeometryError(f"max_faces must be positive, got {max_faces}")
    if not quantum > 0:
        raise GeometryError(f"Barycentre quantum must be positive, got {quantum}")

    transforms = [reflector(mirror) for mirror in base.mirrors]
    faces: List[TriangleFace] = []
    seen: Set[str] = set()
    queue: Deque[Tuple[Triangle, str]] = deque()
    rejected = 0

    def push(verts: Triangle, word: str) -> None:
        nonlocal rejected
        key = barycenter_key(verts, quantum)
        if key in seen:
            rejected += 1
            return
        seen.add(key)
        faces.append(TriangleFace(f"{word}|{key}", verts, _aabb(verts), word))
        queue.append((verts, word))

    def full() -> bool:
        return max_faces is not None and len(faces) >= max_faces

    push(tuple(base.vertices), "")
    for level in range(depth):
        if full():
            break
        for _ in range(len(queue)):
            verts, word = queue.popleft()
            for index, transform in enumerate(transforms):
                image = (transform(verts[0]), transform(verts[1]), transform(verts[2]))
                push(image, word + str(index + 1))
                if full():
                    break
            if full():
                break
        logger.debug("Tiling level %d: %d faces, %d rejected", level + 1, len(faces), rejected)

    if full():
        logger.info("Tiling stopped at max_faces=%d", max_faces)
    faces.sort(key=_face_sort_key)
    return TilingResult(
        faces=tuple(faces),
        stats=TilingStats(depth=depth, total=len(faces), duplicates=rejected),
    )


def expand_hyperbolic_triangle_group(
    base: HyperbolicTriangle,
    depth: int,
    *,
    max_faces: Optional[int] = DEFAULT_TILING_OPTIONS.max_faces,
    quantum: float = DEFAULT_TILING_OPTIONS.quantum,
) -> TilingResult:
    return expand_triangle_group(
        base, depth, reflect_across_geodesic, max_faces=max_faces, quantum=quantum
    )


def expand_euclidean_triangle_group(
    base: EuclideanTriangle,
    depth: int,
    *,
    max_faces: Optional[int] = DEFAULT_TILING_OPTIONS.max_faces,
    quantum: float = DEFAULT_TILING_OPTIONS.quantum,
) -> TilingResult:
    return expand_triangle_group(
        base, depth, reflect_across_half_plane, max_faces=max_faces, quantum=quantum
    )


def faces_as_array(faces: Sequence[TriangleFace]) -> np.ndarray:
    """Stack face vertices into an ``(N, 3, 2)`` float array."""

    if not faces:
        return np.zeros((0, 3, 2), dtype=float)
    return np.asarray([face.verts for face in faces], dtype=float)


apply_debug_logging(globals(), logger=logger, skip={"barycenter_key"})


__all__ = [
    "Aabb",
    "TilingResult",
    "TilingStats",
    "TriangleFace",
    "barycenter_key",
    "expand_euclidean_triangle_group",
    "expand_hyperbolic_triangle_group",
    "expand_triangle_group",
    "faces_as_array",
]
