import argparse
import dataclasses
import json
import logging
import sys
from typing import Any, Dict, Optional, Sequence

from curved_tiling import (
    GeometryError,
    TriangleParams,
    build_euclidean_triangle,
    build_hyperbolic_triangle,
    expand_euclidean_triangle_group,
    expand_hyperbolic_triangle_group,
    snap_triangle_params,
)

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _jsonable(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {key: _jsonable(val) for key, val in dataclasses.asdict(value).items()}
    if isinstance(value, dict):
        return {key: _jsonable(val) for key, val in value.items()}
    if isinstance(value, (list, tuple)):
        return [_jsonable(item) for item in value]
    return value


def build_summary(
    geometry: str,
    p: float,
    q: float,
    r: float,
    *,
    depth: int,
    max_faces: Optional[int] = None,
    snap: bool = False,
) -> Dict[str, Any]:
    """Build and tile one triangle, returning a JSON-ready summary."""

    if snap:
        snapped = snap_triangle_params((p, q, r))
        if snapped != (p, q, r):
            logger.info("Snapped (%s, %s, %s) to %s", p, q, r, tuple(snapped))
        p, q, r = snapped
    params = TriangleParams(p, q, r)

    if geometry == "hyperbolic":
        base = build_hyperbolic_triangle(p, q, r)
        tiling = expand_hyperbolic_triangle_group(base, depth, max_faces=max_faces)
    elif geometry == "euclidean":
        base = build_euclidean_triangle(p, q, r)
        tiling = expand_euclidean_triangle_group(base, depth, max_faces=max_faces)
    else:
        raise GeometryError(f"unknown geometry {geometry!r}")

    return {
        "geometry": geometry,
        "params": params._asdict(),
        "mirrors": _jsonable(base.mirrors),
        "vertices": _jsonable(base.vertices),
        "angles": list(base.angles),
        "warnings": list(base.warnings),
        "stats": _jsonable(tiling.stats),
        "faces": [
            {"id": face.id, "word": face.word, "verts": _jsonable(face.verts)}
            for face in tiling.faces
        ],
    }


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Build and tile (p, q, r) reflection triangles")
    parser.add_argument("geometry", choices=["hyperbolic", "euclidean"], help="Target geometry")
    parser.add_argument("p", type=float, help="Angle denominator at vertex 0")
    parser.add_argument("q", type=float, help="Angle denominator at vertex 1")
    parser.add_argument("r", type=float, help="Angle denominator at vertex 2")
    parser.add_argument(
        "--depth",
        type=int,
        default=2,
        help="Reflection depth of the tiling (default: 2)",
    )
    parser.add_argument(
        "--max-faces",
        type=int,
        default=None,
        help="Stop the expansion once this many faces exist",
    )
    parser.add_argument(
        "--snap",
        action="store_true",
        help="Snap (p, q, r) to integers that form a hyperbolic triple",
    )
    parser.add_argument(
        "--output",
        help="Write the JSON summary to this path instead of stdout",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    try:
        summary = build_summary(
            args.geometry,
            args.p,
            args.q,
            args.r,
            depth=args.depth,
            max_faces=args.max_faces,
            snap=args.snap,
        )
    except GeometryError as exc:
        logger.error("%s", exc)
        raise SystemExit(2) from exc

    text = json.dumps(summary, indent=2)
    if args.output:
        with open(args.output, "w") as fout:
            fout.write(text + "\n")
        logger.info("Wrote %d faces to %s", summary["stats"]["total"], args.output)
    else:
        sys.stdout.write(text + "\n")


if __name__ == "__main__":
    main()
