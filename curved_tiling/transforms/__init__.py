"""Inversions and reflections used to generate tilings."""

from .inversion import (
    InvertedCircle,
    InvertedLine,
    InvertedLineImage,
    circle_through_points,
    invert_in_circle,
    invert_line_in_circle,
    invert_unit,
)
from .reflect import reflect_across_diameter, reflect_across_geodesic

__all__ = [
    "InvertedCircle",
    "InvertedLine",
    "InvertedLineImage",
    "circle_through_points",
    "invert_in_circle",
    "invert_line_in_circle",
    "invert_unit",
    "reflect_across_diameter",
    "reflect_across_geodesic",
]
