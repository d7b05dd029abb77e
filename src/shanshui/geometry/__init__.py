from .curves import fit_curve, normalize_noise, subdivide
from .polytools import (
    bounding_box,
    flip_polyline,
    is_local_maximum,
    midpoint,
    polygon_area,
    transform_along_line,
    triangulate,
    un_nan,
)

__all__ = [
    "subdivide",
    "fit_curve",
    "normalize_noise",
    "midpoint",
    "bounding_box",
    "flip_polyline",
    "transform_along_line",
    "polygon_area",
    "triangulate",
    "un_nan",
    "is_local_maximum",
]
