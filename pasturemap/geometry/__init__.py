"""Mini README: Geometry normalisation package.

Coordinate correction, ring closing, per-type geometry normalisation and the
bounding box accumulator live here. ``normalizer`` holds the public
``normalize_geometry`` entry point.
"""

from .bounds import BoundingBox, extend_bounds
from .coordinates import close_ring, correct_position, is_position
from .normalizer import GeometryType, MalformedGeometryError, NormalizedGeometry, normalize_geometry

__all__ = [
    "BoundingBox",
    "GeometryType",
    "MalformedGeometryError",
    "NormalizedGeometry",
    "close_ring",
    "correct_position",
    "extend_bounds",
    "is_position",
    "normalize_geometry",
]
