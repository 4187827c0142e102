"""Mini README: Normalise one GeoJSON geometry object for rendering.

Structure:
    * GeometryType - closed set of supported geometry tags.
    * NormalizedGeometry - corrected coordinates tagged with their type.
    * MalformedGeometryError - raised for coordinate trees of the wrong shape.
    * normalize_geometry - dispatch on the type tag, correct and close.

Each supported type declares how deeply its positions are nested and whether
its depth-one sequences are polygon rings. Every tag outside ``GeometryType``
yields ``None`` together with a warning; the caller drops the geometry.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterator, List, Mapping, Optional

from ..logging_utils import get_logger
from .coordinates import close_ring, correct_position, is_number, is_position

LOGGER = get_logger(__name__)


class GeometryType(str, Enum):
    """Geometry tags the renderer understands."""

    POINT = "Point"
    MULTI_POINT = "MultiPoint"
    LINE_STRING = "LineString"
    MULTI_LINE_STRING = "MultiLineString"
    POLYGON = "Polygon"
    MULTI_POLYGON = "MultiPolygon"

    @classmethod
    def from_tag(cls, tag: Any) -> Optional["GeometryType"]:
        """Return the member for an exact GeoJSON tag, or None."""

        try:
            return cls(tag)
        except ValueError:
            return None

    @property
    def depth(self) -> int:
        """Number of sequence levels wrapped around each position."""

        return _NESTING_DEPTH[self]

    @property
    def has_rings(self) -> bool:
        return self in (GeometryType.POLYGON, GeometryType.MULTI_POLYGON)


_NESTING_DEPTH: Dict[GeometryType, int] = {
    GeometryType.POINT: 0,
    GeometryType.MULTI_POINT: 1,
    GeometryType.LINE_STRING: 1,
    GeometryType.MULTI_LINE_STRING: 2,
    GeometryType.POLYGON: 2,
    GeometryType.MULTI_POLYGON: 3,
}


class MalformedGeometryError(ValueError):
    """Coordinates do not match the nesting declared by the geometry type."""


@dataclass(slots=True)
class NormalizedGeometry:
    """Geometry with ``(lng, lat)`` positions and closed polygon rings."""

    geometry_type: GeometryType
    coordinates: Any

    def positions(self) -> Iterator[Any]:
        """Yield every leaf entry at the depth implied by the type."""

        yield from walk_positions(self.coordinates, self.geometry_type.depth)

    def to_geojson(self) -> Dict[str, Any]:
        return {"type": self.geometry_type.value, "coordinates": self.coordinates}


def walk_positions(coordinates: Any, depth: int) -> Iterator[Any]:
    """Yield the entries found ``depth`` sequence levels below ``coordinates``.

    Entries that are not lists at an intermediate level are skipped, so the
    walk is safe on untrusted input.
    """

    if depth == 0:
        yield coordinates
        return
    if not isinstance(coordinates, (list, tuple)):
        return
    for child in coordinates:
        yield from walk_positions(child, depth - 1)


def _normalize_level(value: Any, depth: int, has_rings: bool) -> Any:
    if depth == 0:
        if not is_position(value) or not all(is_number(part) for part in value):
            raise MalformedGeometryError(f"Invalid position {value!r}")
        return correct_position(value)
    if not isinstance(value, (list, tuple)):
        raise MalformedGeometryError(f"Expected a coordinate sequence, got {value!r}")
    children: List[Any] = [_normalize_level(child, depth - 1, has_rings) for child in value]
    if has_rings and depth == 1:
        return close_ring(children)
    return children


def normalize_geometry(geometry: Optional[Mapping[str, Any]]) -> Optional[NormalizedGeometry]:
    """Return the normalised geometry, or None when it cannot be rendered.

    Absent coordinates count as an empty sequence at the type's depth. An
    absent or unsupported type tag, and coordinates of the wrong shape, are
    logged and produce None.
    """

    if not isinstance(geometry, Mapping) or not geometry.get("type"):
        LOGGER.warning("Skipping geometry without a type: %r", geometry)
        return None

    geometry_type = GeometryType.from_tag(geometry["type"])
    if geometry_type is None:
        LOGGER.warning("Unsupported geometry type: %s", geometry["type"])
        return None

    coordinates = geometry.get("coordinates")
    if coordinates is None or (geometry_type is GeometryType.POINT and coordinates == []):
        return NormalizedGeometry(geometry_type=geometry_type, coordinates=[])

    try:
        normalized = _normalize_level(coordinates, geometry_type.depth, geometry_type.has_rings)
    except MalformedGeometryError as error:
        LOGGER.warning("Skipping malformed %s geometry: %s", geometry_type.value, error)
        return None
    return NormalizedGeometry(geometry_type=geometry_type, coordinates=normalized)
