"""Mini README: Bounding box accumulation for viewport fitting.

Structure:
    * BoundingBox - mutable min/max accumulator over longitude/latitude.
    * extend_bounds - fold one geometry into an existing box.

The box is deliberately a mutable accumulator: one instance is created per
update pass and every emitted geometry is folded into it. It reports itself
empty until a well-formed position has been added and never shrinks.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Tuple, Union

from .coordinates import is_position
from .normalizer import GeometryType, NormalizedGeometry, walk_positions

GeometryLike = Union[NormalizedGeometry, Mapping[str, Any]]


@dataclass(slots=True)
class BoundingBox:
    """Axis-aligned box in ``(min_lng, min_lat, max_lng, max_lat)`` form."""

    min_lng: Optional[float] = None
    min_lat: Optional[float] = None
    max_lng: Optional[float] = None
    max_lat: Optional[float] = None

    @property
    def is_empty(self) -> bool:
        return self.min_lng is None

    def extend_position(self, position: Any) -> bool:
        """Grow the box to include ``position``; return False if it was skipped."""

        if not is_position(position):
            return False
        lng, lat = float(position[0]), float(position[1])
        if self.is_empty:
            self.min_lng = self.max_lng = lng
            self.min_lat = self.max_lat = lat
            return True
        self.min_lng = min(self.min_lng, lng)
        self.max_lng = max(self.max_lng, lng)
        self.min_lat = min(self.min_lat, lat)
        self.max_lat = max(self.max_lat, lat)
        return True

    def extend(self, geometry: Optional[GeometryLike]) -> None:
        """Fold every position of ``geometry`` into the box.

        Accepts a ``NormalizedGeometry`` or a raw GeoJSON geometry mapping.
        Unknown types and non-conforming entries are ignored.
        """

        if isinstance(geometry, NormalizedGeometry):
            positions = geometry.positions()
        elif isinstance(geometry, Mapping):
            geometry_type = GeometryType.from_tag(geometry.get("type"))
            if geometry_type is None:
                return
            positions = walk_positions(geometry.get("coordinates") or [], geometry_type.depth)
        else:
            return
        for position in positions:
            self.extend_position(position)

    def as_tuple(self) -> Optional[Tuple[float, float, float, float]]:
        if self.is_empty:
            return None
        return (self.min_lng, self.min_lat, self.max_lng, self.max_lat)

    def as_corners(self) -> Optional[List[List[float]]]:
        """Return ``[[west, south], [east, north]]`` as map widgets expect."""

        if self.is_empty:
            return None
        return [[self.min_lng, self.min_lat], [self.max_lng, self.max_lat]]


def extend_bounds(box: BoundingBox, geometry: Optional[GeometryLike]) -> None:
    """Extend ``box`` in place with the positions of ``geometry``."""

    if box is None:
        raise TypeError("extend_bounds requires a BoundingBox instance")
    box.extend(geometry)
