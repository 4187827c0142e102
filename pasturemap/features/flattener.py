"""Mini README: Flatten arbitrary GeoJSON containers into render-ready features.

Structure:
    * Feature - normalised geometry plus display properties.
    * FeatureCollection - ordered features with GeoJSON export.
    * parse_geojson_text - decode a raw blob, returning None when malformed.
    * flatten_features - walk a container and emit normalised features.

Accepted containers are a FeatureCollection, a Feature, a bare geometry, or a
plain JSON array of features/geometries. Entries that cannot be normalised are
dropped with a warning; the rest keep their source order. Record attributes
win over properties already embedded on a feature.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional

from ..geometry import NormalizedGeometry, normalize_geometry
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


@dataclass(slots=True)
class Feature:
    geometry: NormalizedGeometry
    properties: Dict[str, Any] = field(default_factory=dict)

    def to_geojson(self) -> Dict[str, Any]:
        return {
            "type": "Feature",
            "geometry": self.geometry.to_geojson(),
            "properties": dict(self.properties),
        }


@dataclass(slots=True)
class FeatureCollection:
    features: List[Feature] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.features)

    def to_geojson(self) -> Dict[str, Any]:
        """Return the ``{"type": "FeatureCollection", ...}`` mapping."""

        return {
            "type": "FeatureCollection",
            "features": [feature.to_geojson() for feature in self.features],
        }


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def parse_geojson_text(text: Optional[str], *, record_id: Optional[str] = None) -> Any:
    """Decode a GeoJSON blob, logging and returning None when it is not JSON.

    Strict JSON only: ``NaN`` and ``Infinity`` literals and documents nested
    too deeply to decode count as malformed.
    """

    if not text:
        return None
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except (ValueError, TypeError, RecursionError):
        LOGGER.warning("Skipping record with invalid GeoJSON: %s", record_id)
        return None


def _wrap(geometry: Optional[Mapping[str, Any]], properties: Dict[str, Any]) -> List[Feature]:
    normalized = normalize_geometry(geometry)
    if normalized is None:
        return []
    return [Feature(geometry=normalized, properties=properties)]


def _merge(embedded: Any, attrs: Mapping[str, Any]) -> Dict[str, Any]:
    merged = dict(embedded) if isinstance(embedded, Mapping) else {}
    merged.update(attrs)
    return merged


def _flatten_entries(entries: Iterable[Any], attrs: Mapping[str, Any]) -> List[Feature]:
    features: List[Feature] = []
    for index, entry in enumerate(entries):
        if not entry:
            continue
        if not isinstance(entry, Mapping):
            LOGGER.warning("Skipping collection entry %s: not an object", index)
            continue
        if entry.get("type") == "Feature":
            features.extend(_wrap(entry.get("geometry"), _merge(entry.get("properties"), attrs)))
        elif entry.get("type") and entry.get("coordinates") is not None:
            features.extend(_wrap(entry, dict(attrs)))
        else:
            LOGGER.warning("Skipping collection entry %s: not a feature or geometry", index)
    return features


def flatten_features(container: Any, attrs: Optional[Mapping[str, Any]] = None) -> List[Feature]:
    """Return every renderable feature in ``container`` with ``attrs`` merged in.

    Never raises for malformed content; unrecognised containers yield an
    empty list and a warning.
    """

    attrs = attrs or {}
    if not container:
        return []
    if isinstance(container, list):
        return _flatten_entries(container, attrs)
    if not isinstance(container, Mapping):
        LOGGER.warning("Unrecognized GeoJSON object: %r", container)
        return []

    container_type = container.get("type")
    if container_type == "FeatureCollection":
        entries = container.get("features")
        return _flatten_entries(entries if isinstance(entries, list) else [], attrs)
    if container_type == "Feature":
        return _wrap(container.get("geometry"), _merge(container.get("properties"), attrs))
    if container_type:
        return _wrap(container, dict(attrs))

    LOGGER.warning("Unrecognized GeoJSON object: %r", container)
    return []
