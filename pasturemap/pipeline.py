"""Mini README: One update pass from pasture records to a render-ready map.

Structure:
    * FitBoundsRequest - viewport fit instruction handed to the renderer.
    * MapUpdate - feature collection, bounds and optional fit request.
    * coerce_geojson_text - pull the raw text out of a record's GeoJSON cell.
    * build_map_update - filter, format, flatten and bound a record batch.
    * build_preview_update - the same fold for one ad-hoc parsed payload.

A pass is synchronous and side-effect free apart from logging. Records that
are inactive, empty, malformed or produce no renderable geometry are skipped;
the batch itself never fails because of record content.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional

from .configuration import FitOptions, PipelineConfig
from .features import (
    Feature,
    FeatureCollection,
    build_properties,
    flatten_features,
    is_active,
    parse_geojson_text,
)
from .geometry import BoundingBox
from .logging_utils import get_logger
from .records import PastureRecord

LOGGER = get_logger(__name__)


@dataclass(slots=True)
class FitBoundsRequest:
    bounds: BoundingBox
    padding: int
    max_zoom: float
    duration_ms: int

    def as_dict(self) -> Dict[str, Any]:
        return {
            "bounds": self.bounds.as_corners(),
            "padding": self.padding,
            "maxZoom": self.max_zoom,
            "duration": self.duration_ms,
        }


@dataclass(slots=True)
class MapUpdate:
    """Result of one pass; replaces whatever the renderer showed before."""

    collection: FeatureCollection = field(default_factory=FeatureCollection)
    bounds: BoundingBox = field(default_factory=BoundingBox)
    fit_request: Optional[FitBoundsRequest] = None

    def as_dict(self) -> Dict[str, Any]:
        return {
            "collection": self.collection.to_geojson(),
            "bounds": self.bounds.as_tuple(),
            "fit": self.fit_request.as_dict() if self.fit_request else None,
        }


def coerce_geojson_text(cell: Any) -> Optional[str]:
    """Return the GeoJSON text stored in a record cell, if any."""

    if cell is None or cell == "":
        return None
    if isinstance(cell, str):
        return cell
    if isinstance(cell, Mapping):
        text = cell.get("text")
        return text if isinstance(text, str) and text else None
    text = getattr(cell, "text", None)
    if isinstance(text, str):
        return text or None
    return str(cell)


def build_map_update(
    records: Iterable[PastureRecord],
    config: Optional[PipelineConfig] = None,
    fit_options: Optional[FitOptions] = None,
) -> MapUpdate:
    """Turn a batch of records into a flat feature collection and bounds."""

    config = config or PipelineConfig()
    fit_options = fit_options or FitOptions()
    update = MapUpdate()
    processed = 0

    for record in records:
        processed += 1
        if not is_active(record, config):
            LOGGER.debug("Skipping inactive record %s", record.record_id)
            continue

        text = coerce_geojson_text(record.geojson)
        if text is None:
            LOGGER.debug("Record %s has no GeoJSON", record.record_id)
            continue

        parsed = parse_geojson_text(text, record_id=record.record_id)
        if parsed is None:
            continue

        features = flatten_features(parsed, build_properties(record, config))
        if not features:
            LOGGER.warning("No renderable features after normalization for record %s", record.record_id)
            continue

        _fold_features(update, features)

    _attach_fit_request(update, fit_options)
    LOGGER.info(
        "Built map update with %s features from %s records", len(update.collection), processed
    )
    return update


def build_preview_update(
    container: Any,
    record: PastureRecord,
    config: Optional[PipelineConfig] = None,
    fit_options: Optional[FitOptions] = None,
) -> MapUpdate:
    """Flatten one already-parsed GeoJSON container with ``record``'s styling.

    Used for ad-hoc payloads that do not come from the record source; the
    active flag is not consulted.
    """

    update = MapUpdate()
    _fold_features(update, flatten_features(container, build_properties(record, config or PipelineConfig())))
    _attach_fit_request(update, fit_options or FitOptions())
    return update


def _fold_features(update: MapUpdate, features: List[Feature]) -> None:
    for feature in features:
        update.bounds.extend(feature.geometry)
    update.collection.features.extend(features)


def _attach_fit_request(update: MapUpdate, fit_options: FitOptions) -> None:
    if update.collection.features and not update.bounds.is_empty:
        update.fit_request = FitBoundsRequest(
            bounds=update.bounds,
            padding=fit_options.padding,
            max_zoom=fit_options.max_zoom,
            duration_ms=fit_options.duration_ms,
        )
