"""Mini README: Feature flattening and attribute formatting package.

``flattener`` turns raw GeoJSON containers into ``Feature`` objects and
``attributes`` builds the display property bag shared by a record's features.
"""

from .attributes import (
    NOT_AVAILABLE,
    build_properties,
    derive_total_forage,
    format_number,
    format_percentage,
    is_active,
)
from .flattener import Feature, FeatureCollection, flatten_features, parse_geojson_text

__all__ = [
    "NOT_AVAILABLE",
    "Feature",
    "FeatureCollection",
    "build_properties",
    "derive_total_forage",
    "flatten_features",
    "format_number",
    "format_percentage",
    "is_active",
    "parse_geojson_text",
]
