"""Mini README: Display formatting for pasture attributes.

Structure:
    * format_number - round to an integer with thousands separators.
    * format_percentage - render a fraction as a one-decimal percentage.
    * derive_total_forage - acres times forage per acre, or absent.
    * is_active - apply the optional 'Is Active' filter.
    * build_properties - assemble the property bag merged into features.

Absent values render as ``NOT_AVAILABLE`` rather than zero so the map labels
never imply a measurement that was not taken.
"""

from __future__ import annotations

import math
from typing import Any, Dict, Optional

from ..configuration import PipelineConfig
from ..geometry.coordinates import is_number
from ..records import PastureRecord

NOT_AVAILABLE = "N/A"
UNNAMED = "Unnamed"


def format_number(value: Any) -> str:
    """Round half up to an integer and add thousands separators."""

    if value is None:
        return NOT_AVAILABLE
    if is_number(value):
        return f"{math.floor(value + 0.5):,}"
    return str(value)


def format_percentage(value: Any) -> str:
    if value is None:
        return NOT_AVAILABLE
    if is_number(value):
        return f"{value * 100:.1f}%"
    return str(value)


def derive_total_forage(total_acres: Any, forage_per_acre: Any) -> Optional[float]:
    """Return the product when both inputs are non-zero numbers, otherwise None.

    A zero operand counts as unset, so the label shows N/A rather than 0.
    """

    if not is_number(total_acres) or not is_number(forage_per_acre):
        return None
    if not total_acres or not forage_per_acre:
        return None
    return total_acres * forage_per_acre


def is_active(record: PastureRecord, config: PipelineConfig) -> bool:
    """Records without the flag configured are always active."""

    if not config.active_field_present:
        return True
    return bool(record.active)


def build_properties(record: PastureRecord, config: PipelineConfig) -> Dict[str, Any]:
    """Return the display properties shared by every feature of a record."""

    return {
        "recordId": record.record_id,
        "name": record.name if record.name is not None else UNNAMED,
        "totalAcres": format_number(record.total_acres),
        "grazeableAcres": format_percentage(record.grazeable_acres),
        "totalForage": format_number(derive_total_forage(record.total_acres, record.forage_per_acre)),
        "fillColor": record.color if record.color is not None else config.default_fill_color,
        "fillOpacity": record.opacity if record.opacity is not None else config.default_opacity,
        "strokeWidth": (
            record.stroke_width if record.stroke_width is not None else config.default_stroke_width
        ),
    }
