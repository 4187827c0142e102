"""Mini README: Tests for attribute formatting and record property bags.

Checks integer rounding with separators, percentage rendering, the
absence-propagating forage product and the active-flag filter.
"""

from __future__ import annotations

import pytest

from pasturemap.configuration import PipelineConfig
from pasturemap.features import (
    NOT_AVAILABLE,
    build_properties,
    derive_total_forage,
    format_number,
    format_percentage,
    is_active,
)
from pasturemap.records import PastureRecord


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, "N/A"),
        (0, "0"),
        (1234567.4, "1,234,567"),
        (2.5, "3"),
        (-2.5, "-2"),
        (999.5, "1,000"),
        ("custom", "custom"),
    ],
)
def test_format_number(value, expected) -> None:
    assert format_number(value) == expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [(None, "N/A"), (0.82, "82.0%"), (1, "100.0%"), (0.1234, "12.3%"), ("half", "half")],
)
def test_format_percentage(value, expected) -> None:
    assert format_percentage(value) == expected


def test_total_forage_requires_both_inputs() -> None:
    assert derive_total_forage(120, 1500) == 180000
    assert derive_total_forage(120, None) is None
    assert derive_total_forage(None, 1500) is None
    assert derive_total_forage(120, "lots") is None
    assert derive_total_forage(0, 1500) is None
    assert derive_total_forage(120, 0) is None


def test_build_properties_formats_values() -> None:
    record = PastureRecord(
        record_id="rec1",
        name="North",
        total_acres=120,
        grazeable_acres=0.755,
        forage_per_acre=1500,
        color="#ff0000",
        opacity=0.7,
        stroke_width=3,
    )

    properties = build_properties(record, PipelineConfig())

    assert properties == {
        "recordId": "rec1",
        "name": "North",
        "totalAcres": "120",
        "grazeableAcres": "75.5%",
        "totalForage": "180,000",
        "fillColor": "#ff0000",
        "fillOpacity": 0.7,
        "strokeWidth": 3,
    }


def test_build_properties_uses_defaults_and_not_available() -> None:
    """Missing forage per acre propagates absence instead of zero."""

    record = PastureRecord(record_id="rec2", total_acres=120, forage_per_acre=None)
    config = PipelineConfig(default_fill_color="#123456", default_opacity=0.3, default_stroke_width=4)

    properties = build_properties(record, config)

    assert properties["name"] == "Unnamed"
    assert properties["totalForage"] == NOT_AVAILABLE
    assert properties["grazeableAcres"] == NOT_AVAILABLE
    assert properties["fillColor"] == "#123456"
    assert properties["fillOpacity"] == 0.3
    assert properties["strokeWidth"] == 4


def test_is_active_honours_configuration() -> None:
    inactive = PastureRecord(record_id="r", active=False)
    unset = PastureRecord(record_id="r", active=None)

    assert not is_active(inactive, PipelineConfig(active_field_present=True))
    assert not is_active(unset, PipelineConfig(active_field_present=True))
    assert is_active(inactive, PipelineConfig(active_field_present=False))
    assert is_active(PastureRecord(record_id="r"), PipelineConfig())


def test_zero_forage_inputs_render_not_available() -> None:
    """Zero acres or zero forage leaves the total unset instead of 0 lbs."""

    record = PastureRecord(record_id="rec3", total_acres=0, forage_per_acre=1500)

    properties = build_properties(record, PipelineConfig())

    assert properties["totalAcres"] == "0"
    assert properties["totalForage"] == NOT_AVAILABLE


def test_non_finite_values_are_not_formatted_as_numbers() -> None:
    assert format_number(float("inf")) == "inf"
    assert derive_total_forage(float("nan"), 10) is None
