"""Mini README: Tests for coordinate order correction and ring closing.

These tests pin the axis-order rule, including the zone where both readings
are plausible, and confirm polygon rings are closed without mutating input.
"""

from __future__ import annotations

import pytest

from pasturemap.geometry import close_ring, correct_position, is_position


@pytest.mark.parametrize(
    ("position", "expected"),
    [
        ([45.0, -110.0], [-110.0, 45.0]),
        ((-33.9, 151.2), [151.2, -33.9]),
        ([90, 180], [180, 90]),
        ([45.0, -110.0, 1520.5], [-110.0, 45.0, 1520.5]),
    ],
)
def test_correct_position_swaps_latitude_first_pairs(position, expected) -> None:
    """Pairs whose first value fits a latitude are swapped to lng-first."""

    assert correct_position(position) == expected


def test_correct_position_keeps_longitude_first_pairs() -> None:
    """A first value outside latitude range is already a longitude."""

    assert correct_position([-110.0, 45.0]) == [-110.0, 45.0]
    assert correct_position(correct_position([-110.0, 45.0])) == [-110.0, 45.0]


def test_correct_position_passes_out_of_range_pairs_through() -> None:
    """Neither reading is valid, so the pair is left untouched."""

    assert correct_position([200.0, 300.0]) == [200.0, 300.0]


def test_correct_position_ambiguous_pairs_follow_latitude_first_rule() -> None:
    """Known-ambiguous zone: both orders are valid and the swap always wins."""

    assert correct_position([10, 20]) == [20, 10]
    assert correct_position([20, 10]) == [10, 20]


def test_is_position_rejects_non_numeric_values() -> None:
    assert is_position([1, 2])
    assert not is_position([1])
    assert not is_position(["1", "2"])
    assert not is_position([True, 2])
    assert not is_position(None)


def test_close_ring_appends_first_position() -> None:
    """Open rings gain a copy of their first position."""

    ring = [[0.0, 0.0], [1.0, 0.0], [1.0, 1.0]]
    closed = close_ring(ring)

    assert closed == [[0.0, 0.0], [1.0, 0.0], [1.0, 1.0], [0.0, 0.0]]
    assert closed[0] == closed[-1]
    assert closed[-1] is not ring[0]
    assert len(ring) == 3


def test_close_ring_is_idempotent() -> None:
    ring = [[0.0, 0.0], [1.0, 0.0], [1.0, 1.0], [0.0, 1.0]]

    assert close_ring(close_ring(ring)) == close_ring(ring)


def test_close_ring_compares_only_horizontal_components() -> None:
    """Differing elevation does not count as an open ring."""

    ring = [[0.0, 0.0, 5.0], [1.0, 0.0], [1.0, 1.0], [0.0, 0.0, 9.0]]

    assert close_ring(ring) == ring


def test_close_ring_leaves_degenerate_rings_alone() -> None:
    assert close_ring([]) == []
    assert close_ring([[0.0, 0.0], [1.0, 1.0]]) == [[0.0, 0.0], [1.0, 1.0]]


def test_non_finite_values_are_not_positions() -> None:
    assert not is_position([float("nan"), 45.0])
    assert not is_position([-110.0, float("inf")])
