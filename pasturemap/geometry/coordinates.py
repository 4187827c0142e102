"""Mini README: Position-level helpers for hand-authored GeoJSON.

Structure:
    * is_number - finite numeric check that rejects booleans.
    * is_position - check for a sequence of at least two plain numbers.
    * correct_position - swap ``(lat, lng)`` pairs into ``(lng, lat)`` order.
    * close_ring - append the first position to an unclosed polygon ring.

Authors paste coordinates in either axis order. ``correct_position`` applies
a fixed rule: when the first value fits a latitude and the second fits a
longitude the pair is treated as ``(lat, lng)`` and swapped. Pairs where both
readings are plausible, e.g. ``(10, 20)``, are always swapped.
"""

from __future__ import annotations

import math
from numbers import Real
from typing import Any, List, Sequence

MAX_LATITUDE = 90
MAX_LONGITUDE = 180


def is_number(value: Any) -> bool:
    """Finite real number; booleans, NaN and infinities do not count."""

    return isinstance(value, Real) and not isinstance(value, bool) and math.isfinite(value)


def is_position(value: Any) -> bool:
    """Return True for a list/tuple whose first two entries are numbers."""

    return (
        isinstance(value, (list, tuple))
        and len(value) >= 2
        and is_number(value[0])
        and is_number(value[1])
    )


def correct_position(position: Sequence[float]) -> List[float]:
    """Return the position in ``(lng, lat[, elevation...])`` order.

    Trailing values such as elevation keep their place after the swap.
    """

    first, second = position[0], position[1]
    if abs(first) <= MAX_LATITUDE and abs(second) <= MAX_LONGITUDE:
        return [second, first, *position[2:]]
    return list(position)


def close_ring(ring: Sequence[Sequence[float]]) -> Sequence[Sequence[float]]:
    """Close a polygon ring by repeating its first position at the end.

    Rings with fewer than three positions are returned untouched. The input
    is never modified; a new list is returned when a position is appended.
    """

    if len(ring) < 3:
        return ring
    first, last = ring[0], ring[-1]
    if first[0] != last[0] or first[1] != last[1]:
        return [*ring, list(first)]
    return ring
