"""Mini README: Rendering sink interface for map widgets.

Structure:
    * RenderSink - abstract interface implemented by map front-ends.
    * InMemoryRenderSink - keeps the last applied data for APIs and tests.

A sink receives a complete feature collection that replaces everything it
showed before, plus an optional viewport fit request. Sinks that are still
loading report ``is_ready() == False`` so the session can hold the update.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from ..features import FeatureCollection
from ..logging_utils import get_logger
from ..pipeline import FitBoundsRequest

LOGGER = get_logger(__name__)


class RenderSink(ABC):
    """Base interface for anything that draws the pasture collection."""

    sink_name: str = "generic"

    @abstractmethod
    def is_ready(self) -> bool:
        """Return True once the sink can accept data."""

    @abstractmethod
    def set_data(self, collection: FeatureCollection) -> None:
        """Replace the displayed features with ``collection``."""

    @abstractmethod
    def fit_bounds(self, request: FitBoundsRequest) -> None:
        """Move the viewport so the requested bounds are visible."""


class InMemoryRenderSink(RenderSink):
    """Sink that records what it was given instead of drawing it."""

    sink_name = "memory"

    def __init__(self, *, ready: bool = True) -> None:
        self._ready = ready
        self.collection = FeatureCollection()
        self.last_fit: Optional[FitBoundsRequest] = None
        self.applied_count = 0

    def is_ready(self) -> bool:
        return self._ready

    def mark_ready(self) -> None:
        self._ready = True

    def set_data(self, collection: FeatureCollection) -> None:
        self.collection = collection
        self.applied_count += 1
        LOGGER.debug("Sink '%s' now holds %s features", self.sink_name, len(collection))

    def fit_bounds(self, request: FitBoundsRequest) -> None:
        self.last_fit = request

    def snapshot(self) -> Dict[str, Any]:
        """Return the applied data as JSON-serialisable values."""

        return {
            "collection": self.collection.to_geojson(),
            "fit": self.last_fit.as_dict() if self.last_fit else None,
        }
