"""Mini README: Map session tying a record source to a rendering sink.

Structure:
    * MapSession - runs update passes and hands results to the sink.

Each ``refresh`` builds a fresh ``MapUpdate`` from the source's current
records. When the sink is not ready yet the update is parked; a later pass
replaces a parked update and ``sink_ready`` applies whichever is newest.
"""

from __future__ import annotations

from typing import Optional

from ..configuration import FitOptions, PipelineConfig
from ..logging_utils import get_logger
from ..pipeline import MapUpdate, build_map_update
from ..records import RecordSource
from .sink import RenderSink

LOGGER = get_logger(__name__)


class MapSession:
    """Coordinate update passes between a record source and a sink."""

    def __init__(
        self,
        source: RecordSource,
        sink: RenderSink,
        *,
        config: Optional[PipelineConfig] = None,
        fit_options: Optional[FitOptions] = None,
    ) -> None:
        self.source = source
        self.sink = sink
        self.config = config or PipelineConfig()
        self.fit_options = fit_options or FitOptions()
        self._pending: Optional[MapUpdate] = None
        LOGGER.debug("Initialised MapSession with sink '%s'", sink.sink_name)

    @property
    def pending(self) -> Optional[MapUpdate]:
        return self._pending

    def refresh(self) -> MapUpdate:
        """Build an update from the current records and publish it."""

        update = build_map_update(self.source.fetch_records(), self.config, self.fit_options)
        self.publish(update)
        return update

    def publish(self, update: MapUpdate) -> bool:
        """Apply ``update`` now, or park it until the sink is ready.

        Returns True when the sink received the update immediately.
        """

        if not self.sink.is_ready():
            if self._pending is not None:
                LOGGER.debug("Replacing parked update with a newer pass")
            self._pending = update
            LOGGER.info("Sink '%s' not ready; deferring update", self.sink.sink_name)
            return False
        self._apply(update)
        return True

    def sink_ready(self) -> bool:
        """Apply the parked update, if any. Call once the sink has loaded."""

        if self._pending is None or not self.sink.is_ready():
            return False
        update, self._pending = self._pending, None
        self._apply(update)
        return True

    def _apply(self, update: MapUpdate) -> None:
        self.sink.set_data(update.collection)
        if update.fit_request is not None:
            self.sink.fit_bounds(update.fit_request)
        LOGGER.info(
            "Applied %s features to sink '%s'", len(update.collection), self.sink.sink_name
        )
