"""Mini README: Core package initializer for the pasture map pipeline.

Exposes the pipeline entry point and logger factory so callers can turn a
batch of pasture records into a render-ready feature collection without
knowing the package layout.
"""

from .logging_utils import get_logger
from .pipeline import MapUpdate, build_map_update, build_preview_update

__all__ = ["MapUpdate", "build_map_update", "build_preview_update", "get_logger"]
