"""Mini README: Centralised configuration for the pasture map pipeline.

Structure:
    * PipelineConfig - explicit styling defaults and active-flag handling.
    * FitOptions - pass-through viewport fit parameters for the renderer.
    * PastureMapSettings - Pydantic settings read from the environment.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Call ``get_settings().pipeline_config()`` to obtain the value handed to
    ``build_map_update``. Environment variables use the ``PASTUREMAP_``
    prefix, e.g. ``PASTUREMAP_DEFAULT_FILL_COLOR=#ff9900``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, validator
from pydantic_settings import BaseSettings

_HEX_COLOR = re.compile(r"^#(?:[0-9a-fA-F]{3}){1,2}$")


@dataclass(frozen=True, slots=True)
class PipelineConfig:
    """Styling defaults applied when a record leaves a field unset."""

    default_fill_color: str = "#22b14c"
    default_opacity: float = 0.5
    default_stroke_width: float = 2
    active_field_present: bool = True


@dataclass(frozen=True, slots=True)
class FitOptions:
    """Viewport fit parameters, opaque to the normalisation core."""

    padding: int = 50
    max_zoom: float = 15
    duration_ms: int = 1200


class PastureMapSettings(BaseSettings):
    """Runtime configuration for the pasture map service."""

    environment: str = Field(
        "development",
        description="Environment label controlling debug toggles and logging levels.",
    )
    interface_host: str = Field(
        "0.0.0.0",
        description="Network interface for the map data service to bind to.",
    )
    interface_port: int = Field(
        8000,
        description="Default port the map data service exposes.",
        ge=1,
        le=65535,
    )
    records_file: Optional[Path] = Field(
        None,
        description=(
            "JSON file holding pasture records. Leave unset to serve the"
            " built-in demo pastures."
        ),
    )
    mapbox_access_token: Optional[str] = Field(
        None,
        description="Token forwarded to map clients that render the collection.",
    )
    default_fill_color: str = Field(
        "#22b14c",
        description="Fill colour used when a record has no pasture colour.",
    )
    default_opacity: float = Field(
        0.5,
        description="Fill opacity used when a record has no alpha value.",
        ge=0.0,
        le=1.0,
    )
    default_stroke_width: float = Field(
        2,
        description="Boundary width used when a record has no width.",
        ge=0.0,
    )
    active_field_present: bool = Field(
        True,
        description="Whether records carry an 'Is Active' flag that filters them out.",
    )
    fit_padding: int = Field(50, ge=0)
    fit_max_zoom: float = Field(15, ge=0)
    fit_duration_ms: int = Field(1200, ge=0)

    class Config:
        env_prefix = "PASTUREMAP_"
        env_file = ".env"
        case_sensitive = False

    @validator("records_file", pre=True)
    def _expand_path(cls, value: Optional[str | Path]) -> Optional[Path]:
        """Expand user directories without requiring the file to exist yet."""

        if value in (None, ""):
            return None
        return Path(value).expanduser()

    @validator("default_fill_color")
    def _check_color(cls, value: str) -> str:
        """Accept only ``#rgb`` or ``#rrggbb`` colours."""

        value = value.strip()
        if not _HEX_COLOR.match(value):
            raise ValueError(f"default_fill_color must be a hex colour, got {value!r}")
        return value

    def pipeline_config(self) -> PipelineConfig:
        return PipelineConfig(
            default_fill_color=self.default_fill_color,
            default_opacity=self.default_opacity,
            default_stroke_width=self.default_stroke_width,
            active_field_present=self.active_field_present,
        )

    def fit_options(self) -> FitOptions:
        return FitOptions(
            padding=self.fit_padding,
            max_zoom=self.fit_max_zoom,
            duration_ms=self.fit_duration_ms,
        )


@lru_cache()
def get_settings() -> PastureMapSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return PastureMapSettings()
