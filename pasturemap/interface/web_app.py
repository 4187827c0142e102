"""Mini README: FastAPI service exposing render-ready pasture map data.

Structure:
    * build_record_source - choose the configured record source.
    * create_application - application factory wiring the JSON routes.

The service refreshes the map session on demand and returns the flattened
FeatureCollection together with its bounds so any map widget can draw it.
Ad-hoc payloads can be normalised through ``/normalize`` for previews.
"""

from __future__ import annotations

from typing import Optional

from fastapi import FastAPI, Form, HTTPException
from fastapi.responses import JSONResponse

from ..configuration import PastureMapSettings, get_settings
from ..features import parse_geojson_text
from ..logging_utils import get_logger
from ..pipeline import build_preview_update, coerce_geojson_text
from ..records import JsonFileRecordSource, PastureRecord, RecordSource, StaticRecordSource
from ..rendering import InMemoryRenderSink, MapSession

LOGGER = get_logger(__name__)


def build_record_source(settings: PastureMapSettings) -> RecordSource:
    """Return the file-backed source when configured, else demo pastures."""

    if settings.records_file is not None:
        LOGGER.info("Serving records from %s", settings.records_file)
        return JsonFileRecordSource(settings.records_file)
    LOGGER.info("No records file configured; serving demo pastures")
    return StaticRecordSource()


def create_application(
    settings: Optional[PastureMapSettings] = None,
    source: Optional[RecordSource] = None,
) -> FastAPI:
    """Create the FastAPI application with routes and dependencies."""

    settings = settings or get_settings()
    app = FastAPI(title="Pasture Map Data Service", version="0.1.0")
    sink = InMemoryRenderSink()
    session = MapSession(
        source or build_record_source(settings),
        sink,
        config=settings.pipeline_config(),
        fit_options=settings.fit_options(),
    )

    @app.get("/map-data")
    async def map_data() -> JSONResponse:
        """Run a fresh pass and return the collection, bounds and fit request."""

        try:
            update = session.refresh()
        except ValueError as error:
            raise HTTPException(status_code=503, detail=str(error)) from error
        payload = update.as_dict()
        payload["mapboxAccessToken"] = settings.mapbox_access_token
        LOGGER.debug("Returning %s features", len(update.collection))
        return JSONResponse(payload)

    @app.get("/records")
    async def records() -> JSONResponse:
        """Summarise the records the source currently yields."""

        try:
            batch = session.source.fetch_records()
        except ValueError as error:
            raise HTTPException(status_code=503, detail=str(error)) from error
        payload = [
            {
                "record_id": record.record_id,
                "name": record.name,
                "active": record.active,
                "has_geojson": coerce_geojson_text(record.geojson) is not None,
            }
            for record in batch
        ]
        return JSONResponse({"records": payload})

    @app.post("/normalize")
    async def normalize(
        geojson: str = Form(...),
        name: Optional[str] = Form(None),
    ) -> JSONResponse:
        """Flatten an ad-hoc GeoJSON payload with default styling."""

        parsed = parse_geojson_text(geojson, record_id="preview")
        if parsed is None:
            raise HTTPException(status_code=400, detail="GeoJSON payload is invalid JSON")

        update = build_preview_update(
            parsed,
            PastureRecord(record_id="preview", name=name),
            settings.pipeline_config(),
            settings.fit_options(),
        )
        LOGGER.info("Normalised preview payload into %s features", len(update.collection))
        return JSONResponse(update.as_dict())

    return app
