"""Mini README: Entry point CLI for the pasture map data service.

This script exposes a Typer CLI with two commands: ``run`` starts the FastAPI
service with uvicorn, and ``normalize`` flattens a GeoJSON file from disk and
prints the render-ready FeatureCollection with its bounding box.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

import typer
import uvicorn

from pasturemap.configuration import get_settings
from pasturemap.features import parse_geojson_text
from pasturemap.logging_utils import configure_root_logger
from pasturemap.pipeline import build_preview_update
from pasturemap.records import PastureRecord

cli = typer.Typer(help="Serve and preview render-ready pasture map data.")


@cli.command()
def run(
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    production: bool = typer.Option(
        False, help="Use production server settings (disable auto-reload)."
    ),
) -> None:
    """Start the FastAPI application using uvicorn."""

    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    configure_root_logger()

    # 0.0.0.0 is a bind address only; browsers need a concrete host.
    browser_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(
        f"Starting pasture map service on {effective_host}:{effective_port}.\n"
        f"Map data is available at http://{browser_host}:{effective_port}/map-data"
    )
    uvicorn.run(
        "pasturemap.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not production,
    )


@cli.command()
def normalize(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="GeoJSON file to flatten."),
    name: str = typer.Option(None, help="Pasture name attached to every feature."),
    verbose: bool = typer.Option(False, help="Log debug diagnostics to stderr."),
) -> None:
    """Print the normalised FeatureCollection for a GeoJSON file."""

    configure_root_logger(logging.DEBUG if verbose else None)
    parsed = parse_geojson_text(path.read_text(encoding="utf-8"), record_id=str(path))
    if parsed is None:
        typer.echo(f"{path} does not contain valid GeoJSON", err=True)
        raise typer.Exit(code=1)

    settings = get_settings()
    update = build_preview_update(
        parsed,
        PastureRecord(record_id=path.stem, name=name),
        settings.pipeline_config(),
        settings.fit_options(),
    )
    payload = update.collection.to_geojson()
    if not update.bounds.is_empty:
        payload["bbox"] = list(update.bounds.as_tuple())
    typer.echo(json.dumps(payload, indent=2, allow_nan=False))


if __name__ == "__main__":
    cli()
