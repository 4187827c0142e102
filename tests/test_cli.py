"""Mini README: Tests for the command line entry point.

Runs the ``normalize`` command through Typer's CliRunner against files in a
temporary directory.
"""

from __future__ import annotations

import json
import logging

from typer.testing import CliRunner

from main_map_server import cli

runner = CliRunner()


def test_normalize_prints_collection_with_bbox(tmp_path) -> None:
    path = tmp_path / "pasture.geojson"
    path.write_text(
        json.dumps({"type": "Polygon", "coordinates": [[[45.0, -110.0], [45.1, -110.0], [45.1, -110.1]]]}),
        encoding="utf-8",
    )

    result = runner.invoke(cli, ["normalize", str(path), "--name", "North"])

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["type"] == "FeatureCollection"
    assert payload["features"][0]["properties"]["name"] == "North"
    assert payload["features"][0]["geometry"]["coordinates"][0][-1] == [-110.0, 45.0]
    assert payload["bbox"] == [-110.1, 45.0, -110.0, 45.1]


def test_normalize_rejects_invalid_json(tmp_path) -> None:
    path = tmp_path / "broken.geojson"
    path.write_text("{broken", encoding="utf-8")

    result = runner.invoke(cli, ["normalize", str(path)])

    assert result.exit_code == 1


def test_normalize_verbose_enables_debug_logging(tmp_path) -> None:
    path = tmp_path / "point.geojson"
    path.write_text(json.dumps({"type": "Point", "coordinates": [45.0, -110.0]}), encoding="utf-8")
    root_logger = logging.getLogger()
    previous_level = root_logger.level

    try:
        result = runner.invoke(cli, ["normalize", str(path), "--verbose"])
        assert result.exit_code == 0
        assert root_logger.level == logging.DEBUG
    finally:
        root_logger.setLevel(previous_level)


def test_normalize_rejects_nan_literals(tmp_path) -> None:
    path = tmp_path / "nan.geojson"
    path.write_text('{"type": "Point", "coordinates": [NaN, 45.0]}', encoding="utf-8")

    result = runner.invoke(cli, ["normalize", str(path)])

    assert result.exit_code == 1
