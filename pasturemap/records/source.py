"""Mini README: Pasture records and the sources that yield them.

Structure:
    * PastureRecord - one row of the pasture table with optional attributes.
    * RecordSource - abstract interface returning records in table order.
    * StaticRecordSource - in-memory source seeded with demo pastures.
    * JsonFileRecordSource - loads a JSON array of record mappings.

Records arrive either with snake_case keys or with the column names used by
the original pasture table (``Total Acres``, ``Is Active`` ...). Both spellings
are accepted by ``PastureRecord.from_mapping``.
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional

from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

_COLUMN_ALIASES: Dict[str, str] = {
    "id": "record_id",
    "recordId": "record_id",
    "Name": "name",
    "GeoJSON": "geojson",
    "Is Active": "active",
    "Total Acres": "total_acres",
    "Est. Grazeable Acres": "grazeable_acres",
    "Est. Forage/Acre (lbs)": "forage_per_acre",
    "pastureColor": "color",
    "pastureAlphaValue": "opacity",
    "boundaryWidth": "stroke_width",
}


@dataclass(slots=True)
class PastureRecord:
    """Raw pasture attributes exactly as the record store returns them."""

    record_id: str
    name: Optional[str] = None
    geojson: Any = None
    active: Optional[bool] = True
    total_acres: Optional[float] = None
    grazeable_acres: Optional[float] = None
    forage_per_acre: Optional[float] = None
    color: Optional[str] = None
    opacity: Optional[float] = None
    stroke_width: Optional[float] = None

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any]) -> "PastureRecord":
        """Build a record from snake_case keys or table column names."""

        values: Dict[str, Any] = {}
        for key, value in payload.items():
            field_name = _COLUMN_ALIASES.get(key, key)
            if field_name in cls.__dataclass_fields__:
                values[field_name] = value
            else:
                LOGGER.debug("Ignoring unknown record field '%s'", key)
        if values.get("record_id") in (None, ""):
            raise ValueError("Pasture records require an identifier")
        values["record_id"] = str(values["record_id"])
        return cls(**values)


class RecordSource(ABC):
    """Yield the current batch of pasture records in table order."""

    @abstractmethod
    def fetch_records(self) -> List[PastureRecord]:
        """Return the records for one update cycle."""


class StaticRecordSource(RecordSource):
    """Serve a fixed list of records, defaulting to demo pastures."""

    def __init__(self, records: Optional[Iterable[PastureRecord]] = None) -> None:
        if records is None:
            records = self._build_demo_records()
        self._records: List[PastureRecord] = list(records)
        LOGGER.debug("Initialised StaticRecordSource with %s records", len(self._records))

    @staticmethod
    def _build_demo_records() -> List[PastureRecord]:
        """Create deterministic demo pastures near the default map centre."""

        return [
            PastureRecord(
                record_id="rec_north_meadow",
                name="North Meadow",
                geojson=json.dumps(
                    {
                        "type": "Polygon",
                        "coordinates": [
                            [
                                [45.872, -110.715],
                                [45.872, -110.700],
                                [45.864, -110.700],
                                [45.864, -110.715],
                            ]
                        ],
                    }
                ),
                total_acres=312.4,
                grazeable_acres=0.82,
                forage_per_acre=1450,
                color="#00ff00",
                opacity=0.45,
                stroke_width=2,
            ),
            PastureRecord(
                record_id="rec_creek_bottom",
                name="Creek Bottom",
                geojson=json.dumps(
                    {
                        "type": "FeatureCollection",
                        "features": [
                            {
                                "type": "Feature",
                                "properties": {"paddock": "east"},
                                "geometry": {
                                    "type": "Polygon",
                                    "coordinates": [
                                        [
                                            [-110.690, 45.860],
                                            [-110.680, 45.860],
                                            [-110.680, 45.852],
                                            [-110.690, 45.852],
                                            [-110.690, 45.860],
                                        ]
                                    ],
                                },
                            },
                            {
                                "type": "LineString",
                                "coordinates": [[45.858, -110.692], [45.850, -110.684]],
                            },
                        ],
                    }
                ),
                total_acres=148,
                grazeable_acres=0.64,
                forage_per_acre=None,
                color="#ff9900",
            ),
            PastureRecord(
                record_id="rec_resting_lot",
                name="Resting Lot",
                geojson=json.dumps(
                    {"type": "Point", "coordinates": [45.866, -110.730]}
                ),
                active=False,
                total_acres=20,
                color="#9e9e9e",
            ),
        ]

    def fetch_records(self) -> List[PastureRecord]:
        return list(self._records)


class JsonFileRecordSource(RecordSource):
    """Read records from a JSON document holding an array of mappings."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def fetch_records(self) -> List[PastureRecord]:
        try:
            payload = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError as error:
            raise ValueError(f"Records file {self.path} does not exist") from error
        except json.JSONDecodeError as error:
            raise ValueError(f"Records file {self.path} is not valid JSON") from error

        if not isinstance(payload, list):
            raise ValueError("Records file must contain a JSON array of records")
        records: List[PastureRecord] = []
        for index, entry in enumerate(payload):
            if not isinstance(entry, Mapping):
                LOGGER.warning("Skipping record entry %s in %s: not an object", index, self.path)
                continue
            try:
                records.append(PastureRecord.from_mapping(entry))
            except ValueError as error:
                LOGGER.warning("Skipping record entry %s in %s: %s", index, self.path, error)
        LOGGER.info("Loaded %s records from %s", len(records), self.path)
        return records
