"""Record ingestion: raw CSV rows to typed Incident records."""

import csv
import logging
import sys
from collections.abc import Iterable, Mapping
from datetime import datetime
from pathlib import Path
from typing import Any

from citywatch.exceptions import LoadFailure
from citywatch.models.incident import Incident, IncidentStatus

logger = logging.getLogger(__name__)

# Free-text fields have no length cap
csv.field_size_limit(sys.maxsize)

RECOGNIZED_COLUMNS = ("text", "category", "type", "location", "time", "status")

TIME_FORMATS = [
    "%Y-%m-%d %H:%M",
    "%Y/%m/%d %H:%M:%S",
    "%Y/%m/%d %I:%M:%S %p",
    "%d-%m-%Y %H:%M",
    "%d/%m/%Y %H:%M",
    "%Y-%m-%d",
]


def parse_time(value: str | None) -> datetime | None:
    """Parse a source timestamp. Returns None when no format matches."""
    if not value:
        return None
    value = value.strip()
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        pass
    for fmt in TIME_FORMATS:
        try:
            return datetime.strptime(value, fmt)
        except ValueError:
            continue
    return None


def load_table(path: str | Path) -> list[dict[str, str]]:
    """
    Read a CSV file with a header row into a list of row dicts.

    Fully blank lines are skipped. Anything that prevents reading the table
    as a whole raises LoadFailure.
    """
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8-sig", newline="") as f:
            reader = csv.DictReader(f)
            if reader.fieldnames is None:
                raise LoadFailure(path, "file has no header row")
            rows = [row for row in reader if not _is_blank(row)]
    except (OSError, UnicodeDecodeError, csv.Error) as e:
        raise LoadFailure(path, str(e)) from e

    logger.info(f"Read {len(rows)} rows from {path}")
    return rows


def _is_blank(row: Mapping[str | None, Any]) -> bool:
    return all(not (value or "").strip() for key, value in row.items() if key is not None)


class RecordIngestor:
    """
    Turns raw tabular rows into Incident records.

    Parsing is best-effort: a missing or malformed field gets a default and
    the row is still emitted. ``ingest`` always returns one incident per
    input row, with the row's zero-based index as its id.
    """

    def __init__(self, columns: Iterable[str] = RECOGNIZED_COLUMNS):
        self.columns = tuple(columns)

    def _normalize_row(self, row: Any) -> dict[str, str]:
        """Lower-case and trim header names, keep recognized columns only."""
        if not isinstance(row, Mapping):
            return {}

        normalized: dict[str, str] = {}
        for key, value in row.items():
            # csv.DictReader files surplus values under the None key
            if key is None:
                continue
            name = str(key).strip().lower()
            if name not in self.columns or name in normalized:
                continue
            normalized[name] = "" if value is None else str(value).strip()
        return normalized

    def build_incident(self, index: int, row: Any) -> Incident:
        """Build the incident for one row."""
        fields = self._normalize_row(row)
        return Incident(
            id=str(index),
            text=fields.get("text", ""),
            category=fields.get("category", ""),
            type=fields.get("type", ""),
            location=fields.get("location", ""),
            time=parse_time(fields.get("time")),
            status=IncidentStatus.coerce(fields.get("status")),
        )

    def ingest(self, rows: Iterable[Any]) -> list[Incident]:
        """Ingest a batch of rows. Never drops a row."""
        return [self.build_incident(index, row) for index, row in enumerate(rows)]
