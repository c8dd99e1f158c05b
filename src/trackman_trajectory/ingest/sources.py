import csv
import json
import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

from trackman_trajectory.domain.pitch import Pitch
from trackman_trajectory.ingest.records import pitch_from_record, pitch_from_trackman_row

logger = logging.getLogger(__name__)


@runtime_checkable
class PitchSource(Protocol):
    @property
    def source_type(self) -> str: ...

    @property
    def source_detail(self) -> str: ...

    def fetch(self, **params: Any) -> list[dict[str, Any]]: ...

    def mapper(self) -> Callable[[dict[str, Any]], Pitch | None]: ...


class CsvSource:
    """Flat rows from a Trackman CSV export."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def source_type(self) -> str:
        return "csv"

    @property
    def source_detail(self) -> str:
        return str(self._path)

    def fetch(self, **params: Any) -> list[dict[str, Any]]:
        logger.debug("Reading CSV %s", self._path)
        encoding = params.pop("encoding", "utf-8-sig")
        delimiter = params.pop("sep", params.pop("delimiter", ","))
        with open(self._path, encoding=encoding, newline="") as f:
            reader = csv.DictReader(f, delimiter=delimiter)
            rows: list[dict[str, Any]] = list(reader)
        logger.debug("Read %d rows from %s", len(rows), self._path)
        return rows

    def mapper(self) -> Callable[[dict[str, Any]], Pitch | None]:
        return pitch_from_trackman_row


class JsonSource:
    """Nested pitch records, either a JSON list or an object with a "pitches" list."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def source_type(self) -> str:
        return "json"

    @property
    def source_detail(self) -> str:
        return str(self._path)

    def fetch(self, **params: Any) -> list[dict[str, Any]]:
        logger.debug("Reading JSON %s", self._path)
        with open(self._path, encoding=params.pop("encoding", "utf-8")) as f:
            data = json.load(f)
        if isinstance(data, dict):
            data = data.get("pitches", [])
        if not isinstance(data, list):
            msg = f"{self._path}: expected a list of pitch records"
            raise ValueError(msg)
        rows = [row for row in data if isinstance(row, dict)]
        logger.debug("Read %d records from %s", len(rows), self._path)
        return rows

    def mapper(self) -> Callable[[dict[str, Any]], Pitch | None]:
        return pitch_from_record


def source_for(path: str | Path) -> PitchSource:
    """Choose a source by file suffix."""
    suffix = Path(path).suffix.lower()
    if suffix == ".csv":
        return CsvSource(path)
    if suffix == ".json":
        return JsonSource(path)
    msg = f"unsupported input file type '{suffix}' (expected .csv or .json)"
    raise ValueError(msg)


def load_pitches(source: PitchSource) -> list[Pitch]:
    mapper = source.mapper()
    rows = source.fetch()
    pitches: list[Pitch] = []
    for row in rows:
        pitch = mapper(row)
        if pitch is not None:
            pitches.append(pitch)
    skipped = len(rows) - len(pitches)
    if skipped:
        logger.info("Skipped %d of %d rows from %s without a pitch uid", skipped, len(rows), source.source_detail)
    return pitches
