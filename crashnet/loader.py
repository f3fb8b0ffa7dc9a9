"""Loading crash records from a CSV file."""

from __future__ import annotations

import csv
import os
from collections.abc import Iterator, Mapping

from .records import CrashRecord, ProcessedCrashRecord

_REQUIRED_TEXT = ("crash_number", "crash_date", "crash_time", "at_roadway_intersection")
_OPTIONAL_FLOAT = (
    "total_nonfatal_injuries",
    "total_fatal_injuries",
    "x_coordinate",
    "y_coordinate",
)


class _BadRow(ValueError):
    """A CSV row that cannot be read as a crash record."""


def _optional_float(row: Mapping[str, str | None], name: str) -> float | None:
    value = row.get(name)
    if value is None or value == "":
        return None
    try:
        return float(value)
    except ValueError as exc:
        raise _BadRow(f"bad number in {name!r}: {value!r}") from exc


def _to_raw(row: Mapping[str, str | None]) -> CrashRecord:
    if None in row or any(v is None for v in row.values()):
        raise _BadRow("row has the wrong number of fields")
    text = {}
    for name in _REQUIRED_TEXT:
        if name not in row:
            raise _BadRow(f"missing field {name!r}")
        text[name] = row[name]
    floats = {name: _optional_float(row, name) for name in _OPTIONAL_FLOAT}
    return CrashRecord(**text, **floats)


def _records(reader: csv.DictReader) -> Iterator[ProcessedCrashRecord]:
    for row in reader:
        try:
            raw = _to_raw(row)
        except _BadRow:
            continue
        processed = ProcessedCrashRecord.from_raw(raw)
        if processed is not None:
            yield processed


def load_crash_data(file_path: str | os.PathLike[str]) -> list[ProcessedCrashRecord]:
    """Read a crash CSV and return the rows that parse into clean records.

    Rows that cannot be read or cleaned are skipped; an unreadable file raises OSError.
    """
    with open(file_path, newline="", encoding="utf-8") as handle:
        return list(_records(csv.DictReader(handle)))