"""Crash record types and the conversion from raw CSV rows to cleaned records."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, time

_DATE_FORMATS = ("%d-%b-%Y", "%d-%B-%Y")
_TIME_FORMAT = "%I:%M %p"


@dataclass
class CrashRecord:
    """One row of the crash data CSV, as read."""

    crash_number: str
    crash_date: str
    crash_time: str
    total_nonfatal_injuries: float | None
    total_fatal_injuries: float | None
    at_roadway_intersection: str
    x_coordinate: float | None
    y_coordinate: float | None


def _parse_date(text: str) -> date | None:
    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    return None


def _parse_time(text: str) -> time | None:
    try:
        return datetime.strptime(text, _TIME_FORMAT).time()
    except ValueError:
        return None


@dataclass
class ProcessedCrashRecord:
    """A crash record with parsed date, time and coordinates."""

    crash_number: str
    crash_date: date
    crash_time: time
    total_nonfatal_injuries: float | None
    total_fatal_injuries: float | None
    at_roadway_intersection: str
    x_coordinate: float
    y_coordinate: float

    @classmethod
    def from_raw(cls, raw: CrashRecord) -> ProcessedCrashRecord | None:
        """Clean a raw record; return None if coordinates, date or time are unusable."""
        if raw.x_coordinate is None or raw.y_coordinate is None:
            return None

        crash_date = _parse_date(raw.crash_date.strip())
        if crash_date is None:
            return None

        crash_time = _parse_time(raw.crash_time.strip())
        if crash_time is None:
            return None

        return cls(
            crash_number=raw.crash_number,
            crash_date=crash_date,
            crash_time=crash_time,
            total_nonfatal_injuries=raw.total_nonfatal_injuries,
            total_fatal_injuries=raw.total_fatal_injuries,
            at_roadway_intersection=raw.at_roadway_intersection.lower(),
            x_coordinate=raw.x_coordinate,
            y_coordinate=raw.y_coordinate,
        )


@dataclass
class IntersectionNode:
    """A spatial cluster of crashes, standing for one intersection."""

    id: int
    x: float
    y: float
    crashes: list[ProcessedCrashRecord] = field(default_factory=list)


@dataclass
class CrashGraph:
    """Intersection nodes and the adjacency lists that connect them."""

    nodes: list[IntersectionNode] = field(default_factory=list)
    adjacency: dict[int, list[int]] = field(default_factory=dict)