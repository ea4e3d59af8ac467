"""
Normalization of raw cyclist records into typed domain records.

A raw record comes straight from the JSON payload::

    {"Time": "36:50", "Doping": " ", "Name": "Marco Pantani",
     "Nationality": "ITA", "URL": "", "Year": 1995}

`normalize_record` turns it into an immutable `DomainRecord`. Ascent times
are stored as datetimes on the Unix epoch so they sort and scale like any
other time value, while still formatting back to the raw "MM:SS" string.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from cyclist_scatter.errors import MalformedRecordError

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
TIME_REGEX = re.compile(r"(\d{1,2}):(\d{2})", re.ASCII)
YEAR_REGEX = re.compile(r"[+-]?\d+", re.ASCII)
REQUIRED_FIELDS = ("Time", "Doping", "Name", "Nationality", "URL", "Year")
# Fields where null is read as "absent" instead of malformed
OPTIONAL_TEXT_FIELDS = ("Doping", "URL")


@dataclass(frozen=True)
class DomainRecord:
    doping: str
    name: str
    country: str
    time: datetime
    url: str
    year: int
    is_duplicate_year: bool = False

    @property
    def has_doping_allegation(self) -> bool:
        return self.doping != ""

    @property
    def time_label(self) -> str:
        return format_time(self.time)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "doping": self.doping,
            "name": self.name,
            "country": self.country,
            "time": self.time_label,
            "time_iso": self.time.isoformat(),
            "url": self.url,
            "year": self.year,
            "is_duplicate_year": self.is_duplicate_year,
        }


def parse_time(value: Any) -> datetime:
    """Parse an "MM:SS" ascent time into a datetime on the epoch day."""
    if not isinstance(value, str):
        raise MalformedRecordError(f"Time must be a string, got {value!r}", field="Time")
    match = TIME_REGEX.fullmatch(value)
    if not match:
        raise MalformedRecordError(f"Time {value!r} does not match MM:SS", field="Time")
    minutes, seconds = int(match.group(1)), int(match.group(2))
    if minutes >= 60 or seconds >= 60:
        raise MalformedRecordError(f"Time {value!r} is out of range", field="Time")
    return EPOCH.replace(minute=minutes, second=seconds)


def format_time(value: datetime, pattern: str = "{minutes:02d}:{seconds:02d}") -> str:
    return pattern.format(minutes=value.minute, seconds=value.second)


def parse_year(value: Any) -> int:
    if isinstance(value, bool):
        raise MalformedRecordError(f"Year {value!r} is not an integer", field="Year")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if value.is_integer():
            return int(value)
        raise MalformedRecordError(f"Year {value!r} is not an integer", field="Year")
    if isinstance(value, str):
        stripped = value.strip()
        # int() alone would also take "1_994" and non-ASCII digits
        if YEAR_REGEX.fullmatch(stripped):
            return int(stripped)
        raise MalformedRecordError(f"Year {value!r} is not an integer", field="Year")
    raise MalformedRecordError(f"Year {value!r} is not an integer", field="Year")


def _require_fields(raw: Mapping[str, Any]) -> None:
    if not isinstance(raw, Mapping):
        raise MalformedRecordError(f"expected an object, got {type(raw).__name__}")
    for field in REQUIRED_FIELDS:
        if field not in raw:
            raise MalformedRecordError(f"missing field {field!r}", field=field)
        if raw[field] is None and field not in OPTIONAL_TEXT_FIELDS:
            raise MalformedRecordError(f"field {field!r} is null", field=field)


def _text(raw: Mapping[str, Any], field: str) -> str:
    value = raw[field]
    if value is None:
        return ""
    return str(value)


def is_duplicate_of(raw: Mapping[str, Any], previous_raw: Optional[Mapping[str, Any]]) -> bool:
    # Compared raw: "1994" and 1994 count as different years
    if previous_raw is None:
        return False
    return previous_raw.get("Year") == raw.get("Year") and previous_raw.get("Time") == raw.get("Time")


def normalize_record(
    raw: Mapping[str, Any],
    previous_raw: Optional[Mapping[str, Any]] = None,
) -> DomainRecord:
    """
    Convert one raw API record into a `DomainRecord`.

    `previous_raw` is the record immediately before `raw` in the payload, or
    None for the first record. It is only used for duplicate detection.
    """
    _require_fields(raw)
    return DomainRecord(
        doping=_text(raw, "Doping").strip(),
        name=_text(raw, "Name"),
        country=_text(raw, "Nationality"),
        time=parse_time(raw["Time"]),
        url=_text(raw, "URL"),
        year=parse_year(raw["Year"]),
        is_duplicate_year=is_duplicate_of(raw, previous_raw),
    )
