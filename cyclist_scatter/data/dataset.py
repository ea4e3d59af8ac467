"""
Dataset assembly: applies record normalization across the raw payload and
exposes tabular and diagnostic views of the result.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

import pandas as pd

from cyclist_scatter.data.records import DomainRecord, format_time, normalize_record
from cyclist_scatter.errors import DatasetError, EmptyDatasetError, MalformedRecordError

FRAME_COLUMNS = [
    "name",
    "country",
    "year",
    "time",
    "time_label",
    "doping",
    "has_doping_allegation",
    "url",
    "is_duplicate_year",
]


def build_dataset(raw_records: Iterable[Mapping[str, Any]]) -> Tuple[DomainRecord, ...]:
    """
    Normalize every raw record, pairing each with its predecessor.

    The whole batch fails on the first malformed record so duplicate flags
    always refer to the true previous entry.
    """
    if isinstance(raw_records, (str, bytes, Mapping)):
        raise DatasetError(f"expected a list of records, got {type(raw_records).__name__}")
    try:
        raw_list = list(raw_records)
    except TypeError:
        raise DatasetError(f"expected a list of records, got {type(raw_records).__name__}") from None

    if not raw_list:
        raise EmptyDatasetError("dataset is empty")

    records: List[DomainRecord] = []
    previous: Optional[Mapping[str, Any]] = None
    for idx, raw in enumerate(raw_list):
        try:
            records.append(normalize_record(raw, previous))
        except MalformedRecordError as exc:
            raise exc.at_index(idx) from exc
        previous = raw
    return tuple(records)


def dataset_to_frame(records: Sequence[DomainRecord]) -> pd.DataFrame:
    if not records:
        return pd.DataFrame(columns=FRAME_COLUMNS)
    rows = [
        {
            "name": r.name,
            "country": r.country,
            "year": r.year,
            "time": pd.Timestamp(r.time),
            "time_label": r.time_label,
            "doping": r.doping,
            "has_doping_allegation": r.has_doping_allegation,
            "url": r.url,
            "is_duplicate_year": r.is_duplicate_year,
        }
        for r in records
    ]
    return pd.DataFrame(rows, columns=FRAME_COLUMNS)


def dataset_diagnostics(records: Sequence[DomainRecord]) -> Dict[str, Any]:
    """Summary counts and extents, shown alongside the chart."""
    if not records:
        return {
            "records": 0,
            "doping_allegations": 0,
            "clean": 0,
            "duplicate_year_points": 0,
            "year_extent": None,
            "fastest_time": None,
            "slowest_time": None,
        }
    doping = sum(1 for r in records if r.has_doping_allegation)
    years = [r.year for r in records]
    times = [r.time for r in records]
    return {
        "records": len(records),
        "doping_allegations": doping,
        "clean": len(records) - doping,
        "duplicate_year_points": sum(1 for r in records if r.is_duplicate_year),
        "year_extent": (min(years), max(years)),
        "fastest_time": format_time(min(times)),
        "slowest_time": format_time(max(times)),
    }
