"""
Exception hierarchy shared by the data pipeline and the page bootstrap.
"""

from __future__ import annotations

from typing import Optional


class ScatterPlotError(Exception):
    """Base class for every error the application reports to the user."""


class DatasetError(ScatterPlotError):
    """The raw payload cannot be turned into a dataset."""


class MalformedRecordError(DatasetError):
    """A raw record is missing a field or carries an unparseable value."""

    def __init__(self, message: str, field: Optional[str] = None, index: Optional[int] = None):
        self.field = field
        self.index = index
        if index is not None:
            message = f"record {index}: {message}"
        super().__init__(message)

    def at_index(self, index: int) -> "MalformedRecordError":
        return MalformedRecordError(str(self), field=self.field, index=index)


class ScaleError(ScatterPlotError):
    """Scales cannot be derived from the dataset."""


class EmptyDatasetError(DatasetError, ScaleError):
    """The dataset has no records, so no extents exist."""


class FetchError(ScatterPlotError):
    """The remote dataset could not be retrieved or decoded."""
