"""
Scale computation: affine mappings from dataset extents to pixel offsets.

`compute_scales` derives a year scale for the horizontal axis and a time
scale for the vertical axis. Both are plain frozen dataclasses, so the
result can be passed around and compared freely.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import List, Sequence, Tuple

from cyclist_scatter.config import ChartDimensions
from cyclist_scatter.data.records import EPOCH, DomainRecord
from cyclist_scatter.errors import EmptyDatasetError

# Candidate tick spacings for the time axis, in seconds
TIME_TICK_STEPS = (1, 5, 15, 30, 60, 5 * 60, 15 * 60, 30 * 60, 60 * 60)


def _nice_step(span: float, count: int) -> float:
    raw = span / max(count, 1)
    power = 10 ** math.floor(math.log10(raw))
    error = raw / power
    if error >= math.sqrt(50):
        factor = 10
    elif error >= math.sqrt(10):
        factor = 5
    elif error >= math.sqrt(2):
        factor = 2
    else:
        factor = 1
    return factor * power


def _time_tick_step(span: float, count: int) -> int:
    target = span / max(count, 1)
    for lower, upper in zip(TIME_TICK_STEPS, TIME_TICK_STEPS[1:]):
        if target <= upper:
            return lower if target / lower < upper / target else upper
    return TIME_TICK_STEPS[-1]


def _to_seconds(value: datetime) -> float:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return (value - EPOCH).total_seconds()


def _from_seconds(seconds: float) -> datetime:
    return EPOCH + timedelta(seconds=seconds)


@dataclass(frozen=True)
class LinearScale:
    domain: Tuple[float, float]
    range: Tuple[float, float]
    clamp: bool = False

    def __call__(self, value: float) -> float:
        d0, d1 = self.domain
        r0, r1 = self.range
        if d0 == d1:
            return (r0 + r1) / 2
        t = (value - d0) / (d1 - d0)
        if self.clamp:
            t = min(max(t, 0.0), 1.0)
        return r0 * (1 - t) + r1 * t

    def invert(self, pixel: float) -> float:
        d0, d1 = self.domain
        r0, r1 = self.range
        if r0 == r1:
            return d0
        t = (pixel - r0) / (r1 - r0)
        if self.clamp:
            t = min(max(t, 0.0), 1.0)
        return d0 * (1 - t) + d1 * t

    def ticks(self, count: int = 10) -> List[float]:
        lo, hi = sorted(self.domain)
        if lo == hi:
            return [lo]
        step = _nice_step(hi - lo, count)
        first = math.ceil(lo / step)
        last = math.floor(hi / step)
        return [round(k * step, 12) for k in range(first, last + 1)]


@dataclass(frozen=True)
class TimeScale:
    """Linear scale over datetimes, measured in seconds from the epoch."""

    domain: Tuple[datetime, datetime]
    range: Tuple[float, float]
    clamp: bool = False

    @property
    def _linear(self) -> LinearScale:
        d0, d1 = self.domain
        return LinearScale((_to_seconds(d0), _to_seconds(d1)), self.range, self.clamp)

    def __call__(self, value: datetime) -> float:
        return self._linear(_to_seconds(value))

    def invert(self, pixel: float) -> datetime:
        return _from_seconds(self._linear.invert(pixel))

    def ticks(self, count: int = 10) -> List[datetime]:
        lo, hi = sorted(_to_seconds(d) for d in self.domain)
        if lo == hi:
            return [_from_seconds(lo)]
        step = _time_tick_step(hi - lo, count)
        first = math.ceil(lo / step)
        last = math.floor(hi / step)
        return [_from_seconds(k * step) for k in range(first, last + 1)]


@dataclass(frozen=True)
class ChartScales:
    x: LinearScale
    y: TimeScale

    @property
    def x_domain(self) -> Tuple[float, float]:
        return self.x.domain

    @property
    def y_domain(self) -> Tuple[datetime, datetime]:
        return self.y.domain

    @property
    def x_range(self) -> Tuple[float, float]:
        return self.x.range

    @property
    def y_range(self) -> Tuple[float, float]:
        return self.y.range


def inner_size(dimensions: ChartDimensions) -> Tuple[int, int]:
    return dimensions.inner_width, dimensions.inner_height


def compute_scales(
    records: Sequence[DomainRecord],
    inner_width: float,
    inner_height: float,
) -> ChartScales:
    """
    Build the year (x) and ascent time (y) scales for a dataset.

    The year domain is padded by one year on each side. Faster times map to
    smaller vertical offsets; flipping the axis is left to the renderer.
    """
    if not records:
        raise EmptyDatasetError("cannot compute scales for an empty dataset")
    years = [r.year for r in records]
    times = [r.time for r in records]
    x = LinearScale(domain=(min(years) - 1, max(years) + 1), range=(0, inner_width))
    y = TimeScale(domain=(min(times), max(times)), range=(0, inner_height))
    return ChartScales(x=x, y=y)
