"""
Entry animation for the scatter dots.

Each dot starts in the bottom-left corner, large and transparent, and
moves to its plotted position. Dots start one after another, so the state
of the whole chart is a pure function of the elapsed time.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Sequence, Tuple

import numpy as np

from cyclist_scatter.config import DUPLICATE_YEAR_OFFSET, TRANSITION, TransitionConfig
from cyclist_scatter.data.records import DomainRecord
from cyclist_scatter.data.scales import ChartScales


@dataclass(frozen=True)
class DotState:
    cx: float
    cy: float
    r: float
    opacity: float


def ease_circle(t: float) -> float:
    """Circular in-out easing on [0, 1]."""
    t = min(max(t, 0.0), 1.0) * 2
    if t <= 1:
        return (1 - math.sqrt(1 - t * t)) / 2
    t -= 2
    return (math.sqrt(1 - t * t) + 1) / 2


def final_position(record: DomainRecord, scales: ChartScales) -> Tuple[float, float]:
    year = record.year + DUPLICATE_YEAR_OFFSET if record.is_duplicate_year else record.year
    return scales.x(year), scales.y(record.time)


def start_state(scales: ChartScales, transition: TransitionConfig = TRANSITION) -> DotState:
    return DotState(cx=0.0, cy=float(scales.y_range[1]), r=transition.start_radius, opacity=0.0)


def dot_state(
    index: int,
    record: DomainRecord,
    scales: ChartScales,
    elapsed_ms: float,
    transition: TransitionConfig = TRANSITION,
) -> DotState:
    start = start_state(scales, transition)
    cx, cy = final_position(record, scales)
    progress = (elapsed_ms - index * transition.delay_ms) / transition.duration_ms
    k = ease_circle(progress)
    if k >= 1:
        return DotState(cx=cx, cy=cy, r=transition.end_radius, opacity=1.0)
    return DotState(
        cx=start.cx + (cx - start.cx) * k,
        cy=start.cy + (cy - start.cy) * k,
        r=start.r + (transition.end_radius - start.r) * k,
        opacity=start.opacity + (1.0 - start.opacity) * k,
    )


def dot_states(
    records: Sequence[DomainRecord],
    scales: ChartScales,
    elapsed_ms: float,
    transition: TransitionConfig = TRANSITION,
) -> List[DotState]:
    return [dot_state(i, r, scales, elapsed_ms, transition) for i, r in enumerate(records)]


def total_duration_ms(count: int, transition: TransitionConfig = TRANSITION) -> float:
    if count <= 0:
        return 0.0
    return float((count - 1) * transition.delay_ms + transition.duration_ms)


def frame_times(count: int, transition: TransitionConfig = TRANSITION, frame_ms: float = 100.0) -> np.ndarray:
    """Sample instants covering the whole animation, both ends included."""
    total = total_duration_ms(count, transition)
    if total == 0:
        return np.array([0.0])
    steps = max(int(math.ceil(total / frame_ms)), 1)
    return np.linspace(0.0, total, steps + 1)
