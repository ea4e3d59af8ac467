"""
Utility helpers for formatting numeric values, ascent times, and percentages.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from cyclist_scatter.data.records import format_time

TOOLTIP_TIME_PATTERN = "{minutes:02d}'{seconds:02d}\""


def format_number(value: Optional[float], decimals: int = 0) -> str:
    if value is None:
        return "–"
    try:
        return f"{value:,.{decimals}f}"
    except (TypeError, ValueError):
        return "–"


def format_percent(value: Optional[float], decimals: int = 1) -> str:
    if value is None:
        return "–"
    try:
        return f"{value:.{decimals}f}%"
    except (TypeError, ValueError):
        return "–"


def format_year_tick(value: float) -> str:
    # Year ticks are integral; avoid "1994.0"
    return str(int(round(value)))


def format_ascent_time(value: Optional[datetime], tooltip: bool = False) -> str:
    if value is None:
        return "–"
    if tooltip:
        return format_time(value, TOOLTIP_TIME_PATTERN)
    return format_time(value)
