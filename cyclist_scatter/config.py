"""
Application-wide configuration constants and helper utilities.
"""

from dataclasses import dataclass
from typing import Dict, Tuple


DATA_URL = (
    "https://raw.githubusercontent.com/freeCodeCamp/ProjectReferenceData/master/cyclist-data.json"
)
DEFAULT_FETCH_TIMEOUT_SECONDS = 30.0
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Margin:
    top: int
    bottom: int
    left: int
    right: int


@dataclass(frozen=True)
class ChartDimensions:
    width: int
    height: int
    margin: Margin

    @property
    def inner_width(self) -> int:
        return self.width - self.margin.left - self.margin.right

    @property
    def inner_height(self) -> int:
        return self.height - self.margin.top - self.margin.bottom


@dataclass(frozen=True)
class TransitionConfig:
    delay_ms: int
    duration_ms: int
    start_radius: float
    end_radius: float


CHART_DIMENSIONS = ChartDimensions(
    width=800,
    height=600,
    margin=Margin(top=50, bottom=70, left=70, right=10),
)

TRANSITION = TransitionConfig(
    delay_ms=40,
    duration_ms=800,
    start_radius=20,
    end_radius=5,
)

# Horizontal nudge (in years) applied to a dot sharing year and time with its predecessor
DUPLICATE_YEAR_OFFSET = 0.2

# Keyed by "has doping allegation"
LEGEND_COLORS: Dict[bool, str] = {
    True: "#b16f6f",
    False: "#6f95b1",
}
LEGEND_LABELS: Dict[bool, str] = {
    True: "Doping allegations",
    False: "No doping",
}
LEGEND_ORDER: Tuple[bool, ...] = (True, False)

Y_AXIS_LABEL = "⟶ Ascent time (lower means faster) ⟶"
CLEAN_RIDER_NOTE = "Clean. No doping accusations against him"
