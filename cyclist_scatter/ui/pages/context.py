from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import pandas as pd

from cyclist_scatter.data.records import DomainRecord
from cyclist_scatter.data.scales import ChartScales


@dataclass(frozen=True)
class PageContext:
    records: Tuple[DomainRecord, ...]
    scales: ChartScales
    frame: pd.DataFrame
