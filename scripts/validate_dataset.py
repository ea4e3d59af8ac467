"""Quick validation script for the normalization and scale pipeline.

Run with `python scripts/validate_dataset.py` to ensure sample records
normalize and scale to the expected pixel extents.
"""

from __future__ import annotations

from cyclist_scatter.config import CHART_DIMENSIONS
from cyclist_scatter.data.dataset import build_dataset, dataset_diagnostics
from cyclist_scatter.data.scales import compute_scales, inner_size


def main() -> None:
    sample = [
        {"Time": "36:50", "Doping": "", "Name": "A", "Nationality": "X", "URL": "", "Year": "1994"},
        {"Time": "36:50", "Doping": " banned ", "Name": "B", "Nationality": "Y", "URL": "u", "Year": "1994"},
        {"Time": "39:12", "Doping": "", "Name": "C", "Nationality": "Z", "URL": "", "Year": 2004},
    ]

    records = build_dataset(sample)
    width, height = inner_size(CHART_DIMENSIONS)
    scales = compute_scales(records, width, height)

    if len(records) != len(sample):
        raise SystemExit(f"Expected {len(sample)} records, got {len(records)}")

    assert records[1].is_duplicate_year, "Second record should be flagged as duplicate"
    assert records[1].doping == "banned", "Doping text should be trimmed"
    assert scales.x_domain == (1993, 2005), f"Unexpected year domain {scales.x_domain}"
    assert scales.y(records[0].time) == 0, "Fastest time should map to the top"
    assert scales.y(records[2].time) == height, "Slowest time should map to the bottom"

    print("Dataset validation passed.", dataset_diagnostics(records))


if __name__ == "__main__":
    main()
