"""
Tests for scale computation.
"""

from datetime import datetime

import pytest

from cyclist_scatter.config import CHART_DIMENSIONS
from cyclist_scatter.data.records import parse_time
from cyclist_scatter.data.scales import (
    ChartScales,
    LinearScale,
    TimeScale,
    compute_scales,
    inner_size,
)
from cyclist_scatter.errors import EmptyDatasetError, ScaleError


# =============================================================================
# Test LinearScale
# =============================================================================

class TestLinearScale:

    def test_boundaries_map_to_range(self):
        scale = LinearScale(domain=(1993, 2016), range=(0, 720))
        assert scale(1993) == 0
        assert scale(2016) == 720

    def test_affine(self):
        scale = LinearScale(domain=(0, 10), range=(0, 100))
        assert scale(2.5) == pytest.approx(25)
        assert scale(5) - scale(4) == pytest.approx(scale(9) - scale(8))

    def test_extrapolates_outside_domain(self):
        scale = LinearScale(domain=(0, 10), range=(0, 100))
        assert scale(-1) == pytest.approx(-10)
        assert scale(11) == pytest.approx(110)

    def test_clamp(self):
        scale = LinearScale(domain=(0, 10), range=(0, 100), clamp=True)
        assert scale(-1) == 0
        assert scale(11) == 100

    def test_degenerate_domain_maps_to_midpoint(self):
        scale = LinearScale(domain=(1994, 1994), range=(0, 720))
        assert scale(1994) == 360
        assert scale(2000) == 360

    def test_invert(self):
        scale = LinearScale(domain=(1993, 2016), range=(0, 720))
        assert scale.invert(scale(2004)) == pytest.approx(2004)
        assert scale.invert(0) == 1993

    def test_year_ticks_are_nice(self):
        scale = LinearScale(domain=(1993, 2016), range=(0, 720))
        assert scale.ticks() == [1994, 1996, 1998, 2000, 2002, 2004, 2006, 2008, 2010, 2012, 2014, 2016]

    def test_ticks_within_domain(self):
        scale = LinearScale(domain=(0, 1), range=(0, 100))
        ticks = scale.ticks(5)
        assert ticks == [0, 0.2, 0.4, 0.6, 0.8, 1.0]

    def test_degenerate_ticks(self):
        assert LinearScale(domain=(5, 5), range=(0, 1)).ticks() == [5]


# =============================================================================
# Test TimeScale
# =============================================================================

class TestTimeScale:

    @pytest.fixture
    def scale(self):
        return TimeScale(domain=(parse_time("36:50"), parse_time("39:50")), range=(0, 480))

    def test_boundaries_map_to_range(self, scale):
        assert scale(parse_time("36:50")) == 0
        assert scale(parse_time("39:50")) == 480

    def test_faster_times_map_lower(self, scale):
        assert scale(parse_time("37:00")) < scale(parse_time("38:00"))

    def test_linear_in_seconds(self, scale):
        assert scale(parse_time("38:20")) == pytest.approx(240)

    def test_naive_datetimes_treated_as_utc(self, scale):
        assert scale(datetime(1970, 1, 1, 0, 38, 20)) == pytest.approx(240)

    def test_invert(self, scale):
        assert scale.invert(240) == parse_time("38:20")

    def test_ticks(self, scale):
        ticks = scale.ticks()
        assert ticks[0] == parse_time("37:00")
        assert ticks[-1] == parse_time("39:45")
        assert all((b - a).total_seconds() == 15 for a, b in zip(ticks, ticks[1:]))

    def test_ticks_coarser_for_wider_domain(self):
        scale = TimeScale(domain=(parse_time("30:00"), parse_time("50:00")), range=(0, 480))
        ticks = scale.ticks()
        assert ticks[0] == parse_time("30:00")
        assert ticks[-1] == parse_time("50:00")
        assert len(ticks) == 21
        assert all((b - a).total_seconds() == 60 for a, b in zip(ticks, ticks[1:]))

    def test_degenerate_domain(self):
        t = parse_time("36:50")
        scale = TimeScale(domain=(t, t), range=(0, 480))
        assert scale(t) == 240
        assert scale.ticks() == [t]


# =============================================================================
# Test compute_scales
# =============================================================================

class TestComputeScales:

    def test_domains(self, sample_records, sample_scales):
        assert sample_scales.x_domain == (1993, 2016)
        assert sample_scales.y_domain == (parse_time("36:50"), parse_time("39:23"))

    def test_ranges(self, sample_scales):
        assert sample_scales.x_range == (0, 720)
        assert sample_scales.y_range == (0, 480)

    def test_boundary_mapping(self, sample_scales):
        min_year, max_year = 1994, 2015
        assert sample_scales.x(min_year - 1) == 0
        assert sample_scales.x(max_year + 1) == 720
        assert sample_scales.y(parse_time("36:50")) == 0
        assert sample_scales.y(parse_time("39:23")) == 480

    def test_deterministic_and_idempotent(self, sample_records):
        first = compute_scales(sample_records, 720, 480)
        second = compute_scales(sample_records, 720, 480)
        assert first == second
        for record in sample_records:
            assert first.x(record.year) == second.x(record.year)
            assert first.y(record.time) == second.y(record.time)

    def test_returns_chart_scales(self, sample_scales):
        assert isinstance(sample_scales, ChartScales)
        assert isinstance(sample_scales.x, LinearScale)
        assert isinstance(sample_scales.y, TimeScale)

    def test_empty_dataset(self):
        with pytest.raises(EmptyDatasetError):
            compute_scales([], 720, 480)

    def test_empty_dataset_is_scale_error(self):
        with pytest.raises(ScaleError):
            compute_scales((), 720, 480)

    def test_single_record(self, scenario_raw):
        from cyclist_scatter.data.dataset import build_dataset

        records = build_dataset(scenario_raw[:1])
        scales = compute_scales(records, 720, 480)
        assert scales.x(records[0].year) == 360
        assert scales.y(records[0].time) == 240


class TestInnerSize:

    def test_fixed_dimensions(self):
        assert inner_size(CHART_DIMENSIONS) == (720, 480)
