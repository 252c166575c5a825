"""
Tests for GrowthSeriesEngine

Checked invariants:
1. Series have periods + 1 points, ordered by index, all finite
2. Compound series is monotonic in the sign of the rate
3. DCA starts at 0 and uses the linear limit at rate 0
4. Rates at or below -100% and overflow are rejected
"""

import math

import pytest

from fintoolkit.core.errors import InvalidInput
from fintoolkit.core.math.compounding import CompoundingDomainViolation
from fintoolkit.engines.growth_series import (
    compound_comparison,
    compound_series,
    compound_value,
    periodic_contribution_future_value,
    periodic_contribution_future_value_series,
)


# =============================================================================
# COMPOUND
# =============================================================================


class TestCompoundValue:
    def test_matches_power(self):
        assert compound_value(100_000, 6.0, 20) == pytest.approx(100_000 * 1.06**20, rel=1e-12)

    def test_zero_rate(self):
        assert compound_value(100_000, 0.0, 20) == 100_000.0

    def test_zero_periods(self):
        assert compound_value(100_000, 6.0, 0) == 100_000.0

    def test_domain_violation(self):
        with pytest.raises(CompoundingDomainViolation):
            compound_value(100_000, -100.0, 5)

    def test_overflow(self):
        with pytest.raises(InvalidInput):
            compound_value(1.0, 1_000_000.0, 10_000)

    def test_negative_principal(self):
        with pytest.raises(InvalidInput):
            compound_value(-1.0, 5.0, 10)


class TestCompoundSeries:
    def test_shape(self):
        series = compound_series(100_000, 6.0, 10)
        assert len(series) == 11
        assert [p.index for p in series] == list(range(11))
        assert series[0].value == 100_000.0
        assert all(math.isfinite(p.value) for p in series)

    def test_empty_horizon_has_one_point(self):
        series = compound_series(100_000, 6.0, 0)
        assert len(series) == 1

    def test_monotonic_increasing_for_positive_rate(self):
        values = [p.value for p in compound_series(50_000, 4.0, 30)]
        assert all(a < b for a, b in zip(values, values[1:]))

    def test_monotonic_decreasing_for_negative_rate(self):
        values = [p.value for p in compound_series(50_000, -4.0, 30)]
        assert all(a > b for a, b in zip(values, values[1:]))

    def test_constant_for_zero_rate(self):
        values = [p.value for p in compound_series(50_000, 0.0, 30)]
        assert values == [50_000.0] * 31

    def test_last_point_matches_compound_value(self):
        series = compound_series(100_000, 7.0, 25)
        assert series[-1].value == pytest.approx(compound_value(100_000, 7.0, 25))

    @pytest.mark.parametrize("periods", [-1, 2.5])
    def test_invalid_periods(self, periods):
        with pytest.raises(InvalidInput):
            compound_series(100_000, 6.0, periods)


class TestCompoundComparison:
    def test_gap(self):
        result = compound_comparison(100_000, 7.0, 1.5, 20)
        assert len(result.primary) == len(result.comparison) == 21
        assert result.final_gap == pytest.approx(
            result.primary[-1].value - result.comparison[-1].value
        )
        assert result.final_gap > 0

    def test_same_rate_no_gap(self):
        assert compound_comparison(100_000, 3.0, 3.0, 10).final_gap == 0.0


# =============================================================================
# PERIODIC CONTRIBUTIONS
# =============================================================================


class TestPeriodicContribution:
    def test_zero_rate(self):
        assert periodic_contribution_future_value(10_000, 0.0, 12) == 120_000.0

    def test_matches_closed_form(self):
        r = 6.0 / 100 / 12
        expected = 10_000 * ((1 + r) ** 240 - 1) / r
        assert periodic_contribution_future_value(10_000, 6.0, 240) == pytest.approx(expected, rel=1e-10)

    def test_zero_months(self):
        assert periodic_contribution_future_value(10_000, 6.0, 0) == 0.0

    def test_exceeds_contributions_for_positive_rate(self):
        assert periodic_contribution_future_value(10_000, 5.0, 120) > 10_000 * 120


class TestPeriodicContributionSeries:
    def test_starts_at_zero(self):
        series = periodic_contribution_future_value_series(10_000, 6.0, 20)
        assert series[0].value == 0.0
        assert len(series) == 21

    def test_first_year(self):
        r = 0.005
        series = periodic_contribution_future_value_series(10_000, 6.0, 1)
        assert series[1].value == pytest.approx(10_000 * ((1 + r) ** 12 - 1) / r, rel=1e-10)

    def test_zero_rate_is_linear(self):
        values = [p.value for p in periodic_contribution_future_value_series(1_000, 0.0, 3)]
        assert values == [0.0, 12_000.0, 24_000.0, 36_000.0]

    def test_yearly_points_match_monthly_formula(self):
        series = periodic_contribution_future_value_series(5_000, 4.0, 10)
        for point in series:
            assert point.value == pytest.approx(
                periodic_contribution_future_value(5_000, 4.0, point.index * 12)
            )

    def test_monotonic(self):
        values = [p.value for p in periodic_contribution_future_value_series(5_000, 4.0, 30)]
        assert all(a < b for a, b in zip(values, values[1:]))

    def test_negative_amount(self):
        with pytest.raises(InvalidInput):
            periodic_contribution_future_value_series(-1, 4.0, 10)
