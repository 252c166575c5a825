"""
Tests for Compounding — growth, annuity and future-value factors

Checked invariants:
1. Domain restriction: r > -1 + eps, otherwise CompoundingDomainViolation
2. log1p below the switch threshold, log above, same results
3. r == 0 takes the linear limit without dividing
4. Overflow surfaces as InvalidInput
"""

import math

import pytest

from fintoolkit.core.errors import InvalidInput
from fintoolkit.core.math.compounding import (
    COMPOUNDING_R_FLOOR_EPS,
    LOG1P_SWITCH_THRESHOLD,
    CompoundingDomainViolation,
    annual_pct_to_monthly_rate,
    annuity_factor,
    future_value_factor,
    growth_factor,
    pct_to_rate,
    safe_compound_rate,
    safe_log_return,
)


# =============================================================================
# SAFE COMPOUND RATE
# =============================================================================


class TestSafeCompoundRate:
    def test_valid_rates_pass_through(self):
        assert safe_compound_rate(0.05) == 0.05
        assert safe_compound_rate(-0.5) == -0.5
        assert safe_compound_rate(10.0) == 10.0

    def test_edge_valid_rate(self):
        r_edge = -1.0 + COMPOUNDING_R_FLOOR_EPS + 1e-9
        assert safe_compound_rate(r_edge) == r_edge

    @pytest.mark.parametrize("r", [-1.0 + COMPOUNDING_R_FLOOR_EPS, -1.0, -1.5])
    def test_domain_violation(self, r):
        with pytest.raises(CompoundingDomainViolation):
            safe_compound_rate(r)

    @pytest.mark.parametrize("r", [math.nan, math.inf])
    def test_non_finite_rate(self, r):
        with pytest.raises(CompoundingDomainViolation, match="NaN/Inf"):
            safe_compound_rate(r)

    def test_domain_violation_is_invalid_input(self):
        with pytest.raises(InvalidInput):
            safe_compound_rate(-2.0)


class TestSafeLogReturn:
    def test_small_rate_uses_log1p(self):
        r = LOG1P_SWITCH_THRESHOLD / 10
        assert safe_log_return(r) == math.log1p(r)

    def test_large_rate_uses_log(self):
        assert safe_log_return(0.5) == pytest.approx(math.log(1.5), rel=1e-15)

    def test_zero(self):
        assert safe_log_return(0.0) == 0.0


# =============================================================================
# RATE CONVERSION
# =============================================================================


class TestRateConversion:
    def test_pct_to_rate(self):
        assert pct_to_rate(6.0) == pytest.approx(0.06)

    def test_annual_pct_to_monthly_rate(self):
        assert annual_pct_to_monthly_rate(2.1) == pytest.approx(0.00175)
        assert annual_pct_to_monthly_rate(0.0) == 0.0


# =============================================================================
# FACTORS
# =============================================================================


class TestGrowthFactor:
    def test_matches_power(self):
        assert growth_factor(0.06, 20) == pytest.approx(1.06**20, rel=1e-12)
        assert growth_factor(-0.02, 30) == pytest.approx(0.98**30, rel=1e-12)

    def test_zero_rate_and_zero_periods(self):
        assert growth_factor(0.0, 360) == 1.0
        assert growth_factor(0.25, 0) == 1.0

    def test_overflow_raises(self):
        with pytest.raises(InvalidInput, match="overflows"):
            growth_factor(10_000.0, 10_000)


class TestFutureValueFactor:
    def test_zero_rate_linear_limit(self):
        assert future_value_factor(0.0, 12) == 12.0

    def test_zero_periods(self):
        assert future_value_factor(0.005, 0) == 0.0

    def test_matches_closed_form(self):
        r = 0.005
        assert future_value_factor(r, 240) == pytest.approx(((1 + r) ** 240 - 1) / r, rel=1e-12)

    def test_tiny_rate_approaches_linear_limit(self):
        assert future_value_factor(1e-12, 120) == pytest.approx(120.0, rel=1e-6)


class TestAnnuityFactor:
    def test_zero_rate(self):
        assert annuity_factor(0.0, 4) == 0.25

    def test_matches_closed_form(self):
        r, n = 0.00175, 360
        expected = r * (1 + r) ** n / ((1 + r) ** n - 1)
        assert annuity_factor(r, n) == pytest.approx(expected, rel=1e-12)

    @pytest.mark.parametrize("periods", [0, -12])
    def test_non_positive_periods(self, periods):
        with pytest.raises(InvalidInput):
            annuity_factor(0.01, periods)

    def test_annuity_and_future_value_are_consistent(self):
        """payment * fv(n) == principal * growth(n) for a fully amortized loan."""
        r, n = 0.004, 120
        payment = annuity_factor(r, n)
        assert payment * future_value_factor(r, n) == pytest.approx(growth_factor(r, n), rel=1e-12)
