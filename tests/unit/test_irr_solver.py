"""
Tests for IRRSolver

Checked invariants:
1. Lump-sum IRR matches (F/P)^(1/years) - 1
2. Bisection result has |NPV| below tolerance
3. A bracket without a sign change raises NonConvergent
4. Flows without both an outflow and an inflow raise InvalidInput
"""

import logging

import pytest

from fintoolkit.core.domain import CashFlow
from fintoolkit.core.errors import InvalidInput, NonConvergent
from fintoolkit.engines.irr_solver import (
    IRR_BRACKET_HIGH,
    IRR_BRACKET_LOW,
    IRRSolverConfig,
    lump_sum_irr,
    net_present_value,
    scheduled_cash_flows,
    scheduled_irr,
    solve_irr,
)


@pytest.fixture
def policy_flows():
    """100k a year for 6 years, 700k back in year 10."""
    return scheduled_cash_flows(100_000, 6, 700_000, 10)


# =============================================================================
# CLOSED FORM
# =============================================================================


class TestLumpSumIRR:
    def test_scenario(self):
        irr = lump_sum_irr(1_000_000, 1_200_000, 6)
        assert irr == pytest.approx(1.2 ** (1 / 6) - 1, rel=1e-12)
        assert irr == pytest.approx(0.030853, abs=1e-6)

    def test_loss(self):
        assert lump_sum_irr(1_000, 800, 2) < 0

    def test_fractional_years(self):
        assert lump_sum_irr(100, 110, 0.5) == pytest.approx(0.21)

    @pytest.mark.parametrize(
        "principal, final_value, years",
        [(0, 100, 1), (100, 0, 1), (100, 110, 0), (-100, 110, 1)],
    )
    def test_invalid(self, principal, final_value, years):
        with pytest.raises(InvalidInput):
            lump_sum_irr(principal, final_value, years)


# =============================================================================
# NPV & FLOWS
# =============================================================================


class TestNetPresentValue:
    def test_zero_rate_is_plain_sum(self, policy_flows):
        assert net_present_value(0.0, policy_flows) == pytest.approx(100_000)

    def test_rate_must_exceed_minus_one(self, policy_flows):
        with pytest.raises(InvalidInput):
            net_present_value(-1.0, policy_flows)


class TestScheduledCashFlows:
    def test_shape(self, policy_flows):
        assert [f.period for f in policy_flows] == [0, 1, 2, 3, 4, 5, 10]
        assert [f.amount for f in policy_flows[:6]] == [-100_000.0] * 6
        assert policy_flows[-1].amount == 700_000.0

    def test_pay_years_at_least_one(self):
        with pytest.raises(InvalidInput):
            scheduled_cash_flows(100_000, 0, 700_000, 10)


# =============================================================================
# BISECTION
# =============================================================================


class TestSolveIRR:
    def test_scheduled_irr_scenario(self, policy_flows):
        irr = scheduled_irr(100_000, 6, 700_000, 10)
        assert irr == pytest.approx(0.0207, abs=5e-4)
        assert abs(net_present_value(irr, policy_flows)) < 1.0

    def test_within_default_bracket(self, policy_flows):
        irr = solve_irr(policy_flows)
        assert IRR_BRACKET_LOW < irr < IRR_BRACKET_HIGH

    def test_single_period_matches_closed_form(self):
        flows = [CashFlow(period=0, amount=-1_000_000), CashFlow(period=6, amount=1_200_000)]
        assert solve_irr(flows) == pytest.approx(lump_sum_irr(1_000_000, 1_200_000, 6), abs=1e-6)

    def test_negative_irr(self):
        flows = [CashFlow(period=0, amount=-100_000), CashFlow(period=5, amount=80_000)]
        irr = solve_irr(flows)
        assert irr < 0
        assert abs(net_present_value(irr, flows)) < 1.0

    def test_exact_root_at_bracket_end(self):
        flows = [CashFlow(period=0, amount=-100), CashFlow(period=1, amount=200)]
        assert solve_irr(flows) == IRR_BRACKET_HIGH

    def test_loan_style_flows(self):
        """Inflow first, repayments later: NPV increases with the rate."""
        flows = [CashFlow(period=0, amount=1_000_000)] + [
            CashFlow(period=t, amount=-120_000) for t in range(1, 11)
        ]
        irr = solve_irr(flows)
        assert abs(net_present_value(irr, flows)) < 1.0
        assert 0.03 < irr < 0.04

    @pytest.mark.parametrize("final_payout", [0.5, 500.0])
    def test_no_sign_change(self, final_payout):
        flows = [CashFlow(period=0, amount=-100), CashFlow(period=1, amount=final_payout)]
        with pytest.raises(NonConvergent) as exc_info:
            solve_irr(flows)

        err = exc_info.value
        assert (err.low, err.high) == (IRR_BRACKET_LOW, IRR_BRACKET_HIGH)
        assert (err.npv_low > 0) == (err.npv_high > 0)

    def test_non_convergent_is_arithmetic_error(self):
        flows = [CashFlow(period=0, amount=-100), CashFlow(period=1, amount=0.5)]
        with pytest.raises(ArithmeticError, match="does not change sign"):
            solve_irr(flows)

    @pytest.mark.parametrize(
        "amounts",
        [[], [-100.0, -50.0], [100.0, 50.0], [0.0, 0.0]],
    )
    def test_missing_outflow_or_inflow(self, amounts):
        flows = [CashFlow(period=t, amount=a) for t, a in enumerate(amounts)]
        with pytest.raises(InvalidInput):
            solve_irr(flows)

    def test_custom_bracket(self):
        flows = [CashFlow(period=0, amount=-100), CashFlow(period=1, amount=500)]
        config = IRRSolverConfig(low=0.0, high=10.0, npv_tolerance=1e-6)
        assert solve_irr(flows, config) == pytest.approx(4.0, abs=0.01)

    def test_iteration_cap(self, policy_flows, caplog):
        config = IRRSolverConfig(max_iterations=3, npv_tolerance=0.0)
        with caplog.at_level(logging.DEBUG, logger="fintoolkit.engines.irr_solver"):
            irr = solve_irr(policy_flows, config)

        assert IRR_BRACKET_LOW < irr < IRR_BRACKET_HIGH
        assert "iteration cap" in caplog.text


class TestIRRSolverConfig:
    @pytest.mark.parametrize(
        "kwargs",
        [
            {"low": -1.0},
            {"low": 0.5, "high": 0.5},
            {"max_iterations": 0},
            {"npv_tolerance": -1.0},
        ],
    )
    def test_invalid_config(self, kwargs):
        with pytest.raises(InvalidInput):
            IRRSolverConfig(**kwargs)

    def test_frozen(self):
        config = IRRSolverConfig()
        with pytest.raises(AttributeError):
            config.low = 0.0
