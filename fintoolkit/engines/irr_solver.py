"""
IRRSolver — internal rate of return

Two entry points:
- lump_sum_irr: closed form (F / P)^(1 / years) - 1
- scheduled_irr / solve_irr: bisection on NPV(g) over a verified bracket

Typical use is a savings-type insurance policy: `payment` each year for
`pay_years` years (first payment today), then one `final_payout` in year
`wait_years`:

    NPV(g) = -sum_{t=0}^{pay_years-1} payment / (1+g)^t
             + final_payout / (1+g)^wait_years

BISECTION:
1. Evaluate NPV at both ends of [low, high]; same sign -> NonConvergent
2. Halve the interval max_iterations times, keeping the half whose ends
   still differ in sign
3. Stop early once |NPV(mid)| < npv_tolerance (currency units)
"""

import logging
import math
from dataclasses import dataclass
from typing import Final, Iterable

from fintoolkit.core.domain.cash_flow import CashFlow
from fintoolkit.core.errors import InvalidInput, NonConvergent
from fintoolkit.core.math.numerical_safeguards import (
    validate_non_negative,
    validate_positive,
    validate_whole,
)

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

IRR_BRACKET_LOW: Final[float] = -0.99
IRR_BRACKET_HIGH: Final[float] = 1.00
IRR_MAX_ITERATIONS: Final[int] = 50

# Early exit once the NPV is within one currency unit of zero
IRR_NPV_TOLERANCE: Final[float] = 1.0


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class IRRSolverConfig:
    """Bisection parameters."""

    low: float = IRR_BRACKET_LOW
    high: float = IRR_BRACKET_HIGH
    max_iterations: int = IRR_MAX_ITERATIONS
    npv_tolerance: float = IRR_NPV_TOLERANCE

    def __post_init__(self) -> None:
        if not (-1.0 < self.low < self.high):
            raise InvalidInput(
                f"IRR bracket must satisfy -1 < low < high, got [{self.low}, {self.high}]"
            )
        if self.max_iterations < 1:
            raise InvalidInput(f"max_iterations must be >= 1, got {self.max_iterations}")
        if self.npv_tolerance < 0:
            raise InvalidInput(f"npv_tolerance must be >= 0, got {self.npv_tolerance}")


# =============================================================================
# CLOSED FORM
# =============================================================================


def lump_sum_irr(principal: float, final_value: float, years: float) -> float:
    """
    Annualized return of a single deposit.

    Args:
        principal: Amount paid in today (> 0)
        final_value: Amount received after `years` (> 0)
        years: Holding period (> 0, may be fractional)

    Returns:
        Annual rate as a fraction (0.0308 = 3.08%)

    Raises:
        InvalidInput: if any argument is <= 0 or NaN/Inf

    Examples:
        >>> round(lump_sum_irr(1_000_000, 1_200_000, 6), 4)
        0.0309
    """
    validate_positive(principal, "principal")
    validate_positive(final_value, "final_value")
    validate_positive(years, "years")

    return (final_value / principal) ** (1.0 / years) - 1.0


# =============================================================================
# NPV
# =============================================================================


def net_present_value(rate: float, cash_flows: Iterable[CashFlow]) -> float:
    """
    Sum of cash flows discounted at periodic rate `rate` (> -1).

    Raises:
        InvalidInput: if rate <= -1
    """
    if not rate > -1.0:
        raise InvalidInput(f"discount rate must be > -1, got {rate}")

    return sum(flow.discounted(rate) for flow in cash_flows)


def scheduled_cash_flows(
    payment: float,
    pay_years: int,
    final_payout: float,
    wait_years: int,
) -> list[CashFlow]:
    """
    Cash flows of a level-premium policy: `payment` out at t = 0..pay_years-1,
    `final_payout` in at t = wait_years.
    """
    validate_non_negative(payment, "payment")
    validate_non_negative(final_payout, "final_payout")
    n_pay = validate_whole(pay_years, "pay_years", min_value=1)
    wait = validate_whole(wait_years, "wait_years")

    flows = [CashFlow(period=t, amount=-payment) for t in range(n_pay)]
    flows.append(CashFlow(period=wait, amount=final_payout))
    return flows


# =============================================================================
# BISECTION
# =============================================================================


def solve_irr(cash_flows: list[CashFlow], config: IRRSolverConfig | None = None) -> float:
    """
    Rate g in [low, high] with NPV(g) = 0, by bisection.

    Args:
        cash_flows: Flows with at least one sign change
        config: Bracket, iteration cap and tolerance

    Returns:
        IRR as a fraction per period

    Raises:
        InvalidInput: if flows lack an outflow or an inflow, or NPV is NaN at a bracket end
        NonConvergent: if NPV(low) and NPV(high) have the same sign
    """
    config = config or IRRSolverConfig()

    if not any(flow.amount < 0 for flow in cash_flows) or not any(
        flow.amount > 0 for flow in cash_flows
    ):
        raise InvalidInput("cash_flows need at least one outflow and one inflow")

    low, high = config.low, config.high
    npv_low = net_present_value(low, cash_flows)
    npv_high = net_present_value(high, cash_flows)

    if math.isnan(npv_low) or math.isnan(npv_high):
        raise InvalidInput(f"NPV is undefined at the bracket ends [{low}, {high}]")

    if npv_low == 0.0:
        return low
    if npv_high == 0.0:
        return high

    if (npv_low > 0) == (npv_high > 0):
        raise NonConvergent(low, high, npv_low, npv_high)

    mid = (low + high) / 2.0
    for iteration in range(config.max_iterations):
        mid = (low + high) / 2.0
        npv_mid = net_present_value(mid, cash_flows)

        if abs(npv_mid) < config.npv_tolerance:
            logger.debug("IRR converged after %d iterations: %.10f", iteration + 1, mid)
            break

        if (npv_mid > 0) == (npv_low > 0):
            low, npv_low = mid, npv_mid
        else:
            high = mid
    else:
        logger.debug(
            "IRR stopped at iteration cap %d: %.10f (bracket width %.3e)",
            config.max_iterations, mid, high - low,
        )

    return mid


def scheduled_irr(
    payment: float,
    pay_years: int,
    final_payout: float,
    wait_years: int,
    config: IRRSolverConfig | None = None,
) -> float:
    """
    IRR of a level-premium policy (see scheduled_cash_flows).

    Examples:
        >>> round(scheduled_irr(100_000, 6, 700_000, 10), 3)
        0.021
    """
    flows = scheduled_cash_flows(payment, pay_years, final_payout, wait_years)
    return solve_irr(flows, config)
