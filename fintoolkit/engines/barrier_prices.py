"""
BarrierPriceEngine — FCN/ELN barrier levels and maturity scenarios

Barrier levels are percentages of the reference (initial fixing) price:

    level = reference_price * pct / 100

At maturity a note either knocked out (redeemed at par), settles at par
because the price ended at or above strike / the KI barrier was never hit,
or delivers the underlying at the strike price.
"""

from fintoolkit.core.domain.barrier import (
    BarrierPrices,
    BarrierSet,
    MaturityOutcome,
    ObservationMode,
    SettlementPnL,
)
from fintoolkit.core.math.compounding import MONTHS_PER_YEAR
from fintoolkit.core.math.numerical_safeguards import (
    validate_non_negative,
    validate_positive,
)


# =============================================================================
# BARRIER LEVELS
# =============================================================================


def barrier_prices(
    reference_price: float,
    ko_pct: float,
    strike_pct: float,
    ki_pct: float,
) -> BarrierPrices:
    """
    Absolute KO, strike and KI prices.

    Linear in reference_price.

    Raises:
        InvalidInput: reference_price <= 0 or a negative percentage

    Examples:
        >>> barrier_prices(1_000, 100, 100, 65).ki
        650.0
    """
    validate_positive(reference_price, "reference_price")
    validate_non_negative(ko_pct, "ko_pct")
    validate_non_negative(strike_pct, "strike_pct")
    validate_non_negative(ki_pct, "ki_pct")

    return BarrierPrices(
        ko=reference_price * ko_pct / 100.0,
        strike=reference_price * strike_pct / 100.0,
        ki=reference_price * ki_pct / 100.0,
    )


def barrier_prices_for(barrier_set: BarrierSet) -> BarrierPrices:
    """barrier_prices for a validated BarrierSet."""
    return barrier_prices(
        barrier_set.reference_price,
        barrier_set.ko_pct,
        barrier_set.strike_pct,
        barrier_set.ki_pct,
    )


def break_even_price(
    strike_pct: float,
    reference_price: float,
    coupon_annual_pct: float,
    term_months: float = MONTHS_PER_YEAR,
) -> float:
    """
    Final price at which delivery at strike is exactly offset by coupons.

    strike * (1 - coupon_annual_pct / 100 * term_months / 12)

    Examples:
        >>> break_even_price(100, 100, 8, 12)
        92.0
    """
    validate_positive(reference_price, "reference_price")
    validate_non_negative(strike_pct, "strike_pct")
    validate_non_negative(coupon_annual_pct, "coupon_annual_pct")
    validate_non_negative(term_months, "term_months")

    strike = reference_price * strike_pct / 100.0
    return strike * (1.0 - coupon_annual_pct / 100.0 * term_months / MONTHS_PER_YEAR)


# =============================================================================
# MATURITY
# =============================================================================


def classify_maturity_outcome(
    observation_mode: ObservationMode,
    touched_ki: bool,
    final_price: float,
    ko: float,
    strike: float,
) -> MaturityOutcome:
    """
    Settlement scenario at maturity.

    1. CONTINUOUS observation and final_price >= ko        -> KNOCKED_OUT
    2. mode NONE and final_price >= strike                 -> SETTLED_ABOVE_STRIKE
       other modes and (KI never touched or >= strike)     -> SETTLED_ABOVE_STRIKE
    3. otherwise                                           -> DELIVERED_UNDERLYING

    Examples:
        >>> classify_maturity_outcome(ObservationMode.CONTINUOUS, False, 80.0, 100.0, 100.0).value
        'settled_above_strike'
    """
    mode = ObservationMode(observation_mode)

    if mode is ObservationMode.CONTINUOUS and final_price >= ko:
        return MaturityOutcome.KNOCKED_OUT

    if mode is ObservationMode.NONE:
        if final_price >= strike:
            return MaturityOutcome.SETTLED_ABOVE_STRIKE
    elif not touched_ki or final_price >= strike:
        return MaturityOutcome.SETTLED_ABOVE_STRIKE

    return MaturityOutcome.DELIVERED_UNDERLYING


def settlement_pnl(
    notional: float,
    outcome: MaturityOutcome,
    strike: float,
    final_price: float,
    coupon_annual_pct: float,
    term_months: float = MONTHS_PER_YEAR,
) -> SettlementPnL:
    """
    P&L of a note held to maturity.

    Coupons are earned in every scenario. On delivery the investor receives
    notional / strike shares worth final_price each.

    Examples:
        >>> settlement_pnl(100_000, MaturityOutcome.DELIVERED_UNDERLYING, 100.0, 60.0, 8.0).total_pnl
        -32000.0
    """
    validate_positive(notional, "notional")
    validate_positive(strike, "strike")
    validate_non_negative(final_price, "final_price")
    validate_non_negative(coupon_annual_pct, "coupon_annual_pct")
    validate_non_negative(term_months, "term_months")

    coupon_income = notional * coupon_annual_pct / 100.0 * term_months / MONTHS_PER_YEAR

    if MaturityOutcome(outcome) is MaturityOutcome.DELIVERED_UNDERLYING:
        underlying_pnl = notional * (final_price / strike - 1.0)
    else:
        underlying_pnl = 0.0

    return SettlementPnL(
        outcome=outcome,
        coupon_income=coupon_income,
        underlying_pnl=underlying_pnl,
        total_pnl=coupon_income + underlying_pnl,
    )
