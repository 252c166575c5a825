"""
AnnuityEngine — loan payments and amortization

FORMULAS:
    r            = annual_rate_pct / 100 / 12
    payment      = P r (1+r)^n / ((1+r)^n - 1)     (r == 0: P / n)
    grace        = P r                             (interest only)
    balance(k)   = P (1+r)^k - payment * ((1+r)^k - 1) / r

Payments are rounded half-up to whole currency units; schedules keep full
precision and settle the residual balance in the final month.
"""

import logging

from fintoolkit.core.domain.amortization import (
    AmortizationParams,
    AmortizationPayments,
    AmortizationRow,
)
from fintoolkit.core.math.compounding import (
    annual_pct_to_monthly_rate,
    annuity_factor,
    future_value_factor,
    growth_factor,
)
from fintoolkit.core.math.numerical_safeguards import (
    round_half_up,
    validate_non_negative,
    validate_positive,
    validate_whole,
)

logger = logging.getLogger(__name__)


# =============================================================================
# PAYMENTS
# =============================================================================


def _level_payment(principal: float, annual_rate_pct: float, months: int) -> float:
    """Unrounded level payment; arguments already validated."""
    r = annual_pct_to_monthly_rate(annual_rate_pct)
    return principal * annuity_factor(r, months)


def monthly_payment(principal: float, annual_rate_pct: float, total_months: int) -> int:
    """
    Level monthly payment that fully amortizes a loan.

    Args:
        principal: Amount borrowed (> 0)
        annual_rate_pct: Nominal annual rate in percent (>= 0)
        total_months: Term in months (> 0)

    Returns:
        Monthly payment, rounded half-up to a whole currency unit

    Raises:
        InvalidInput: if any argument is out of domain

    Examples:
        >>> monthly_payment(1_200, 0.0, 12)
        100
    """
    validate_positive(principal, "principal")
    validate_non_negative(annual_rate_pct, "annual_rate_pct")
    months = validate_whole(total_months, "total_months", min_value=1)

    return round_half_up(_level_payment(principal, annual_rate_pct, months))


def grace_interest_only_payment(principal: float, annual_rate_pct: float) -> int:
    """
    Monthly interest-only payment during a grace period.

    Examples:
        >>> grace_interest_only_payment(10_000_000, 2.1)
        17500
    """
    validate_positive(principal, "principal")
    validate_non_negative(annual_rate_pct, "annual_rate_pct")

    return round_half_up(principal * annual_pct_to_monthly_rate(annual_rate_pct))


def amortized_payment_with_grace(params: AmortizationParams) -> AmortizationPayments:
    """
    Payments for a loan whose first grace_months are interest only.

    The normal payment amortizes the full principal over the months left
    after the grace period; it is 0 when no months remain.
    """
    grace_payment = grace_interest_only_payment(params.principal, params.annual_rate_pct)

    remaining = params.amortizing_months
    if remaining > 0:
        normal_payment = monthly_payment(params.principal, params.annual_rate_pct, remaining)
    else:
        normal_payment = 0

    return AmortizationPayments(grace_payment=grace_payment, normal_payment=normal_payment)


# =============================================================================
# SCHEDULE
# =============================================================================


def amortization_schedule(params: AmortizationParams) -> list[AmortizationRow]:
    """
    Month-by-month schedule.

    Grace months pay interest only. Amortizing months pay the rounded normal
    payment; the final month pays whatever balance is left plus interest, so
    principal_paid sums to principal. If the grace period covers the whole
    term, the principal is still outstanding after the last row.
    """
    r = annual_pct_to_monthly_rate(params.annual_rate_pct)
    payments = amortized_payment_with_grace(params)

    rows: list[AmortizationRow] = []
    balance = params.principal

    for month in range(1, params.total_months + 1):
        interest = balance * r

        if month <= params.grace_months:
            payment = interest
        elif month == params.total_months:
            payment = balance + interest
        else:
            payment = min(float(payments.normal_payment), balance + interest)

        principal_paid = payment - interest
        balance -= principal_paid

        rows.append(
            AmortizationRow(
                month=month,
                payment=payment,
                interest=interest,
                principal_paid=principal_paid,
                balance=balance,
            )
        )

    logger.debug(
        "schedule for %s months: total interest %.2f, closing balance %.6f",
        params.total_months, sum(row.interest for row in rows), balance,
    )
    return rows


def remaining_balance(
    principal: float,
    annual_rate_pct: float,
    total_months: int,
    months_paid: int,
) -> float:
    """
    Outstanding principal after `months_paid` level payments (no grace period).

    Returns 0.0 once the loan is paid off.

    Examples:
        >>> remaining_balance(1_200, 0.0, 12, 6)
        600.0
    """
    validate_positive(principal, "principal")
    validate_non_negative(annual_rate_pct, "annual_rate_pct")
    months = validate_whole(total_months, "total_months", min_value=1)
    paid = validate_whole(months_paid, "months_paid")

    if paid >= months:
        return 0.0

    r = annual_pct_to_monthly_rate(annual_rate_pct)
    payment = _level_payment(principal, annual_rate_pct, months)

    balance = principal * growth_factor(r, paid) - payment * future_value_factor(r, paid)
    return max(0.0, balance)
