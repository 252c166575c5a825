"""
Compounding — Safe Geometric Growth & Annuity Factors

Shared growth primitives for the annuity, growth-series and rent-vs-buy engines:
- Domain restriction for log(1+r): r > -1 + eps
- Numerically stable log-returns via log1p
- Growth factor (1+r)^n computed in log space
- Annuity and future-value factors with the rate-zero linear limit

CRITICAL INVARIANTS:
1. Domain violation (r <= -1 + eps) -> CompoundingDomainViolation
2. log1p is used for |r| < LOG1P_SWITCH_THRESHOLD
3. r == 0 never divides: annuity_factor -> 1/n, future_value_factor -> n
4. Overflow surfaces as InvalidInput, never as Inf

FORMULAS:
    growth_factor(r, n)       = (1 + r)^n = exp(n * ln(1 + r))
    annuity_factor(r, n)      = r (1+r)^n / ((1+r)^n - 1)      (r != 0)
                              = 1 / n                          (r == 0)
    future_value_factor(r, n) = ((1+r)^n - 1) / r              (r != 0)
                              = n                              (r == 0)
"""

import math
from typing import Final

from fintoolkit.core.errors import InvalidInput
from fintoolkit.core.math.numerical_safeguards import is_valid_float, is_zero

# =============================================================================
# COMPOUNDING EPSILON PARAMETERS
# =============================================================================

# Domain floor for log(1+r): r must be > -1 + COMPOUNDING_R_FLOOR_EPS
COMPOUNDING_R_FLOOR_EPS: Final[float] = 1.0e-6

# Below this |r| use log1p(r), above it log(1 + r)
LOG1P_SWITCH_THRESHOLD: Final[float] = 0.01

MONTHS_PER_YEAR: Final[int] = 12


# =============================================================================
# EXCEPTIONS
# =============================================================================


class CompoundingDomainViolation(InvalidInput):
    """
    Growth rate at or below -100% per period.

    (1 + r) would be zero or negative, so neither the growth factor nor its
    logarithm is defined.
    """

    pass


# =============================================================================
# RATE CONVERSION
# =============================================================================


def pct_to_rate(rate_pct: float) -> float:
    """
    Percent per year -> fraction per year.

    Examples:
        >>> pct_to_rate(6.0)
        0.06
    """
    return rate_pct / 100.0


def annual_pct_to_monthly_rate(annual_rate_pct: float) -> float:
    """
    Nominal annual percent -> monthly periodic rate (annual / 100 / 12).
    """
    return annual_rate_pct / 100.0 / MONTHS_PER_YEAR


# =============================================================================
# SAFE COMPOUND RATE
# =============================================================================


def safe_compound_rate(r: float, eps: float = COMPOUNDING_R_FLOOR_EPS) -> float:
    """
    Check that a periodic rate keeps (1 + r) strictly positive.

    Args:
        r: Periodic rate (dimensionless, e.g. 0.05 for 5%)
        eps: Domain floor epsilon (default: COMPOUNDING_R_FLOOR_EPS)

    Returns:
        r unchanged if r > -1 + eps

    Raises:
        CompoundingDomainViolation: if r <= -1 + eps or r is NaN/Inf

    Examples:
        >>> safe_compound_rate(0.05)
        0.05
        >>> safe_compound_rate(-0.5)
        -0.5
    """
    if not is_valid_float(r):
        raise CompoundingDomainViolation(f"Rate contains NaN/Inf: {r}")

    domain_floor = -1.0 + eps

    if r <= domain_floor:
        raise CompoundingDomainViolation(
            f"Compounding domain violation: r={r:.12f} <= -1 + eps={eps:.12e}. "
            f"A rate of -100% or lower per period has no growth factor."
        )

    return r


def safe_log_return(r: float) -> float:
    """
    Numerically stable ln(1 + r).

    Examples:
        >>> safe_log_return(0.0)
        0.0
        >>> safe_log_return(-0.5)
        -0.6931471805599453
    """
    r = safe_compound_rate(r)

    if abs(r) < LOG1P_SWITCH_THRESHOLD:
        return math.log1p(r)
    return math.log(1.0 + r)


# =============================================================================
# GROWTH & ANNUITY FACTORS
# =============================================================================


def growth_factor(r: float, periods: float) -> float:
    """
    (1 + r)^periods computed as exp(periods * ln(1 + r)).

    Args:
        r: Periodic rate
        periods: Number of periods (may be fractional)

    Returns:
        Growth factor, always > 0 and finite

    Raises:
        CompoundingDomainViolation: if r <= -1 + eps
        InvalidInput: if the factor overflows

    Examples:
        >>> growth_factor(0.0, 360)
        1.0
        >>> round(growth_factor(0.1, 2), 12)
        1.21
    """
    log_return = safe_log_return(r)

    try:
        return math.exp(periods * log_return)
    except OverflowError:
        raise InvalidInput(
            f"Growth factor overflows for r={r}, periods={periods}"
        ) from None


def future_value_factor(r: float, periods: int) -> float:
    """
    Future value of 1 paid at the end of each of `periods` periods.

    ((1+r)^n - 1) / r, or n when r == 0. Uses expm1 so that small monthly
    rates keep full precision.

    Examples:
        >>> future_value_factor(0.0, 12)
        12.0
        >>> round(future_value_factor(0.1, 2), 12)
        2.1
    """
    if periods == 0:
        return 0.0

    if is_zero(r):
        return float(periods)

    log_return = safe_log_return(r)

    try:
        return math.expm1(periods * log_return) / r
    except OverflowError:
        raise InvalidInput(
            f"Future value factor overflows for r={r}, periods={periods}"
        ) from None


def annuity_factor(r: float, periods: int) -> float:
    """
    Level payment per unit of principal that amortizes a loan in `periods`.

    r (1+r)^n / ((1+r)^n - 1), or 1/n when r == 0.

    Raises:
        InvalidInput: if periods <= 0

    Examples:
        >>> annuity_factor(0.0, 4)
        0.25
    """
    if periods <= 0:
        raise InvalidInput(f"periods must be positive, got {periods}")

    if is_zero(r):
        return 1.0 / periods

    factor = growth_factor(r, periods)
    return r * factor / (factor - 1.0)
