"""
GrowthSeriesEngine — compound growth and periodic-contribution (DCA) series

FORMULAS:
    compound:   value(t) = principal * (1 + pct/100)^t,           t = 0..periods
    DCA:        value(y) = m * ((1 + r)^(12y) - 1) / r,           y = 0..years
                r = pct / 100 / 12, value(0) = 0, r == 0 -> m * 12y

Series are plain lists of SeriesPoint, rebuilt on every call. For valid input
they are non-empty, ordered by index and contain only finite values.
"""

from typing import NamedTuple

from fintoolkit.core.domain.series import SeriesPoint
from fintoolkit.core.math.compounding import (
    MONTHS_PER_YEAR,
    annual_pct_to_monthly_rate,
    future_value_factor,
    growth_factor,
    pct_to_rate,
    safe_compound_rate,
)
from fintoolkit.core.math.numerical_safeguards import (
    ensure_finite,
    validate_non_negative,
    validate_whole,
)


class CompoundComparison(NamedTuple):
    """Two compound series over the same horizon, e.g. ETF vs bank deposit."""

    primary: list[SeriesPoint]
    comparison: list[SeriesPoint]
    final_gap: float  # primary - comparison at the last period


# =============================================================================
# COMPOUND GROWTH
# =============================================================================


def compound_value(principal: float, annual_rate_pct: float, periods: int) -> float:
    """
    principal * (1 + annual_rate_pct/100)^periods.

    Raises:
        InvalidInput: negative principal or periods, overflow
        CompoundingDomainViolation: rate at or below -100%

    Examples:
        >>> compound_value(100_000, 0.0, 20)
        100000.0
    """
    validate_non_negative(principal, "principal")
    n = validate_whole(periods, "periods")
    r = safe_compound_rate(pct_to_rate(annual_rate_pct))

    return ensure_finite(principal * growth_factor(r, n), "compound value")


def compound_series(principal: float, annual_rate_pct: float, periods: int) -> list[SeriesPoint]:
    """
    Compound growth sampled at every period, including t = 0.

    Args:
        principal: Starting amount (>= 0)
        annual_rate_pct: Growth per period in percent (> -100)
        periods: Number of periods (>= 0)

    Returns:
        periods + 1 points, index 0..periods

    Examples:
        >>> [p.value for p in compound_series(100.0, 0.0, 2)]
        [100.0, 100.0, 100.0]
    """
    validate_non_negative(principal, "principal")
    n = validate_whole(periods, "periods")
    r = safe_compound_rate(pct_to_rate(annual_rate_pct))

    return [
        SeriesPoint(t, ensure_finite(principal * growth_factor(r, t), f"value at period {t}"))
        for t in range(n + 1)
    ]


def compound_comparison(
    principal: float,
    annual_rate_pct: float,
    comparison_rate_pct: float,
    periods: int,
) -> CompoundComparison:
    """Compound series at two rates, for side-by-side charts."""
    primary = compound_series(principal, annual_rate_pct, periods)
    comparison = compound_series(principal, comparison_rate_pct, periods)

    return CompoundComparison(
        primary=primary,
        comparison=comparison,
        final_gap=primary[-1].value - comparison[-1].value,
    )


# =============================================================================
# PERIODIC CONTRIBUTIONS
# =============================================================================


def periodic_contribution_future_value(
    monthly_amount: float,
    annual_rate_pct: float,
    months: int,
) -> float:
    """
    Future value of `months` end-of-month contributions.

    r == 0 uses the linear limit monthly_amount * months.

    Examples:
        >>> periodic_contribution_future_value(10_000, 0.0, 12)
        120000.0
    """
    validate_non_negative(monthly_amount, "monthly_amount")
    n = validate_whole(months, "months")
    r = safe_compound_rate(annual_pct_to_monthly_rate(annual_rate_pct))

    return ensure_finite(monthly_amount * future_value_factor(r, n), "future value")


def periodic_contribution_future_value_series(
    monthly_amount: float,
    annual_rate_pct: float,
    years: int,
) -> list[SeriesPoint]:
    """
    DCA balance sampled once a year.

    Args:
        monthly_amount: Contribution per month (>= 0)
        annual_rate_pct: Nominal annual return in percent
        years: Horizon in years (>= 0)

    Returns:
        years + 1 points, index = year, value(0) = 0

    Examples:
        >>> [p.value for p in periodic_contribution_future_value_series(1_000, 0.0, 2)]
        [0.0, 12000.0, 24000.0]
    """
    validate_non_negative(monthly_amount, "monthly_amount")
    n_years = validate_whole(years, "years")
    r = safe_compound_rate(annual_pct_to_monthly_rate(annual_rate_pct))

    series = []
    for year in range(n_years + 1):
        months = year * MONTHS_PER_YEAR
        value = monthly_amount * future_value_factor(r, months)
        series.append(SeriesPoint(year, ensure_finite(value, f"value at year {year}")))

    return series
