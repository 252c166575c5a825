"""
TaxBracketEngine — progressive tax, its inverse, and the overseas-income quota

Forward:  tax = floor(max(0, income * rate - correction)) using the first
          bracket whose upper_bound >= income.
Inverse:  income = floor((tax + correction) / rate) using the first bracket
          whose max_tax_at_bound >= tax.
Quota:    quota = max(floor, floor(tax / amt_rate + exemption - income))

The overseas quota is the amount of overseas income that can be added before
the alternative minimum tax (basic income tax) exceeds the regular tax.

INVARIANTS:
1. compute_tax is monotonic non-decreasing in income
2. compute_tax(compute_income_from_tax(compute_tax(i))) == compute_tax(i)
3. Negative income or tax -> InvalidInput
"""

import logging
from dataclasses import dataclass
from typing import Final

from pydantic import BaseModel

from fintoolkit.core.domain.tax_bracket import TW_2025_SCHEDULE, TaxBracket, TaxSchedule
from fintoolkit.core.math.numerical_safeguards import floor_currency, validate_non_negative

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

# Basic income tax rate applied to the AMT base
AMT_RATE: Final[float] = 0.20

# Basic income tax exemption for 2025
AMT_EXEMPTION_2025: Final[int] = 7_500_000

# Overseas income below this is never counted toward the AMT base
OVERSEAS_QUOTA_FLOOR: Final[int] = 1_000_000


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class OverseasQuotaConfig:
    """Parameters of the overseas-income quota formula."""

    amt_rate: float = AMT_RATE
    exemption: float = AMT_EXEMPTION_2025
    quota_floor: float = OVERSEAS_QUOTA_FLOOR


# =============================================================================
# RESULT
# =============================================================================


class OverseasQuotaResult(BaseModel):
    """Regular income, regular tax and the overseas quota they imply."""

    income: int
    tax: int
    quota: int

    model_config = {"frozen": True}


# =============================================================================
# BRACKET LOOKUP
# =============================================================================


def bracket_for_income(income: float, schedule: TaxSchedule = TW_2025_SCHEDULE) -> TaxBracket:
    """
    First bracket whose upper_bound >= income.

    The last bracket is +inf, so a match always exists.
    """
    for bracket in schedule.brackets:
        if income <= bracket.upper_bound:
            return bracket
    return schedule.brackets[-1]


def bracket_for_tax(tax: float, schedule: TaxSchedule = TW_2025_SCHEDULE) -> TaxBracket:
    """First bracket whose max_tax_at_bound >= tax."""
    for bracket in schedule.brackets:
        if tax <= bracket.max_tax_at_bound:
            return bracket
    return schedule.brackets[-1]


# =============================================================================
# FORWARD / INVERSE
# =============================================================================


def compute_tax(income: float, schedule: TaxSchedule = TW_2025_SCHEDULE) -> int:
    """
    Regular income tax on net taxable income.

    Args:
        income: Net taxable income (>= 0)
        schedule: Bracket table (default: Taiwan 2025)

    Returns:
        Tax in whole currency units

    Raises:
        InvalidInput: if income is negative or NaN/Inf

    Examples:
        >>> compute_tax(1_500_000)
        150900
        >>> compute_tax(0)
        0
    """
    validate_non_negative(income, "income")

    bracket = bracket_for_income(income, schedule)
    tax = floor_currency(max(0.0, income * bracket.marginal_rate - bracket.progressive_correction))

    logger.debug(
        "tax on income=%s: bracket<=%s rate=%s -> %s",
        income, bracket.upper_bound, bracket.marginal_rate, tax,
    )
    return tax


def compute_income_from_tax(tax: float, schedule: TaxSchedule = TW_2025_SCHEDULE) -> int:
    """
    Invert compute_tax: an income whose regular tax equals `tax`.

    Flooring in the forward direction makes the inverse many-to-one, so the
    result is one valid income, not necessarily the original. When flooring
    the inverse would land one unit short of `tax`, the income is bumped by
    one so that the forward tax is reproduced.

    Args:
        tax: Regular income tax (>= 0)
        schedule: Bracket table (default: Taiwan 2025)

    Returns:
        Net taxable income in whole currency units

    Raises:
        InvalidInput: if tax is negative or NaN/Inf

    Examples:
        >>> compute_income_from_tax(150_900)
        1500000
    """
    validate_non_negative(tax, "tax")

    bracket = bracket_for_tax(tax, schedule)
    income = floor_currency((tax + bracket.progressive_correction) / bracket.marginal_rate)

    if compute_tax(income, schedule) < tax:
        income += 1

    return income


# =============================================================================
# OVERSEAS QUOTA
# =============================================================================


def compute_overseas_quota(
    tax: float,
    exemption: float,
    income: float,
    config: OverseasQuotaConfig | None = None,
) -> int:
    """
    Overseas income that can be added without owing basic income tax.

    quota = floor(tax / amt_rate + exemption - income), floored at quota_floor.

    Args:
        tax: Regular income tax
        exemption: Basic income tax exemption
        income: Net taxable income
        config: Formula parameters (amt_rate, quota_floor)

    Returns:
        Quota in whole currency units, >= quota_floor

    Examples:
        >>> compute_overseas_quota(150_900, 7_500_000, 1_500_000)
        6754500
    """
    config = config or OverseasQuotaConfig()

    validate_non_negative(tax, "tax")
    validate_non_negative(exemption, "exemption")
    validate_non_negative(income, "income")

    quota = floor_currency(tax / config.amt_rate + exemption - income)
    return max(int(config.quota_floor), quota)


def overseas_quota_from_income(
    income: float,
    schedule: TaxSchedule = TW_2025_SCHEDULE,
    config: OverseasQuotaConfig | None = None,
) -> OverseasQuotaResult:
    """Quota when the user enters net income; tax is derived."""
    config = config or OverseasQuotaConfig()

    tax = compute_tax(income, schedule)
    quota = compute_overseas_quota(tax, config.exemption, income, config)

    return OverseasQuotaResult(income=floor_currency(income), tax=tax, quota=quota)


def overseas_quota_from_tax(
    tax: float,
    schedule: TaxSchedule = TW_2025_SCHEDULE,
    config: OverseasQuotaConfig | None = None,
) -> OverseasQuotaResult:
    """Quota when the user enters the tax paid; income is derived."""
    config = config or OverseasQuotaConfig()

    income = compute_income_from_tax(tax, schedule)
    quota = compute_overseas_quota(tax, config.exemption, income, config)

    return OverseasQuotaResult(income=income, tax=floor_currency(tax), quota=quota)
