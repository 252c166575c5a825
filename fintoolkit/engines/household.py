"""
Household planning calculators: FIRE number, life-insurance gap, inflation.
"""

from typing import Final

from pydantic import BaseModel

from fintoolkit.core.math.compounding import growth_factor, pct_to_rate
from fintoolkit.core.math.numerical_safeguards import (
    clamp,
    validate_non_negative,
    validate_positive,
    validate_whole,
)

# 4% withdrawal rule: the portfolio must cover 25 years of the spending gap
FIRE_MULTIPLE: Final[float] = 25.0


class FireResult(BaseModel):
    """Financial-independence target after pension income."""

    gap_yearly: float
    fire_number: float
    progress_pct: float  # 0-100

    model_config = {"frozen": True}


class InsuranceGapResult(BaseModel):
    """Life cover needed beyond existing savings (needs-based method)."""

    needs: float
    gap: float

    model_config = {"frozen": True}


def fire_number(
    annual_expense: float,
    monthly_pension: float,
    assets: float,
    multiple: float = FIRE_MULTIPLE,
) -> FireResult:
    """
    Portfolio needed to retire, net of a monthly pension.

    gap_yearly = max(0, annual_expense - 12 * monthly_pension)
    fire_number = gap_yearly * multiple

    A pension that covers all spending means the target is already met.

    Examples:
        >>> fire_number(600_000, 20_000, 2_000_000).fire_number
        9000000.0
    """
    validate_non_negative(annual_expense, "annual_expense")
    validate_non_negative(monthly_pension, "monthly_pension")
    validate_non_negative(assets, "assets")
    validate_positive(multiple, "multiple")

    gap_yearly = max(0.0, annual_expense - monthly_pension * 12)
    target = gap_yearly * multiple

    if target == 0:
        progress = 100.0
    else:
        progress = clamp(assets / target * 100.0, max_value=100.0)

    return FireResult(gap_yearly=gap_yearly, fire_number=target, progress_pct=progress)


def insurance_gap(
    debt: float,
    family_annual_need: float,
    years: float,
    savings: float,
) -> InsuranceGapResult:
    """
    needs = debt + family_annual_need * years; gap = max(0, needs - savings).

    Examples:
        >>> insurance_gap(5_000_000, 500_000, 10, 1_000_000).gap
        9000000.0
    """
    validate_non_negative(debt, "debt")
    validate_non_negative(family_annual_need, "family_annual_need")
    validate_non_negative(years, "years")
    validate_non_negative(savings, "savings")

    needs = float(debt + family_annual_need * years)
    return InsuranceGapResult(needs=needs, gap=max(0.0, needs - savings))


def purchasing_power(amount: float, inflation_pct: float, years: int) -> float:
    """
    Today's value of `amount` after `years` of inflation.

    Uses the (1 - inflation)^years erosion convention of the calculator
    suite, which is slightly harsher than dividing by (1 + inflation)^years.

    Examples:
        >>> purchasing_power(1_000_000, 0.0, 20)
        1000000.0
    """
    validate_non_negative(amount, "amount")
    validate_non_negative(inflation_pct, "inflation_pct")
    n = validate_whole(years, "years")

    return amount * growth_factor(-pct_to_rate(inflation_pct), n)
