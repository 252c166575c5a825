"""
Rent vs buy — net worth of each choice after a holding period.

Buyer: pays the down payment and a level mortgage; ends with the appreciated
home minus the outstanding loan balance.

Renter: invests the down payment as a lump sum (compounded yearly) and, each
month, the amount by which the mortgage payment exceeds rent (DCA).
"""

from dataclasses import dataclass
from typing import Final

from pydantic import BaseModel

from fintoolkit.core.math.compounding import (
    MONTHS_PER_YEAR,
    annual_pct_to_monthly_rate,
    annuity_factor,
)
from fintoolkit.core.math.numerical_safeguards import (
    validate_in_range,
    validate_non_negative,
    validate_positive,
    validate_whole,
)
from fintoolkit.engines.annuity import remaining_balance
from fintoolkit.engines.growth_series import compound_value, periodic_contribution_future_value

DOWN_PAYMENT_RATIO: Final[float] = 0.20
MORTGAGE_RATE_PCT: Final[float] = 2.1
MORTGAGE_YEARS: Final[int] = 30


@dataclass(frozen=True)
class RentVsBuyConfig:
    """Mortgage terms assumed for the buyer."""

    down_payment_ratio: float = DOWN_PAYMENT_RATIO
    mortgage_rate_pct: float = MORTGAGE_RATE_PCT
    mortgage_years: int = MORTGAGE_YEARS


class RentVsBuyResult(BaseModel):
    monthly_mortgage: float
    final_home_value: float
    remaining_loan: float
    buy_net_worth: float
    rent_net_worth: float

    model_config = {"frozen": True}

    @property
    def renting_wins(self) -> bool:
        return self.rent_net_worth > self.buy_net_worth


def rent_vs_buy(
    home_price: float,
    monthly_rent: float,
    years: int,
    invest_return_pct: float,
    home_appreciation_pct: float,
    config: RentVsBuyConfig | None = None,
) -> RentVsBuyResult:
    """
    Compare buying with a mortgage against renting and investing the difference.

    Args:
        home_price: Purchase price (> 0)
        monthly_rent: Rent for an equivalent home (>= 0)
        years: Holding period (>= 0)
        invest_return_pct: Annual return on the renter's investments
        home_appreciation_pct: Annual home price growth
        config: Mortgage terms

    Returns:
        RentVsBuyResult
    """
    config = config or RentVsBuyConfig()

    validate_positive(home_price, "home_price")
    validate_non_negative(monthly_rent, "monthly_rent")
    n_years = validate_whole(years, "years")
    validate_in_range(config.down_payment_ratio, "down_payment_ratio", 0.0, 1.0)

    down_payment = home_price * config.down_payment_ratio
    loan = home_price - down_payment
    term_months = config.mortgage_years * MONTHS_PER_YEAR

    if loan > 0:
        r = annual_pct_to_monthly_rate(config.mortgage_rate_pct)
        monthly_mortgage = loan * annuity_factor(r, term_months)
        remaining_loan = remaining_balance(
            loan,
            config.mortgage_rate_pct,
            term_months,
            min(n_years * MONTHS_PER_YEAR, term_months),
        )
    else:
        monthly_mortgage = 0.0
        remaining_loan = 0.0

    final_home_value = compound_value(home_price, home_appreciation_pct, n_years)

    monthly_saving = max(0.0, monthly_mortgage - monthly_rent)
    rent_net_worth = compound_value(down_payment, invest_return_pct, n_years) + (
        periodic_contribution_future_value(
            monthly_saving, invest_return_pct, n_years * MONTHS_PER_YEAR
        )
    )

    return RentVsBuyResult(
        monthly_mortgage=monthly_mortgage,
        final_home_value=final_home_value,
        remaining_loan=remaining_loan,
        buy_net_worth=final_home_value - remaining_loan,
        rent_net_worth=rent_net_worth,
    )
