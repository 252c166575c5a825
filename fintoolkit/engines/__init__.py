"""Engines — one calculator per module, all pure functions.

- tax_brackets: progressive tax, inverse, overseas-income quota
- annuity: loan payments, grace period, amortization schedule
- growth_series: compound growth and DCA series
- irr_solver: lump-sum IRR and bisection IRR
- barrier_prices: FCN/ELN barrier levels and maturity outcome
- household: FIRE number, insurance gap, purchasing power
- trading_costs: dividend surcharge, stock round-trip costs
- rent_vs_buy: rent-and-invest vs buy-with-mortgage
- forex: cross rates from a rate table
"""

from .annuity import (
    amortization_schedule,
    amortized_payment_with_grace,
    grace_interest_only_payment,
    monthly_payment,
    remaining_balance,
)
from .barrier_prices import (
    barrier_prices,
    barrier_prices_for,
    break_even_price,
    classify_maturity_outcome,
    settlement_pnl,
)
from .forex import DEFAULT_TWD_RATES, convert, cross_rate
from .growth_series import (
    CompoundComparison,
    compound_comparison,
    compound_series,
    compound_value,
    periodic_contribution_future_value,
    periodic_contribution_future_value_series,
)
from .household import FireResult, InsuranceGapResult, fire_number, insurance_gap, purchasing_power
from .irr_solver import (
    IRRSolverConfig,
    lump_sum_irr,
    net_present_value,
    scheduled_cash_flows,
    scheduled_irr,
    solve_irr,
)
from .rent_vs_buy import RentVsBuyConfig, RentVsBuyResult, rent_vs_buy
from .tax_brackets import (
    OverseasQuotaConfig,
    OverseasQuotaResult,
    bracket_for_income,
    bracket_for_tax,
    compute_income_from_tax,
    compute_overseas_quota,
    compute_tax,
    overseas_quota_from_income,
    overseas_quota_from_tax,
)
from .trading_costs import (
    DividendResult,
    DividendSurchargeConfig,
    SecurityKind,
    TradeCostConfig,
    TradeResult,
    dividend_income,
    stock_trade,
)

__all__ = [
    # Tax
    "OverseasQuotaConfig",
    "OverseasQuotaResult",
    "bracket_for_income",
    "bracket_for_tax",
    "compute_income_from_tax",
    "compute_overseas_quota",
    "compute_tax",
    "overseas_quota_from_income",
    "overseas_quota_from_tax",
    # Annuity
    "amortization_schedule",
    "amortized_payment_with_grace",
    "grace_interest_only_payment",
    "monthly_payment",
    "remaining_balance",
    # Growth
    "CompoundComparison",
    "compound_comparison",
    "compound_series",
    "compound_value",
    "periodic_contribution_future_value",
    "periodic_contribution_future_value_series",
    # IRR
    "IRRSolverConfig",
    "lump_sum_irr",
    "net_present_value",
    "scheduled_cash_flows",
    "scheduled_irr",
    "solve_irr",
    # Barrier
    "barrier_prices",
    "barrier_prices_for",
    "break_even_price",
    "classify_maturity_outcome",
    "settlement_pnl",
    # Household
    "FireResult",
    "InsuranceGapResult",
    "fire_number",
    "insurance_gap",
    "purchasing_power",
    # Trading costs
    "DividendResult",
    "DividendSurchargeConfig",
    "SecurityKind",
    "TradeCostConfig",
    "TradeResult",
    "dividend_income",
    "stock_trade",
    # Rent vs buy
    "RentVsBuyConfig",
    "RentVsBuyResult",
    "rent_vs_buy",
    # Forex
    "DEFAULT_TWD_RATES",
    "convert",
    "cross_rate",
]
