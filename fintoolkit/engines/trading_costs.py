"""
Trading cost calculators for Taiwan-listed securities.

- Dividend income and the 2nd-generation NHI supplementary premium
- Round-trip stock trade: brokerage fees (with discount and minimum) and
  securities transaction tax by security kind
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Final

from pydantic import BaseModel

from fintoolkit.core.math.numerical_safeguards import (
    floor_currency,
    validate_in_range,
    validate_non_negative,
    validate_positive,
)

# =============================================================================
# CONSTANTS
# =============================================================================

# Supplementary health-insurance premium on dividends
NHI_SURCHARGE_RATE: Final[float] = 0.0211

# Single payment at or above this triggers the surcharge
NHI_SURCHARGE_THRESHOLD: Final[float] = 20_000

BROKERAGE_FEE_RATE: Final[float] = 0.001425
BROKERAGE_MIN_FEE: Final[float] = 20


class SecurityKind(str, Enum):
    """Transaction-tax category."""

    STOCK = "stock"
    DAY_TRADE = "day"
    ETF = "etf"
    BOND = "bond"


DEFAULT_TRANSACTION_TAX_RATES: Final[dict[SecurityKind, float]] = {
    SecurityKind.STOCK: 0.003,
    SecurityKind.DAY_TRADE: 0.0015,
    SecurityKind.ETF: 0.001,
    SecurityKind.BOND: 0.0,
}


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class DividendSurchargeConfig:
    """NHI supplementary premium parameters."""

    rate: float = NHI_SURCHARGE_RATE
    threshold: float = NHI_SURCHARGE_THRESHOLD


@dataclass(frozen=True)
class TradeCostConfig:
    """Brokerage and transaction tax parameters."""

    fee_rate: float = BROKERAGE_FEE_RATE
    min_fee: float = BROKERAGE_MIN_FEE
    transaction_tax_rates: dict[SecurityKind, float] = field(
        default_factory=lambda: dict(DEFAULT_TRANSACTION_TAX_RATES)
    )


# =============================================================================
# RESULTS
# =============================================================================


class DividendResult(BaseModel):
    total_dividend: float
    single_payment: float
    health_surcharge: int
    net_income: float

    model_config = {"frozen": True}


class TradeResult(BaseModel):
    buy_fee: int
    sell_fee: int
    transaction_tax: int
    profit: float

    model_config = {"frozen": True}


# =============================================================================
# CALCULATORS
# =============================================================================


def dividend_income(
    shares: float,
    dividend_per_share: float,
    payments_per_year: int = 1,
    config: DividendSurchargeConfig | None = None,
) -> DividendResult:
    """
    Annual dividend after the supplementary premium.

    The premium applies to the whole year's dividend when a single payment
    reaches the threshold; splitting into quarterly payments can avoid it.

    Examples:
        >>> dividend_income(10_000, 1.5, 1).health_surcharge
        0
        >>> dividend_income(20_000, 1.5, 1).health_surcharge
        633
    """
    config = config or DividendSurchargeConfig()

    validate_non_negative(shares, "shares")
    validate_non_negative(dividend_per_share, "dividend_per_share")
    validate_positive(payments_per_year, "payments_per_year")

    total = shares * dividend_per_share
    single = total / payments_per_year

    surcharge = floor_currency(total * config.rate) if single >= config.threshold else 0

    return DividendResult(
        total_dividend=total,
        single_payment=single,
        health_surcharge=surcharge,
        net_income=total - surcharge,
    )


def stock_trade(
    buy_price: float,
    sell_price: float,
    shares: float,
    fee_discount_pct: float = 100.0,
    kind: SecurityKind = SecurityKind.STOCK,
    config: TradeCostConfig | None = None,
) -> TradeResult:
    """
    Net profit of buying and selling `shares` after fees and tax.

    fee = floor(max(min_fee, value * fee_rate * discount)) per side
    tax = floor(sell_value * tax_rate(kind))

    Examples:
        >>> stock_trade(100, 110, 1_000, 60).profit
        9491.0
    """
    config = config or TradeCostConfig()

    validate_non_negative(buy_price, "buy_price")
    validate_non_negative(sell_price, "sell_price")
    validate_non_negative(shares, "shares")
    validate_in_range(fee_discount_pct, "fee_discount_pct", 0.0, 100.0)

    discount = fee_discount_pct / 100.0
    buy_value = buy_price * shares
    sell_value = sell_price * shares

    buy_fee = floor_currency(max(config.min_fee, buy_value * config.fee_rate * discount))
    sell_fee = floor_currency(max(config.min_fee, sell_value * config.fee_rate * discount))
    tax = floor_currency(sell_value * config.transaction_tax_rates[SecurityKind(kind)])

    profit = sell_value - sell_fee - tax - buy_value - buy_fee

    return TradeResult(buy_fee=buy_fee, sell_fee=sell_fee, transaction_tax=tax, profit=profit)
