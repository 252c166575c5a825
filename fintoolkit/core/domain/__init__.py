"""
Domain models and value objects.

Contains the immutable inputs and results of the calculator engines.
"""

from fintoolkit.core.domain.amortization import (
    AmortizationParams,
    AmortizationPayments,
    AmortizationRow,
)
from fintoolkit.core.domain.barrier import (
    BarrierPrices,
    BarrierSet,
    MaturityOutcome,
    ObservationMode,
    SettlementPnL,
)
from fintoolkit.core.domain.base import build
from fintoolkit.core.domain.cash_flow import CashFlow
from fintoolkit.core.domain.series import SeriesPoint
from fintoolkit.core.domain.tax_bracket import TW_2025_SCHEDULE, TaxBracket, TaxSchedule

__all__ = [
    # Construction
    "build",
    # Amortization
    "AmortizationParams",
    "AmortizationPayments",
    "AmortizationRow",
    # Barrier
    "BarrierPrices",
    "BarrierSet",
    "MaturityOutcome",
    "ObservationMode",
    "SettlementPnL",
    # Cash flows & series
    "CashFlow",
    "SeriesPoint",
    # Tax
    "TW_2025_SCHEDULE",
    "TaxBracket",
    "TaxSchedule",
]
