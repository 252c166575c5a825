"""
Barrier — structured-note (FCN/ELN) barrier terms and maturity outcomes.

KO (knock-out) redeems early, KI (knock-in) removes downside protection,
Strike is the price at which the underlying is delivered.

Immutable Pydantic models.
"""

from enum import Enum

from pydantic import BaseModel, Field


# =============================================================================
# ENUMS
# =============================================================================


class ObservationMode(str, Enum):
    """How the KO/KI barriers are observed."""

    CONTINUOUS = "continuous"
    TERMINAL_ONLY = "terminal_only"
    NONE = "none"


class MaturityOutcome(str, Enum):
    """Settlement scenario at maturity."""

    KNOCKED_OUT = "knocked_out"
    SETTLED_ABOVE_STRIKE = "settled_above_strike"
    DELIVERED_UNDERLYING = "delivered_underlying"


# =============================================================================
# MODELS
# =============================================================================


class BarrierSet(BaseModel):
    """Barrier levels as percentages of the reference (initial) price."""

    reference_price: float = Field(..., gt=0, allow_inf_nan=False)
    ko_pct: float = Field(..., ge=0, allow_inf_nan=False)
    strike_pct: float = Field(..., ge=0, allow_inf_nan=False)
    ki_pct: float = Field(..., ge=0, allow_inf_nan=False)
    observation_mode: ObservationMode = ObservationMode.CONTINUOUS

    model_config = {"frozen": True}


class BarrierPrices(BaseModel):
    """Absolute barrier price levels."""

    ko: float
    strike: float
    ki: float

    model_config = {"frozen": True}


class SettlementPnL(BaseModel):
    """Profit and loss of a structured note held to maturity."""

    outcome: MaturityOutcome
    coupon_income: float
    underlying_pnl: float  # mark-to-market on delivered shares, 0 unless delivered
    total_pnl: float

    model_config = {"frozen": True}
