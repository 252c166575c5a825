"""
Core math modules for fintoolkit

Numerical primitives shared by the calculator engines.
"""

# Numerical Safeguards
from fintoolkit.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_CALC,
    EPS_CURRENCY,
    EPS_RATE,
    # NaN/Inf checks
    ensure_finite,
    is_valid_float,
    # Epsilon comparisons
    is_zero,
    # Currency quantization
    clamp,
    floor_currency,
    round_half_up,
    # Validation
    validate_in_range,
    validate_non_negative,
    validate_positive,
    validate_whole,
)

# Compounding
from fintoolkit.core.math.compounding import (
    COMPOUNDING_R_FLOOR_EPS,
    LOG1P_SWITCH_THRESHOLD,
    MONTHS_PER_YEAR,
    CompoundingDomainViolation,
    annual_pct_to_monthly_rate,
    annuity_factor,
    future_value_factor,
    growth_factor,
    pct_to_rate,
    safe_compound_rate,
    safe_log_return,
)

__all__ = [
    # Numerical Safeguards: Epsilon constants
    "EPS_CALC",
    "EPS_CURRENCY",
    "EPS_RATE",
    # Numerical Safeguards: NaN/Inf checks
    "ensure_finite",
    "is_valid_float",
    # Numerical Safeguards: Epsilon comparisons
    "is_zero",
    # Numerical Safeguards: Quantization
    "clamp",
    "floor_currency",
    "round_half_up",
    # Numerical Safeguards: Validation
    "validate_in_range",
    "validate_non_negative",
    "validate_positive",
    "validate_whole",
    # Compounding: Constants
    "COMPOUNDING_R_FLOOR_EPS",
    "LOG1P_SWITCH_THRESHOLD",
    "MONTHS_PER_YEAR",
    # Compounding: Exceptions
    "CompoundingDomainViolation",
    # Compounding: Functions
    "annual_pct_to_monthly_rate",
    "annuity_factor",
    "future_value_factor",
    "growth_factor",
    "pct_to_rate",
    "safe_compound_rate",
    "safe_log_return",
]
