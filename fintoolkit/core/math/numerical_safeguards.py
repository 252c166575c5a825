"""
Numerical Safeguards — Safe Math Primitives

Keeps every calculator numerically well-behaved:
- Validation of inputs before a formula runs (typed InvalidInput)
- NaN/Inf detection so non-finite values never reach a caller
- Epsilon-guarded flooring and half-up rounding to whole currency units
- Epsilon comparisons for rate-zero branches

CRITICAL INVARIANTS:
1. Division by zero never happens (rate-zero branches use the linear limit)
2. NaN/Inf never propagate (invalid input is rejected up front)
3. Currency quantization is stable against binary float noise
   (e.g. 150900 / 0.2 must floor to 754500, not 754499)
4. All operations are deterministic and reproducible
"""

import math
from typing import Final

from fintoolkit.core.errors import InvalidInput

# =============================================================================
# EPSILON PARAMETERS
# =============================================================================

# General purpose epsilon for comparisons and positivity checks
EPS_CALC: Final[float] = 1e-12

# Guard added before flooring/rounding to whole currency units.
# Far below one unit, far above float noise on values up to ~1e9.
EPS_CURRENCY: Final[float] = 1e-6

# Absolute tolerance for "rate is exactly zero"
EPS_RATE: Final[float] = 1e-15


# =============================================================================
# NaN/Inf CHECKS
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Check whether a float is finite (not NaN, not Inf).

    Args:
        value: Value to check

    Returns:
        True if finite, False for NaN or +/-Inf
    """
    return math.isfinite(value)


def ensure_finite(value: float, name: str) -> float:
    """
    Return value unchanged, or raise if a computation overflowed to Inf/NaN.

    Raises:
        InvalidInput: if value is NaN or Inf
    """
    if not is_valid_float(value):
        raise InvalidInput(f"{name} is not a finite number ({value}); inputs are out of range")
    return value


# =============================================================================
# EPSILON COMPARISONS
# =============================================================================


def is_zero(value: float, tol: float = EPS_RATE) -> bool:
    """
    Check whether a value is zero within tolerance.

    Args:
        value: Value to check
        tol: Absolute tolerance (default: EPS_RATE)

    Returns:
        True if abs(value) <= tol
    """
    return abs(value) <= tol


# =============================================================================
# CURRENCY QUANTIZATION
# =============================================================================


def floor_currency(value: float, eps: float = EPS_CURRENCY) -> int:
    """
    Floor to a whole currency unit, tolerant of float representation error.

    Examples:
        >>> floor_currency(754499.9999999999)
        754500
        >>> floor_currency(150900.7)
        150900
        >>> floor_currency(-0.5)
        -1
    """
    return math.floor(value + eps)


def round_half_up(value: float, eps: float = EPS_CURRENCY) -> int:
    """
    Round to the nearest whole currency unit, halves rounding up.

    Matches the rounding used for displayed payments (x.5 -> x+1), unlike
    Python's round(), which rounds halves to even.

    Examples:
        >>> round_half_up(2.5)
        3
        >>> round_half_up(37461.49)
        37461
        >>> round_half_up(17500.0)
        17500
    """
    return math.floor(value + 0.5 + eps)


def clamp(
    value: float,
    min_value: float | None = None,
    max_value: float | None = None,
) -> float:
    """
    Limit a value to [min_value, max_value].

    Examples:
        >>> clamp(5.0, 0.0, 10.0)
        5.0
        >>> clamp(-1.0, 0.0, 10.0)
        0.0
        >>> clamp(15.0, 0.0, 10.0)
        10.0
    """
    result = value

    if min_value is not None:
        result = max(result, min_value)

    if max_value is not None:
        result = min(result, max_value)

    return result


# =============================================================================
# VALIDATION
# =============================================================================


def validate_positive(value: float, name: str, eps: float = EPS_CALC) -> None:
    """
    Validate that a value is strictly positive.

    Args:
        value: Value to check
        name: Parameter name (for the error message)
        eps: Minimum threshold (default: EPS_CALC)

    Raises:
        InvalidInput: if value <= eps or NaN/Inf
    """
    if not is_valid_float(value):
        raise InvalidInput(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if value <= eps:
        raise InvalidInput(f"{name} must be positive, got {value}")


def validate_non_negative(value: float, name: str) -> None:
    """
    Validate that a value is >= 0.

    Raises:
        InvalidInput: if value < 0 or NaN/Inf
    """
    if not is_valid_float(value):
        raise InvalidInput(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if value < 0:
        raise InvalidInput(f"{name} must be non-negative, got {value}")


def validate_whole(value: float, name: str, min_value: int = 0) -> int:
    """
    Validate that a value is a whole number >= min_value and return it as int.

    Periods, months and years arrive from forms as floats ("360.0"); anything
    with a fractional part is rejected rather than silently truncated.

    Raises:
        InvalidInput: if value is fractional, NaN/Inf, or below min_value
    """
    if isinstance(value, bool):
        raise InvalidInput(f"{name} must be a whole number, got {value!r}")

    if not is_valid_float(float(value)):
        raise InvalidInput(f"{name} must be a valid number (not NaN/Inf), got {value}")

    if float(value) != int(value):
        raise InvalidInput(f"{name} must be a whole number, got {value}")

    whole = int(value)
    if whole < min_value:
        raise InvalidInput(f"{name} must be >= {min_value}, got {whole}")

    return whole


def validate_in_range(
    value: float,
    name: str,
    min_value: float | None = None,
    max_value: float | None = None,
) -> None:
    """
    Validate that a value lies in [min_value, max_value].

    Raises:
        InvalidInput: if value is out of range or NaN/Inf
    """
    if not is_valid_float(value):
        raise InvalidInput(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if min_value is not None and value < min_value:
        raise InvalidInput(f"{name} must be >= {min_value}, got {value}")

    if max_value is not None and value > max_value:
        raise InvalidInput(f"{name} must be <= {max_value}, got {value}")
