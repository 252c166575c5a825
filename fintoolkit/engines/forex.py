"""
Currency cross rates from a table of rates quoted against one base currency.

Live rates are supplied by the caller; DEFAULT_TWD_RATES is an offline
fallback quoted as TWD per unit of each currency.
"""

from typing import Final, Mapping

from fintoolkit.core.errors import InvalidInput
from fintoolkit.core.math.numerical_safeguards import validate_non_negative, validate_positive

DEFAULT_TWD_RATES: Final[Mapping[str, float]] = {
    "TWD": 1.0,
    "USD": 32.5,
    "JPY": 0.22,
    "EUR": 35.2,
    "CNY": 4.5,
    "AUD": 21.5,
    "KRW": 0.024,
}


def cross_rate(
    from_ccy: str,
    to_ccy: str,
    rates: Mapping[str, float] = DEFAULT_TWD_RATES,
) -> float:
    """
    Units of to_ccy per one unit of from_ccy.

    Raises:
        InvalidInput: unknown currency code or non-positive quote

    Examples:
        >>> cross_rate("USD", "TWD")
        32.5
    """
    for code in (from_ccy, to_ccy):
        if code not in rates:
            raise InvalidInput(f"No rate for currency {code!r}; known: {sorted(rates)}")
        validate_positive(rates[code], f"rate[{code}]")

    return rates[from_ccy] / rates[to_ccy]


def convert(amount: float, rate: float) -> float:
    """amount * rate, for an explicit (possibly user-overridden) rate."""
    validate_non_negative(amount, "amount")
    validate_positive(rate, "rate")

    return amount * rate
