"""
CashFlow — a signed amount at a whole-year period.

Negative amounts are outflows (premiums, contributions), positive amounts are
inflows (payouts). IRR input.
"""

import math

from pydantic import BaseModel, Field


class CashFlow(BaseModel):
    """Immutable cash flow at period `period` (0 = today)."""

    period: int = Field(..., ge=0, description="Period index, 0 = today")
    amount: float = Field(
        ..., allow_inf_nan=False, description="Signed amount (negative = outflow)"
    )

    model_config = {"frozen": True}

    def discounted(self, rate: float) -> float:
        """
        Present value of this flow at periodic discount rate `rate` (> -1).

        Near rate = -1 the discount factor underflows to zero; the present
        value then saturates to +/-inf with the sign of the amount.
        """
        if self.amount == 0.0:
            return 0.0

        try:
            factor = (1.0 + rate) ** self.period
        except OverflowError:
            return 0.0

        if factor == 0.0:
            return math.copysign(math.inf, self.amount)

        return self.amount / factor
