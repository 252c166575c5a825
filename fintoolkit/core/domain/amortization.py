"""
Amortization — loan parameters and payment results.

Immutable Pydantic models for an amortizing loan with an optional
interest-only grace period at the start.
"""

from typing import NamedTuple

from pydantic import BaseModel, Field


class AmortizationParams(BaseModel):
    """
    Loan terms.

    grace_months may exceed total_months; the loan then never amortizes and
    the normal payment is 0.
    """

    principal: float = Field(..., gt=0, allow_inf_nan=False, description="Amount borrowed")
    annual_rate_pct: float = Field(
        ..., ge=0, allow_inf_nan=False, description="Nominal annual rate in percent"
    )
    total_months: int = Field(..., gt=0, description="Loan term in months")
    grace_months: int = Field(0, ge=0, description="Interest-only months at the start")

    model_config = {"frozen": True}

    @property
    def amortizing_months(self) -> int:
        """Months left for principal repayment after the grace period (may be <= 0)."""
        return self.total_months - self.grace_months


class AmortizationPayments(BaseModel):
    """Monthly payments during and after the grace period, whole currency units."""

    grace_payment: int
    normal_payment: int

    model_config = {"frozen": True}


class AmortizationRow(NamedTuple):
    """One month of an amortization schedule."""

    month: int  # 1-based
    payment: float
    interest: float
    principal_paid: float
    balance: float  # outstanding after this payment
