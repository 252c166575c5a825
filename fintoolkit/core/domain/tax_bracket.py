"""
TaxBracket / TaxSchedule — progressive income tax tables.

Each bracket is taxed with the "quick deduction" form

    tax = income * marginal_rate - progressive_correction

which is equivalent to summing slices bracket by bracket. The tax owed at the
top of a bracket (max_tax_at_bound) is derived from the other two fields, so
the table has a single source of truth.

Immutable Pydantic models.
"""

import math

from pydantic import BaseModel, Field, computed_field, model_validator


# =============================================================================
# TAX BRACKET
# =============================================================================


class TaxBracket(BaseModel):
    """
    One row of a progressive tax table.

    upper_bound is inclusive; the catch-all top bracket uses +inf.
    """

    upper_bound: float = Field(..., gt=0, description="Inclusive income ceiling (may be +inf)")
    marginal_rate: float = Field(..., gt=0, le=1, description="Marginal rate (0-1)")
    progressive_correction: float = Field(
        ..., ge=0, allow_inf_nan=False, description="Quick-deduction amount"
    )

    model_config = {"frozen": True}

    @computed_field  # type: ignore[prop-decorator]
    @property
    def max_tax_at_bound(self) -> float:
        """Tax owed at exactly upper_bound (+inf for the catch-all bracket)."""
        return self.upper_bound * self.marginal_rate - self.progressive_correction

    @property
    def is_catch_all(self) -> bool:
        return math.isinf(self.upper_bound)


# =============================================================================
# TAX SCHEDULE
# =============================================================================


class TaxSchedule(BaseModel):
    """
    Ordered progressive tax table.

    Invariants:
    - at least one bracket
    - upper_bound strictly ascending
    - exactly one +inf bound, on the last bracket
    """

    brackets: tuple[TaxBracket, ...] = Field(..., min_length=1)

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def check_ordering(self) -> "TaxSchedule":
        bounds = [b.upper_bound for b in self.brackets]

        for lower, upper in zip(bounds, bounds[1:]):
            if upper <= lower:
                raise ValueError(
                    f"bracket upper bounds must be strictly ascending, got {lower} then {upper}"
                )

        if not self.brackets[-1].is_catch_all:
            raise ValueError("last bracket must have upper_bound = +inf")

        # Ascending order already rules out a second +inf before the last one
        return self

    @classmethod
    def from_rows(cls, rows: list[tuple[float, float, float]]) -> "TaxSchedule":
        """
        Build a schedule from (upper_bound, marginal_rate, progressive_correction) rows.

        Examples:
            >>> TaxSchedule.from_rows([(100.0, 0.1, 0.0), (math.inf, 0.2, 10.0)]).brackets[0].max_tax_at_bound
            10.0
        """
        return cls(
            brackets=tuple(
                TaxBracket(
                    upper_bound=upper_bound,
                    marginal_rate=marginal_rate,
                    progressive_correction=progressive_correction,
                )
                for upper_bound, marginal_rate, progressive_correction in rows
            )
        )


# Taiwan comprehensive income tax, 2025 net-income brackets
TW_2025_SCHEDULE = TaxSchedule.from_rows(
    [
        (610_000, 0.05, 0),
        (1_330_000, 0.12, 42_700),
        (2_660_000, 0.20, 149_100),
        (4_980_000, 0.30, 415_100),
        (math.inf, 0.40, 913_100),
    ]
)
