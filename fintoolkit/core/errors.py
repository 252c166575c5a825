"""
Error taxonomy shared by all engines.

- InvalidInput: domain-invalid argument, raised before any computation
- NonConvergent: root search whose bracket holds no sign change

Both are local to a single calculation call; the caller decides how to
present them.
"""


class InvalidInput(ValueError):
    """Argument outside the domain of a financial formula."""

    pass


class NonConvergent(ArithmeticError):
    """
    Bisection bracket does not contain a root.

    NPV has the same sign at both ends of [low, high], so halving the
    interval would return a meaningless midpoint.
    """

    def __init__(self, low: float, high: float, npv_low: float, npv_high: float):
        self.low = low
        self.high = high
        self.npv_low = npv_low
        self.npv_high = npv_high
        super().__init__(
            f"NPV does not change sign on [{low}, {high}]: "
            f"NPV(low)={npv_low:.6g}, NPV(high)={npv_high:.6g}"
        )
