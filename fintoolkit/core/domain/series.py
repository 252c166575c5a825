"""
SeriesPoint — one sample of a growth time series.

Consumed by chart renderers as an ordered, non-empty sequence of finite values.
"""

from typing import NamedTuple


class SeriesPoint(NamedTuple):
    """(index, value) pair; index is a period or a year depending on the series."""

    index: int
    value: float
