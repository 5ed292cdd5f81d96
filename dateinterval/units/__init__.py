"""Interval units and plurality.

Classes:
    IntervalUnit: Formattable interval components (YEAR .. SECOND).
    Plurality: SINGULAR / PLURAL selector for unit words.
"""

from __future__ import annotations

from dateinterval.units.intervalunit import IntervalUnit
from dateinterval.units.plurality import Plurality

__all__: list[str] = [
    "IntervalUnit",
    "Plurality",
]
