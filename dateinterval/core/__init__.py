"""Core interval type.

Classes:
    IntervalValue: Calendar interval with non-negative components and a
        sign flag.

Functions:
    create_spec: Build the canonical specification string.
"""

from __future__ import annotations

from dateinterval.core.interval import IntervalValue, create_spec

__all__: list[str] = [
    "IntervalValue",
    "create_spec",
]
