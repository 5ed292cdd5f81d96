"""Interval formatting.

This module provides functions for turning intervals into text:
    - Directive substitution ("%y-%d" -> "1-4")
    - Human-readable rendering with unit words ("1 year 4 days")

Functions:
    format_directives: Substitute %-directives with component values.
    render: Render an interval through a token template with unit words.

Classes:
    IntervalFormatter: Reusable renderer with a translation provider.
    FormatOptions: Options for rendering.

Examples:
    >>> from dateinterval import IntervalValue
    >>> from dateinterval.format import render, format_directives

    >>> iv = IntervalValue(years=1, days=4, seconds=39)
    >>> render(iv, "%y %m %d %s")
    '1 year 4 days 39 seconds'

    >>> format_directives(iv, "%y %m %d %s")
    '1 0 4 39'
"""

from __future__ import annotations

from dateinterval.format.directives import escape_literal, format_directives
from dateinterval.format.humanize import (
    TOKEN_UNITS,
    FormatOptions,
    IntervalFormatter,
    render,
)

__all__: list[str] = [
    # Directives
    "format_directives",
    "escape_literal",
    # Humanizing
    "TOKEN_UNITS",
    "FormatOptions",
    "IntervalFormatter",
    "render",
]
