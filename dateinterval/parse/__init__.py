"""Interval construction from external input.

This module builds IntervalValue objects from several input shapes:
    - Specification strings ("P1Y2M10DT2H30M")
    - Free-text duration phrases ("1 year 4 days 39 seconds")
    - Component mappings ({"years": 1, "days": 4})
    - Two points in time, or a datetime.timedelta

Functions:
    parse_interval_spec: Parse a specification string.
    parse_duration_text: Parse a free-text duration phrase.
    interval_from_mapping: Build from a component mapping.
    interval_between: Calendar difference of two dates/datetimes.
    interval_from_timedelta: Convert a timedelta.

Examples:
    >>> from dateinterval.parse import parse_interval_spec, parse_duration_text
    >>> parse_interval_spec("P1Y0M4DT0H0M39S") == parse_duration_text("1 year 4 days 39 seconds")
    True
"""

from __future__ import annotations

from dateinterval.parse.diff import interval_between, interval_from_timedelta
from dateinterval.parse.mapping import interval_from_mapping
from dateinterval.parse.natural import parse_duration_text
from dateinterval.parse.spec import parse_interval_spec

__all__: list[str] = [
    "parse_interval_spec",
    "parse_duration_text",
    "interval_from_mapping",
    "interval_between",
    "interval_from_timedelta",
]
