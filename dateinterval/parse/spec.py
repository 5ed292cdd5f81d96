"""Interval specification string parsing.

This module parses the ISO 8601 duration subset used to describe
intervals:

    P[nY][nM][nW][nD][T[nH][nM][nS]]

    - Designators are upper case and appear in this order
    - Every number is a non-negative integer
    - At least one component is required
    - A "T" must be followed by at least one time component
    - Weeks are folded into days

Functions:
    parse_interval_spec: Parse a specification string into an IntervalValue.

Examples:
    >>> parse_interval_spec("P1Y2M10DT2H30M").days
    10

    >>> parse_interval_spec("P2W").days
    14

    >>> parse_interval_spec("PT36H").hours
    36
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from dateinterval._internal.constants import DAYS_PER_WEEK
from dateinterval.errors import ParseError

if TYPE_CHECKING:
    from dateinterval.core.interval import IntervalValue

_SPEC_PATTERN = re.compile(
    r"P"
    r"(?:(?P<years>\d+)Y)?"
    r"(?:(?P<months>\d+)M)?"
    r"(?:(?P<weeks>\d+)W)?"
    r"(?:(?P<days>\d+)D)?"
    r"(?P<time>T"
    r"(?:(?P<hours>\d+)H)?"
    r"(?:(?P<minutes>\d+)M)?"
    r"(?:(?P<seconds>\d+)S)?"
    r")?"
)

_DATE_GROUPS = ("years", "months", "weeks", "days")
_TIME_GROUPS = ("hours", "minutes", "seconds")


def parse_interval_spec(spec: str, *, inverted: bool = False) -> IntervalValue:
    """Parse an interval specification string.

    The string is kept verbatim as the value's ``spec``.

    Args:
        spec: The specification string, e.g. "P1Y0M4DT0H0M39S".
        inverted: Mark the interval as negative.

    Returns:
        The parsed IntervalValue.

    Raises:
        ParseError: If the string does not follow the grammar.

    Examples:
        >>> iv = parse_interval_spec("P1Y0M4DT0H0M39S")
        >>> (iv.years, iv.days, iv.seconds)
        (1, 4, 39)

        >>> parse_interval_spec("P1D2Y")
        Traceback (most recent call last):
        ...
        ParseError: invalid interval spec: 'P1D2Y'
    """
    from dateinterval.core.interval import IntervalValue

    if not isinstance(spec, str):
        raise ParseError(f"interval spec must be a string, got {type(spec).__name__}")

    match = _SPEC_PATTERN.fullmatch(spec)
    if match is None:
        raise ParseError(f"invalid interval spec: {spec!r}")

    if not any(match.group(name) for name in _DATE_GROUPS + _TIME_GROUPS):
        raise ParseError(f"interval spec has no components: {spec!r}")

    if match.group("time") and not any(match.group(name) for name in _TIME_GROUPS):
        raise ParseError(f"interval spec has an empty time part: {spec!r}")

    values = {name: int(match.group(name) or 0) for name in _DATE_GROUPS + _TIME_GROUPS}
    weeks = values.pop("weeks")
    values["days"] += weeks * DAYS_PER_WEEK

    return IntervalValue(**values, inverted=inverted, spec=spec)


__all__ = ["parse_interval_spec"]
