"""Intervals from two points in time and from timedeltas.

This module provides the calendar difference between two dates or
datetimes, and the conversion of a ``datetime.timedelta``.

Calendar difference:
    Whole months are counted first, clamping the day of month the way
    calendar arithmetic does (Jan 31 + 1 month is the last day of
    February). The remainder is split into days, hours, minutes, seconds
    and microseconds.

Examples:
    >>> from datetime import datetime
    >>> iv = interval_between(datetime(2024, 3, 1), datetime(2024, 1, 31))
    >>> (iv.months, iv.days, iv.inverted)
    (1, 1, False)
    >>> iv.total_days
    30
"""

from __future__ import annotations

import calendar
import datetime as _dt
from typing import TYPE_CHECKING

from dateinterval._internal.constants import MONTHS_PER_YEAR, SECONDS_PER_HOUR, SECONDS_PER_MINUTE
from dateinterval.errors import ValidationError

if TYPE_CHECKING:
    from dateinterval.core.interval import IntervalValue


def _is_aware(value: _dt.datetime) -> bool:
    return value.tzinfo is not None and value.utcoffset() is not None


def _as_datetime(value: _dt.date | _dt.datetime, name: str) -> _dt.datetime:
    if isinstance(value, _dt.datetime):
        return value
    if isinstance(value, _dt.date):
        return _dt.datetime.combine(value, _dt.time())
    raise TypeError(f"{name} must be a date or datetime, got {type(value).__name__}")


def _add_months(value: _dt.datetime, months: int) -> _dt.datetime:
    """Add whole months, clamping the day to the target month's length."""
    total = value.year * MONTHS_PER_YEAR + (value.month - 1) + months
    year, month_index = divmod(total, MONTHS_PER_YEAR)
    month = month_index + 1
    day = min(value.day, calendar.monthrange(year, month)[1])
    return value.replace(year=year, month=month, day=day)


def _split_time(delta: _dt.timedelta) -> tuple[int, int, int]:
    hours, remainder = divmod(delta.seconds, SECONDS_PER_HOUR)
    minutes, seconds = divmod(remainder, SECONDS_PER_MINUTE)
    return hours, minutes, seconds


def interval_between(
    first: _dt.date | _dt.datetime,
    second: _dt.date | _dt.datetime,
) -> IntervalValue:
    """Compute the calendar interval ``first - second``.

    Args:
        first: The point to measure to.
        second: The point to measure from.

    Returns:
        The magnitude of the span between the two points, inverted when
        first is earlier than second. ``total_days`` holds the exact day
        count.

    Raises:
        TypeError: If either argument is not a date or datetime.
        ValidationError: If one datetime is timezone-aware and the other
            is naive.

    Examples:
        >>> from datetime import date
        >>> iv = interval_between(date(2020, 1, 1), date(2021, 2, 5))
        >>> (iv.years, iv.months, iv.days, iv.inverted)
        (1, 1, 4, True)
    """
    from dateinterval.core.interval import IntervalValue

    a = _as_datetime(first, "first")
    b = _as_datetime(second, "second")

    if _is_aware(a) != _is_aware(b):
        raise ValidationError("cannot compare timezone-aware and naive datetimes")
    if _is_aware(a):
        a = a.astimezone(_dt.timezone.utc).replace(tzinfo=None)
        b = b.astimezone(_dt.timezone.utc).replace(tzinfo=None)

    inverted = a < b
    start, end = (a, b) if a <= b else (b, a)

    months = (end.year - start.year) * MONTHS_PER_YEAR + (end.month - start.month)
    anchor = _add_months(start, months)
    if anchor > end:
        months -= 1
        anchor = _add_months(start, months)

    rest = end - anchor
    years, months = divmod(months, MONTHS_PER_YEAR)
    hours, minutes, seconds = _split_time(rest)

    return IntervalValue(
        years=years,
        months=months,
        days=rest.days,
        hours=hours,
        minutes=minutes,
        seconds=seconds,
        microseconds=rest.microseconds,
        inverted=inverted,
        total_days=(end - start).days,
    )


def interval_from_timedelta(delta: _dt.timedelta) -> IntervalValue:
    """Convert a timedelta into an IntervalValue.

    Years and months are always zero; a timedelta has no calendar.

    Args:
        delta: The timedelta. Negative deltas give an inverted interval.

    Raises:
        TypeError: If delta is not a timedelta.

    Examples:
        >>> iv = interval_from_timedelta(_dt.timedelta(days=-1, hours=-2))
        >>> (iv.days, iv.hours, iv.inverted)
        (1, 2, True)
    """
    from dateinterval.core.interval import IntervalValue

    if not isinstance(delta, _dt.timedelta):
        raise TypeError(f"expected timedelta, got {type(delta).__name__}")

    span = abs(delta)
    hours, minutes, seconds = _split_time(span)

    return IntervalValue(
        days=span.days,
        hours=hours,
        minutes=minutes,
        seconds=seconds,
        microseconds=span.microseconds,
        inverted=delta < _dt.timedelta(0),
        total_days=span.days,
    )


__all__ = ["interval_between", "interval_from_timedelta"]
