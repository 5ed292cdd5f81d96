"""Directive substitution for interval templates.

This module implements the low-level substitution that turns a template
such as "%y years %d days" into text, reading values from an
IntervalValue. It is what IntervalValue.format() delegates to and the
last step of the humanizing formatter.

Supported Directives:
    %Y - Years, at least 2 digits (e.g., 01, 12)
    %y - Years (e.g., 1, 12)
    %M - Months, at least 2 digits
    %m - Months
    %D - Days, at least 2 digits
    %d - Days
    %H - Hours, at least 2 digits
    %h - Hours
    %I - Minutes, at least 2 digits
    %i - Minutes
    %S - Seconds, at least 2 digits
    %s - Seconds
    %F - Microseconds, at least 6 digits
    %f - Microseconds
    %a - Total days of the span, or "(unknown)"
    %R - Sign, "-" when inverted and "+" otherwise
    %r - Sign, "-" when inverted and empty otherwise
    %% - Literal %

Any other "%x" pair and a trailing lone "%" are copied through unchanged.

Examples:
    >>> from dateinterval import IntervalValue
    >>> from dateinterval.format import format_directives

    >>> format_directives(IntervalValue(hours=2, minutes=5), "%H:%I")
    '02:05'

    >>> format_directives(-IntervalValue(days=3), "%r%d days")
    '-3 days'
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from dateinterval._internal.constants import TOKEN_INTRODUCER

if TYPE_CHECKING:
    from dateinterval.core.interval import IntervalValue

UNKNOWN_TOTAL_DAYS: str = "(unknown)"


def _microseconds(value: IntervalValue) -> int:
    return int(round(value.microseconds))


def _total_days(value: IntervalValue) -> str:
    if value.total_days is None:
        return UNKNOWN_TOTAL_DAYS
    return str(value.total_days)


# Directive letter -> renderer
_DIRECTIVES: dict[str, Callable[["IntervalValue"], str]] = {
    "Y": lambda v: f"{v.years:02d}",
    "y": lambda v: str(v.years),
    "M": lambda v: f"{v.months:02d}",
    "m": lambda v: str(v.months),
    "D": lambda v: f"{v.days:02d}",
    "d": lambda v: str(v.days),
    "H": lambda v: f"{v.hours:02d}",
    "h": lambda v: str(v.hours),
    "I": lambda v: f"{v.minutes:02d}",
    "i": lambda v: str(v.minutes),
    "S": lambda v: f"{v.seconds:02d}",
    "s": lambda v: str(v.seconds),
    "F": lambda v: f"{_microseconds(v):06d}",
    "f": lambda v: str(_microseconds(v)),
    "a": _total_days,
    "R": lambda v: "-" if v.inverted else "+",
    "r": lambda v: "-" if v.inverted else "",
    "%": lambda v: TOKEN_INTRODUCER,
}


def format_directives(value: IntervalValue, template: str) -> str:
    """Replace every directive in a template with its value.

    Args:
        value: The interval to read from.
        template: Text with %-directives.

    Returns:
        The template with directives substituted.

    Examples:
        >>> from dateinterval import IntervalValue
        >>> iv = IntervalValue(years=1, days=4, seconds=39)
        >>> format_directives(iv, "%y %m %d %h %i %s")
        '1 0 4 0 0 39'
        >>> format_directives(iv, "%Y-%M-%D")
        '01-00-04'
        >>> format_directives(iv, "100%% sure, %q stays")
        '100% sure, %q stays'
    """
    result = []
    i = 0
    while i < len(template):
        if template[i] == TOKEN_INTRODUCER and i + 1 < len(template):
            letter = template[i + 1]
            renderer = _DIRECTIVES.get(letter)
            if renderer is None:
                result.append(template[i : i + 2])
            else:
                result.append(renderer(value))
            i += 2
        else:
            result.append(template[i])
            i += 1

    return "".join(result)


def escape_literal(text: str) -> str:
    """Escape text so format_directives() reproduces it verbatim.

    Examples:
        >>> escape_literal("50% off")
        '50%% off'
    """
    return text.replace(TOKEN_INTRODUCER, TOKEN_INTRODUCER * 2)


__all__ = ["format_directives", "escape_literal", "UNKNOWN_TOTAL_DAYS"]
