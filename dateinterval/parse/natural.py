"""Free-text duration phrase parsing.

This module reads phrases such as "1 year 4 days 39 seconds",
"+2 weeks", "1 hour, 30 minutes" or "3 days ago" into an IntervalValue.

A phrase is a sequence of terms ``[+|-]<n> <unit>`` optionally separated
by commas or "and", optionally followed by "ago" which reverses the
whole phrase. Units may be singular or plural and any case:

    year, month, fortnight, week, day, hour, minute (min), second (sec)

Weeks and fortnights fold into days.

Parsing is lenient: a phrase that cannot be read produces the empty
interval and a logged warning rather than an error.

Functions:
    parse_duration_text: Parse a phrase into an IntervalValue.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from dateinterval._internal.constants import DAYS_PER_FORTNIGHT, DAYS_PER_WEEK
from dateinterval.errors import ValidationError

if TYPE_CHECKING:
    from dateinterval.core.interval import IntervalValue

logger = logging.getLogger(__name__)

# Unit word -> (component, multiplier)
TIME_UNITS: dict[str, tuple[str, int]] = {
    "year": ("years", 1),
    "years": ("years", 1),
    "month": ("months", 1),
    "months": ("months", 1),
    "fortnight": ("days", DAYS_PER_FORTNIGHT),
    "fortnights": ("days", DAYS_PER_FORTNIGHT),
    "week": ("days", DAYS_PER_WEEK),
    "weeks": ("days", DAYS_PER_WEEK),
    "day": ("days", 1),
    "days": ("days", 1),
    "hour": ("hours", 1),
    "hours": ("hours", 1),
    "minute": ("minutes", 1),
    "minutes": ("minutes", 1),
    "min": ("minutes", 1),
    "mins": ("minutes", 1),
    "second": ("seconds", 1),
    "seconds": ("seconds", 1),
    "sec": ("seconds", 1),
    "secs": ("seconds", 1),
}

# One "[+|-]N unit" term, with optional leading filler
TERM_PATTERN = re.compile(
    r"\s*(?:(?:,|and\b)\s*)?"
    r"(?P<sign>[+-]?)\s*(?P<amount>\d+)\s*"
    r"(?P<unit>" + "|".join(sorted(TIME_UNITS, key=len, reverse=True)) + r")\b",
    re.IGNORECASE,
)

# Trailing "ago" reverses the phrase
AGO_PATTERN = re.compile(r"\s+ago\s*$", re.IGNORECASE)


def _read_terms(text: str) -> dict[str, int] | None:
    """Sum the signed terms of a phrase per component.

    Returns None if any part of the text is not a term.
    """
    totals: dict[str, int] = {}
    pos = 0
    while pos < len(text):
        match = TERM_PATTERN.match(text, pos)
        if match is None:
            if text[pos:].strip():
                return None
            break
        component, multiplier = TIME_UNITS[match.group("unit").lower()]
        amount = int(match.group("amount")) * multiplier
        if match.group("sign") == "-":
            amount = -amount
        totals[component] = totals.get(component, 0) + amount
        pos = match.end()

    return totals or None


def parse_duration_text(text: str) -> IntervalValue:
    """Parse a free-text duration phrase.

    Args:
        text: The phrase, e.g. "2 days 4 hours" or "1 week ago".

    Returns:
        The parsed interval. Negative phrases ("-2 days", "2 days ago")
        give an inverted interval. Unreadable phrases give the empty
        interval.

    Raises:
        ValidationError: If the phrase mixes forward and backward terms
            so that components would point in different directions.

    Examples:
        >>> parse_duration_text("1 year 4 days 39 seconds").spec
        'P1Y0M4DT0H0M39S'

        >>> iv = parse_duration_text("3 days ago")
        >>> (iv.days, iv.inverted)
        (3, True)

        >>> parse_duration_text("random string").is_empty
        True
    """
    from dateinterval.core.interval import IntervalValue

    if not isinstance(text, str):
        raise ValidationError(f"duration text must be a string, got {type(text).__name__}")

    body = text.strip()
    ago = AGO_PATTERN.search(body)
    if ago is not None:
        body = body[: ago.start()]

    totals = _read_terms(body)
    if totals is None:
        logger.warning("Could not read duration phrase %r, using an empty interval", text)
        return IntervalValue.empty()

    if ago is not None:
        totals = {component: -amount for component, amount in totals.items()}

    has_forward = any(amount > 0 for amount in totals.values())
    has_backward = any(amount < 0 for amount in totals.values())
    if has_forward and has_backward:
        raise ValidationError(
            f"duration phrase mixes forward and backward components: {text!r}"
        )

    return IntervalValue(
        **{component: abs(amount) for component, amount in totals.items()},
        inverted=has_backward,
    )


__all__ = ["TIME_UNITS", "parse_duration_text"]
