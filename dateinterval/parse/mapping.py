"""Construction of intervals from component mappings."""

from __future__ import annotations

import logging
import math
import numbers
from typing import TYPE_CHECKING, Any, Mapping

from dateinterval._internal.constants import (
    MAPPING_DAYS,
    MAPPING_HOURS,
    MAPPING_MICROSECONDS,
    MAPPING_MINUTES,
    MAPPING_MONTHS,
    MAPPING_SECONDS,
    MAPPING_YEARS,
)

if TYPE_CHECKING:
    from dateinterval.core.interval import IntervalValue

logger = logging.getLogger(__name__)

# Accepted key -> IntervalValue keyword
COMPONENT_KEYS: dict[str, str] = {
    "years": "years",
    "months": "months",
    "days": "days",
    "hours": "hours",
    "minutes": "minutes",
    "seconds": "seconds",
    "microseconds": "microseconds",
    MAPPING_YEARS: "years",
    MAPPING_MONTHS: "months",
    MAPPING_DAYS: "days",
    MAPPING_HOURS: "hours",
    MAPPING_MINUTES: "minutes",
    MAPPING_SECONDS: "seconds",
    MAPPING_MICROSECONDS: "microseconds",
}


def _as_number(value: Any) -> int | float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, numbers.Real):
        number = float(value)
    elif isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            try:
                number = float(value.strip())
            except ValueError:
                return None
    else:
        return None
    # "nan" and "inf" parse as floats but are not magnitudes
    return number if math.isfinite(number) else None


def interval_from_mapping(
    components: Mapping[str, Any],
    *,
    inverted: bool = False,
) -> IntervalValue:
    """Create an IntervalValue from a mapping of components.

    Keys may be the long names ("years" .. "seconds", "microseconds") or
    the designator letters Y, M, D, H, I (minutes), S and F
    (microseconds). Keys that are neither, and values that are not
    finite numbers, are skipped. Numeric strings are accepted. Missing
    components are zero.

    Args:
        components: The component mapping.
        inverted: Mark the interval as negative.

    Returns:
        The new IntervalValue with a canonical spec.

    Raises:
        ValidationError: If a component is negative, or a whole-number
            component has a fractional value.

    Examples:
        >>> interval_from_mapping({"years": 1, "days": 4, "seconds": 39}).spec
        'P1Y0M4DT0H0M39S'

        >>> interval_from_mapping({"days": 5, "random": 1, "keys": 4}).spec
        'P0Y0M5DT0H0M0S'

        >>> interval_from_mapping({"I": "30"}).minutes
        30
    """
    from dateinterval.core.interval import IntervalValue

    values: dict[str, int | float] = {}
    for key, raw in components.items():
        name = COMPONENT_KEYS.get(key)
        if name is None:
            logger.debug("Ignoring unknown interval component %r", key)
            continue
        number = _as_number(raw)
        if number is None:
            logger.debug("Ignoring non-numeric value %r for %s", raw, name)
            continue
        if name != "microseconds" and isinstance(number, float) and number.is_integer():
            number = int(number)
        values[name] = number

    return IntervalValue(**values, inverted=inverted)


__all__ = ["COMPONENT_KEYS", "interval_from_mapping"]
