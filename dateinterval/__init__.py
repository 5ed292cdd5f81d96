"""Dateinterval: calendar intervals and their human-readable rendering.

Dateinterval models a calendar/time interval (years, months, days, hours,
minutes, seconds, fractional seconds and a direction flag), builds one
from several input shapes, and renders it as text with unit words,
pluralization, localization hooks and empty-component suppression.

Core Types:
    IntervalValue: Interval with non-negative components and a sign flag

Units:
    IntervalUnit: Formattable components (YEAR .. SECOND)
    Plurality: SINGULAR / PLURAL selector for unit words

Construction:
    parse_interval_spec: Parse "P1Y2M10DT2H30M"-style strings
    parse_duration_text: Parse phrases like "1 year 4 days"
    interval_from_mapping: Build from {"years": 1, "days": 4}
    interval_between: Calendar difference of two dates/datetimes
    interval_from_timedelta: Convert a datetime.timedelta

Formatting:
    IntervalFormatter: Renders intervals through token templates
    FormatOptions: Rendering options
    render: One-off rendering

Localization:
    TranslationProvider: Protocol for unit word translation
    CatalogTranslationProvider: In-memory catalogs, English built in

Exceptions:
    IntervalError: Base exception
    ValidationError: Invalid input values
    ParseError: Malformed specification string
    TranslationError: Missing translation in a strict catalog

Example:
    >>> from dateinterval import IntervalValue, render
    >>> iv = IntervalValue.from_text("1 year 4 days 39 seconds")
    >>> render(iv, "%y %m %d %s")
    '1 year 4 days 39 seconds'
"""

from __future__ import annotations

__version__ = "0.1.0"

# Core types
from dateinterval.core.interval import IntervalValue, create_spec

# Units
from dateinterval.units.intervalunit import IntervalUnit
from dateinterval.units.plurality import Plurality

# Exceptions
from dateinterval.errors import (
    IntervalError,
    ParseError,
    TranslationError,
    ValidationError,
)

# Construction
from dateinterval.parse import (
    interval_between,
    interval_from_mapping,
    interval_from_timedelta,
    parse_duration_text,
    parse_interval_spec,
)

# Formatting
from dateinterval.format import FormatOptions, IntervalFormatter, render

# Localization
from dateinterval.i18n import (
    CatalogTranslationProvider,
    IdentityTranslationProvider,
    TranslationProvider,
)

__all__: list[str] = [
    "__version__",
    # Core types
    "IntervalValue",
    "create_spec",
    # Units
    "IntervalUnit",
    "Plurality",
    # Exceptions
    "IntervalError",
    "ValidationError",
    "ParseError",
    "TranslationError",
    # Construction
    "parse_interval_spec",
    "parse_duration_text",
    "interval_from_mapping",
    "interval_between",
    "interval_from_timedelta",
    # Formatting
    "FormatOptions",
    "IntervalFormatter",
    "render",
    # Localization
    "TranslationProvider",
    "CatalogTranslationProvider",
    "IdentityTranslationProvider",
]
