"""Internal constants for dateinterval.

These constants define the defaults and mapping keys used throughout
the library. This module is not part of the public API.
"""

from __future__ import annotations

# Single-letter keys accepted by component mappings. Minutes use "I" so
# they do not collide with months.
MAPPING_YEARS: str = "Y"
MAPPING_MONTHS: str = "M"
MAPPING_DAYS: str = "D"
MAPPING_HOURS: str = "H"
MAPPING_MINUTES: str = "I"
MAPPING_SECONDS: str = "S"
MAPPING_MICROSECONDS: str = "F"

# Canonical spec of the all-zero interval
EMPTY_SPEC: str = "P0Y0M0DT0H0M0S"

# Formatting defaults
DEFAULT_LANGUAGE_CODE: str = "en"
DEFAULT_CONTEXT: str = "date_interval"
DEFAULT_SEPARATOR: str = " "

# Token introducer shared by templates and directives
TOKEN_INTRODUCER: str = "%"

DAYS_PER_WEEK: int = 7
DAYS_PER_FORTNIGHT: int = 14
MONTHS_PER_YEAR: int = 12
SECONDS_PER_MINUTE: int = 60
SECONDS_PER_HOUR: int = 60 * SECONDS_PER_MINUTE


__all__ = [
    "MAPPING_YEARS",
    "MAPPING_MONTHS",
    "MAPPING_DAYS",
    "MAPPING_HOURS",
    "MAPPING_MINUTES",
    "MAPPING_SECONDS",
    "MAPPING_MICROSECONDS",
    "EMPTY_SPEC",
    "DEFAULT_LANGUAGE_CODE",
    "DEFAULT_CONTEXT",
    "DEFAULT_SEPARATOR",
    "TOKEN_INTRODUCER",
    "DAYS_PER_WEEK",
    "DAYS_PER_FORTNIGHT",
    "MONTHS_PER_YEAR",
    "SECONDS_PER_MINUTE",
    "SECONDS_PER_HOUR",
]
