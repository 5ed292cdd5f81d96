"""Internal utilities for dateinterval.

This module contains private implementation details:
    - Validation decorators
    - Constants and designator letters

Note: This module is not part of the public API.
"""

from __future__ import annotations

from dateinterval._internal.validation import (
    check_magnitude,
    validate_non_negative,
    validate_unit_text,
)

__all__: list[str] = [
    "check_magnitude",
    "validate_non_negative",
    "validate_unit_text",
]
