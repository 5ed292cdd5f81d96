"""Validation utilities for dateinterval.

This module provides validation decorators and utilities for
ensuring interval components and unit overrides are well formed.

This module is not part of the public API.
"""

from __future__ import annotations

import functools
import inspect
import math
import numbers
from typing import Callable, TypeVar, ParamSpec

from dateinterval.errors import ValidationError

P = ParamSpec("P")
T = TypeVar("T")


def validate_non_negative(
    *names: str,
    integral: bool = True,
) -> Callable[[Callable[P, T]], Callable[P, T]]:
    """Decorator to validate that named parameters are non-negative numbers.

    Booleans are rejected even though they are integers; ``True`` as a
    year count is almost always a caller mistake.

    Args:
        *names: Names of the parameters to check.
        integral: Also require whole numbers. Defaults to True.

    Returns:
        A decorator function.

    Examples:
        >>> @validate_non_negative("days")
        ... def make(days: int = 0) -> None:
        ...     pass

        >>> make(days=-1)  # Raises ValidationError
        Traceback (most recent call last):
        ...
        ValidationError: days must be a non-negative number, got -1
    """

    def decorator(func: Callable[P, T]) -> Callable[P, T]:
        sig = inspect.signature(func)

        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            bound = sig.bind(*args, **kwargs)
            for name in names:
                if name in bound.arguments:
                    check_magnitude(name, bound.arguments[name], integral=integral)
            return func(*args, **kwargs)

        return wrapper

    return decorator


def check_magnitude(name: str, value: object, *, integral: bool = False) -> None:
    """Validate a single interval magnitude.

    Args:
        name: Component name used in the error message.
        value: The value to check.
        integral: Also require a whole number.

    Raises:
        ValidationError: If value is not a real number (or not a whole number
            when integral is set), is not finite, or is negative.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ValidationError(
            f"{name} must be a non-negative number, got {value!r}"
        )
    if integral and not isinstance(value, numbers.Integral):
        raise ValidationError(f"{name} must be a whole number, got {value!r}")
    if not math.isfinite(value):
        raise ValidationError(f"{name} must be a finite number, got {value!r}")
    if value < 0:
        raise ValidationError(f"{name} must be a non-negative number, got {value}")


def validate_unit_text(token: str, text: object) -> str:
    """Validate caller-supplied unit text for a token.

    Args:
        token: The format token the text belongs to (for the message).
        text: The override text.

    Returns:
        The text, unchanged.

    Raises:
        ValidationError: If text is not a string.
    """
    if not isinstance(text, str):
        raise ValidationError(
            f"unit override for {token} must be a string, "
            f"got {type(text).__name__}"
        )
    return text


__all__ = [
    "validate_non_negative",
    "check_magnitude",
    "validate_unit_text",
]
