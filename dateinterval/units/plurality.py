"""Plurality enumeration for unit words."""

from __future__ import annotations

from enum import Enum


class Plurality(Enum):
    """Grammatical number of a unit word.

    Exactly one selects SINGULAR; every other count, zero included,
    selects PLURAL.

    Examples:
        >>> Plurality.for_count(1)
        <Plurality.SINGULAR: 'singular'>
        >>> Plurality.for_count(0)
        <Plurality.PLURAL: 'plural'>
    """

    SINGULAR = "singular"
    PLURAL = "plural"

    @classmethod
    def for_count(cls, count: int) -> Plurality:
        """Return the plurality a count calls for."""
        return cls.SINGULAR if count == 1 else cls.PLURAL


__all__ = ["Plurality"]
