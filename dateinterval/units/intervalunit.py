"""IntervalUnit enumeration for the components of an interval.

This module provides the IntervalUnit enum naming each formattable
component of an IntervalValue together with the English unit words
used as translation keys.
"""

from __future__ import annotations

from enum import Enum

from dateinterval.units.plurality import Plurality


class IntervalUnit(Enum):
    """Formattable interval components, largest first.

    Each unit knows the IntervalValue attribute it reads and the English
    singular and plural words that serve as translation keys.

    Note:
        Microseconds are not a formattable unit. They only take part in
        the emptiness check of an interval.

    Examples:
        >>> IntervalUnit.DAY.attribute
        'days'

        >>> IntervalUnit.MINUTE.word(Plurality.SINGULAR)
        'minute'

        >>> IntervalUnit.MINUTE.word(Plurality.PLURAL)
        'minutes'
    """

    YEAR = "year"
    MONTH = "month"
    DAY = "day"
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"

    @property
    def attribute(self) -> str:
        """Return the IntervalValue attribute holding this component."""
        return self.plural

    @property
    def singular(self) -> str:
        """Return the English singular unit word."""
        return self.value

    @property
    def plural(self) -> str:
        """Return the English plural unit word."""
        return f"{self.value}s"

    def word(self, plurality: Plurality) -> str:
        """Return the English unit word for a plurality.

        Args:
            plurality: SINGULAR or PLURAL.

        Returns:
            The untranslated unit word.
        """
        if plurality is Plurality.SINGULAR:
            return self.singular
        return self.plural


__all__ = ["IntervalUnit"]
