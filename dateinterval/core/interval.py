"""IntervalValue class representing a calendar/time interval.

This module provides the IntervalValue class: separate year, month, day,
hour, minute, second and microsecond magnitudes plus a direction flag.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping

from dateinterval._internal.constants import EMPTY_SPEC
from dateinterval._internal.validation import check_magnitude, validate_non_negative
from dateinterval.units.intervalunit import IntervalUnit

if TYPE_CHECKING:
    import datetime as _dt


class IntervalValue:
    """A calendar interval with non-negative components and a sign flag.

    Components are stored as given, without normalization: an interval of
    90 minutes stays 90 minutes rather than becoming 1 hour 30 minutes.
    The direction of the interval lives only in ``inverted``; every
    magnitude is non-negative.

    Instances are immutable. Use replace() or the unary operators to
    derive new values.

    Attributes:
        years: Number of years.
        months: Number of months.
        days: Number of days.
        hours: Number of hours.
        minutes: Number of minutes.
        seconds: Number of seconds.
        microseconds: Fractional-second magnitude in microseconds.
        inverted: True if the interval runs backwards.
        spec: The specification string the value was built from.

    Examples:
        >>> iv = IntervalValue(years=1, days=4, seconds=39)
        >>> iv.spec
        'P1Y0M4DT0H0M39S'
        >>> iv.format("%y-%d-%s")
        '1-4-39'

        >>> IntervalValue.from_spec("P2W").days
        14

        >>> IntervalValue().is_empty
        True
    """

    __slots__ = (
        "_years",
        "_months",
        "_days",
        "_hours",
        "_minutes",
        "_seconds",
        "_microseconds",
        "_inverted",
        "_spec",
        "_total_days",
    )

    @validate_non_negative("years", "months", "days", "hours", "minutes", "seconds")
    @validate_non_negative("microseconds", integral=False)
    def __init__(
        self,
        years: int = 0,
        months: int = 0,
        days: int = 0,
        hours: int = 0,
        minutes: int = 0,
        seconds: int = 0,
        microseconds: float = 0.0,
        *,
        inverted: bool = False,
        spec: str | None = None,
        total_days: int | None = None,
    ) -> None:
        """Create an IntervalValue from component magnitudes.

        Args:
            years: Number of years.
            months: Number of months.
            days: Number of days.
            hours: Number of hours.
            minutes: Number of minutes.
            seconds: Number of seconds.
            microseconds: Fractional seconds, in microseconds.
            inverted: True for a negative (backwards) interval.
            spec: The specification string this value came from. Defaults
                to the canonical spec of the components.
            total_days: Exact day count of the span, when known (only
                intervals computed from two points in time know it).

        Raises:
            ValidationError: If a component is negative or not a number.
        """
        if total_days is not None:
            check_magnitude("total_days", total_days, integral=True)

        self._years = int(years)
        self._months = int(months)
        self._days = int(days)
        self._hours = int(hours)
        self._minutes = int(minutes)
        self._seconds = int(seconds)
        self._microseconds = float(microseconds)
        self._inverted = bool(inverted)
        self._total_days = total_days
        self._spec = spec if spec is not None else create_spec(
            self._years,
            self._months,
            self._days,
            self._hours,
            self._minutes,
            self._seconds,
        )

    # -------------------------------------------------------------------------
    # Named constructors
    # -------------------------------------------------------------------------

    @classmethod
    def empty(cls) -> IntervalValue:
        """Create the all-zero interval.

        Examples:
            >>> IntervalValue.empty().spec
            'P0Y0M0DT0H0M0S'
        """
        return cls(spec=EMPTY_SPEC)

    @classmethod
    def from_spec(cls, spec: str, *, inverted: bool = False) -> IntervalValue:
        """Create an IntervalValue from a specification string.

        Args:
            spec: A string such as "P1Y2M10DT2H30M".
            inverted: Mark the interval as negative.

        Raises:
            ParseError: If the string is not a valid specification.

        Examples:
            >>> IntervalValue.from_spec("P1Y2M").months
            2
        """
        from dateinterval.parse.spec import parse_interval_spec

        return parse_interval_spec(spec, inverted=inverted)

    @classmethod
    def from_text(cls, text: str) -> IntervalValue:
        """Create an IntervalValue from a free-text duration phrase.

        Unreadable phrases produce the empty interval.

        Examples:
            >>> IntervalValue.from_text("1 year 4 days 39 seconds").spec
            'P1Y0M4DT0H0M39S'
        """
        from dateinterval.parse.natural import parse_duration_text

        return parse_duration_text(text)

    @classmethod
    def from_mapping(
        cls,
        components: Mapping[str, Any],
        *,
        inverted: bool = False,
    ) -> IntervalValue:
        """Create an IntervalValue from a component mapping.

        Keys may be long names ("years") or designator letters ("Y").
        Unknown keys and non-numeric values are ignored.

        Examples:
            >>> IntervalValue.from_mapping({"years": 1, "D": 4}).spec
            'P1Y0M4DT0H0M0S'
        """
        from dateinterval.parse.mapping import interval_from_mapping

        return interval_from_mapping(components, inverted=inverted)

    @classmethod
    def from_timedelta(cls, delta: _dt.timedelta) -> IntervalValue:
        """Create an IntervalValue from a datetime.timedelta.

        Negative deltas produce an inverted interval.
        """
        from dateinterval.parse.diff import interval_from_timedelta

        return interval_from_timedelta(delta)

    @classmethod
    def from_diff(
        cls,
        first: _dt.date | _dt.datetime,
        second: _dt.date | _dt.datetime,
    ) -> IntervalValue:
        """Create the calendar interval ``first - second``.

        The interval is inverted when first is earlier than second.
        """
        from dateinterval.parse.diff import interval_between

        return interval_between(first, second)

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def years(self) -> int:
        """Return the years component."""
        return self._years

    @property
    def months(self) -> int:
        """Return the months component."""
        return self._months

    @property
    def days(self) -> int:
        """Return the days component."""
        return self._days

    @property
    def hours(self) -> int:
        """Return the hours component."""
        return self._hours

    @property
    def minutes(self) -> int:
        """Return the minutes component."""
        return self._minutes

    @property
    def seconds(self) -> int:
        """Return the seconds component."""
        return self._seconds

    @property
    def microseconds(self) -> float:
        """Return the fractional-second component, in microseconds."""
        return self._microseconds

    @property
    def inverted(self) -> bool:
        """Return True if this interval runs backwards."""
        return self._inverted

    @property
    def spec(self) -> str:
        """Return the specification string this value was built from."""
        return self._spec

    @property
    def canonical_spec(self) -> str:
        """Return the canonical spec of the current components.

        Unlike ``spec``, this never depends on how the value was built.

        Examples:
            >>> IntervalValue.from_spec("P2W").canonical_spec
            'P0Y0M14DT0H0M0S'
        """
        return create_spec(
            self._years,
            self._months,
            self._days,
            self._hours,
            self._minutes,
            self._seconds,
        )

    @property
    def total_days(self) -> int | None:
        """Return the exact day count of the span, or None if unknown."""
        return self._total_days

    @property
    def is_empty(self) -> bool:
        """Return True if every magnitude is zero.

        The sign flag is not considered.

        Examples:
            >>> IntervalValue().is_empty
            True
            >>> IntervalValue(microseconds=5).is_empty
            False
        """
        return (
            self._years == 0
            and self._months == 0
            and self._days == 0
            and self._hours == 0
            and self._minutes == 0
            and self._seconds == 0
            and self._microseconds == 0
        )

    def component(self, unit: IntervalUnit) -> int:
        """Return the magnitude of one formattable component.

        Args:
            unit: The component to read.

        Examples:
            >>> IntervalValue(hours=3).component(IntervalUnit.HOUR)
            3
        """
        return getattr(self, unit.attribute)

    # -------------------------------------------------------------------------
    # Formatting
    # -------------------------------------------------------------------------

    def format(self, template: str, empty_fallback: str | None = None) -> str:
        """Substitute ``%`` directives in a template with component values.

        See dateinterval.format.directives for the directive table.

        Args:
            template: Template text with directives such as "%y" or "%D".
            empty_fallback: Returned verbatim instead when the interval is
                empty.

        Examples:
            >>> IntervalValue(years=1, days=4, seconds=39).format("%y %m %d %s")
            '1 0 4 39'
            >>> IntervalValue().format("%d", "nothing")
            'nothing'
        """
        from dateinterval.format.directives import format_directives

        if empty_fallback is not None and self.is_empty:
            return empty_fallback
        return format_directives(self, template)

    # -------------------------------------------------------------------------
    # Derivation
    # -------------------------------------------------------------------------

    def replace(self, **changes: Any) -> IntervalValue:
        """Return a copy with some components replaced.

        The spec of the copy is the canonical spec of its components and
        any recorded total day count is dropped.

        Examples:
            >>> IntervalValue(days=3).replace(hours=2).spec
            'P0Y0M3DT2H0M0S'
        """
        values = self.to_dict()
        values.update(changes)
        return IntervalValue(**values)

    def to_dict(self) -> dict[str, Any]:
        """Return the components and sign flag as a dictionary.

        Examples:
            >>> IntervalValue(days=2).to_dict()["days"]
            2
        """
        return {
            "years": self._years,
            "months": self._months,
            "days": self._days,
            "hours": self._hours,
            "minutes": self._minutes,
            "seconds": self._seconds,
            "microseconds": self._microseconds,
            "inverted": self._inverted,
        }

    def __neg__(self) -> IntervalValue:
        """Return this interval with the sign flag flipped."""
        return self._with_inverted(not self._inverted)

    def __pos__(self) -> IntervalValue:
        """Return this interval unchanged (unary +)."""
        return self

    def __abs__(self) -> IntervalValue:
        """Return the forward-running version of this interval."""
        return self._with_inverted(False)

    def _with_inverted(self, inverted: bool) -> IntervalValue:
        return IntervalValue(
            self._years,
            self._months,
            self._days,
            self._hours,
            self._minutes,
            self._seconds,
            self._microseconds,
            inverted=inverted,
            spec=self._spec,
            total_days=self._total_days,
        )

    # -------------------------------------------------------------------------
    # Comparison and representation
    # -------------------------------------------------------------------------

    def _key(self) -> tuple:
        return (
            self._years,
            self._months,
            self._days,
            self._hours,
            self._minutes,
            self._seconds,
            self._microseconds,
            self._inverted,
        )

    def __eq__(self, other: object) -> bool:
        """Check equality with another interval.

        Components and sign are compared; the source spec is not, so
        IntervalValue.from_spec("P2W") == IntervalValue(days=14).
        """
        if not isinstance(other, IntervalValue):
            return NotImplemented
        return self._key() == other._key()

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __hash__(self) -> int:
        return hash(self._key())

    def __bool__(self) -> bool:
        """Return True if this is a non-empty interval."""
        return not self.is_empty

    def __repr__(self) -> str:
        parts = [
            f"years={self._years}",
            f"months={self._months}",
            f"days={self._days}",
            f"hours={self._hours}",
            f"minutes={self._minutes}",
            f"seconds={self._seconds}",
        ]
        if self._microseconds:
            parts.append(f"microseconds={self._microseconds:g}")
        if self._inverted:
            parts.append("inverted=True")
        return f"IntervalValue({', '.join(parts)})"

    def __str__(self) -> str:
        """Return the canonical spec, prefixed with "-" when inverted."""
        sign = "-" if self._inverted else ""
        return f"{sign}{self.canonical_spec}"


def create_spec(
    years: int | None = None,
    months: int | None = None,
    days: int | None = None,
    hours: int | None = None,
    minutes: int | None = None,
    seconds: int | None = None,
) -> str:
    """Build the canonical specification string for a set of components.

    Missing (None) components count as zero.

    Examples:
        >>> create_spec(1, 0, 4, 0, 0, 39)
        'P1Y0M4DT0H0M39S'
        >>> create_spec()
        'P0Y0M0DT0H0M0S'
    """
    return (
        f"P{years or 0}Y{months or 0}M{days or 0}D"
        f"T{hours or 0}H{minutes or 0}M{seconds or 0}S"
    )


__all__ = ["IntervalValue", "create_spec"]
