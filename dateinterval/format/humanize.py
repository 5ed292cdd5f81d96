"""Human-readable interval formatting.

This module turns an IntervalValue and a token template such as
"%y %m %d %s" into text like "1 year 4 days 39 seconds".

A template is read one token at a time. Rendering runs these stages
in order:

1. Tokenize: split on "%", drop empty pieces, put the "%" back and remove
   whitespace, so "%y %d" becomes ["%y", "%d"].
2. Validate: keep only known tokens. Unknown tokens vanish silently.
3. Remove empty values (optional): drop tokens whose component is zero.
4. Add units (optional): append the singular or plural unit word.
5. Reassemble: join the surviving pieces with the separator.
6. Substitute: hand the result to IntervalValue.format().

Each piece is exactly one token. Literal text between tokens is not
supported and is discarded, either by the whitespace removal in stage 1
or by the validation in stage 2.

Tokens (upper and lower case read the same component; the upper case
form is zero-padded by the final substitution):
    %Y %y - years
    %M %m - months
    %D %d - days
    %H %h - hours
    %I %i - minutes
    %S %s - seconds

Examples:
    >>> from dateinterval import IntervalValue
    >>> from dateinterval.format import render
    >>> iv = IntervalValue(years=1, days=4, seconds=39)

    >>> render(iv, "%y %m %d %s")
    '1 year 4 days 39 seconds'

    >>> render(iv, "%y %m %d %s", show_units=False, separator="-")
    '1-4-39'

    >>> render(iv, "%y %m %d %s", separator=", ", remove_empty_values=False)
    '1 year, 0 months, 4 days, 39 seconds'
"""

from __future__ import annotations

import dataclasses
import logging
import re
from dataclasses import dataclass
from typing import Any, Mapping, Sequence, Union

from dateinterval._internal.constants import (
    DEFAULT_CONTEXT,
    DEFAULT_LANGUAGE_CODE,
    DEFAULT_SEPARATOR,
    TOKEN_INTRODUCER,
)
from dateinterval._internal.validation import validate_unit_text
from dateinterval.core.interval import IntervalValue
from dateinterval.errors import ValidationError
from dateinterval.format.directives import escape_literal
from dateinterval.i18n.provider import CatalogTranslationProvider, TranslationProvider
from dateinterval.units.intervalunit import IntervalUnit
from dateinterval.units.plurality import Plurality

logger = logging.getLogger(__name__)

# Format token -> the component it reads
TOKEN_UNITS: dict[str, IntervalUnit] = {
    "%Y": IntervalUnit.YEAR,
    "%y": IntervalUnit.YEAR,
    "%M": IntervalUnit.MONTH,
    "%m": IntervalUnit.MONTH,
    "%D": IntervalUnit.DAY,
    "%d": IntervalUnit.DAY,
    "%H": IntervalUnit.HOUR,
    "%h": IntervalUnit.HOUR,
    "%I": IntervalUnit.MINUTE,
    "%i": IntervalUnit.MINUTE,
    "%S": IntervalUnit.SECOND,
    "%s": IntervalUnit.SECOND,
}

# Fixed gap between a number and its unit word
UNIT_PREFIX: str = " "

_WHITESPACE = re.compile(r"\s+")

UnitTexts = Union[Mapping[Any, str], Sequence[str], str]
UnitOverrides = Mapping[str, UnitTexts]

# Accepted keys inside a per-token override mapping
_PLURALITY_KEYS: dict[Any, Plurality] = {
    Plurality.SINGULAR: Plurality.SINGULAR,
    Plurality.PLURAL: Plurality.PLURAL,
    "singular": Plurality.SINGULAR,
    "plural": Plurality.PLURAL,
    0: Plurality.SINGULAR,
    1: Plurality.PLURAL,
}

# Option names accepted by FormatOptions.from_mapping()
_OPTION_ALIASES: dict[str, str] = {
    "show_units": "show_units",
    "units": "show_units",
    "separator": "separator",
    "remove_empty_values": "remove_empty_values",
    "language_code": "language_code",
    "langcode": "language_code",
    "translation_context": "translation_context",
    "context": "translation_context",
    "empty_fallback": "empty_fallback",
}


@dataclass(frozen=True)
class FormatOptions:
    """Options controlling how an interval is humanized.

    Attributes:
        show_units: False for bare numbers, True for default unit words,
            or a mapping of token to override texts. Tokens missing from
            the mapping still get default unit words. An empty mapping
            behaves like False.
        separator: Joins the rendered pieces. Defaults to a single space,
            which None also selects.
        remove_empty_values: Drop tokens whose component is zero.
        language_code: Language for unit words. None uses the formatter's
            default.
        translation_context: Translation context. None uses the
            formatter's default.
        empty_fallback: Returned verbatim, skipping every stage, when the
            interval is empty.

    Examples:
        >>> FormatOptions().separator
        ' '
        >>> FormatOptions.from_mapping({"units": False, "langcode": "nl"}).language_code
        'nl'
    """

    # Override mappings are not hashable, so hashing skips them
    show_units: Union[bool, UnitOverrides] = dataclasses.field(default=True, hash=False)
    separator: str = DEFAULT_SEPARATOR
    remove_empty_values: bool = True
    language_code: str | None = None
    translation_context: str | None = None
    empty_fallback: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.show_units, (bool, Mapping)):
            raise ValidationError(
                "show_units must be a bool or a mapping of unit overrides, "
                f"got {type(self.show_units).__name__}"
            )
        if self.separator is None:
            object.__setattr__(self, "separator", DEFAULT_SEPARATOR)
        elif not isinstance(self.separator, str):
            raise ValidationError(
                f"separator must be a string, got {type(self.separator).__name__}"
            )

    @classmethod
    def from_mapping(cls, settings: Mapping[str, Any]) -> FormatOptions:
        """Build options from a settings mapping.

        Besides the attribute names, the short names "units", "langcode"
        and "context" are accepted.

        Raises:
            ValidationError: If a key is not a known option, show_units is
                neither a bool nor a mapping, or the separator is not a
                string.
        """
        return cls().replace(**settings)

    def replace(self, **changes: Any) -> FormatOptions:
        """Return a copy with some options changed.

        Raises:
            ValidationError: If a key is not a known option or a value is
                rejected by the options record.
        """
        resolved: dict[str, Any] = {}
        for name, value in changes.items():
            field_name = _OPTION_ALIASES.get(name)
            if field_name is None:
                raise ValidationError(f"unknown format option: {name!r}")
            resolved[field_name] = value
        return dataclasses.replace(self, **resolved)


def _coerce_plurality(token: str, key: Any) -> Plurality:
    try:
        return _PLURALITY_KEYS[key]
    except (KeyError, TypeError):
        raise ValidationError(
            f"unit override for {token} has unknown plurality key {key!r}"
        ) from None


def normalize_overrides(overrides: UnitOverrides) -> dict[str, dict[Plurality, str]]:
    """Validate unit overrides and key them by Plurality.

    Each token may map to:
        - a mapping keyed by Plurality, "singular"/"plural", or 0/1
        - a (singular, plural) sequence; a single item covers singular only
        - a single string used for both forms

    None texts are treated as absent, so the default word is used.
    Tokens that are not format tokens are ignored.

    Raises:
        ValidationError: If the overrides are malformed.

    Examples:
        >>> normalize_overrides({"%d": ("d", "dd")})["%d"][Plurality.PLURAL]
        'dd'
    """
    if not isinstance(overrides, Mapping):
        raise ValidationError(
            f"unit overrides must be a mapping, got {type(overrides).__name__}"
        )

    normalized: dict[str, dict[Plurality, str]] = {}
    for token, texts in overrides.items():
        if token not in TOKEN_UNITS:
            logger.debug("Ignoring unit override for unknown token %r", token)
            continue

        if isinstance(texts, str):
            pairs = [(Plurality.SINGULAR, texts), (Plurality.PLURAL, texts)]
        elif isinstance(texts, Mapping):
            pairs = [(_coerce_plurality(token, key), text) for key, text in texts.items()]
        elif isinstance(texts, Sequence) and 1 <= len(texts) <= 2:
            pairs = list(zip((Plurality.SINGULAR, Plurality.PLURAL), texts))
        else:
            raise ValidationError(
                f"unit override for {token} must be a string, a mapping or "
                f"a (singular, plural) pair, got {texts!r}"
            )

        normalized[token] = {
            plurality: validate_unit_text(token, text)
            for plurality, text in pairs
            if text is not None
        }

    return normalized


def tokenize(template: str) -> list[str]:
    """Split a template into its token pieces.

    Whitespace inside a piece is removed and unknown tokens are kept;
    see filter_tokens().

    Examples:
        >>> tokenize("%y %m  %d")
        ['%y', '%m', '%d']
        >>> tokenize("%%y")
        ['%y']
    """
    pieces = (_WHITESPACE.sub("", piece) for piece in template.split(TOKEN_INTRODUCER))
    return [TOKEN_INTRODUCER + piece for piece in pieces if piece]


def filter_tokens(fragments: Sequence[str]) -> list[str]:
    """Keep only the known format tokens.

    Examples:
        >>> filter_tokens(["%y", "%x", "%dd", "%d"])
        ['%y', '%d']
    """
    kept = [fragment for fragment in fragments if fragment in TOKEN_UNITS]
    if len(kept) != len(fragments):
        logger.debug(
            "Dropped unknown template tokens: %s",
            [fragment for fragment in fragments if fragment not in TOKEN_UNITS],
        )
    return kept


class IntervalFormatter:
    """Render intervals as human-readable text.

    The formatter owns a translation provider and default options. It
    holds no per-call state, so one instance can serve many threads as
    long as its provider can.

    Attributes:
        translator: Provider for default unit words.
        language_code: Language used when the options name none.
        context: Translation context used when the options name none.
        options: Default options for render().

    Examples:
        >>> from dateinterval import IntervalValue
        >>> formatter = IntervalFormatter()
        >>> iv = IntervalValue(years=1, days=4, seconds=39)
        >>> formatter.render(iv, "%y %m %d %s")
        '1 year 4 days 39 seconds'

        >>> formatter.render(
        ...     iv,
        ...     "%y %m %d %s",
        ...     show_units={"%y": ("y", "ys"), "%m": ("m", "mths"),
        ...                 "%d": ("d", "d"), "%s": ("s", "s")},
        ...     separator=", ",
        ...     remove_empty_values=False,
        ... )
        '1 y, 0 mths, 4 d, 39 s'
    """

    def __init__(
        self,
        translator: TranslationProvider | None = None,
        *,
        language_code: str = DEFAULT_LANGUAGE_CODE,
        context: str = DEFAULT_CONTEXT,
        options: FormatOptions | None = None,
    ) -> None:
        """Create a formatter.

        Args:
            translator: Provider for unit words. Defaults to a
                CatalogTranslationProvider with the English catalog.
            language_code: Default language code.
            context: Default translation context.
            options: Default options. Defaults to FormatOptions().
        """
        self.translator = translator if translator is not None else CatalogTranslationProvider()
        self.language_code = language_code
        self.context = context
        self.options = options if options is not None else FormatOptions()

    def render(
        self,
        value: IntervalValue,
        template: str,
        options: FormatOptions | None = None,
        **overrides: Any,
    ) -> str:
        """Render an interval through a token template.

        Args:
            value: The interval to render.
            template: Token template such as "%y %m %d".
            options: Options for this call. Defaults to the formatter's.
            **overrides: Individual options to change for this call, by
                FormatOptions attribute name or short name.

        Returns:
            The rendered text. It is empty when every token was dropped.

        Raises:
            ValidationError: If value is None, an option name or value is
                rejected, or the unit overrides are malformed.
            TypeError: If value is not an IntervalValue.

        Errors raised by the translation provider propagate unchanged.
        """
        if value is None:
            raise ValidationError("cannot format a missing interval")
        if not isinstance(value, IntervalValue):
            raise TypeError(f"expected IntervalValue, got {type(value).__name__}")

        opts = options if options is not None else self.options
        if overrides:
            opts = opts.replace(**overrides)

        if opts.empty_fallback is not None and value.is_empty:
            logger.debug("Interval is empty, returning fallback text")
            return opts.empty_fallback

        fragments = filter_tokens(tokenize(template))

        if opts.remove_empty_values:
            fragments = [
                fragment
                for fragment in fragments
                if value.component(TOKEN_UNITS[fragment]) != 0
            ]

        if opts.show_units:
            fragments = self._add_units(value, fragments, opts)

        return value.format(escape_literal(opts.separator).join(fragments))

    def _add_units(
        self,
        value: IntervalValue,
        fragments: list[str],
        opts: FormatOptions,
    ) -> list[str]:
        custom: dict[str, dict[Plurality, str]] = {}
        if isinstance(opts.show_units, Mapping):
            custom = normalize_overrides(opts.show_units)

        language_code = opts.language_code or self.language_code
        context = opts.translation_context or self.context

        # One provider call per (unit, plurality), however often it recurs
        defaults: dict[tuple[IntervalUnit, Plurality], str] = {}

        decorated = []
        for fragment in fragments:
            unit = TOKEN_UNITS[fragment]
            plurality = Plurality.for_count(value.component(unit))

            text = custom.get(fragment, {}).get(plurality)
            if text is None:
                key = (unit, plurality)
                if key not in defaults:
                    defaults[key] = self.translator.translate(
                        unit.word(plurality), language_code, context
                    )
                text = defaults[key]

            decorated.append(fragment + UNIT_PREFIX + escape_literal(text))

        return decorated


def render(
    value: IntervalValue,
    template: str,
    options: FormatOptions | None = None,
    *,
    translator: TranslationProvider | None = None,
    **overrides: Any,
) -> str:
    """Render an interval with a one-off IntervalFormatter.

    Args:
        value: The interval to render.
        template: Token template such as "%y %m %d".
        options: Options for this call. Defaults to FormatOptions().
        translator: Provider for unit words. Defaults to English.
        **overrides: Individual options, see FormatOptions.

    Examples:
        >>> from dateinterval import IntervalValue
        >>> render(IntervalValue(), "%y %d", empty_fallback="Empty period provided!")
        'Empty period provided!'
    """
    return IntervalFormatter(translator).render(value, template, options, **overrides)


__all__ = [
    "TOKEN_UNITS",
    "FormatOptions",
    "IntervalFormatter",
    "normalize_overrides",
    "tokenize",
    "filter_tokens",
    "render",
]
