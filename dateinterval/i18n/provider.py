"""Translation providers for unit words.

The humanizing formatter never translates anything itself. It asks a
TranslationProvider for the localized form of an English unit word
("year", "days", ...) in a language code and translation context.

Classes:
    TranslationProvider: Protocol every provider satisfies.
    CatalogTranslationProvider: In-memory catalogs keyed by language and
        context, with an English catalog built in.
    IdentityTranslationProvider: Returns the English word unchanged.

Examples:
    >>> provider = CatalogTranslationProvider()
    >>> provider.add("nl", "days", "dagen")
    >>> provider.translate("days", "nl", "date_interval")
    'dagen'
    >>> provider.translate("days", "en", "date_interval")
    'days'
"""

from __future__ import annotations

import logging
from typing import Mapping, Protocol, runtime_checkable

from dateinterval._internal.constants import DEFAULT_CONTEXT, DEFAULT_LANGUAGE_CODE
from dateinterval.errors import TranslationError
from dateinterval.units.intervalunit import IntervalUnit

logger = logging.getLogger(__name__)

CatalogKey = tuple[str, str]


@runtime_checkable
class TranslationProvider(Protocol):
    """Protocol for resolving a unit word into display text.

    Implementations must be safe for concurrent reads; the formatter
    holds no lock around calls.
    """

    def translate(self, text: str, language_code: str, context: str) -> str:
        """Return the localized form of an English unit word.

        Args:
            text: The English word, already singular or plural.
            language_code: Target language (e.g. "en", "nl").
            context: Translation context disambiguating the word.

        Returns:
            The text to display.
        """
        ...


class IdentityTranslationProvider:
    """Provider that returns the English word unchanged."""

    def translate(self, text: str, language_code: str, context: str) -> str:
        return text


def _english_catalog() -> dict[str, str]:
    catalog: dict[str, str] = {}
    for unit in IntervalUnit:
        catalog[unit.singular] = unit.singular
        catalog[unit.plural] = unit.plural
    return catalog


class CatalogTranslationProvider:
    """Provider backed by in-memory catalogs.

    A catalog maps English unit words to translations and is registered
    under a (language_code, context) pair. An English catalog for the
    default context is always present.

    When a word is missing the provider either returns the English word
    (the default) or, with ``strict=True``, raises TranslationError.

    Register entries before sharing the provider between threads; lookups
    do not lock.

    Attributes:
        strict: Raise instead of falling back on a missing entry.

    Examples:
        >>> provider = CatalogTranslationProvider(
        ...     {("fr", "date_interval"): {"year": "an", "years": "ans"}}
        ... )
        >>> provider.translate("years", "fr", "date_interval")
        'ans'
        >>> provider.translate("hours", "fr", "date_interval")
        'hours'
    """

    def __init__(
        self,
        catalogs: Mapping[CatalogKey, Mapping[str, str]] | None = None,
        *,
        strict: bool = False,
    ) -> None:
        """Create a provider from optional catalogs.

        Args:
            catalogs: Mapping of (language_code, context) to a mapping of
                English word to translated word. Merged over the built-in
                English catalog.
            strict: Raise TranslationError on a missing entry.
        """
        self.strict = strict
        self._catalogs: dict[CatalogKey, dict[str, str]] = {
            (DEFAULT_LANGUAGE_CODE, DEFAULT_CONTEXT): _english_catalog(),
        }
        for key, entries in (catalogs or {}).items():
            self._catalogs.setdefault(key, {}).update(entries)

    @property
    def languages(self) -> frozenset[str]:
        """Return the language codes that have at least one catalog."""
        return frozenset(language for language, _ in self._catalogs)

    def add(
        self,
        language_code: str,
        text: str,
        translation: str,
        context: str = DEFAULT_CONTEXT,
    ) -> None:
        """Register a single translation.

        Args:
            language_code: Target language.
            text: The English word.
            translation: The localized word.
            context: Translation context. Defaults to "date_interval".
        """
        self._catalogs.setdefault((language_code, context), {})[text] = translation

    def translate(self, text: str, language_code: str, context: str) -> str:
        """Look up a word in the catalog for a language and context.

        Raises:
            TranslationError: In strict mode, if there is no entry.
        """
        catalog = self._catalogs.get((language_code, context), {})
        try:
            return catalog[text]
        except KeyError:
            if self.strict:
                raise TranslationError(
                    f"no translation for {text!r} in language "
                    f"{language_code!r} (context {context!r})"
                ) from None
            logger.debug(
                "No %s translation for %r in context %r, using source text",
                language_code,
                text,
                context,
            )
            return text


__all__ = [
    "TranslationProvider",
    "CatalogTranslationProvider",
    "IdentityTranslationProvider",
]
