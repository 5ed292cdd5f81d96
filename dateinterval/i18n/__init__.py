"""Localization hooks for unit words.

Classes:
    TranslationProvider: Protocol consumed by the humanizing formatter.
    CatalogTranslationProvider: In-memory catalogs with English built in.
    IdentityTranslationProvider: No-op provider.
"""

from __future__ import annotations

from dateinterval.i18n.provider import (
    CatalogTranslationProvider,
    IdentityTranslationProvider,
    TranslationProvider,
)

__all__: list[str] = [
    "TranslationProvider",
    "CatalogTranslationProvider",
    "IdentityTranslationProvider",
]
