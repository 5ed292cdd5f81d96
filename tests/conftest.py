"""Pytest configuration and fixtures for dateinterval tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so dateinterval can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from dateinterval import CatalogTranslationProvider, IntervalFormatter, IntervalValue  # noqa: E402


@pytest.fixture
def sample_interval() -> IntervalValue:
    """One year, four days and thirty-nine seconds."""
    return IntervalValue.from_mapping({"years": 1, "days": 4, "seconds": 39})


@pytest.fixture
def provider() -> CatalogTranslationProvider:
    """Catalog provider with a small Dutch catalog next to English."""
    catalog = CatalogTranslationProvider()
    for english, dutch in [
        ("year", "jaar"),
        ("years", "jaar"),
        ("month", "maand"),
        ("months", "maanden"),
        ("day", "dag"),
        ("days", "dagen"),
        ("hour", "uur"),
        ("hours", "uur"),
        ("minute", "minuut"),
        ("minutes", "minuten"),
        ("second", "seconde"),
        ("seconds", "seconden"),
    ]:
        catalog.add("nl", english, dutch)
    return catalog


@pytest.fixture
def formatter(provider: CatalogTranslationProvider) -> IntervalFormatter:
    """English formatter backed by the catalog provider."""
    return IntervalFormatter(provider, language_code="en")
