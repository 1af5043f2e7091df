"""Pytest configuration and shared fixtures"""

import json
import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest

from localized_country_select import CountryCatalog, LocaleStore
from localized_country_select.config import PACKAGE_DIR, Settings


@pytest.fixture
def temp_dir() -> Generator[Path]:
    """Create temporary directory for test files"""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def test_settings(temp_dir: Path) -> Settings:
    """Create test settings"""
    return Settings(
        default_locale='en',
        locales_path=str(temp_dir),
        log_prefix='country_select_test',
        log_level='DEBUG',
    )


def write_locale(directory: Path, locale: str, countries: dict[str, str]) -> Path:
    """Write a <locale>.json catalog shaped like the bundled ones"""
    path = directory / f'{locale}.json'
    path.write_text(json.dumps({locale: {'countries': countries}}, ensure_ascii=False), encoding='utf-8')
    return path


@pytest.fixture
def sample_countries() -> dict[str, dict[str, str]]:
    """Small catalogs for two locales"""
    return {
        'en': {'DE': 'Germany', 'es': 'Spain', 'FR': 'France', 'AF': 'Afghanistan'},
        'de': {'DE': 'Deutschland', 'ES': 'Spanien', 'FR': 'Frankreich', 'AF': 'Afghanistan'},
    }


@pytest.fixture
def locale_dir(temp_dir: Path, sample_countries: dict[str, dict[str, str]]) -> Path:
    """Temporary directory with the sample catalogs written out"""
    for locale, countries in sample_countries.items():
        write_locale(temp_dir, locale, countries)
    return temp_dir


@pytest.fixture
def sample_catalog(locale_dir: Path) -> CountryCatalog:
    """Catalog over the sample catalogs"""
    return CountryCatalog(LocaleStore(locale_dir), default_locale='en')


@pytest.fixture
def catalog() -> CountryCatalog:
    """Catalog over the bundled en/ru data"""
    return CountryCatalog(LocaleStore(PACKAGE_DIR / 'locales'), default_locale='en')


@pytest.fixture
def locale_writer():
    """Expose write_locale to tests that build their own catalogs"""
    return write_locale
