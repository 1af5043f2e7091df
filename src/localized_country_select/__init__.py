"""Localized country select: country codes in storage, localized names on display"""

from .catalog import CountryCatalog, normalize_code
from .exceptions import CountrySelectError, LocaleDataError, LocaleNotAvailable, TranslationNotAvailable
from .schemas import AbbreviatedCountry, CountryEntry, CountryOptions, FallbackCountry, ResolvedCountry
from .store import LocaleProvider, LocaleStore

__all__ = (
    'AbbreviatedCountry',
    'CountryCatalog',
    'CountryEntry',
    'CountryOptions',
    'CountrySelectError',
    'FallbackCountry',
    'LocaleDataError',
    'LocaleNotAvailable',
    'LocaleProvider',
    'LocaleStore',
    'ResolvedCountry',
    'TranslationNotAvailable',
    'normalize_code',
)
