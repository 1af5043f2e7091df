"""Localized country lists for select inputs

Countries are stored as ISO 3166-1 alpha-2 codes and shown with names taken from
the locale catalog::

    catalog = CountryCatalog()
    catalog.list_all('ru')
    catalog.list_priority(['US', 'CA'], 'en')
"""

import logging
from collections.abc import Iterable
from operator import attrgetter
from typing import Any

from localized_country_select.config import settings
from localized_country_select.exceptions import TranslationNotAvailable
from localized_country_select.schemas import (
    AbbreviatedCountry,
    CountryEntry,
    CountryOptions,
    FallbackCountry,
    ResolvedCountry,
)
from localized_country_select.store import CountryMap, LocaleProvider, LocaleStore, normalize_locale

__all__ = ('COUNTRIES_KEY', 'CountryCatalog', 'normalize_code', 'normalize_codes')

log = logging.getLogger(f'{settings.log_prefix}.catalog')

COUNTRIES_KEY = 'countries'


def normalize_code(code: Any) -> str:  # noqa: ANN401
    """Canonical form of a country code: 'us', :us or Country.US -> 'US'"""
    return str(code).strip().upper()


def _as_codes(codes: Iterable[Any] | str) -> Iterable[Any]:
    # A lone code is one code, not a sequence of letters
    return [codes] if isinstance(codes, str) else codes


def normalize_codes(codes: Iterable[Any] | str) -> list[str]:
    """Normalize codes, dropping repeats but keeping first-seen order"""
    return list(dict.fromkeys(normalize_code(code) for code in _as_codes(codes)))


def _sorted(entries: Iterable[CountryEntry]) -> list[CountryEntry]:
    # Sort by what is shown first: the name, or the code in abbreviated mode
    return sorted(entries, key=attrgetter('display'))


class CountryCatalog:
    """Builds ordered country lists over a locale provider"""

    def __init__(self, store: LocaleProvider | None = None, default_locale: str | None = None):
        self.store = store if store is not None else LocaleStore()
        self.default_locale = normalize_locale(default_locale or settings.default_locale)

    def _locale(self, locale: str | None) -> str:
        return locale or self.default_locale

    def countries(self, locale: str | None = None) -> CountryMap:
        """Code -> localized name mapping for the locale"""
        return self.store.translate(self._locale(locale), COUNTRIES_KEY)

    def available_locales(self) -> list[str]:
        """Locales the underlying store can serve"""
        available = getattr(self.store, 'available_locales', None)
        return available() if available is not None else []

    def country_name(self, code: Any, locale: str | None = None) -> str | None:  # noqa: ANN401
        """Localized name of a single stored country code, None when the locale has no entry"""
        return self.countries(locale).get(normalize_code(code))

    def list_all(
        self,
        locale: str | None = None,
        allowed: Iterable[Any] | str | None = None,
        silent: bool = False,
        abbreviated: bool = False,
    ) -> list[CountryEntry]:
        """All countries of the locale, sorted for display

        Args:
            locale: Locale to read names from, the catalog default when None
            allowed: Restrict the list to these codes (case-insensitive)
            silent: Show untranslated allowed codes by their code instead of raising
            abbreviated: Produce codes only, sorted by code

        Raises:
            TranslationNotAvailable: some allowed codes have no translation and
                ``silent`` is off
        """
        countries = self.countries(locale)

        if allowed is None:
            found = dict(countries)
            missing: list[str] = []
        else:
            requested = normalize_codes(allowed)
            found = {code: countries[code] for code in requested if code in countries}
            missing = [] if len(requested) == len(found) else [code for code in requested if code not in found]

        if missing:
            if not silent:
                raise TranslationNotAvailable(missing)
            log.warning('No %s translation for %s, showing codes instead', self._locale(locale), ', '.join(missing))

        entries: list[CountryEntry]
        if abbreviated:
            entries = [AbbreviatedCountry(code=code) for code in (*found, *missing)]
        else:
            entries = [ResolvedCountry(name=name, code=code) for code, name in found.items()]
            entries.extend(FallbackCountry(code=code) for code in missing)

        log.debug('Built %d country entries for %s', len(entries), self._locale(locale))
        return _sorted(entries)

    def list_priority(
        self,
        codes: Iterable[Any] | str,
        locale: str | None = None,
        abbreviated: bool = False,
    ) -> list[CountryEntry]:
        """Entries for the given codes in the given order

        Unknown codes are kept with an empty name. In abbreviated mode the locale
        is not consulted at all.
        """
        normalized = [normalize_code(code) for code in _as_codes(codes)]
        if abbreviated:
            return [AbbreviatedCountry(code=code) for code in normalized]

        countries = self.countries(locale)
        return [ResolvedCountry(name=countries.get(code), code=code) for code in normalized]

    def options_for_select(
        self,
        locale: str | None = None,
        priority: Iterable[Any] | str | None = None,
        selected: Any = None,  # noqa: ANN401
        allowed: Iterable[Any] | str | None = None,
        silent: bool = False,
        abbreviated: bool = False,
    ) -> CountryOptions:
        """Priority group, separator flag and full list for a country select"""
        return CountryOptions(
            priority=self.list_priority(priority or (), locale, abbreviated=abbreviated),
            countries=self.list_all(locale, allowed=allowed, silent=silent, abbreviated=abbreviated),
            selected=normalize_code(selected) if selected else None,
        )
