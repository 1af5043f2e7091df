"""Locale data provider backed by per-locale JSON files"""

import json
import logging
import re
import threading
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any, Protocol

from localized_country_select.config import settings
from localized_country_select.exceptions import LocaleDataError, LocaleNotAvailable

log = logging.getLogger(f'{settings.log_prefix}.store')

CountryMap = Mapping[str, str]

# Language with optional subtags, after normalization: en, pt-br, zh-hant-tw
LOCALE_PATTERN = re.compile(r'^[a-z]{2,3}(-[a-z0-9]{2,8})*$')


class LocaleProvider(Protocol):
    """Anything that can hand out a locale's translations by key"""

    def translate(self, locale: str, key: str) -> CountryMap: ...


def normalize_locale(locale: str) -> str:
    """Lowercase a locale identifier and use '-' as the region separator"""
    return locale.strip().lower().replace('_', '-')


def _read_locale_file(path: Path, locale: str) -> dict[str, CountryMap]:
    """Read one <locale>.json file into read-only per-key mappings"""
    try:
        with path.open(encoding='utf-8') as f:
            data: dict[str, Any] = json.load(f)
    except json.JSONDecodeError as e:
        raise LocaleDataError(f'Malformed locale file {path}: {e}') from e
    except OSError as e:
        raise LocaleDataError(f'Cannot read locale file {path}: {e}') from e

    # Files are keyed by their own locale: {"en": {"countries": {...}}}
    scopes = None
    if isinstance(data, dict):
        scopes = next((v for k, v in data.items() if normalize_locale(str(k)) == locale), None)
    if not isinstance(scopes, dict):
        raise LocaleDataError(f'Locale file {path} has no {locale!r} section')

    result: dict[str, CountryMap] = {}
    for key, entries in scopes.items():
        if not isinstance(entries, dict):
            raise LocaleDataError(f'Locale file {path}: {key!r} must be a mapping')
        result[key] = MappingProxyType({str(code).upper(): str(name) for code, name in entries.items()})
    return result


class LocaleStore:
    """Load-once store of locale catalogs

    Each locale is read from ``<path>/<locale>.json`` on first use and kept as an
    immutable snapshot. ``reload`` swaps in a fresh snapshot as a whole.
    """

    def __init__(self, path: str | Path | None = None):
        self.path = Path(path) if path is not None else settings.locales_path
        self._locales: dict[str, Mapping[str, CountryMap]] = {}
        self._lock = threading.Lock()

    def _file_for(self, locale: str) -> Path:
        return self.path / f'{locale}.json'

    def resolve(self, locale: str) -> str:
        """Map a requested locale to one the store can serve

        'pt_BR' resolves to 'pt-br' when that file exists, else to 'pt'.
        """
        normalized = normalize_locale(locale)
        # Locales name files, so only well-formed identifiers get near the disk
        if not LOCALE_PATTERN.match(normalized):
            raise LocaleNotAvailable(locale)

        candidates = [normalized]
        if '-' in normalized:
            candidates.append(normalized.split('-', 1)[0])

        for candidate in candidates:
            if candidate in self._locales or self._file_for(candidate).is_file():
                return candidate
        raise LocaleNotAvailable(locale)

    def _load(self, locale: str) -> Mapping[str, CountryMap]:
        data = MappingProxyType(_read_locale_file(self._file_for(locale), locale))
        log.debug('Loaded locale %s from %s (%s)', locale, self.path, ', '.join(data))
        return data

    def _get(self, locale: str) -> Mapping[str, CountryMap]:
        resolved = self.resolve(locale)
        data = self._locales.get(resolved)
        if data is not None:
            return data

        with self._lock:
            # Another thread may have loaded it while we waited
            data = self._locales.get(resolved)
            if data is None:
                data = self._load(resolved)
                self._locales[resolved] = data
        return data

    def translate(self, locale: str, key: str) -> CountryMap:
        """Return the mapping stored under ``key`` for the locale"""
        scopes = self._get(locale)
        try:
            return scopes[key]
        except KeyError:
            raise LocaleNotAvailable(locale, key) from None

    def reload(self, locale: str) -> None:
        """Re-read a locale file and replace its snapshot"""
        resolved = self.resolve(locale)
        data = self._load(resolved)
        with self._lock:
            self._locales[resolved] = data
        log.info('Reloaded locale %s', resolved)

    def available_locales(self) -> list[str]:
        """Locales that have a data file or are already loaded"""
        on_disk = {p.stem.lower() for p in self.path.glob('*.json')} if self.path.is_dir() else set()
        return sorted(on_disk | set(self._locales))
