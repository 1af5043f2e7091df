"""Exceptions raised by the country catalog and locale store"""

from collections.abc import Iterable


class CountrySelectError(Exception):
    """Base exception for country catalog errors"""


class TranslationNotAvailable(CountrySelectError):
    """Requested country codes have no translation in the locale"""

    def __init__(self, missing: Iterable[str]):
        self.missing = list(missing)
        super().__init__(f'Missing translations: {self.missing}')


class LocaleNotAvailable(CountrySelectError, KeyError):
    """Locale (or a key inside it) is not known to the locale store"""

    def __init__(self, locale: str, key: str | None = None):
        self.locale = locale
        self.key = key
        message = f'Locale {locale!r} is not available'
        if key is not None:
            message = f'Key {key!r} is not available for locale {locale!r}'
        super().__init__(message)

    def __str__(self) -> str:
        # KeyError would repr() the message
        return str(self.args[0])


class LocaleDataError(CountrySelectError):
    """Locale file could not be read or has an unexpected shape"""
