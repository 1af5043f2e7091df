"""Pydantic schemas for catalog entries and select options"""

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field


class ResolvedCountry(BaseModel):
    """Country with its localized name

    ``name`` is None only in priority lists, for codes the locale does not know.
    """

    kind: Literal['resolved'] = 'resolved'
    name: str | None
    code: str

    model_config = ConfigDict(frozen=True)

    @property
    def display(self) -> str:
        return self.name or ''

    def as_tuple(self) -> tuple[str | None, str]:
        return (self.name, self.code)


class FallbackCountry(BaseModel):
    """Country without a translation, displayed by its code"""

    kind: Literal['fallback'] = 'fallback'
    code: str

    model_config = ConfigDict(frozen=True)

    @property
    def name(self) -> str:
        return self.code

    @property
    def display(self) -> str:
        return self.code

    def as_tuple(self) -> tuple[str, str]:
        return (self.code, self.code)


class AbbreviatedCountry(BaseModel):
    """Country rendered by code only"""

    kind: Literal['abbreviated'] = 'abbreviated'
    code: str

    model_config = ConfigDict(frozen=True)

    @property
    def display(self) -> str:
        return self.code

    def as_tuple(self) -> tuple[str]:
        return (self.code,)


CountryEntry = Annotated[ResolvedCountry | FallbackCountry | AbbreviatedCountry, Field(discriminator='kind')]


class CountryOptions(BaseModel):
    """Data for a country <select>: priority group, separator and the full list"""

    priority: list[CountryEntry] = []
    countries: list[CountryEntry] = []
    selected: str | None = None

    model_config = ConfigDict(frozen=True)

    @property
    def has_separator(self) -> bool:
        return bool(self.priority)

    def codes(self) -> list[str]:
        """All option values in render order"""
        return [entry.code for entry in (*self.priority, *self.countries)]
