# -*- coding: utf-8 -*-
# config/dictionaries/models.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import ClassVar

from config.dictionaries.exceptions import DataConsistencyError, InvalidRecord


logger = logging.getLogger(__name__)


def _require(record: object, *field_names: str) -> None:
    for field_name in field_names:
        value = getattr(record, field_name)
        if not isinstance(value, str) or not value:
            raise InvalidRecord(
                f"{type(record).__name__}.{field_name} cannot be empty or null"
            )


@dataclass(frozen=True)
class Standard:
    """ISO standard a catalog implements."""

    number: int
    name: str
    wiki: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Currency:
    # ISO 4217
    KEY_FIELDS: ClassVar[tuple[str, ...]] = ("name", "alpha3")
    CODE_FIELDS: ClassVar[tuple[str, ...]] = ("alpha3",)

    alpha3: str
    name: str
    numeric: str | None
    minor_unit: int

    def __post_init__(self) -> None:
        _require(self, "alpha3", "name")
        if (
            isinstance(self.minor_unit, bool)
            or not isinstance(self.minor_unit, int)
            or self.minor_unit < 0
        ):
            raise InvalidRecord(
                f"Currency.minor_unit must be a non-negative integer, got {self.minor_unit!r}"
            )

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Language:
    # ISO 639-1 (alpha2) / ISO 639-2/T (alpha3)
    KEY_FIELDS: ClassVar[tuple[str, ...]] = ("name", "alpha2", "alpha3")
    CODE_FIELDS: ClassVar[tuple[str, ...]] = ("alpha2", "alpha3")

    alpha2: str
    alpha3: str
    name: str
    name2: str = ""
    native_name: str = ""
    family: str = ""

    def __post_init__(self) -> None:
        _require(self, "alpha2", "alpha3", "name")

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Country:
    # ISO 3166-1
    KEY_FIELDS: ClassVar[tuple[str, ...]] = ("name", "name2", "alpha2", "alpha3")
    CODE_FIELDS: ClassVar[tuple[str, ...]] = ("alpha2", "alpha3")

    alpha2: str
    alpha3: str
    name: str
    name2: str = ""
    native_name: str = ""
    capital: str = ""
    numeric: str = ""
    continent: str = ""
    continent_code: str = ""
    phones: tuple[int, ...] = ()
    currencies: tuple[str, ...] = ()
    languages: tuple[str, ...] = ()
    flag: str = ""
    wiki: str = ""

    def __post_init__(self) -> None:
        _require(self, "alpha2", "alpha3", "name")
        # frozen: lists passed by callers are stored as tuples
        for field_name in ("phones", "currencies", "languages"):
            object.__setattr__(self, field_name, tuple(getattr(self, field_name)))

    def __str__(self) -> str:
        return self.name

    def resolve_languages(self) -> tuple[Language, ...]:
        """
        Языки страны из каталога ISO 639.

        Коды страны - внутренние ссылки таблиц, а не ввод пользователя:
        если код не найден, это дефект данных, поэтому падаем явно.
        """
        from config.dictionaries.logic.languages import languages

        resolved = []
        for code in self.languages:
            language = languages.get_by("alpha2", code)
            if language is None:
                logger.error("Country %s references unknown language %r", self.alpha3, code)
                raise DataConsistencyError(
                    f"Country {self.alpha3} references unknown language code {code!r}"
                )
            resolved.append(language)
        return tuple(resolved)

    def resolve_currencies(self) -> tuple[Currency, ...]:
        """Валюты страны из каталога ISO 4217 (та же политика, что и для языков)."""
        from config.dictionaries.logic.currencies import currencies

        resolved = []
        for code in self.currencies:
            currency = currencies.get_by("alpha3", code)
            if currency is None:
                logger.error("Country %s references unknown currency %r", self.alpha3, code)
                raise DataConsistencyError(
                    f"Country {self.alpha3} references unknown currency code {code!r}"
                )
            resolved.append(currency)
        return tuple(resolved)
