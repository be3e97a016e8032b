# config/dictionaries/logic/countries.py
from __future__ import annotations

from config.dictionaries.logic.catalog import Catalog
from config.dictionaries.models import Country, Standard


ISO_3166 = Standard(
    number=3166,
    name="ISO 3166",
    wiki="https://en.wikipedia.org/wiki/List_of_ISO_3166_country_codes",
)


def _load_countries():
    from config.dictionaries.data.countries import COUNTRIES

    return COUNTRIES


# Один экземпляр на процесс; таблица грузится при первом обращении.
countries: Catalog[Country] = Catalog(
    standard=ISO_3166,
    loader=_load_countries,
    key_fields=Country.KEY_FIELDS,
    code_fields=Country.CODE_FIELDS,
)


def get_by_alpha2(alpha2: str | None) -> Country | None:
    return countries.get_by("alpha2", alpha2)


def get_by_alpha3(alpha3: str | None) -> Country | None:
    return countries.get_by("alpha3", alpha3)


def get_by_name(name: str | None) -> Country | None:
    """По официальному или общеупотребительному (name2) названию."""
    return countries.get_by("name", name) or countries.get_by("name2", name)


def filter_countries(*keys: str) -> tuple[Country, ...]:
    return countries.filter(keys)


def get_names() -> tuple[str, ...]:
    return countries.values("name")


def get_alpha2_codes() -> tuple[str, ...]:
    return countries.values("alpha2")


def get_alpha3_codes() -> tuple[str, ...]:
    return countries.values("alpha3")
