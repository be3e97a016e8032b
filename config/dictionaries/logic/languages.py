# config/dictionaries/logic/languages.py
from __future__ import annotations

from config.dictionaries.logic.catalog import Catalog
from config.dictionaries.models import Language, Standard


ISO_639 = Standard(
    number=639,
    name="ISO 639",
    wiki="https://en.wikipedia.org/wiki/List_of_ISO_639-1_codes",
)


def _load_languages():
    from config.dictionaries.data.languages import LANGUAGES

    return LANGUAGES


# name2 не участвует в общем поиске, только в get_by_name()
languages: Catalog[Language] = Catalog(
    standard=ISO_639,
    loader=_load_languages,
    key_fields=Language.KEY_FIELDS,
    code_fields=Language.CODE_FIELDS,
    index_fields=("name2",),
)


def get_by_alpha2(alpha2: str | None) -> Language | None:
    return languages.get_by("alpha2", alpha2)


def get_by_alpha3(alpha3: str | None) -> Language | None:
    return languages.get_by("alpha3", alpha3)


def get_by_name(name: str | None) -> Language | None:
    return languages.get_by("name", name) or languages.get_by("name2", name)


def filter_languages(*keys: str) -> tuple[Language, ...]:
    return languages.filter(keys)


def get_names() -> tuple[str, ...]:
    return languages.values("name")


def get_alpha2_codes() -> tuple[str, ...]:
    return languages.values("alpha2")


def get_alpha3_codes() -> tuple[str, ...]:
    return languages.values("alpha3")
