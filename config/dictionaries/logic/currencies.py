# config/dictionaries/logic/currencies.py
from __future__ import annotations

from config.dictionaries.logic.catalog import Catalog
from config.dictionaries.models import Currency, Standard


ISO_4217 = Standard(
    number=4217,
    name="ISO 4217",
    wiki="https://en.wikipedia.org/wiki/ISO_4217",
)


def _load_currencies():
    from config.dictionaries.data.currencies import CURRENCIES

    return CURRENCIES


currencies: Catalog[Currency] = Catalog(
    standard=ISO_4217,
    loader=_load_currencies,
    key_fields=Currency.KEY_FIELDS,
    code_fields=Currency.CODE_FIELDS,
)


def get_by_alpha3(alpha3: str | None) -> Currency | None:
    return currencies.get_by("alpha3", alpha3)


def get_by_name(name: str | None) -> Currency | None:
    return currencies.get_by("name", name)


def filter_currencies(*keys: str) -> tuple[Currency, ...]:
    return currencies.filter(keys)


def get_names() -> tuple[str, ...]:
    return currencies.values("name")


def get_alpha3_codes() -> tuple[str, ...]:
    return currencies.values("alpha3")
