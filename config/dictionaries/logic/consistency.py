# config/dictionaries/logic/consistency.py
from __future__ import annotations

import logging

from config.dictionaries.exceptions import DataConsistencyError
from config.dictionaries.logic.countries import countries
from config.dictionaries.logic.currencies import currencies
from config.dictionaries.logic.languages import languages


logger = logging.getLogger(__name__)

CATALOGS = (countries, currencies, languages)


def load_all() -> None:
    for catalog in CATALOGS:
        catalog.load()


def find_problems() -> list[str]:
    """
    Проверяем ссылки стран на валюты и языки.

    Возвращает список описаний проблем; пустой список - данные согласованы.
    """
    load_all()
    problems: list[str] = []
    for country in countries:
        for code in country.currencies:
            if currencies.get_by("alpha3", code) is None:
                problems.append(f"{country.alpha3}: unknown currency {code!r}")
        for code in country.languages:
            if languages.get_by("alpha2", code) is None:
                problems.append(f"{country.alpha3}: unknown language {code!r}")
    return problems


def assert_consistent() -> None:
    problems = find_problems()
    if problems:
        for problem in problems:
            logger.error("Dictionary data problem: %s", problem)
        raise DataConsistencyError(
            f"{len(problems)} broken cross-reference(s): " + "; ".join(problems)
        )
