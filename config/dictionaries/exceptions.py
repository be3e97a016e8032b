# config/dictionaries/exceptions.py
from __future__ import annotations


class DictionaryError(Exception):
    """Базовая ошибка справочников ISO."""


class RecordNotFound(DictionaryError, LookupError):
    """
    Строгий get() не нашёл запись.

    try_get() / filter() никогда это не бросают: отсутствие - нормальный результат.
    """

    def __init__(self, catalog: str, key: object):
        self.catalog = catalog
        self.key = key
        super().__init__(f"{catalog}: record not found for key {key!r}")


class DataConsistencyError(DictionaryError):
    """Дефект статических таблиц: дубликат кода или битая ссылка между каталогами."""


class InvalidRecord(DictionaryError, ValueError):
    """Запись не прошла проверку при построении каталога."""
