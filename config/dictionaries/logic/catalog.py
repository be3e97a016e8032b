# config/dictionaries/logic/catalog.py
from __future__ import annotations

import logging
from threading import Lock
from typing import Callable, Generic, Iterable, Iterator, TypeVar

from config.dictionaries.exceptions import DataConsistencyError, RecordNotFound
from config.dictionaries.models import Standard


logger = logging.getLogger(__name__)

R = TypeVar("R")


def normalize_key(key: object) -> str | None:
    """
    Ключ поиска без учёта регистра (casefold, без локали).

    None / пустая строка / не-строка -> None: "не найдено", а не ошибка.
    """
    if not isinstance(key, str) or not key:
        return None
    return key.casefold()


class Catalog(Generic[R]):
    """
    Неизменяемый справочник записей одного стандарта ISO.

    Записи строятся один раз при первом обращении (loader), в порядке
    объявления в таблице. Для каждого ключевого поля (и index_fields) строится
    hash-индекс, плюс общий индекс по key_fields: при совпадении значений
    побеждает первая запись.
    После загрузки все операции - чистое чтение, без блокировок.
    """

    def __init__(
        self,
        *,
        standard: Standard,
        loader: Callable[[], Iterable[R]],
        key_fields: tuple[str, ...],
        code_fields: tuple[str, ...] = (),
        index_fields: tuple[str, ...] = (),
    ):
        self.standard = standard
        self.key_fields = key_fields
        self.code_fields = code_fields
        self.index_fields = index_fields
        self._loader = loader
        self._lock = Lock()
        self._loaded = False
        self._records: tuple[R, ...] = ()
        self._by_key: dict[str, R] = {}
        self._by_field: dict[str, dict[str, R]] = {}

    def __repr__(self) -> str:
        state = f"{len(self._records)} records" if self._loaded else "not loaded"
        return f"<Catalog {self.standard.name}: {state}>"

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    def load(self) -> None:
        if self._loaded:
            return
        with self._lock:
            if self._loaded:
                return
            records = tuple(self._loader())
            by_field = self._build_field_indexes(records)
            by_key: dict[str, R] = {}
            for record in records:
                for field in self.key_fields:
                    value = normalize_key(getattr(record, field))
                    if value is not None:
                        by_key.setdefault(value, record)

            self._records = records
            self._by_field = by_field
            self._by_key = by_key
            self._loaded = True
        logger.debug("Loaded %s catalog: %d records", self.standard.name, len(records))

    def _build_field_indexes(self, records: tuple[R, ...]) -> dict[str, dict[str, R]]:
        by_field: dict[str, dict[str, R]] = {}
        for field in dict.fromkeys(self.key_fields + self.code_fields + self.index_fields):
            index: dict[str, R] = {}
            for record in records:
                value = normalize_key(getattr(record, field))
                if value is None:
                    continue
                if value in index:
                    if field in self.code_fields:
                        raise DataConsistencyError(
                            f"{self.standard.name}: duplicate {field} {getattr(record, field)!r}"
                        )
                    continue
                index[value] = record
            by_field[field] = index
        return by_field

    def all(self) -> tuple[R, ...]:
        self.load()
        return self._records

    def __iter__(self) -> Iterator[R]:
        return iter(self.all())

    def __len__(self) -> int:
        return len(self.all())

    def __contains__(self, key: object) -> bool:
        return self.try_get(key) is not None

    def __getitem__(self, key: str) -> R:
        return self.get(key)

    def try_get(self, key: object) -> R | None:
        normalized = normalize_key(key)
        if normalized is None:
            return None
        self.load()
        return self._by_key.get(normalized)

    def get(self, key: object) -> R:
        record = self.try_get(key)
        if record is None:
            raise RecordNotFound(self.standard.name, key)
        return record

    def get_by(self, field: str, value: object) -> R | None:
        """Поиск только по одному полю (например, alpha2), без смешивания полей."""
        self.load()
        if field not in self._by_field:
            raise ValueError(f"{self.standard.name}: field {field!r} is not indexed")
        normalized = normalize_key(value)
        if normalized is None:
            return None
        return self._by_field[field].get(normalized)

    def filter(self, keys: Iterable[object]) -> tuple[R, ...]:
        # порядок входных ключей сохраняется, промахи молча пропускаем
        found = []
        for key in keys:
            record = self.try_get(key)
            if record is not None:
                found.append(record)
        return tuple(found)

    def values(self, field: str) -> tuple[str, ...]:
        return tuple(getattr(record, field) for record in self.all())
