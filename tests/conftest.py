# tests/conftest.py
import pytest


@pytest.fixture
def api_client(client):
    """
    Django test client (как обычно), но оставляем именование "api_client",
    чтобы было понятно, что это клиент для HTTP-запросов к API.
    """
    return client


@pytest.fixture
def catalog_factory():
    """
    Собирает отдельный (не глобальный) Catalog поверх переданных записей.
    Считает, сколько раз вызывался loader.
    """
    from config.dictionaries.logic.catalog import Catalog
    from config.dictionaries.models import Standard

    def _make(records, *, key_fields, code_fields=(), index_fields=()):
        calls = []

        def loader():
            calls.append(1)
            return list(records)

        catalog = Catalog(
            standard=Standard(number=9999, name="ISO 9999", wiki="https://example.com/iso-9999"),
            loader=loader,
            key_fields=key_fields,
            code_fields=code_fields,
            index_fields=index_fields,
        )
        catalog.loader_calls = calls
        return catalog

    return _make
