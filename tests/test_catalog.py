import threading

import pytest


def _languages():
    from config.dictionaries.models import Language

    return [
        Language(alpha2="en", alpha3="eng", name="English"),
        Language(alpha2="fr", alpha3="fra", name="French"),
        Language(alpha2="de", alpha3="deu", name="German"),
    ]


def _catalog(catalog_factory, records=None):
    return catalog_factory(
        records if records is not None else _languages(),
        key_fields=("name", "alpha2", "alpha3"),
        code_fields=("alpha2", "alpha3"),
    )


def test_catalog_is_lazy_and_loads_once(catalog_factory):
    catalog = _catalog(catalog_factory)
    assert catalog.is_loaded is False
    assert catalog.loader_calls == []

    catalog.get("eng")
    catalog.load()
    len(catalog)

    assert catalog.is_loaded is True
    assert catalog.loader_calls == [1]


def test_concurrent_first_access_builds_once(catalog_factory):
    catalog = _catalog(catalog_factory)
    barrier = threading.Barrier(8)
    results = []

    def worker():
        barrier.wait()
        results.append(catalog.try_get("French"))

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert catalog.loader_calls == [1]
    assert len(results) == 8
    assert all(r is results[0] for r in results)


def test_order_is_declaration_order(catalog_factory):
    catalog = _catalog(catalog_factory)

    assert catalog.values("name") == ("English", "French", "German")
    assert [r.alpha3 for r in catalog] == ["eng", "fra", "deu"]


@pytest.mark.parametrize("key", ["eng", "ENG", "en", "EN", "english", "ENGLISH", "EnGlIsH"])
def test_try_get_matches_any_key_field_case_insensitive(catalog_factory, key):
    catalog = _catalog(catalog_factory)

    assert catalog.try_get(key).alpha3 == "eng"


@pytest.mark.parametrize("key", ["", None, 42, "Engl", "eng ", " eng", "xx"])
def test_try_get_miss_returns_none(catalog_factory, key):
    catalog = _catalog(catalog_factory)

    assert catalog.try_get(key) is None
    assert key not in catalog


def test_get_raises_record_not_found(catalog_factory):
    from config.dictionaries.exceptions import RecordNotFound

    catalog = _catalog(catalog_factory)

    with pytest.raises(RecordNotFound) as exc_info:
        catalog.get("ZZZZZZ")

    assert exc_info.value.key == "ZZZZZZ"
    assert exc_info.value.catalog == "ISO 9999"
    assert isinstance(exc_info.value, LookupError)

    with pytest.raises(RecordNotFound):
        catalog[""]


def test_getitem_is_get(catalog_factory):
    catalog = _catalog(catalog_factory)

    assert catalog["fra"] is catalog.get("French")


def test_get_by_restricts_to_one_field(catalog_factory):
    catalog = _catalog(catalog_factory)

    assert catalog.get_by("alpha2", "DE").name == "German"
    assert catalog.get_by("alpha2", "deu") is None
    assert catalog.get_by("alpha3", "de") is None
    assert catalog.get_by("alpha3", None) is None


def test_get_by_unknown_field_is_programming_error(catalog_factory):
    catalog = _catalog(catalog_factory)

    with pytest.raises(ValueError):
        catalog.get_by("family", "Indo-European")


def test_index_fields_are_searchable_only_via_get_by(catalog_factory):
    from config.dictionaries.models import Language

    catalog = catalog_factory(
        [Language(alpha2="nb", alpha3="nob", name="Norwegian Bokmål", name2="Bokmal")],
        key_fields=("name", "alpha2", "alpha3"),
        index_fields=("name2",),
    )

    assert catalog.try_get("bokmal") is None
    assert catalog.get_by("name2", "bokmal").alpha3 == "nob"


def test_filter_keeps_input_order_and_skips_misses(catalog_factory):
    catalog = _catalog(catalog_factory)

    found = catalog.filter(["deu", "ZZZ", "", None, "english"])

    assert [r.alpha3 for r in found] == ["deu", "eng"]
    assert catalog.filter([]) == ()


def test_first_record_wins_on_shared_key_value(catalog_factory):
    from config.dictionaries.models import Language

    records = [
        Language(alpha2="aa", alpha3="aaa", name="Shared"),
        Language(alpha2="bb", alpha3="bbb", name="Shared"),
    ]
    catalog = _catalog(catalog_factory, records)

    assert catalog.get("shared").alpha3 == "aaa"


def test_duplicate_code_is_data_consistency_error(catalog_factory):
    from config.dictionaries.exceptions import DataConsistencyError
    from config.dictionaries.models import Language

    records = [
        Language(alpha2="aa", alpha3="aaa", name="One"),
        Language(alpha2="aa", alpha3="bbb", name="Two"),
    ]
    catalog = _catalog(catalog_factory, records)

    with pytest.raises(DataConsistencyError):
        catalog.load()

    assert catalog.is_loaded is False
