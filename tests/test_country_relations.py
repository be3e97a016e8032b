import pytest


def test_every_country_resolves_its_currencies_and_languages():
    from config.dictionaries.logic.countries import countries

    for c in countries:
        assert [cur.alpha3 for cur in c.resolve_currencies()] == list(c.currencies)
        assert [lang.alpha2 for lang in c.resolve_languages()] == list(c.languages)


def test_antarctica_has_no_currency_or_language():
    from config.dictionaries.logic.countries import countries

    ata = countries.get("ATA")
    assert ata.resolve_currencies() == ()
    assert ata.resolve_languages() == ()


def test_usa_relations():
    from config.dictionaries.logic.countries import countries
    from config.dictionaries.logic.currencies import currencies

    usa = countries.get("USA")
    assert usa.resolve_currencies()[0] is currencies.get("USD")
    assert [lang.name for lang in usa.resolve_languages()] == ["English"]


def test_unknown_language_code_is_data_consistency_error(caplog):
    from config.dictionaries.exceptions import DataConsistencyError
    from config.dictionaries.models import Country

    broken = Country(alpha2="XX", alpha3="XXX", name="Nowhere", languages=("en", "zz"))

    with caplog.at_level("ERROR", logger="config.dictionaries"):
        with pytest.raises(DataConsistencyError):
            broken.resolve_languages()

    assert "zz" in caplog.text


def test_unknown_currency_code_is_data_consistency_error():
    from config.dictionaries.exceptions import DataConsistencyError
    from config.dictionaries.models import Country

    broken = Country(alpha2="XX", alpha3="XXX", name="Nowhere", currencies=("EUR", "QQQ"))

    with pytest.raises(DataConsistencyError):
        broken.resolve_currencies()


def test_currency_references_are_codes_not_names():
    from config.dictionaries.exceptions import DataConsistencyError
    from config.dictionaries.models import Country

    # "Euro" - имя валюты, а не код: ссылки между таблицами только по коду
    broken = Country(alpha2="XX", alpha3="XXX", name="Nowhere", currencies=("Euro",))

    with pytest.raises(DataConsistencyError):
        broken.resolve_currencies()
