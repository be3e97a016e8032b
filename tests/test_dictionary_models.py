import pytest


def test_country_str_returns_name():
    from config.dictionaries.logic.countries import countries

    assert str(countries.get("SVK")) == "Slovakia"


def test_country_sequences_are_stored_as_tuples():
    from config.dictionaries.models import Country

    c = Country(alpha2="XX", alpha3="XXX", name="Testland", phones=[1, 2], currencies=["EUR"], languages=["en"])

    assert c.phones == (1, 2)
    assert c.currencies == ("EUR",)
    assert c.languages == ("en",)
    hash(c)


def test_records_are_frozen():
    from dataclasses import FrozenInstanceError

    from config.dictionaries.logic.currencies import currencies

    eur = currencies.get("EUR")
    with pytest.raises(FrozenInstanceError):
        eur.name = "Euro 2"


@pytest.mark.parametrize(
    "kwargs",
    [
        {"alpha2": "XX", "alpha3": "", "name": "Testland"},
        {"alpha2": "XX", "alpha3": None, "name": "Testland"},
        {"alpha2": "XX", "alpha3": "XXX", "name": ""},
        {"alpha2": "", "alpha3": "XXX", "name": "Testland"},
    ],
)
def test_country_requires_codes_and_name(kwargs):
    from config.dictionaries.exceptions import InvalidRecord
    from config.dictionaries.models import Country

    with pytest.raises(InvalidRecord):
        Country(**kwargs)


@pytest.mark.parametrize("minor_unit", [-1, "2", None, True, 2.0])
def test_currency_minor_unit_must_be_non_negative_int(minor_unit):
    from config.dictionaries.exceptions import InvalidRecord
    from config.dictionaries.models import Currency

    with pytest.raises(InvalidRecord):
        Currency(alpha3="XXX", name="Test", numeric="000", minor_unit=minor_unit)


def test_currency_numeric_may_be_missing():
    from config.dictionaries.logic.currencies import currencies

    assert currencies.get("XFU").numeric is None


def test_invalid_record_is_value_error():
    from config.dictionaries.exceptions import InvalidRecord
    from config.dictionaries.models import Language

    with pytest.raises(ValueError):
        Language(alpha2="xx", alpha3="", name="Test")

    assert issubclass(InvalidRecord, ValueError)
