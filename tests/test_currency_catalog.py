import pytest


def test_currency_catalog_size():
    from config.dictionaries.logic.currencies import currencies

    assert len(currencies) == 183


@pytest.mark.parametrize(
    "alpha3,name",
    [
        ("AFN", "Afghan afghani"),
        ("ZMW", "Zambian kwacha"),
        ("VUV", "Vanuatu vatu"),
        ("USD", "United States dollar"),
        ("MXN", "Mexican peso"),
        ("LYD", "Libyan dinar"),
        ("INR", "Indian rupee"),
    ],
)
def test_currency_get_by_code_and_name(alpha3, name):
    from config.dictionaries.logic.currencies import currencies

    assert currencies.get(alpha3).name == name
    assert currencies.get(name).alpha3 == alpha3


def test_afghani_minor_unit():
    from config.dictionaries.logic.currencies import currencies

    afn = currencies.get("AFN")
    assert afn.minor_unit == 2
    assert afn.numeric == "971"


def test_every_currency_round_trips():
    from config.dictionaries.logic.currencies import currencies

    for c in currencies:
        assert currencies.get(c.alpha3) is c
        assert currencies.get(c.name) is c


def test_minor_units_are_small_non_negative_ints():
    from config.dictionaries.logic.currencies import currencies

    assert {c.minor_unit for c in currencies} <= {0, 2, 3}
    assert currencies.get("JPY").minor_unit == 0
    assert currencies.get("KWD").minor_unit == 3


def test_currency_lookup_does_not_use_numeric_code():
    from config.dictionaries.logic.currencies import currencies

    assert currencies.try_get("971") is None


def test_currency_helpers():
    from config.dictionaries.logic import currencies as module

    assert module.get_by_alpha3("eur").name == "Euro"
    assert module.get_by_alpha3("Euro") is None
    assert module.get_by_name("euro").alpha3 == "EUR"
    assert [c.alpha3 for c in module.filter_currencies("usd", "XYZ", "Euro")] == ["USD", "EUR"]
    assert module.get_alpha3_codes()[:2] == ("AED", "AFN")
    assert module.get_names()[0] == "United Arab Emirates dirham"
    assert len(module.get_alpha3_codes()) == len(set(module.get_alpha3_codes()))
