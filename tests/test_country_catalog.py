import pytest


def test_country_catalog_size():
    from config.dictionaries.logic.countries import countries

    assert len(countries) == 249


def test_country_catalog_standard():
    from config.dictionaries.logic.countries import countries

    assert countries.standard.number == 3166
    assert countries.standard.name == "ISO 3166"


@pytest.mark.parametrize(
    "alpha3,name",
    [
        ("USA", "United States of America"),
        ("ZWE", "Zimbabwe"),
        ("TLS", "Timor-Leste"),
        ("RUS", "Russian Federation"),
        ("AFG", "Afghanistan"),
        ("BHS", "Bahamas"),
        ("KGZ", "Kyrgyzstan"),
    ],
)
def test_country_get_by_code_and_name(alpha3, name):
    from config.dictionaries.logic.countries import countries

    assert countries.get(alpha3).name == name
    assert countries.get(name).alpha3 == alpha3


def test_every_country_round_trips_by_every_key_field():
    from config.dictionaries.logic.countries import countries

    for c in countries:
        assert countries.get(c.alpha3).alpha3 == c.alpha3
        assert countries.get(c.alpha2).alpha3 == c.alpha3
        assert countries.get(c.name).alpha3 == c.alpha3
        assert countries.get(c.name2).alpha3 == c.alpha3


def test_alpha3_codes_are_unique_and_not_empty():
    from config.dictionaries.logic.countries import get_alpha3_codes

    codes = get_alpha3_codes()
    assert all(codes)
    assert len(set(codes)) == len(codes)


def test_lookup_is_case_insensitive():
    from config.dictionaries.logic.countries import countries

    usa = countries.get("USA")
    assert countries.get("usa") is usa
    assert countries.get("UsA") is usa
    assert countries.get("united states") is usa
    assert countries.get("ÅLAND ISLANDS").alpha3 == "ALA"


def test_unknown_key_get_raises_try_get_does_not():
    from config.dictionaries.exceptions import RecordNotFound
    from config.dictionaries.logic.countries import countries

    assert countries.try_get("ZZZZZZ") is None
    assert countries.try_get("") is None
    assert countries.try_get(None) is None

    with pytest.raises(RecordNotFound):
        countries.get("ZZZZZZ")


def test_no_partial_matching():
    from config.dictionaries.logic.countries import countries

    assert countries.try_get("United") is None
    assert countries.try_get("Slovak") is None


def test_filter_countries():
    from config.dictionaries.logic.countries import countries, filter_countries

    assert [c.alpha3 for c in countries.filter(["USA", "ZZZ", "GBR"])] == ["USA", "GBR"]
    assert [c.alpha3 for c in filter_countries("gb", "Slovakia", "nope")] == ["GBR", "SVK"]


def test_code_specific_lookups():
    from config.dictionaries.logic import countries as module

    assert module.get_by_alpha2("sk").alpha3 == "SVK"
    assert module.get_by_alpha2("SVK") is None
    assert module.get_by_alpha3("svk").alpha2 == "SK"
    assert module.get_by_alpha3("SK") is None
    assert module.get_by_name("United States").alpha3 == "USA"
    assert module.get_by_name("Aland").alpha3 == "ALA"
    assert module.get_by_name("US") is None


def test_projections_follow_catalog_order():
    from config.dictionaries.logic.countries import get_alpha2_codes, get_alpha3_codes, get_names

    names = get_names()
    assert len(names) == 249
    assert names[:3] == ("Afghanistan", "Åland Islands", "Albania")
    assert get_alpha2_codes()[:3] == ("AF", "AX", "AL")
    assert get_alpha3_codes()[-1] == "ZWE"


def test_country_fields():
    from config.dictionaries.logic.countries import countries

    sk = countries.get("SK")
    assert sk.alpha3 == "SVK"
    assert sk.capital == "Bratislava"
    assert sk.numeric == "703"
    assert sk.continent_code == "EU"
    assert sk.phones == (421,)
    assert sk.currencies == ("EUR",)
    assert sk.flag == "🇸🇰"
    assert sk.wiki.endswith("ISO_3166-2:SK")
