import pytest


def test_language_catalog_size():
    from config.dictionaries.logic.languages import languages

    assert len(languages) == 184


@pytest.mark.parametrize(
    "alpha3,name",
    [
        ("aar", "Afar"),
        ("eng", "English"),
        ("nor", "Norwegian"),
        ("zul", "Zulu"),
        ("tah", "Tahitian"),
        ("swa", "Swahili"),
        ("som", "Somali"),
    ],
)
def test_language_get_by_code_and_name(alpha3, name):
    from config.dictionaries.logic.languages import languages

    assert languages.get(alpha3).name == name
    assert languages.get(name).alpha3 == alpha3


def test_every_language_round_trips_by_codes_and_name():
    from config.dictionaries.logic.languages import languages

    for lang in languages:
        assert languages.get(lang.alpha2) is lang
        assert languages.get(lang.alpha3) is lang
        assert languages.get(lang.name) is lang


def test_codes_are_unique():
    from config.dictionaries.logic.languages import get_alpha2_codes, get_alpha3_codes

    assert len(set(get_alpha2_codes())) == 184
    assert len(set(get_alpha3_codes())) == 184


def test_alternate_name_only_via_get_by_name():
    from config.dictionaries.logic.languages import get_by_name, languages

    # Abkhaz / Abkhazian
    assert languages.try_get("Abkhazian") is None
    assert get_by_name("abkhazian").alpha2 == "ab"
    assert get_by_name("Abkhaz").alpha2 == "ab"


def test_language_helpers():
    from config.dictionaries.logic import languages as module

    assert module.get_by_alpha2("SW").name == "Swahili"
    assert module.get_by_alpha2("swa") is None
    assert module.get_by_alpha3("SWA").alpha2 == "sw"
    assert [lang.alpha3 for lang in module.filter_languages("en", "??", "fra")] == ["eng", "fra"]
    assert module.get_alpha2_codes()[:3] == ("aa", "ab", "ae")
    assert module.get_names()[0] == "Afar"
