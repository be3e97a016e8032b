from urllib.parse import quote

from django.urls import reverse


def test_list_currencies_returns_items(api_client):
    resp = api_client.get("/api/v1/dictionaries/currencies/")

    assert resp.status_code == 200
    data = resp.json()
    assert isinstance(data, list)
    assert len(data) == 183
    assert data[0]["code"] == "AED"
    assert data[0]["name"] == "United Arab Emirates dirham"
    assert data[0]["minor_unit"] == 2


def test_list_countries_returns_items_in_catalog_order(api_client):
    resp = api_client.get(reverse("countries-list"))

    assert resp.status_code == 200
    data = resp.json()
    assert len(data) == 249
    assert data[0]["alpha3"] == "AFG"
    assert data[0]["currencies"] == ["AFN"]
    assert data[0]["languages"] == ["ps", "uz", "tk"]
    assert data[0]["phones"] == [93]


def test_list_languages_returns_items(api_client):
    resp = api_client.get(reverse("languages-list"))

    assert resp.status_code == 200
    data = resp.json()
    assert len(data) == 184
    assert data[0] == {
        "alpha2": "aa",
        "alpha3": "aar",
        "name": "Afar",
        "name2": "Afar",
        "native_name": "Afar",
        "family": "Afro-Asiatic",
    }


def test_list_filters_by_keys_and_skips_unknown(api_client):
    resp = api_client.get("/api/v1/dictionaries/countries/?keys=USA,ZZZ,gbr")

    assert resp.status_code == 200
    assert [c["alpha3"] for c in resp.json()] == ["USA", "GBR"]


def test_list_filter_with_only_unknown_keys_is_empty(api_client):
    resp = api_client.get("/api/v1/dictionaries/currencies/?keys=ZZZ,,")

    assert resp.status_code == 200
    assert resp.json() == []


def test_country_detail_includes_resolved_relations(api_client):
    resp = api_client.get(reverse("countries-detail", kwargs={"key": "tls"}))

    assert resp.status_code == 200
    data = resp.json()
    assert data["name"] == "Timor-Leste"
    assert [c["code"] for c in data["resolved_currencies"]] == list(data["currencies"])
    assert [lang["alpha2"] for lang in data["resolved_languages"]] == list(data["languages"])


def test_country_detail_by_name(api_client):
    resp = api_client.get("/api/v1/dictionaries/countries/" + quote("Timor-Leste") + "/")

    assert resp.status_code == 200
    assert resp.json()["alpha3"] == "TLS"


def test_currency_detail(api_client):
    resp = api_client.get(reverse("currencies-detail", kwargs={"key": "AFN"}))

    assert resp.status_code == 200
    assert resp.json() == {"code": "AFN", "name": "Afghan afghani", "numeric": "971", "minor_unit": 2}


def test_currency_detail_without_numeric_code(api_client):
    resp = api_client.get(reverse("currencies-detail", kwargs={"key": "XFU"}))

    assert resp.status_code == 200
    assert resp.json()["numeric"] is None


def test_language_detail(api_client):
    resp = api_client.get(reverse("languages-detail", kwargs={"key": "swa"}))

    assert resp.status_code == 200
    assert resp.json()["name"] == "Swahili"


def test_detail_unknown_key_returns_404(api_client):
    for name in ("countries-detail", "currencies-detail", "languages-detail"):
        resp = api_client.get(reverse(name, kwargs={"key": "ZZZZZZ"}))

        assert resp.status_code == 404, name
        assert "not found" in resp.json()["detail"]


def test_standards_list(api_client):
    resp = api_client.get(reverse("standards-list"))

    assert resp.status_code == 200
    data = {item["number"]: item for item in resp.json()}
    assert data[3166]["name"] == "ISO 3166"
    assert data[3166]["count"] == 249
    assert data[4217]["count"] == 183
    assert data[639]["count"] == 184
    assert data[639]["wiki"].startswith("https://")


def test_dictionaries_are_read_only(api_client):
    resp = api_client.post(reverse("countries-list"), data={}, content_type="application/json")

    assert resp.status_code == 405
