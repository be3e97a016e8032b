import pytest


@pytest.fixture
def app_config():
    from django.apps import apps

    return apps.get_app_config("dictionaries")


def test_defaults_are_lazy(settings):
    from config.dictionaries.apps import dictionaries_settings

    del settings.ISO_DICTIONARIES

    assert dictionaries_settings() == {"EAGER_LOAD": False, "VERIFY_REFERENCES": False}


def test_ready_eager_load(settings, monkeypatch, app_config):
    from config.dictionaries.logic import consistency

    calls = []
    monkeypatch.setattr(consistency, "load_all", lambda: calls.append("load"))
    monkeypatch.setattr(consistency, "assert_consistent", lambda: calls.append("verify"))
    settings.ISO_DICTIONARIES = {"EAGER_LOAD": True}

    app_config.ready()

    assert calls == ["load"]


def test_ready_verify_references(settings, monkeypatch, app_config):
    from config.dictionaries.logic import consistency

    calls = []
    monkeypatch.setattr(consistency, "load_all", lambda: calls.append("load"))
    monkeypatch.setattr(consistency, "assert_consistent", lambda: calls.append("verify"))
    settings.ISO_DICTIONARIES = {"VERIFY_REFERENCES": True}

    app_config.ready()

    assert calls == ["verify"]


def test_ready_does_nothing_by_default(settings, monkeypatch, app_config):
    from config.dictionaries.logic import consistency

    calls = []
    monkeypatch.setattr(consistency, "load_all", lambda: calls.append("load"))
    monkeypatch.setattr(consistency, "assert_consistent", lambda: calls.append("verify"))
    settings.ISO_DICTIONARIES = {}

    app_config.ready()

    assert calls == []
