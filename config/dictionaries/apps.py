# config/dictionaries/apps.py
from django.apps import AppConfig
from django.conf import settings


DEFAULTS = {
    "EAGER_LOAD": False,
    "VERIFY_REFERENCES": False,
}


def dictionaries_settings() -> dict:
    return {**DEFAULTS, **getattr(settings, "ISO_DICTIONARIES", {})}


class DictionariesConfig(AppConfig):
    name = "config.dictionaries"
    label = "dictionaries"
    verbose_name = "ISO dictionaries"

    def ready(self):
        from config.dictionaries.logic.consistency import assert_consistent, load_all

        conf = dictionaries_settings()
        if conf["VERIFY_REFERENCES"]:
            assert_consistent()
        elif conf["EAGER_LOAD"]:
            load_all()
