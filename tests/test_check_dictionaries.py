from io import StringIO

import pytest
from django.core.management import CommandError, call_command


def test_check_dictionaries_reports_sizes_and_success():
    out = StringIO()

    call_command("check_dictionaries", stdout=out)

    text = out.getvalue()
    assert "ISO 3166: 249 records" in text
    assert "ISO 4217: 183 records" in text
    assert "ISO 639: 184 records" in text
    assert "consistent" in text


def test_check_dictionaries_fails_on_broken_reference(monkeypatch):
    from config.dictionaries.management.commands import check_dictionaries

    monkeypatch.setattr(check_dictionaries, "find_problems", lambda: ["XXX: unknown currency 'QQQ'"])
    err = StringIO()

    with pytest.raises(CommandError):
        call_command("check_dictionaries", stdout=StringIO(), stderr=err)

    assert "QQQ" in err.getvalue()


def test_consistency_check_is_clean():
    from config.dictionaries.logic.consistency import assert_consistent, find_problems

    assert find_problems() == []
    assert_consistent()


def test_assert_consistent_raises_on_problems(monkeypatch):
    from config.dictionaries.exceptions import DataConsistencyError
    from config.dictionaries.logic import consistency

    monkeypatch.setattr(consistency, "find_problems", lambda: ["XXX: unknown language 'zz'"])

    with pytest.raises(DataConsistencyError):
        consistency.assert_consistent()
