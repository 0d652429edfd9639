import hashlib

import pytest
import requests
import requests_mock

from marvelapi import cli
from marvelapi.errors import ConfigError

BODY = b'{"code": 200, "data": {"count": 1}}'


@pytest.fixture
def keys(monkeypatch):
    monkeypatch.setenv("MARVEL_PUBLIC_KEY", "8bd96a0e83")
    monkeypatch.setenv("MARVEL_PRIVATE_KEY", "05b154e464")


def test_auth_prints_prefixes_and_hash(keys, capsys, monkeypatch):
    monkeypatch.setattr(cli.time, "time", lambda: 42)
    assert cli.main(["auth"]) == 0

    out = capsys.readouterr().out
    assert "PUBLIC KEY START: 8bd9..." in out
    assert "8bd96a0e83" not in out
    assert "05b154e464" not in out
    assert "ts: 42" in out
    assert hashlib.md5(b"4205b154e4648bd96a0e83").hexdigest() in out


def test_auth_without_keys_fails(capsys):
    assert cli.main(["auth"]) == 1
    assert "missing" in capsys.readouterr().out


def test_get_prints_body(keys, capsys):
    with requests_mock.Mocker() as m:
        m.get(requests_mock.ANY, content=BODY)
        code = cli.main(["get", "characters", "--id", "1011334", "--related", "comics",
                         "--filter", "limit=5", "--filter", "noVariants=true"])
        qs = m.last_request.url

    assert code == 0
    captured = capsys.readouterr()
    assert '"count": 1' in captured.out
    assert "HTTP 200" in captured.err
    assert "/characters/1011334/comics?" in qs
    assert "limit=5" in qs and "noVariants=true" in qs


def test_get_non_2xx_exits_nonzero(keys, capsys):
    with requests_mock.Mocker() as m:
        m.get(requests_mock.ANY, content=b"{}", status_code=409)
        assert cli.main(["get", "comics"]) == 1
    assert "HTTP 409" in capsys.readouterr().err


def test_get_transport_error(keys, capsys):
    with requests_mock.Mocker() as m:
        m.get(requests_mock.ANY, exc=requests.exceptions.ConnectionError("dns"))
        assert cli.main(["get", "events"]) == 1
    assert "failed" in capsys.readouterr().err


def test_get_unknown_filter_is_reported(keys, capsys):
    assert cli.main(["get", "series", "--filter", "bogus=1"]) == 1
    assert "no filter" in capsys.readouterr().err


def test_related_without_id_is_reported(keys, capsys):
    assert cli.main(["get", "series", "--related", "comics"]) == 1
    assert "need a resource id" in capsys.readouterr().err


def test_parse_filters_coerces_kinds():
    out = cli.parse_filters(
        "comics", None,
        ["issue_number=266", "hasDigitalIssue=no", "title=Uncanny X-Men", "characters=1,2"],
    )
    assert out == {
        "issue_number": 266,
        "has_digital_issue": False,
        "title": "Uncanny X-Men",
        "characters": "1,2",
    }


@pytest.mark.parametrize("raw", ["limit=five", "noVariants=maybe", "limit"])
def test_parse_filters_rejects_bad_values(raw):
    with pytest.raises(ConfigError):
        cli.parse_filters("comics", None, [raw])


def test_get_with_zero_timeout_env_is_reported(keys, capsys, monkeypatch):
    monkeypatch.setenv("MARVEL_TIMEOUT", "0")
    assert cli.main(["get", "comics"]) == 1
    assert "greater than zero" in capsys.readouterr().err


def test_get_with_negative_timeout_flag_is_reported(keys, capsys):
    assert cli.main(["get", "comics", "--timeout", "-1"]) == 1
    assert "greater than zero" in capsys.readouterr().err
