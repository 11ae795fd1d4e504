from __future__ import annotations

import types

import pytest
import requests
from typer.testing import CliRunner

import lyric_finder.cli as cli
from lyric_finder.client import LyricClient
from tests.mocks.transport_mock import SpySession, lyrics_doc, make_response

runner = CliRunner()


@pytest.fixture
def use_session(monkeypatch):
    def _install(session: SpySession) -> None:
        factory = types.SimpleNamespace(create=lambda **kw: LyricClient.create_from(session, **kw))
        monkeypatch.setattr(cli, "LyricClient", factory)

    monkeypatch.delenv("LYRIC_FINDER_BASE_URL", raising=False)
    monkeypatch.delenv("LYRIC_FINDER_TIMEOUT", raising=False)
    return _install


def test_lookup_prints_lyrics(use_session):
    use_session(SpySession(make_response(200, lyrics_doc("first", "second"))))

    result = runner.invoke(cli.app, ["lookup", "shape of you"])

    assert result.exit_code == 0
    assert result.stdout == "first\nsecond\n"


def test_lookup_not_found_exit_1(use_session):
    use_session(SpySession(make_response(404, {})))

    result = runner.invoke(cli.app, ["lookup", "nope"])

    assert result.exit_code == 1
    assert "No lyrics found for nope" in result.output


def test_lookup_transport_error_exit_2(use_session):
    use_session(SpySession(error=requests.ConnectionError("refused")))

    result = runner.invoke(cli.app, ["lookup", "x"])

    assert result.exit_code == 2
    assert "Error:" in result.output


def test_lookup_timeout_option_reaches_transport(use_session):
    session = SpySession(make_response(200, lyrics_doc()))
    use_session(session)

    result = runner.invoke(cli.app, ["lookup", "x", "--timeout", "4"])

    assert result.exit_code == 0
    assert session.calls[0][1] == 4.0


def test_lookup_timeout_option_overrides_env(use_session, monkeypatch):
    session = SpySession(make_response(200, lyrics_doc()))
    use_session(session)
    monkeypatch.setenv("LYRIC_FINDER_TIMEOUT", "9")

    result = runner.invoke(cli.app, ["lookup", "x", "--timeout", "2"])

    assert result.exit_code == 0
    assert session.calls[0][1] == 2.0


@pytest.mark.parametrize("value", ["-1", "abc"])
def test_bad_timeout_env_is_usage_error(use_session, monkeypatch, value):
    session = SpySession(make_response(200, lyrics_doc("never")))
    use_session(session)
    monkeypatch.setenv("LYRIC_FINDER_TIMEOUT", value)

    result = runner.invoke(cli.app, ["lookup", "x"])

    assert result.exit_code == 2
    assert "LYRIC_FINDER_TIMEOUT" in result.output
    assert session.calls == []


@pytest.mark.parametrize("value", ["0", "-1"])
def test_non_positive_timeout_option_is_usage_error(use_session, value):
    session = SpySession(make_response(200, lyrics_doc("never")))
    use_session(session)

    result = runner.invoke(cli.app, ["lookup", "x", "--timeout", value])

    assert result.exit_code == 2
    assert "timeout must be positive" in result.output
    assert session.calls == []
