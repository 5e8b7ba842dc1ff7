import json

import httpx
import pytest
from click.testing import CliRunner

import pls.cli.main as cli
import pls.config
from pls.client import Plexpy

from payloads import make_session, wrap

SERVER = "http://tautulli.local:8181"
KEY = "0123456789abcdef"


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    monkeypatch.setattr(pls.config, "CONFIG_FILE", tmp_path / "pls.toml")
    monkeypatch.delenv("PLEXPY_SERVER", raising=False)
    monkeypatch.delenv("PLEXPY_KEY", raising=False)


@pytest.fixture
def serve(monkeypatch):
    """Answer every request with `body`; returns the list of seen requests."""
    seen = []

    def _serve(body, status=200):
        def handler(request):
            seen.append(request)
            return httpx.Response(status, json=body)

        monkeypatch.setattr(cli, "Plexpy",
                            lambda server, key: Plexpy(server, key, transport=httpx.MockTransport(handler)))
        return seen

    return _serve


def _run(*args):
    return CliRunner().invoke(cli.main, ["-s", SERVER, "-k", KEY, "--color", "never", *args])


def test_activity(serve, activity_body):
    seen = serve(activity_body)
    result = _run()
    assert result.exit_code == 0, result.output
    assert seen[0].url.params["cmd"] == "get_activity"
    assert "Daft Punk - Around the World" in result.output
    assert "    User: alice" in result.output
    assert "    Container: mkv -> mpegts" in result.output


def test_history_default_length(serve, history_body):
    seen = serve(history_body)
    result = _run("-l")
    assert result.exit_code == 0, result.output
    assert seen[0].url.params["cmd"] == "get_history"
    assert seen[0].url.params["length"] == "25"
    lines = result.output.splitlines()
    assert "Media" in lines[0]
    assert lines[1].startswith("Arrival")
    assert lines[1].endswith("1h56m0s")


def test_history_explicit_length(serve, history_body):
    seen = serve(history_body)
    result = _run("--list", "5")
    assert result.exit_code == 0, result.output
    assert seen[0].url.params["length"] == "5"


def test_history_length_must_be_positive(serve, history_body):
    serve(history_body)
    result = _run("-l", "0")
    assert result.exit_code == 2


def test_api_error_exits_1(serve):
    serve(wrap({}, message="Invalid apikey", result="success"))
    result = _run()
    assert result.exit_code == 1
    assert "error: Invalid apikey" in result.output


def test_empty_response_exits_0(serve):
    serve(wrap({}, message=None))
    result = _run()
    assert result.exit_code == 0
    assert result.output == ""


def test_no_sessions_prints_nothing(serve):
    serve(wrap({"sessions": []}))
    result = _run()
    assert result.exit_code == 0
    assert result.output == ""


def test_http_failure_exits_1(serve):
    serve({"error": "nope"}, status=502)
    result = _run()
    assert result.exit_code == 1
    assert "error: HTTP 502" in result.output


def test_unknown_payload_exits_1(serve):
    serve(wrap({"something": "else"}))
    result = _run()
    assert result.exit_code == 1
    assert "error: unrecognized response payload" in result.output


def test_missing_configuration_exits_1():
    result = CliRunner().invoke(cli.main, [])
    assert result.exit_code == 1
    assert "PLEXPY_SERVER" in result.output


def test_env_configuration(serve, activity_body, monkeypatch):
    seen = serve(activity_body)
    monkeypatch.setenv("PLEXPY_SERVER", SERVER)
    monkeypatch.setenv("PLEXPY_KEY", "env-key-123")
    result = CliRunner().invoke(cli.main, [])
    assert result.exit_code == 0, result.output
    assert seen[0].url.params["apikey"] == "env-key-123"


def test_json_output(serve):
    serve(wrap({"sessions": [make_session()], "stream_count": "1"}))
    result = _run("--json")
    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert data["stream_count"] == "1"
    assert data["sessions"][0]["secure"] == 1
    assert data["sessions"][0]["user"] == "alice"


def test_version():
    result = CliRunner().invoke(cli.main, ["--version"])
    assert result.exit_code == 0
    assert "0.1.0" in result.output


def test_json_output_keeps_non_ascii_titles(serve):
    serve(wrap({"sessions": [make_session(full_title="千と千尋の神隠し")]}))
    result = _run("--json")
    assert result.exit_code == 0, result.output
    assert "千と千尋の神隠し" in result.output
    assert "\\u" not in result.output
