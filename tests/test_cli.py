import json

import httpx
import pytest

from tracelink import cli


@pytest.fixture()
def env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("TRACELINK_ACCESS_TOKEN", "cli-token")
    return monkeypatch


def route_to(monkeypatch, handler):
    real_client = httpx.Client
    monkeypatch.setattr(httpx, "Client", lambda **kwargs: real_client(transport=httpx.MockTransport(handler)))


def test_prints_envelope(env, capsys):
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={"status": "ok", "code": 200, "message": "OK", "count": 1})

    route_to(env, handler)
    code = cli.main(["/user/list", "--body", '{"order": {"page": 0}}', "--idempotency-key", "k1", "--charset", "CP850"])

    assert code == 0
    assert json.loads(capsys.readouterr().out)["count"] == 1
    request = seen[0]
    assert str(request.url) == "https://tracelink.app/rest/user/list"
    assert request.headers["x-access-token"] == "cli-token"
    assert request.headers["idempotency-key"] == "k1"
    assert request.headers["x-charset"] == "CP850"
    assert json.loads(request.content) == {"order": {"page": 0}}


def test_api_error_exit_code(env, capsys):
    route_to(env, lambda request: httpx.Response(200, json={"status": "error", "code": 404, "message": "Not found"}))
    code = cli.main(["/tracelink/order/99"])
    assert code == 1
    assert json.loads(capsys.readouterr().err.strip().splitlines()[-1]) == {"error": "Not found", "code": 404}


def test_invalid_body(env, capsys):
    assert cli.main(["/company", "--body", "{not json"]) == 2
    assert cli.main(["/company", "--body", "[1, 2]"]) == 2


def test_missing_token(monkeypatch, tmp_path, capsys):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("TRACELINK_ACCESS_TOKEN", raising=False)
    assert cli.main(["/company"]) == 2
    assert "access_token is required" in capsys.readouterr().err
