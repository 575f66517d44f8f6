"""CLI tests."""

from __future__ import annotations

import json

import httpx
import pytest

from helpers import make_client, plan_body
from tripclient.cli import main
from tripclient.services import RoutingService


def _service(handler) -> RoutingService:
    return RoutingService(make_client(handler))


def _no_network(request: httpx.Request) -> httpx.Response:
    raise AssertionError("unexpected network call")


def test_check_accepts_warsaw_trip(capsys):
    code = main(["check", "52.23,21.01", "52.40,20.97"])
    out = json.loads(capsys.readouterr().out)
    assert code == 0
    assert out["ok"] is True
    assert 18.0 < out["distance_km"] < 20.5
    assert out["issues"] == []


def test_check_rejects_krakow_trip(capsys):
    code = main(["check", "52.23,21.01", "50.06,19.94"])
    out = json.loads(capsys.readouterr().out)
    assert code == 1
    assert out["issues"] == ["Distance too large for multimodal planning (max 50km)."]


def test_plan_prints_routes(capsys):
    seen: list[dict] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(json.loads(request.content))
        return httpx.Response(200, json=plan_body())

    code = main(
        ["plan", "52.23,21.01", "52.40,20.97", "--mode", "cheapest", "--no-scooters"],
        service=_service(handler),
    )
    out = json.loads(capsys.readouterr().out)
    assert code == 0
    assert out["ok"] is True
    assert out["data"]["routes"][0]["walkTime"] == 420
    assert out["data"]["routes"][0]["segments"][0]["from"]["name"] == "Centrum"
    assert seen[0]["preferences"]["mode"] == "cheapest"
    assert seen[0]["preferences"]["allowScooters"] is False


def test_plan_rejected_locally_never_calls_backend(capsys):
    code = main(["plan", "52.23,21.01", "50.06,19.94"], service=_service(_no_network))
    out = json.loads(capsys.readouterr().out)
    assert code == 1
    assert out["error"]["kind"] == "validation"


def test_plan_reports_server_error(capsys):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503)

    code = main(["plan", "52.23,21.01", "52.40,20.97"], service=_service(handler))
    out = json.loads(capsys.readouterr().out)
    assert code == 1
    assert out["error"] == {"kind": "server_error", "message": "Server error. Please try again later."}


def test_health_exit_codes(capsys):
    def down(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    assert main(["health"], service=_service(down)) == 1
    assert json.loads(capsys.readouterr().out)["healthy"] is False

    def up(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200)

    assert main(["health"], service=_service(up)) == 0


def test_modes_lists_capabilities(capsys):
    assert main(["modes"], service=_service(_no_network)) == 0
    out = json.loads(capsys.readouterr().out)
    assert [m["id"] for m in out] == ["walk", "transit", "scooter", "bike"]


@pytest.mark.parametrize("bad", ["52.23", "95,10", "a,b"])
def test_invalid_coordinate_is_usage_error(bad):
    with pytest.raises(SystemExit) as info:
        main(["check", bad, "52.40,20.97"])
    assert info.value.code == 2


def test_bad_configuration_is_reported(monkeypatch, capsys):
    monkeypatch.setenv("ROUTING_TIMEOUT_SECONDS", "soon")
    assert main(["health"]) == 2
    assert "ROUTING_TIMEOUT_SECONDS" in capsys.readouterr().err
