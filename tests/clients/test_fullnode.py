from __future__ import annotations

from unittest.mock import MagicMock

import pytest
import requests

from defi_positions.clients import FullnodeClient


def _response(payload, headers=None, status_code=200) -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = payload
    response.headers = headers or {}
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(response=response)
    return response


@pytest.fixture(autouse=True)
def no_sleep(monkeypatch):
    monkeypatch.setattr("time.sleep", lambda seconds: None)


@pytest.fixture
def client() -> FullnodeClient:
    client = FullnodeClient("https://node.example/v1/", max_retries=3, page_limit=2)
    client.session = MagicMock()
    return client


def test_follows_cursor_until_exhausted(client):
    client.session.get.side_effect = [
        _response(
            [{"type": "0x1::a::A", "data": {}}, {"type": "0x1::b::B", "data": {}}],
            headers={"x-aptos-cursor": "0xcursor"},
        ),
        _response([{"type": "0x1::c::C", "data": {"x": "1"}}]),
    ]

    resources = client.get_account_resources("0xabc")

    assert [r.resource_type for r in resources] == ["0x1::a::A", "0x1::b::B", "0x1::c::C"]
    first, second = client.session.get.call_args_list
    assert first.args == ("https://node.example/v1/accounts/0xabc/resources",)
    assert first.kwargs["params"] == {"limit": 2}
    assert second.kwargs["params"] == {"limit": 2, "start": "0xcursor"}
    assert first.kwargs["timeout"] == 10.0


def test_retries_transient_failures(client):
    client.session.get.side_effect = [
        requests.ConnectionError("reset"),
        _response(None, status_code=503),
        _response([]),
    ]

    assert client.get_account_resources("0xabc") == []
    assert client.session.get.call_count == 3


def test_gives_up_on_client_errors(client):
    client.session.get.return_value = _response(None, status_code=404)

    with pytest.raises(requests.HTTPError):
        client.get_account_resources("0xabc")
    assert client.session.get.call_count == 1


def test_stops_after_max_retries(client):
    client.session.get.return_value = _response(None, status_code=429)

    with pytest.raises(requests.HTTPError):
        client.get_account_resources("0xabc")
    assert client.session.get.call_count == 3


def test_rejects_non_list_payload(client):
    client.session.get.return_value = _response({"error": "nope"})

    with pytest.raises(ValueError, match="Unexpected resources payload"):
        client.get_account_resources("0xabc")


def test_api_key_is_sent_as_bearer_token():
    client = FullnodeClient("https://node.example/v1", api_key="k3y")

    assert client.session.headers["Authorization"] == "Bearer k3y"
    assert "Authorization" not in FullnodeClient("https://node.example/v1").session.headers
