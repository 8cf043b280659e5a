import importlib
import json

import pytest
import requests
import responses

from fastly_client.client import FastlyClient, RequestOptions
from fastly_client.exceptions import FastlyHTTPError
from fastly_client.models import RequestInput
from fastly_client.testutils import API_KEY, API_ROOT, form_body


@responses.activate
def test_default_headers(client) -> None:
    responses.add(responses.GET, API_ROOT + "/stats/regions", json={})

    client.get("/stats/regions")
    headers = responses.calls[0].request.headers
    assert headers["Fastly-Key"] == API_KEY
    assert headers["Accept"] == "application/json"
    assert headers["User-Agent"].startswith("fastly-client/")


@responses.activate
def test_no_key_header_without_key() -> None:
    responses.add(responses.GET, API_ROOT + "/stats/regions", json={})

    FastlyClient("", API_ROOT).get("stats/regions")
    assert "Fastly-Key" not in responses.calls[0].request.headers


@responses.activate
def test_api_root_trailing_slash() -> None:
    responses.add(responses.GET, "http://localhost:8080/stats", json={})

    FastlyClient(API_KEY, "http://localhost:8080/").get("/stats")
    assert responses.calls[0].request.url == "http://localhost:8080/stats"


@responses.activate
def test_request_options(client) -> None:
    responses.add(responses.POST, API_ROOT + "/service/abc/purge", json={})

    client.post(
        "/service/abc/purge",
        RequestOptions(
            headers={"Surrogate-Key": "a"},
            params={"x": "1"},
            parallel=True,
            timeout=2.5,
        ),
    )
    request = responses.calls[0].request
    assert request.url == API_ROOT + "/service/abc/purge?x=1"
    assert request.headers["Surrogate-Key"] == "a"
    assert request.req_kwargs["timeout"] == 2.5


@responses.activate
def test_client_default_timeout() -> None:
    responses.add(responses.GET, API_ROOT + "/stats", json={})

    FastlyClient(API_KEY, API_ROOT, timeout=10.0).get("/stats")
    assert responses.calls[0].request.req_kwargs["timeout"] == 10.0


def test_request_options_for_input() -> None:
    options = RequestOptions.for_input(RequestInput(timeout=4.0))
    assert options.timeout == 4.0
    assert options.headers == {}
    assert options.params == {}
    assert options.parallel is False


class _Form(RequestInput):
    pass


@responses.activate
def test_put_form_empty(client) -> None:
    responses.add(responses.PUT, API_ROOT + "/thing", json={})
    client.put_form("/thing", _Form())
    assert form_body(responses.calls[0].request) == {}


@responses.activate
def test_http_error_message(client) -> None:
    responses.add(
        responses.GET,
        API_ROOT + "/service/abc/version/1/condition/nope",
        json={"msg": "Record not found", "detail": "Couldn't find Condition"},
        status=404,
    )
    with pytest.raises(FastlyHTTPError) as excinfo:
        client.get("/service/abc/version/1/condition/nope")
    error = excinfo.value
    assert error.status_code == 404
    assert error.method == "GET"
    assert error.url.endswith("/condition/nope")
    assert error.is_not_found
    assert "Record not found: Couldn't find Condition" in str(error)


@responses.activate
def test_http_error_plain_text_body(client) -> None:
    responses.add(
        responses.POST, API_ROOT + "/purge/x", body="Bad Gateway", status=502
    )
    with pytest.raises(FastlyHTTPError) as excinfo:
        client.post("/purge/x")
    assert excinfo.value.errors == [{"title": None, "detail": "Bad Gateway"}]
    assert not excinfo.value.is_not_found


@responses.activate
def test_transport_errors_propagate(client) -> None:
    responses.add(
        responses.GET,
        API_ROOT + "/stats",
        body=requests.ConnectionError("connection refused"),
    )
    with pytest.raises(requests.ConnectionError):
        client.get("/stats")


@responses.activate
def test_rate_limit_headers(client) -> None:
    responses.add(
        responses.PUT,
        API_ROOT + "/thing",
        json={},
        headers={
            "Fastly-RateLimit-Remaining": "999",
            "Fastly-RateLimit-Reset": "1452032384",
        },
    )
    responses.add(
        responses.GET,
        API_ROOT + "/thing",
        json={},
        headers={"Fastly-RateLimit-Remaining": "1"},
    )

    assert client.rate_limit_remaining is None
    client.put("/thing")
    assert client.rate_limit_remaining == 999
    assert client.rate_limit_reset == 1452032384

    # Reads do not count against the limit
    client.get("/thing")
    assert client.rate_limit_remaining == 999


def test_client_uses_profile_defaults(monkeypatch) -> None:
    from fastly_client import config

    monkeypatch.setattr(config.ProductionConfig, "API_KEY", "env-key")
    monkeypatch.setattr(
        config.ProductionConfig, "API_URL", "https://fastly.example.com"
    )
    monkeypatch.delenv("FASTLY_CLIENT_PROFILE", raising=False)

    client = FastlyClient()
    assert client.api_key == "env-key"
    assert client.api_root == "https://fastly.example.com"


def test_client_reads_environment(monkeypatch) -> None:
    from fastly_client import config

    monkeypatch.setenv("FASTLY_API_KEY", "env-key")
    monkeypatch.setenv("FASTLY_API_URL", "https://fastly.example.com/")
    monkeypatch.setenv("FASTLY_TIMEOUT", "7.5")
    monkeypatch.delenv("FASTLY_CLIENT_PROFILE", raising=False)
    try:
        importlib.reload(config)
        client = FastlyClient()
        assert client.api_key == "env-key"
        assert client.api_root == "https://fastly.example.com"
        assert client.timeout == 7.5
    finally:
        monkeypatch.undo()
        importlib.reload(config)


@pytest.mark.parametrize("parallel", [False, True])
@responses.activate
def test_mutation_lock(client, parallel) -> None:
    lock_held = []

    def callback(request):
        lock_held.append(client._update_lock.locked())
        return (200, {}, json.dumps({}))

    responses.add_callback(
        responses.PUT, API_ROOT + "/thing", callback=callback
    )
    responses.add_callback(
        responses.GET, API_ROOT + "/thing", callback=callback
    )

    client.put("/thing", RequestOptions(parallel=parallel))
    client.get("/thing")
    # Reads never take the lock
    assert lock_held == [not parallel, False]
    assert not client._update_lock.locked()
