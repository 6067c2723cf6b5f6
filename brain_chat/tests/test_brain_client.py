import asyncio
import json

import httpx
import pytest

from brain_chat.domain.exceptions import (
    ApiError,
    NetworkError,
    RateLimitError,
    ResponseDecodeError,
    TransportError,
)
from brain_chat.domain.intents import Command, SemanticSearch, ThreadLookup
from brain_chat.providers.brain_client import BrainApiClient


class SettingsStub:
    brain_api_url = "https://brain.example.com/"
    http_timeout = 1.0


class Resp:
    def __init__(self, status_code=200, payload=None, body=None):
        self.status_code = status_code
        self._payload = payload
        self.text = body if body is not None else json.dumps(payload)

    def json(self):
        return json.loads(self.text)


def install_client(monkeypatch, resp=None, exc=None):
    calls = []

    class Client:
        def __init__(self, *a, **kw):
            calls.append({"init": kw})

        async def __aenter__(self):
            return self

        async def __aexit__(self, *a):
            return False

        async def request(self, method, url, **kw):
            calls.append({"method": method, "url": url, **kw})
            if exc is not None:
                raise exc
            return resp

    monkeypatch.setattr("httpx.AsyncClient", Client)
    return calls


def _requests(calls):
    return [c for c in calls if "method" in c]


def test_dispatch_priority_is_bare_get(monkeypatch):
    calls = install_client(monkeypatch, resp=Resp(payload={"allThreads": []}))
    data = asyncio.run(BrainApiClient(SettingsStub()).dispatch(Command("priority")))
    assert data == {"allThreads": []}
    (req,) = _requests(calls)
    assert req["method"] == "GET"
    assert req["url"] == "https://brain.example.com/priority"
    assert "json" not in req and "headers" not in req
    assert calls[0]["init"]["timeout"] == 1.0


def test_dispatch_search_posts_json_body(monkeypatch):
    calls = install_client(monkeypatch, resp=Resp(payload={"results": []}))
    asyncio.run(BrainApiClient(SettingsStub()).dispatch(SemanticSearch("what did I ship", 10)))
    (req,) = _requests(calls)
    assert req["method"] == "POST"
    assert req["url"].endswith("/search")
    assert req["json"] == {"query": "what did I ship", "limit": 10}
    assert req["headers"]["Content-Type"] == "application/json"


def test_dispatch_status_and_thread(monkeypatch):
    calls = install_client(monkeypatch, resp=Resp(payload={"message": "ok"}))
    client = BrainApiClient(SettingsStub())
    asyncio.run(client.dispatch(Command("status")))
    asyncio.run(client.dispatch(ThreadLookup("abc")))
    status_req, thread_req = _requests(calls)
    assert status_req["json"] == {"query": "project status current active"}
    assert thread_req["url"].endswith("/thread")
    assert thread_req["json"] == {"thread": "abc"}


def test_network_error(monkeypatch):
    install_client(monkeypatch, exc=httpx.ConnectError("connection refused"))
    with pytest.raises(NetworkError) as exc_info:
        asyncio.run(BrainApiClient(SettingsStub()).fetch_health())
    assert exc_info.value.code == "NETWORK_ERROR"
    assert exc_info.value.extra["endpoint"] == "/health"


def test_non_2xx_status(monkeypatch):
    install_client(monkeypatch, resp=Resp(status_code=502, body="bad gateway"))
    with pytest.raises(ApiError) as exc_info:
        asyncio.run(BrainApiClient(SettingsStub()).dispatch(Command("health")))
    assert exc_info.value.http_status == 502
    assert exc_info.value.message == "bad gateway"


def test_rate_limit_is_transport_error(monkeypatch):
    install_client(monkeypatch, resp=Resp(status_code=429, body=""))
    with pytest.raises(RateLimitError):
        asyncio.run(BrainApiClient(SettingsStub()).fetch_priorities())
    assert issubclass(RateLimitError, TransportError)


def test_undecodable_body(monkeypatch):
    install_client(monkeypatch, resp=Resp(status_code=200, body="<html>oops</html>"))
    with pytest.raises(ResponseDecodeError):
        asyncio.run(BrainApiClient(SettingsStub()).dispatch(SemanticSearch("x")))
