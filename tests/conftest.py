"""Root conftest — shared fixtures for the client tests.

Invariants:
    - No test touches the network: every client runs on httpx.MockTransport
    - Settings are built explicitly, never from the developer's environment
    - Recorder keeps every request it saw, in order
"""

import json

import httpx
import pytest

from listmonk import ClientSettings, ListmonkClient

BASE_URL = "https://lists.example.com/listmonk"


class Recorder:
    """MockTransport handler that records requests and replays queued responses."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self._responses: list[httpx.Response] = []

    def reply(self, status_code=200, *, json_body=None, text=None, content=None, headers=None):
        if json_body is not None:
            content = json.dumps(json_body).encode()
            headers = {"Content-Type": "application/json", **(headers or {})}
        elif text is not None:
            content = text.encode()
            headers = {"Content-Type": "text/html; charset=utf-8", **(headers or {})}
        self._responses.append(
            httpx.Response(status_code, content=content or b"", headers=headers)
        )
        return self

    def data(self, payload, status_code=200):
        return self.reply(status_code, json_body={"data": payload})

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self._responses:
            return httpx.Response(200, json={"data": True})
        return self._responses.pop(0)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self):
        return json.loads(self.last.content)


@pytest.fixture
def settings():
    return ClientSettings(
        base_url=BASE_URL,
        api_user="api",
        api_token="s3cret",
        http_timeout_seconds=5,
        _env_file=None,
    )


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def http_client(recorder):
    return httpx.AsyncClient(transport=httpx.MockTransport(recorder))


@pytest.fixture
def client(settings, http_client):
    return ListmonkClient(settings, http_client=http_client)

