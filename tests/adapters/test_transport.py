"""Transport tests — URL join, auth, bodies, multipart and failure mapping.

Invariants:
    - The base URL path prefix is preserved when joining endpoint paths
    - Every request carries `Authorization: token <user>:<token>`
    - JSON bodies are only sent for POST/PUT, with a JSON content type
    - Parameter objects on GET/DELETE are sent as query pairs, never dropped
    - Network failures become TransportError; timeouts RequestTimeoutError
    - Cancellation propagates as asyncio.CancelledError, never wrapped
    - Encoding failures raise before any request is issued
"""

import asyncio
import io
import json
import math

import httpx
import pytest

from listmonk import ClientSettings
from listmonk.adapters.transport import ApiRequest, Transport, encode_json_body, join_url
from listmonk.core.domain.params import (
    CreateSubscriberParams,
    GetSubscribersParams,
    IDsBody,
    IDsQuery,
)
from listmonk.core.errors import (
    BodyEncodingError,
    InvalidURLError,
    QueryEncodingError,
    RequestTimeoutError,
    TransportError,
)


def _transport(settings, handler):
    http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return Transport(settings, http)


# -- join_url ------------------------------------------------------------------


def test_join_keeps_base_path_prefix():
    assert (
        join_url("https://lists.example.com/listmonk", "/api/subscribers")
        == "https://lists.example.com/listmonk/api/subscribers"
    )


def test_join_tolerates_trailing_slash():
    assert join_url("http://localhost:9000/", "/api/lists") == "http://localhost:9000/api/lists"


@pytest.mark.parametrize("base", ["lists.example.com", "ftp://lists.example.com", "/relative"])
def test_join_rejects_non_http_base(base):
    with pytest.raises(InvalidURLError):
        join_url(base, "/api/lists")


# -- send ----------------------------------------------------------------------


@pytest.mark.asyncio
async def test_get_sends_auth_and_query_without_body(settings, recorder):
    transport = _transport(settings, recorder)

    response = await transport.send(
        ApiRequest("GET", "/api/subscribers", query=GetSubscribersParams(list_ids=[1, 2], page=1))
    )

    assert response.status_code == 200
    sent = recorder.last
    assert sent.method == "GET"
    assert sent.url.path == "/listmonk/api/subscribers"
    assert sent.url.params.get_list("list_id") == ["1", "2"]
    assert sent.url.params["page"] == "1"
    assert sent.headers["Authorization"] == "token api:s3cret"
    assert sent.content == b""
    assert "Content-Type" not in sent.headers


@pytest.mark.asyncio
async def test_get_body_becomes_query(settings, recorder):
    """A parameter object on a GET is sent as query pairs, after the query model."""
    transport = _transport(settings, recorder)

    await transport.send(
        ApiRequest("GET", "/api/lists", query={"page": 2}, body={"tag": ["a", "b"], "all": None})
    )

    sent = recorder.last
    assert sent.content == b""
    assert "Content-Type" not in sent.headers
    assert list(sent.url.params.multi_items()) == [("page", "2"), ("tag", "a"), ("tag", "b")]


@pytest.mark.asyncio
@pytest.mark.parametrize("method", ["POST", "PUT"])
async def test_post_and_put_send_json(settings, recorder, method):
    transport = _transport(settings, recorder)

    await transport.send(ApiRequest(method, "/api/subscribers/blocklist", body=IDsBody(ids=[3, 4])))

    sent = recorder.last
    assert sent.method == method
    assert sent.headers["Content-Type"] == "application/json"
    assert sent.headers["Authorization"] == "token api:s3cret"
    assert json.loads(sent.content) == {"ids": [3, 4]}


@pytest.mark.asyncio
async def test_delete_body_becomes_query(settings, recorder):
    transport = _transport(settings, recorder)

    await transport.send(ApiRequest("DELETE", "/api/bounces", body=IDsQuery(ids=[1, 2])))

    sent = recorder.last
    assert sent.method == "DELETE"
    assert sent.content == b""
    assert sent.url.params.get_list("id") == ["1", "2"]


@pytest.mark.asyncio
async def test_unencodable_delete_body_raises_before_request(settings, recorder):
    """A body that cannot become query pairs fails loudly instead of being dropped."""
    transport = _transport(settings, recorder)

    with pytest.raises(QueryEncodingError):
        await transport.send(ApiRequest("DELETE", "/api/bounces", body=[1, 2]))
    assert recorder.requests == []


@pytest.mark.asyncio
async def test_invalid_base_url_raises_before_request(recorder):
    settings = ClientSettings(base_url="lists.example.com", api_user="u", api_token="t", _env_file=None)
    transport = _transport(settings, recorder)

    with pytest.raises(InvalidURLError):
        await transport.send(ApiRequest("GET", "/api/lists"))
    assert recorder.requests == []


@pytest.mark.asyncio
async def test_unencodable_body_raises_before_request(settings, recorder):
    transport = _transport(settings, recorder)

    with pytest.raises(BodyEncodingError):
        await transport.send(ApiRequest("POST", "/api/tx", body={"data": {"score": math.nan}}))
    with pytest.raises(BodyEncodingError):
        await transport.send(ApiRequest("POST", "/api/tx", body={"data": object()}))
    assert recorder.requests == []


@pytest.mark.asyncio
async def test_unencodable_query_raises_before_request(settings, recorder):
    transport = _transport(settings, recorder)

    with pytest.raises(QueryEncodingError):
        await transport.send(ApiRequest("GET", "/api/subscribers", query={"filter": {"a": 1}}))
    assert recorder.requests == []


@pytest.mark.asyncio
async def test_network_failure_is_transport_error(settings):
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    transport = _transport(settings, handler)

    with pytest.raises(TransportError) as excinfo:
        await transport.send(ApiRequest("GET", "/api/lists"))
    assert not isinstance(excinfo.value, RequestTimeoutError)
    assert isinstance(excinfo.value.__cause__, httpx.ConnectError)


@pytest.mark.asyncio
async def test_timeout_is_request_timeout_error(settings):
    def handler(request):
        raise httpx.ReadTimeout("read timed out", request=request)

    transport = _transport(settings, handler)

    with pytest.raises(RequestTimeoutError):
        await transport.send(ApiRequest("GET", "/api/lists"))


@pytest.mark.asyncio
async def test_cancellation_propagates_unwrapped(settings):
    started = asyncio.Event()
    release = asyncio.Event()

    async def handler(request):
        started.set()
        await release.wait()
        return httpx.Response(200, json={"data": True})

    transport = _transport(settings, handler)
    task = asyncio.create_task(transport.send(ApiRequest("GET", "/api/lists")))
    await started.wait()
    task.cancel()

    with pytest.raises(asyncio.CancelledError):
        await task


@pytest.mark.asyncio
async def test_per_call_timeout_reaches_request(settings, recorder):
    transport = _transport(settings, recorder)

    await transport.send(ApiRequest("GET", "/api/lists", timeout=1.5))

    assert recorder.last.extensions["timeout"]["read"] == 1.5


# -- multipart -----------------------------------------------------------------


@pytest.mark.asyncio
async def test_multipart_has_file_and_text_parts(settings, recorder):
    transport = _transport(settings, recorder)
    csv = io.BytesIO(b"email,name\na@b.com,Ada\n")
    csv.name = "/tmp/subscribers.csv"

    await transport.send_multipart(
        "/api/import/subscribers",
        fields={"params": '{"mode":"subscribe"}'},
        files={"file": csv},
    )

    sent = recorder.last
    assert sent.method == "POST"
    assert sent.url.path == "/listmonk/api/import/subscribers"
    assert sent.headers["Authorization"] == "token api:s3cret"
    assert sent.headers["Content-Type"].startswith("multipart/form-data; boundary=")
    body = sent.content
    assert b'name="params"' in body
    assert b'{"mode":"subscribe"}' in body
    assert b'name="file"; filename="subscribers.csv"' in body
    assert b"a@b.com,Ada" in body


@pytest.mark.asyncio
async def test_multipart_bytes_fall_back_to_field_name(settings, recorder):
    transport = _transport(settings, recorder)

    await transport.send_multipart("/api/media", fields={}, files={"file": b"\x89PNG"})

    assert b'name="file"; filename="file"' in recorder.last.content


# -- encode_json_body ----------------------------------------------------------


def test_json_body_uses_aliases_and_drops_none():
    body = encode_json_body(
        CreateSubscriberParams(email="a@b.com", name="Ada", attributes={"city": "Pune"})
    )
    assert json.loads(body) == {
        "email": "a@b.com",
        "name": "Ada",
        "status": "enabled",
        "lists": [],
        "attribs": {"city": "Pune"},
        "preconfirm_subscriptions": False,
    }
