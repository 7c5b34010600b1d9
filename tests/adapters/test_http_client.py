import httpx
import pytest

from listmonk import ClientSettings
from listmonk.adapters.http_client import build_async_client


@pytest.mark.asyncio
async def test_default_client_headers_and_timeout():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={"data": True})

    settings = ClientSettings(user_agent="lm-tests/1.0", http_timeout_seconds=7, _env_file=None)
    async with build_async_client(settings, transport=httpx.MockTransport(handler)) as http:
        await http.get("https://lists.example.com/api/lists")

    sent = seen[0]
    assert sent.headers["User-Agent"] == "lm-tests/1.0"
    assert sent.headers["Accept"] == "application/json"
    assert "Authorization" not in sent.headers
    assert sent.extensions["timeout"]["read"] == 7
