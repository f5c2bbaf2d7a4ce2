import json

import httpx
import pytest

from airc_mcp.registry.client import RegistryClient
from airc_mcp.registry.exceptions import (
    AircError,
    RegistryConnectionError,
    RegistryResponseError,
    RegistryTimeoutError,
)
from airc_mcp.session import Session


def make_client(session, handler, base_url="https://registry.test"):
    return RegistryClient(
        session,
        base_url=base_url,
        transport=httpx.MockTransport(handler),
    )


@pytest.mark.asyncio
async def test_get_without_token_omits_authorization():
    seen = {}

    def handler(request):
        seen["request"] = request
        return httpx.Response(200, json={"users": ["a"]})

    client = make_client(Session(), handler)
    result = await client.request("/api/presence")

    request = seen["request"]
    assert result == {"users": ["a"]}
    assert request.method == "GET"
    assert str(request.url) == "https://registry.test/api/presence"
    assert request.headers["content-type"] == "application/json"
    assert "authorization" not in request.headers


@pytest.mark.asyncio
async def test_token_is_sent_as_bearer():
    seen = {}

    def handler(request):
        seen["auth"] = request.headers.get("authorization")
        return httpx.Response(200, json={})

    session = Session()
    session.establish("bob", "T")
    client = make_client(session, handler)
    await client.request("/api/messages", params={"user": "bob"})

    assert seen["auth"] == "Bearer T"


@pytest.mark.asyncio
async def test_post_sends_json_body_and_params():
    seen = {}

    def handler(request):
        seen["request"] = request
        return httpx.Response(200, json={"success": True})

    client = make_client(Session(), handler, base_url="https://registry.test/")
    await client.request(
        "/api/presence",
        method="POST",
        body={"action": "register", "username": "bob"},
        params={"since": 5},
    )

    request = seen["request"]
    assert request.method == "POST"
    assert request.url.path == "/api/presence"
    assert request.url.params["since"] == "5"
    assert json.loads(request.content) == {"action": "register", "username": "bob"}


@pytest.mark.asyncio
async def test_error_status_body_is_returned_as_is():
    def handler(request):
        return httpx.Response(409, json={"success": False, "error": "taken"})

    client = make_client(Session(), handler)

    assert await client.request("/api/presence", method="POST", body={}) == {
        "success": False,
        "error": "taken",
    }


@pytest.mark.asyncio
async def test_non_json_body_raises_response_error():
    def handler(request):
        return httpx.Response(502, text="<html>Bad Gateway</html>")

    client = make_client(Session(), handler)

    with pytest.raises(RegistryResponseError) as exc_info:
        await client.request("/api/presence")

    assert exc_info.value.status_code == 502
    assert "HTTP 502" in str(exc_info.value)


@pytest.mark.asyncio
async def test_connection_failure_raises_connection_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    client = make_client(Session(), handler)

    with pytest.raises(RegistryConnectionError) as exc_info:
        await client.request("/api/agents")

    assert isinstance(exc_info.value, AircError)
    assert "connection refused" in str(exc_info.value)
    assert exc_info.value.endpoint == "/api/agents"


@pytest.mark.asyncio
async def test_timeout_raises_timeout_error():
    def handler(request):
        raise httpx.ReadTimeout("timed out", request=request)

    client = make_client(Session(), handler)

    with pytest.raises(RegistryTimeoutError):
        await client.request("/api/presence")
