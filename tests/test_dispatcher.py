import json

import mcp.types as types
import pytest

from airc_mcp.registry.exceptions import RegistryConnectionError
from airc_mcp.server import ToolDispatcher, create_server, to_call_tool_result
from airc_mcp.server.dispatcher import ToolEnvelope
from airc_mcp.tools import NOT_REGISTERED


@pytest.fixture
def dispatcher(tool_registry):
    return ToolDispatcher(tool_registry)


def test_catalog_lists_all_tools_in_order(dispatcher):
    names = [entry["name"] for entry in dispatcher.list_tools()]

    assert names == [
        "airc_register",
        "airc_who",
        "airc_send",
        "airc_poll",
        "airc_heartbeat",
        "airc_consent",
        "airc_discover",
        "airc_capabilities",
    ]
    for entry in dispatcher.list_tools():
        assert entry["description"]
        assert entry["inputSchema"]["type"] == "object"


def test_catalog_declares_enums(dispatcher):
    catalog = {entry["name"]: entry for entry in dispatcher.list_tools()}

    consent = catalog["airc_consent"]["inputSchema"]
    assert consent["properties"]["action"]["enum"] == ["accept", "block"]
    assert consent["required"] == ["handle", "action"]


@pytest.mark.asyncio
async def test_unknown_tool_is_error_envelope(dispatcher):
    envelope = await dispatcher.invoke("airc_teleport", {})

    assert envelope.is_error is True
    assert envelope.to_dict()["isError"] is True
    assert json.loads(envelope.text) == {"error": "Unknown tool: airc_teleport"}


@pytest.mark.asyncio
async def test_success_payload_is_serialized_json(dispatcher, fake_client):
    fake_client.responses["/api/presence"] = {"users": [{"username": "bob"}]}

    envelope = await dispatcher.invoke("airc_who", None)

    assert envelope.is_error is False
    assert "isError" not in envelope.to_dict()
    assert envelope.content[0]["type"] == "text"
    assert json.loads(envelope.text) == [{"username": "bob"}]


@pytest.mark.asyncio
async def test_precondition_failure_is_not_error_envelope(dispatcher, fake_client):
    envelope = await dispatcher.invoke("airc_poll", {})

    assert envelope.is_error is False
    assert json.loads(envelope.text) == {"success": False, "error": NOT_REGISTERED}
    assert fake_client.requests == []


@pytest.mark.asyncio
async def test_network_failure_becomes_error_envelope(dispatcher, fake_client):
    fake_client.error = RegistryConnectionError("Registry request failed: boom", "/api/agents")

    envelope = await dispatcher.invoke("airc_discover", {"query": "rust"})

    assert envelope.is_error is True
    assert json.loads(envelope.text) == {
        "error": "Registry request failed: boom (/api/agents)",
    }


@pytest.mark.asyncio
async def test_undeclared_arguments_are_dropped(dispatcher, fake_client):
    fake_client.responses["/api/presence"] = {"success": True, "token": "T"}

    await dispatcher.invoke("airc_register", {"handle": "bob", "admin": True})

    assert "admin" not in fake_client.requests[0]["body"]


def test_to_call_tool_result_keeps_error_flag():
    result = to_call_tool_result(ToolEnvelope.from_error("Unknown tool: x"))

    assert isinstance(result, types.CallToolResult)
    assert result.isError is True
    assert result.content[0].text == json.dumps({"error": "Unknown tool: x"})


def test_mcp_tools_match_catalog(tool_registry):
    tools = tool_registry.get_mcp_tools()

    assert [t.name for t in tools] == tool_registry.get_tool_names()
    assert tools[0].inputSchema["required"] == ["handle"]
    assert "airc_who" in tool_registry
    assert "airc_teleport" not in tool_registry


def test_create_server_registers_handlers(dispatcher):
    server = create_server(dispatcher)

    assert server.name == "airc-mcp"
    assert types.ListToolsRequest in server.request_handlers
    assert types.CallToolRequest in server.request_handlers


@pytest.mark.asyncio
async def test_wrong_argument_type_stays_inside_envelope(dispatcher, fake_client):
    envelope = await dispatcher.invoke("airc_register", {"handle": 5})

    payload = json.loads(envelope.text)
    assert envelope.is_error is False
    assert payload["success"] is False
    assert payload["error"] == "Invalid type for handle: expected string, got int"
    assert fake_client.requests == []


def call_tool_request(name, arguments):
    return types.CallToolRequest(
        method="tools/call",
        params=types.CallToolRequestParams(name=name, arguments=arguments),
    )


@pytest.mark.asyncio
async def test_server_call_tool_returns_json_text(dispatcher, fake_client):
    fake_client.responses["/api/presence"] = {"success": True, "token": "T"}
    handler = create_server(dispatcher).request_handlers[types.CallToolRequest]

    response = await handler(call_tool_request("airc_register", {"handle": "@bob"}))

    result = response.root
    assert isinstance(result, types.CallToolResult)
    assert result.isError is False
    assert json.loads(result.content[0].text) == {
        "success": True,
        "message": "Registered as @bob",
    }


@pytest.mark.asyncio
async def test_server_call_tool_unknown_name_is_error(dispatcher):
    handler = create_server(dispatcher).request_handlers[types.CallToolRequest]

    response = await handler(call_tool_request("airc_teleport", {}))

    result = response.root
    assert result.isError is True
    assert json.loads(result.content[0].text) == {"error": "Unknown tool: airc_teleport"}


@pytest.mark.asyncio
async def test_server_call_tool_wrong_type_is_json(dispatcher, fake_client):
    handler = create_server(dispatcher).request_handlers[types.CallToolRequest]

    response = await handler(call_tool_request("airc_register", {"handle": 5}))

    payload = json.loads(response.root.content[0].text)
    assert payload["success"] is False
    assert "handle" in payload["error"]
