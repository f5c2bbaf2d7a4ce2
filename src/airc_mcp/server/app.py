"""MCP server wiring for the AIRC tools."""

import logging
from typing import Any, Optional

import mcp.types as types
from mcp.server import Server
from mcp.server.stdio import stdio_server

from .. import __version__
from ..config import Config, config as app_config
from ..registry.client import RegistryClient
from ..session import Session
from ..tools.registry import ToolRegistry
from .dispatcher import ToolDispatcher, ToolEnvelope

logger = logging.getLogger(__name__)


def create_dispatcher(cfg: Optional[Config] = None) -> ToolDispatcher:
    """Build a dispatcher with a fresh, unregistered session."""
    cfg = cfg or app_config
    session = Session()
    client = RegistryClient(
        session,
        base_url=cfg.registry.base_url,
        timeout=cfg.registry.timeout,
    )
    return ToolDispatcher(ToolRegistry(client, session))


def to_call_tool_result(envelope: ToolEnvelope) -> types.CallToolResult:
    """Convert a dispatcher envelope into the MCP result type."""
    return types.CallToolResult(
        content=[
            types.TextContent(type="text", text=item["text"])
            for item in envelope.content
        ],
        isError=envelope.is_error,
    )


def create_server(dispatcher: ToolDispatcher, name: Optional[str] = None) -> Server:
    """
    Create the MCP server.

    Args:
        dispatcher: Dispatcher that handles every tool call
        name: Server name advertised to clients

    Returns:
        Low-level MCP server with list_tools and call_tool handlers
    """
    server = Server(name or app_config.server_name, version=__version__)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return dispatcher.registry.get_mcp_tools()

    # Arguments are validated by the tools themselves
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: dict[str, Any]) -> types.CallToolResult:
        envelope = await dispatcher.invoke(name, arguments)
        return to_call_tool_result(envelope)

    return server


async def serve(cfg: Optional[Config] = None):
    """Run the server over stdio until the client disconnects."""
    cfg = cfg or app_config
    dispatcher = create_dispatcher(cfg)
    server = create_server(dispatcher, cfg.server_name)

    async with stdio_server() as (read_stream, write_stream):
        logger.info(
            "AIRC MCP server running (registry: %s, %d tools)",
            cfg.registry.base_url,
            dispatcher.registry.count,
        )
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )
