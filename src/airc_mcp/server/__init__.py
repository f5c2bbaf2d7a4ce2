"""MCP server and tool dispatch."""

from .dispatcher import ToolDispatcher, ToolEnvelope
from .app import create_dispatcher, create_server, serve, to_call_tool_result

__all__ = [
    "ToolDispatcher",
    "ToolEnvelope",
    "create_dispatcher",
    "create_server",
    "serve",
    "to_call_tool_result",
]
