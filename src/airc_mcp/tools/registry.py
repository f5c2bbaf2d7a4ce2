"""Tool registry for managing available tools."""

from typing import Optional

from mcp.types import Tool as MCPTool

from ..registry.client import RegistryClient
from ..session import Session
from .base import BaseTool
from .discovery import CapabilitiesTool, DiscoverTool
from .messaging import ConsentTool, PollTool, SendTool
from .presence import HeartbeatTool, RegisterTool, WhoTool


class ToolRegistry:
    """
    Registry of available tools.

    All tools share one registry client and one session, so a successful
    airc_register unlocks the gated tools of the same registry.
    """

    def __init__(self, client: RegistryClient, session: Session):
        """
        Initialize tool registry.

        Args:
            client: Registry client used by every tool
            session: Session the tools read and update
        """
        self.client = client
        self.session = session
        self._tools: dict[str, BaseTool] = {}

        # Register default tools
        self._register_default_tools()

    def _register_default_tools(self):
        """Register all default tools."""
        # Communication tools
        for tool_cls in (RegisterTool, WhoTool, SendTool, PollTool, HeartbeatTool, ConsentTool):
            self.register(tool_cls(self.client, self.session))

        # Discovery tools
        self.register(DiscoverTool(self.client, self.session))
        self.register(CapabilitiesTool(self.client, self.session))

    def register(self, tool: BaseTool):
        """Register a tool."""
        self._tools[tool.name] = tool

    def get(self, name: str) -> Optional[BaseTool]:
        """Get tool by name."""
        return self._tools.get(name)

    def list_tools(self) -> list[BaseTool]:
        """List all registered tools."""
        return list(self._tools.values())

    def get_tool_names(self) -> list[str]:
        """Get list of tool names."""
        return list(self._tools.keys())

    def get_catalog(self) -> list[dict]:
        """Get all tools as {name, description, inputSchema} entries."""
        return [tool.to_catalog_entry() for tool in self.list_tools()]

    def get_mcp_tools(self) -> list[MCPTool]:
        """Get all tools as MCP tool definitions."""
        return [MCPTool(**entry) for entry in self.get_catalog()]

    @property
    def count(self) -> int:
        """Number of registered tools."""
        return len(self._tools)

    def __repr__(self) -> str:
        return f"ToolRegistry({self.count} tools)"

    def __contains__(self, name: str) -> bool:
        return name in self._tools
