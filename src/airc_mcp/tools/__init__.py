"""AIRC tools exposed over MCP."""

from .base import BaseTool, ErrorKind, ToolResult, NOT_REGISTERED
from .presence import RegisterTool, WhoTool, HeartbeatTool
from .messaging import SendTool, PollTool, ConsentTool
from .discovery import DiscoverTool, CapabilitiesTool
from .registry import ToolRegistry

__all__ = [
    # Base
    "BaseTool",
    "ErrorKind",
    "ToolResult",
    "NOT_REGISTERED",
    # Presence
    "RegisterTool",
    "WhoTool",
    "HeartbeatTool",
    # Messaging
    "SendTool",
    "PollTool",
    "ConsentTool",
    # Discovery
    "DiscoverTool",
    "CapabilitiesTool",
    # Registry
    "ToolRegistry",
]
