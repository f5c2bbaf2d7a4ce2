"""Routes named MCP tool calls to AIRC tools."""

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Optional

from ..registry.exceptions import AircError
from ..tools.registry import ToolRegistry

logger = logging.getLogger(__name__)


@dataclass
class ToolEnvelope:
    """Tool call response in MCP shape: text content plus an error flag."""

    content: list[dict[str, str]] = field(default_factory=list)
    is_error: bool = False

    @property
    def text(self) -> str:
        return "\n".join(item["text"] for item in self.content)

    def to_dict(self) -> dict:
        data: dict[str, Any] = {"content": self.content}
        if self.is_error:
            data["isError"] = True
        return data

    @classmethod
    def from_payload(cls, payload: Any) -> "ToolEnvelope":
        return cls(content=[{"type": "text", "text": json.dumps(payload, indent=2)}])

    @classmethod
    def from_error(cls, message: str) -> "ToolEnvelope":
        return cls(
            content=[{"type": "text", "text": json.dumps({"error": message})}],
            is_error=True,
        )


class ToolDispatcher:
    """
    Single entry point for tool calls.

    Structured failures from tools are returned as ordinary payloads.
    Registry exceptions and unknown tool names become error envelopes.
    """

    def __init__(self, registry: ToolRegistry):
        self.registry = registry

    def list_tools(self) -> list[dict]:
        """Tool catalog as {name, description, inputSchema} entries."""
        return self.registry.get_catalog()

    async def invoke(
        self,
        name: str,
        arguments: Optional[dict[str, Any]] = None,
    ) -> ToolEnvelope:
        """
        Run a tool by name.

        Args:
            name: Tool name
            arguments: Tool arguments from the caller

        Returns:
            ToolEnvelope with the JSON-serialized result
        """
        if name not in self.registry:
            logger.warning("Unknown tool requested: %s", name)
            return ToolEnvelope.from_error(f"Unknown tool: {name}")

        tool = self.registry.get(name)
        try:
            result = await tool.run(arguments or {})
        except AircError as e:
            logger.warning("Tool %s failed: %s", name, e)
            return ToolEnvelope.from_error(str(e))

        if not result.success:
            logger.debug("Tool %s returned %s failure: %s", name, result.kind, result.error)
        return ToolEnvelope.from_payload(result.to_payload())

    def __repr__(self) -> str:
        return f"ToolDispatcher({self.registry!r})"
