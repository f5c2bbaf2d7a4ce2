"""Discovery tools: agent search and capability lookup."""

from typing import Optional
from urllib.parse import quote

from ..registry.models import CapabilityProfile, DiscoveryResponse
from ..session import normalize_handle
from .base import BaseTool, ErrorKind, ToolResult

AGENT_TYPES = ["autonomous", "assistant", "bot"]
DEFAULT_LIMIT = 10


class DiscoverTool(BaseTool):
    """
    Search the registry for agents.

    Only filters that were supplied end up in the query string, except
    `available`, which is sent unless explicitly false, and `limit`.
    """

    name = "airc_discover"
    description = (
        "Find AI agents by capability or natural language query. "
        "Use this to find agents that can help with specific tasks."
    )
    parameters = {
        "type": "object",
        "properties": {
            "capability": {
                "type": "string",
                "description": 'Filter by capability (e.g., "code_review", "research", "text")',
            },
            "query": {
                "type": "string",
                "description": 'Natural language search (e.g., "help me debug rust code")',
            },
            "type": {
                "type": "string",
                "description": "Agent type filter",
                "enum": AGENT_TYPES,
            },
            "model": {
                "type": "string",
                "description": 'Filter by model prefix (e.g., "claude", "gpt")',
            },
            "available": {
                "type": "boolean",
                "description": "Only show online agents (default: true)",
            },
            "limit": {
                "type": "integer",
                "description": f"Maximum number of agents to return (default: {DEFAULT_LIMIT})",
            },
        },
    }
    requires_registration = False

    @staticmethod
    def build_params(
        capability: Optional[str] = None,
        type: Optional[str] = None,
        model: Optional[str] = None,
        query: Optional[str] = None,
        available: Optional[bool] = None,
        limit: Optional[int] = None,
    ) -> dict[str, str]:
        """Query string parameters for /api/agents."""
        params = {}
        if capability:
            params["capability"] = capability
        if type:
            params["type"] = type
        if model:
            params["model"] = model
        if query:
            params["q"] = query
        if available is not False:
            params["available"] = "true"
        params["limit"] = str(limit or DEFAULT_LIMIT)
        return params

    async def execute(self, **kwargs) -> ToolResult:
        data = await self.client.request("/api/agents", params=self.build_params(**kwargs))
        response = DiscoveryResponse.from_dict(data)

        if not response.success:
            return ToolResult.fail(response.error or "Discovery failed")

        if response.total == 0:
            suggestion = "No agents found. Try a broader search or check back later."
        else:
            suggestion = (
                f"Found {response.total} agent(s). "
                "Use airc_capabilities to learn more about a specific agent."
            )

        return ToolResult.ok({
            "success": True,
            "agents": [agent.to_dict() for agent in response.agents],
            "total": response.total,
            "suggestion": suggestion,
        })


class CapabilitiesTool(BaseTool):
    """Describe what an agent accepts before messaging it."""

    name = "airc_capabilities"
    description = (
        "Get detailed information about a specific agent including their "
        "capabilities, input/output schemas, and availability. Use this before "
        "sending messages to understand what an agent can do."
    )
    parameters = {
        "type": "object",
        "properties": {
            "handle": {
                "type": "string",
                "description": 'Agent handle (e.g., "@research-agent")',
            },
        },
        "required": ["handle"],
    }
    requires_registration = False

    async def execute(self, handle: str, **kwargs) -> ToolResult:
        normalized = normalize_handle(handle)
        if not normalized:
            return ToolResult.fail(
                "Missing required parameter: handle",
                kind=ErrorKind.INVALID_ARGUMENTS,
            )

        data = await self.client.request(
            f"/api/identity/{quote(normalized, safe='')}/capabilities"
        )
        profile = CapabilityProfile.from_dict(data, requested_handle=normalized)

        if profile.error:
            return ToolResult.fail(profile.error, message=profile.message)

        if profile.is_offline:
            suggestion = "Agent is offline. Message will be delivered when they return."
        else:
            suggestion = "Agent is available. Use airc_send to message them."

        return ToolResult.ok({
            "success": True,
            "handle": profile.handle,
            "is_agent": profile.is_agent,
            "type": profile.type,
            "model": profile.model,
            "capabilities": profile.supported,
            "primary_capability": profile.primary,
            "availability": profile.status,
            "accepts_messages": profile.accepts_messages,
            "input_schemas": profile.input_schemas,
            "examples": profile.examples,
            "suggestion": suggestion,
        })
