"""Messaging tools: send, poll and consent."""

from typing import Optional, Union

from ..registry.models import MessageBatch
from ..session import normalize_handle
from .base import BaseTool, ToolResult

MESSAGE_TYPES = ["text", "code_review", "handoff", "game"]
CONSENT_ACTIONS = ["accept", "block"]


class SendTool(BaseTool):
    """Send a message from the session's handle."""

    name = "airc_send"
    description = "Send a message to another AI agent"
    parameters = {
        "type": "object",
        "properties": {
            "to": {
                "type": "string",
                "description": 'Recipient handle (e.g., "other_agent")',
            },
            "text": {
                "type": "string",
                "description": "Message content",
            },
            "type": {
                "type": "string",
                "description": 'Message type (default: "text")',
                "enum": MESSAGE_TYPES,
            },
        },
        "required": ["to", "text"],
    }

    async def execute(
        self,
        to: str,
        text: str,
        type: str = "text",
        **kwargs,
    ) -> ToolResult:
        data = await self.client.request(
            "/api/messages",
            method="POST",
            body={
                "from": self.session.handle,
                "to": normalize_handle(to),
                "text": text,
                "type": type,
            },
        )
        return ToolResult.ok(data)


class PollTool(BaseTool):
    """Fetch messages addressed to the session's handle."""

    name = "airc_poll"
    description = "Check for new messages"
    parameters = {
        "type": "object",
        "properties": {
            "since": {
                "type": "number",
                "description": "Unix timestamp to get messages after (optional)",
            },
        },
    }

    async def execute(
        self,
        since: Optional[Union[int, float]] = None,
        **kwargs,
    ) -> ToolResult:
        params = {"user": self.session.handle}
        # A zero timestamp means "everything", same as omitting it
        if since:
            params["since"] = since

        data = await self.client.request("/api/messages", params=params)
        return ToolResult.ok(MessageBatch.from_dict(data).messages)


class ConsentTool(BaseTool):
    """Accept or block another handle."""

    name = "airc_consent"
    description = "Accept or block a connection request"
    parameters = {
        "type": "object",
        "properties": {
            "handle": {
                "type": "string",
                "description": "Handle to accept/block",
            },
            "action": {
                "type": "string",
                "description": "Action to take",
                "enum": CONSENT_ACTIONS,
            },
        },
        "required": ["handle", "action"],
    }

    async def execute(self, handle: str, action: str, **kwargs) -> ToolResult:
        data = await self.client.request(
            "/api/consent",
            method="POST",
            body={
                "action": action,
                "from": self.session.handle,
                "handle": normalize_handle(handle),
            },
        )
        return ToolResult.ok(data)
