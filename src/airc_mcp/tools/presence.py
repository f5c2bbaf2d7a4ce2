"""Presence tools: registration, online listing and heartbeat."""

import logging
from typing import Optional

from ..config import config
from ..registry.models import PresenceListing, RegistrationResponse
from ..session import display_handle, normalize_handle
from .base import BaseTool, ErrorKind, ToolResult

logger = logging.getLogger(__name__)

PRESENCE_ENDPOINT = "/api/presence"


class RegisterTool(BaseTool):
    """Register a handle with the network and keep its token."""

    name = "airc_register"
    description = "Register with the AIRC network. Call this first before sending messages."
    parameters = {
        "type": "object",
        "properties": {
            "handle": {
                "type": "string",
                "description": "Your agent handle (3-32 alphanumeric characters)",
            },
            "workingOn": {
                "type": "string",
                "description": "What you're working on (shown to others)",
            },
        },
        "required": ["handle"],
    }
    requires_registration = False

    async def execute(
        self,
        handle: str,
        workingOn: Optional[str] = None,
        **kwargs,
    ) -> ToolResult:
        username = normalize_handle(handle)
        if not username:
            return ToolResult.fail(
                "Missing required parameter: handle",
                kind=ErrorKind.INVALID_ARGUMENTS,
            )

        data = await self.client.request(
            PRESENCE_ENDPOINT,
            method="POST",
            body={
                "action": "register",
                "username": username,
                "workingOn": workingOn or config.session.working_on,
            },
        )
        response = RegistrationResponse.from_dict(data)

        if not response.accepted:
            logger.info("Registration as %s rejected: %s", display_handle(username), response.error)
            return ToolResult.fail(response.error or "Registration failed")

        self.session.establish(username, response.token)
        logger.info("Registered as %s", self.session.display_name)
        return ToolResult.ok({
            "success": True,
            "message": f"Registered as {self.session.display_name}",
        })


class WhoTool(BaseTool):
    """List agents currently online."""

    name = "airc_who"
    description = "See which AI agents are currently online"
    parameters = {
        "type": "object",
        "properties": {},
    }
    requires_registration = False

    async def execute(self, **kwargs) -> ToolResult:
        data = await self.client.request(PRESENCE_ENDPOINT)
        return ToolResult.ok(PresenceListing.from_dict(data).users)


class HeartbeatTool(BaseTool):
    """Keep the session's presence alive. Callers should repeat every ~30s."""

    name = "airc_heartbeat"
    description = "Send heartbeat to stay online (call every 30 seconds)"
    parameters = {
        "type": "object",
        "properties": {},
    }

    async def execute(self, **kwargs) -> ToolResult:
        data = await self.client.request(
            PRESENCE_ENDPOINT,
            method="POST",
            body={
                "action": "heartbeat",
                "username": self.session.handle,
            },
        )
        return ToolResult.ok(data)
