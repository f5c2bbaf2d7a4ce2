"""Typed views over registry responses.

The registry enforces no schema on its JSON, so every field is optional.
Defaults are filled in here and nowhere else.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from ..session import display_handle


def _as_dict(data: Any) -> dict:
    return data if isinstance(data, dict) else {}


def _as_list(value: Any) -> list:
    return value if isinstance(value, list) else []


@dataclass
class RegistrationResponse:
    """Answer to a presence registration."""

    success: bool
    token: Optional[str] = None
    error: Optional[str] = None

    @property
    def accepted(self) -> bool:
        return self.success and bool(self.token)

    @classmethod
    def from_dict(cls, data: Any) -> "RegistrationResponse":
        data = _as_dict(data)
        return cls(
            success=bool(data.get("success")),
            token=data.get("token"),
            error=data.get("error"),
        )


@dataclass
class PresenceListing:
    """Users currently online."""

    users: list = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> "PresenceListing":
        return cls(users=_as_list(_as_dict(data).get("users")))


@dataclass
class MessageBatch:
    """Messages waiting for the session's handle."""

    messages: list = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> "MessageBatch":
        return cls(messages=_as_list(_as_dict(data).get("messages")))


@dataclass
class AgentSummary:
    """One entry in a discovery result."""

    handle: str
    type: Optional[str] = None
    model: Optional[str] = None
    capabilities: Any = None
    status: Optional[str] = None
    working_on: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> "AgentSummary":
        data = _as_dict(data)
        return cls(
            handle=display_handle(str(data.get("handle") or "")),
            type=data.get("type"),
            model=data.get("model"),
            capabilities=data.get("capabilities"),
            status=data.get("status"),
            working_on=data.get("working_on"),
        )

    def to_dict(self) -> dict:
        return {
            "handle": self.handle,
            "type": self.type,
            "model": self.model,
            "capabilities": self.capabilities,
            "status": self.status,
            "working_on": self.working_on,
        }


@dataclass
class DiscoveryResponse:
    """Result of an agent search."""

    success: bool
    agents: list[AgentSummary] = field(default_factory=list)
    total: int = 0
    error: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> "DiscoveryResponse":
        data = _as_dict(data)
        agents = [AgentSummary.from_dict(a) for a in _as_list(data.get("agents"))]
        total = data.get("total")
        return cls(
            success=bool(data.get("success")),
            agents=agents,
            total=total if isinstance(total, int) else len(agents),
            error=data.get("error"),
        )


@dataclass
class CapabilityProfile:
    """What an agent can do and whether it is reachable."""

    handle: str
    is_agent: Any = None
    type: Optional[str] = None
    model: Optional[str] = None
    supported: list = field(default_factory=lambda: ["text"])
    primary: str = "text"
    status: str = "unknown"
    accepts_messages: bool = True
    input_schemas: Any = None
    examples: Any = None
    error: Optional[str] = None
    message: Optional[str] = None

    @property
    def is_offline(self) -> bool:
        return self.status == "offline"

    @classmethod
    def from_dict(cls, data: Any, requested_handle: str = "") -> "CapabilityProfile":
        data = _as_dict(data)
        capabilities = _as_dict(data.get("capabilities"))
        availability = _as_dict(data.get("availability"))
        return cls(
            handle=display_handle(str(data.get("handle") or requested_handle)),
            is_agent=data.get("is_agent"),
            type=data.get("type"),
            model=data.get("model"),
            supported=capabilities.get("supported") or ["text"],
            primary=capabilities.get("primary") or "text",
            status=availability.get("status") or "unknown",
            accepts_messages=availability.get("accepts_messages") is not False,
            input_schemas=data.get("input_schemas"),
            examples=data.get("examples"),
            error=data.get("error"),
            message=data.get("message"),
        )
