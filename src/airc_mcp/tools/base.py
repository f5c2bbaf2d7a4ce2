"""Base tool interface."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from ..registry.client import RegistryClient
from ..session import Session

NOT_REGISTERED = "Not registered. Call airc_register first."

# JSON Schema type -> accepted Python types; bool never counts as a number
JSON_TYPES = {
    "string": (str,),
    "number": (int, float),
    "integer": (int,),
    "boolean": (bool,),
}


class ErrorKind(str, Enum):
    """Why a tool call did not succeed."""
    NOT_REGISTERED = "not_registered"
    INVALID_ARGUMENTS = "invalid_arguments"
    REGISTRY = "registry"


@dataclass
class ToolResult:
    """
    Result of a tool execution.

    `data` is the JSON payload shown to the caller on success. Failures
    carry an error message and the kind of failure.
    """

    success: bool
    data: Any = None
    error: Optional[str] = None
    kind: Optional[ErrorKind] = None

    def to_payload(self) -> Any:
        """JSON-ready value returned to the MCP caller."""
        if self.success:
            return self.data
        payload = {"success": False, "error": self.error}
        if isinstance(self.data, dict):
            payload.update(self.data)
        return payload

    @classmethod
    def ok(cls, data: Any) -> "ToolResult":
        """Create successful result."""
        return cls(success=True, data=data)

    @classmethod
    def fail(
        cls,
        error: str,
        kind: ErrorKind = ErrorKind.REGISTRY,
        **extra,
    ) -> "ToolResult":
        """Create failed result. Extra fields are included in the payload."""
        return cls(success=False, error=error, kind=kind, data=extra or None)


class BaseTool(ABC):
    """
    Base class for all AIRC tools.

    Each tool maps its arguments onto a single registry request using the
    shared client and session.
    """

    name: str
    description: str
    parameters: dict[str, Any]  # JSON Schema
    requires_registration: bool = True

    def __init__(self, client: RegistryClient, session: Session):
        self.client = client
        self.session = session

    @abstractmethod
    async def execute(self, **kwargs) -> ToolResult:
        """
        Execute the tool with given arguments.

        Args:
            **kwargs: Declared tool arguments

        Returns:
            ToolResult with success status and payload
        """
        pass

    async def run(self, arguments: Optional[dict[str, Any]] = None) -> ToolResult:
        """
        Validate arguments and session state, then execute.

        Registry exceptions propagate to the caller.
        """
        kwargs = self.extract_args(arguments or {})

        error = self.validate_args(**kwargs)
        if error:
            return ToolResult.fail(error, kind=ErrorKind.INVALID_ARGUMENTS)

        if self.requires_registration and not self.session.registered:
            return ToolResult.fail(NOT_REGISTERED, kind=ErrorKind.NOT_REGISTERED)

        return await self.execute(**kwargs)

    def extract_args(self, arguments: dict[str, Any]) -> dict[str, Any]:
        """Keep only declared, non-null arguments."""
        declared = self.parameters.get("properties", {})
        return {
            key: value
            for key, value in arguments.items()
            if key in declared and value is not None
        }

    def validate_args(self, **kwargs) -> Optional[str]:
        """
        Validate arguments against schema.

        Returns:
            Error message if validation fails, None otherwise.
        """
        required = self.parameters.get("required", [])
        for param in required:
            if param not in kwargs or kwargs[param] == "":
                return f"Missing required parameter: {param}"

        properties = self.parameters.get("properties", {})
        for param, value in kwargs.items():
            expected = properties[param].get("type")
            if not self._matches_type(value, expected):
                return f"Invalid type for {param}: expected {expected}, got {type(value).__name__}"

            allowed = properties[param].get("enum")
            if allowed and value not in allowed:
                options = ", ".join(allowed)
                return f"Invalid value for {param}: {value!r} (expected one of: {options})"
        return None

    @staticmethod
    def _matches_type(value: Any, expected: Optional[str]) -> bool:
        if expected not in JSON_TYPES:
            return True
        if isinstance(value, bool) and expected != "boolean":
            return False
        return isinstance(value, JSON_TYPES[expected])

    def to_catalog_entry(self) -> dict:
        """Convert to MCP tool listing format."""
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.parameters,
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.name})"
