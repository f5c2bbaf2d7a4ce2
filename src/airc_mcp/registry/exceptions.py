"""Exceptions raised while talking to the AIRC registry."""

from dataclasses import dataclass
from typing import Optional


class AircError(Exception):
    """Base class for errors surfaced to MCP callers as error results."""


@dataclass
class RegistryError(AircError):
    """
    The registry could not be reached or answered with something unusable.

    Registry-reported failures ({"success": false, "error": ...}) are not
    exceptions; they come back as ordinary JSON.
    """
    message: str
    endpoint: str = ""

    def __str__(self):
        if self.endpoint:
            return f"{self.message} ({self.endpoint})"
        return self.message


@dataclass
class RegistryConnectionError(RegistryError):
    """Network-level failure (DNS, refused connection, protocol error)."""


@dataclass
class RegistryTimeoutError(RegistryError):
    """Request exceeded the configured timeout."""


@dataclass
class RegistryResponseError(RegistryError):
    """Response body was not valid JSON."""
    status_code: Optional[int] = None

    def __str__(self):
        base = super().__str__()
        if self.status_code is not None:
            return f"{base} [HTTP {self.status_code}]"
        return base
