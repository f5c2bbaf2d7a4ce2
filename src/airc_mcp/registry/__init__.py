"""AIRC registry access."""

from .client import RegistryClient
from .exceptions import (
    AircError,
    RegistryError,
    RegistryConnectionError,
    RegistryTimeoutError,
    RegistryResponseError,
)
from .models import (
    RegistrationResponse,
    PresenceListing,
    MessageBatch,
    AgentSummary,
    DiscoveryResponse,
    CapabilityProfile,
)

__all__ = [
    "RegistryClient",
    # Errors
    "AircError",
    "RegistryError",
    "RegistryConnectionError",
    "RegistryTimeoutError",
    "RegistryResponseError",
    # Responses
    "RegistrationResponse",
    "PresenceListing",
    "MessageBatch",
    "AgentSummary",
    "DiscoveryResponse",
    "CapabilityProfile",
]
