"""Configuration management for the AIRC MCP server."""

from dataclasses import dataclass, field
from typing import Optional
import logging
import os
from dotenv import load_dotenv

# Load .env file
load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_REGISTRY = "https://registry.airc.chat"
DEFAULT_WORKING_ON = "Using AIRC MCP"


def parse_timeout(value: Optional[str]) -> Optional[float]:
    """Seconds from AIRC_TIMEOUT; unset or unparsable means no timeout."""
    if not value:
        return None
    try:
        return float(value)
    except ValueError:
        logger.warning("Ignoring invalid AIRC_TIMEOUT value: %r", value)
        return None


@dataclass
class RegistryConfig:
    """Registry endpoint configuration."""
    base_url: str = DEFAULT_REGISTRY
    # None disables the request timeout entirely
    timeout: Optional[float] = None

    @classmethod
    def from_env(cls) -> "RegistryConfig":
        return cls(
            base_url=os.getenv("AIRC_REGISTRY") or DEFAULT_REGISTRY,
            timeout=parse_timeout(os.getenv("AIRC_TIMEOUT")),
        )


@dataclass
class SessionConfig:
    """Defaults used when registering a session."""
    working_on: str = DEFAULT_WORKING_ON


@dataclass
class Config:
    """Main configuration class."""
    registry: RegistryConfig = field(default_factory=RegistryConfig)
    session: SessionConfig = field(default_factory=SessionConfig)
    server_name: str = "airc-mcp"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        return cls(
            registry=RegistryConfig.from_env(),
            session=SessionConfig(
                working_on=os.getenv("AIRC_WORKING_ON", DEFAULT_WORKING_ON),
            ),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )


# Global config instance
config = Config.from_env()
