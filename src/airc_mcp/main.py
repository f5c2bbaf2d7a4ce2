"""Main entry point for the AIRC MCP server."""

import asyncio
import logging
import sys

from rich.console import Console
from rich.logging import RichHandler

from .config import config
from .server import serve

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO"):
    """Send log records to stderr; stdout carries the MCP stream."""
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )
    # Per-request lines from httpx are noise at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)


def cli_main():
    """Entry point for CLI."""
    setup_logging(config.log_level)

    try:
        asyncio.run(serve(config))
    except KeyboardInterrupt:
        pass
    except Exception:
        logger.exception("AIRC MCP server failed")
        sys.exit(1)


if __name__ == "__main__":
    cli_main()
