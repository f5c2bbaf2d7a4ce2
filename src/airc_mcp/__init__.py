"""MCP server for AIRC (Agent Identity & Relay Communication)."""

__version__ = "0.2.0"
