import sys
from pathlib import Path

# Ensure src is importable
sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

from typing import Any, Optional

import pytest

from airc_mcp.session import Session
from airc_mcp.tools.registry import ToolRegistry


class FakeRegistryClient:
    """Records requests and answers with canned JSON per endpoint path."""

    def __init__(self, session: Session, responses: Optional[dict[str, Any]] = None):
        self.session = session
        self.responses = responses or {}
        self.requests: list[dict[str, Any]] = []
        self.error: Optional[Exception] = None

    async def request(self, endpoint, method="GET", body=None, params=None):
        self.requests.append({
            "endpoint": endpoint,
            "method": method,
            "body": body,
            "params": params,
            "token": self.session.token,
        })
        if self.error is not None:
            raise self.error
        return self.responses.get((method, endpoint), self.responses.get(endpoint, {}))


@pytest.fixture
def session():
    return Session()


@pytest.fixture
def fake_client(session):
    return FakeRegistryClient(session)


@pytest.fixture
def tool_registry(fake_client, session):
    return ToolRegistry(fake_client, session)
