"""HTTP client for the AIRC registry API."""

import logging
from typing import Any, Optional

import httpx

from .. import __version__
from ..config import config
from ..session import Session
from .exceptions import (
    RegistryConnectionError,
    RegistryResponseError,
    RegistryTimeoutError,
)

logger = logging.getLogger(__name__)


class RegistryClient:
    """
    Thin async wrapper around the registry's JSON API.

    Attaches the session's bearer token when one is present and returns
    the decoded body untouched. Each request uses its own connection.
    """

    USER_AGENT = f"airc-mcp/{__version__}"

    def __init__(
        self,
        session: Session,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.session = session
        self.base_url = (base_url or config.registry.base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else config.registry.timeout
        self._transport = transport

    def _headers(self) -> dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "User-Agent": self.USER_AGENT,
        }
        if self.session.token:
            headers["Authorization"] = f"Bearer {self.session.token}"
        return headers

    async def request(
        self,
        endpoint: str,
        method: str = "GET",
        body: Optional[dict[str, Any]] = None,
        params: Optional[dict[str, Any]] = None,
    ) -> Any:
        """
        Send a request to the registry.

        Args:
            endpoint: Path starting with '/', appended to the base URL
            method: HTTP method
            body: JSON body for POST requests
            params: Query string parameters

        Returns:
            Parsed JSON body, whatever the HTTP status

        Raises:
            RegistryTimeoutError: request timed out
            RegistryConnectionError: transport-level failure
            RegistryResponseError: body is not JSON
        """
        url = f"{self.base_url}{endpoint}"
        logger.debug("%s %s", method, url)

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                transport=self._transport,
            ) as client:
                response = await client.request(
                    method,
                    url,
                    headers=self._headers(),
                    params=params,
                    json=body,
                )
        except httpx.TimeoutException as e:
            raise RegistryTimeoutError(f"Request timed out: {e}", endpoint)
        except httpx.HTTPError as e:
            raise RegistryConnectionError(f"Registry request failed: {e}", endpoint)

        logger.debug("%s %s -> %d", method, url, response.status_code)

        try:
            return response.json()
        except ValueError:
            raise RegistryResponseError(
                "Registry returned a non-JSON response",
                endpoint,
                status_code=response.status_code,
            )

    def __repr__(self) -> str:
        return f"RegistryClient({self.base_url})"
