"""HTTP client for the Unreal Engine Remote Control API."""

import json
import logging
from typing import Any, Optional

import httpx

from ..errors import RemoteCallError, TransportError

logger = logging.getLogger(__name__)


class RemoteControlClient:
    """Performs single request/response exchanges against Remote Control."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 60.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the client.

        Args:
            base_url: Endpoint root, e.g. ``http://127.0.0.1:30010``
            timeout: Request timeout in seconds
            transport: Optional httpx transport (tests pass a MockTransport)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    async def request(self, method: str, path: str, body: Any = None) -> Any:
        """
        Send one request and normalize the outcome.

        Args:
            method: HTTP method
            path: Route path, e.g. ``/remote/object/property``
            body: JSON-serializable body, or None to send none

        Returns:
            Parsed JSON, the raw text when the body is not JSON,
            or None when the body is empty

        Raises:
            RemoteCallError: The endpoint returned a non-success status
            TransportError: The endpoint could not be reached
        """
        method = method.upper()
        content = json.dumps(body) if body is not None else None
        logger.debug("UE %s %s", method, path)

        try:
            async with httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self._transport,
            ) as client:
                response = await client.request(
                    method,
                    path,
                    content=content,
                    headers={"Content-Type": "application/json"},
                )
        except httpx.RequestError as e:
            raise TransportError(method, path, str(e) or type(e).__name__) from e

        text = response.text
        if not response.is_success:
            raise RemoteCallError(method, path, response.status_code, text)

        try:
            return json.loads(text)
        except ValueError:
            return text or None

    async def get(self, path: str) -> Any:
        """Send a GET request."""
        return await self.request("GET", path)

    async def put(self, path: str, body: Any = None) -> Any:
        """Send a PUT request."""
        return await self.request("PUT", path, body)
