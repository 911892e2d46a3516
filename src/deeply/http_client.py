# SPDX-License-Identifier: Apache-2.0
"""HTTP transport for DeepL API calls."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Protocol, runtime_checkable

import aiohttp

from deeply.errors import CallError

logger = logging.getLogger(__name__)


@runtime_checkable
class HttpClient(Protocol):
    """Protocol for objects that execute API calls.

    Implementations only send the request and return the raw body; decoding
    and validation happen in the client.
    """

    async def call_api(
        self,
        operation: str,
        method: str,
        payload: dict[str, str],
    ) -> str | bytes:
        """Execute an API call.

        Args:
            operation: API operation path relative to the base URL
                ("translate", "usage", "languages").
            method: HTTP method ("GET" or "POST").
            payload: Request parameters.

        Returns:
            Raw response body.

        Raises:
            CallError: On a non-2xx status or when no response was received.
        """
        ...


class AiohttpClient:
    """HttpClient implementation backed by an aiohttp session.

    GET payloads are sent as query parameters, POST payloads as form data.
    """

    DEFAULT_TIMEOUT = 10.0

    def __init__(self, base_url: str, timeout: float = DEFAULT_TIMEOUT) -> None:
        """Initialize AiohttpClient.

        Args:
            base_url: API base URL ending with a slash.
            timeout: Total timeout per request in seconds.
        """
        self._base_url = base_url if base_url.endswith("/") else base_url + "/"
        self._timeout = timeout
        self._session: aiohttp.ClientSession | None = None

    @property
    def base_url(self) -> str:
        """Return the API base URL."""
        return self._base_url

    async def __aenter__(self) -> AiohttpClient:
        """Enter async context manager."""
        await self._ensure_session()
        return self

    async def __aexit__(self, *args: Any) -> None:
        """Exit async context manager."""
        await self.close()

    async def _ensure_session(self) -> aiohttp.ClientSession:
        """Ensure aiohttp session exists.

        Returns:
            Active aiohttp session.
        """
        if self._session is None:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self._timeout)
            )
        return self._session

    async def call_api(
        self,
        operation: str,
        method: str,
        payload: dict[str, str],
    ) -> bytes:
        """Execute an API call and return the raw response body.

        Raises:
            CallError: On a non-2xx status (status preserved) or a
                connection failure or timeout (status 0).
        """
        session = await self._ensure_session()
        url = self._base_url + operation.lstrip("/")
        method = method.upper()

        if method == "GET":
            request_kwargs: dict[str, Any] = {"params": payload}
        else:
            request_kwargs = {"data": payload}

        logger.debug("DeepL API call: %s %s", method, url)

        try:
            async with session.request(method, url, **request_kwargs) as response:
                body = await response.read()
                if not 200 <= response.status < 300:
                    raise CallError(
                        f"Server side error during DeepL API call: "
                        f"HTTP code {response.status}: "
                        f"{body.decode('utf-8', errors='replace')}",
                        response.status,
                    )
        except aiohttp.ClientError as e:
            raise CallError(f"DeepL request failed: {e}") from e
        except asyncio.TimeoutError as e:
            raise CallError(
                f"DeepL request timed out after {self._timeout}s"
            ) from e

        logger.debug(
            "DeepL API response: %s %s (%d bytes)", method, url, len(body)
        )
        return body

    async def close(self) -> None:
        """Close the HTTP session."""
        if self._session:
            await self._session.close()
            self._session = None
