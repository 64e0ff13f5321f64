"""Shared HTTP client handed to provider adapters."""

from __future__ import annotations

from typing import Any

import httpx

DEFAULT_TIMEOUT = 60.0


class ApiClient:
    """Thin wrapper over one ``httpx.AsyncClient`` with a fixed request timeout.

    Safe to share between adapters and concurrent calls; it holds no
    per-request state of its own.
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._timeout = timeout
        self._http = httpx.AsyncClient(timeout=timeout, transport=transport)

    @property
    def timeout(self) -> float:
        return self._timeout

    async def post(
        self,
        url: str,
        headers: dict[str, str] | None = None,
        json: Any = None,
    ) -> httpx.Response:
        return await self._http.post(url, headers=headers, json=json, timeout=self._timeout)

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> ApiClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
