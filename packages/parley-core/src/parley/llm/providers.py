"""Provider contract and the HTTP adapter pattern shared by all backends."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from enum import Enum
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

import httpx
from pydantic import BaseModel, ValidationError

from parley.errors import (
    AuthenticationError,
    DeserializationError,
    HttpStatusError,
    ProviderConnectionError,
    ProviderTimeoutError,
    RateLimitError,
)
from parley.messages import Message, Role
from parley.transport import DEFAULT_TIMEOUT, ApiClient

if TYPE_CHECKING:
    from parley.config import LLMConfig

logger = logging.getLogger(__name__)

SYSTEM_SEPARATOR = "\n\n"


class ProviderType(Enum):
    """Supported LLM provider backends."""

    ANTHROPIC = "anthropic"
    OPENAI = "openai"
    OLLAMA = "ollama"


class SystemPromptMode(Enum):
    """Where an adapter puts System-role messages."""

    SEPARATE = "separate"  # merged into one out-of-band system prompt
    INLINE = "inline"  # kept as system turns in conversation order


@runtime_checkable
class LLMProvider(Protocol):
    """Single-operation contract every adapter implements."""

    async def send(self, messages: Sequence[Message]) -> str:
        """Return the backend's reply text or raise a ``ProviderError``."""
        ...


def split_system_messages(
    messages: Sequence[Message],
    separator: str = SYSTEM_SEPARATOR,
) -> tuple[str | None, list[Message]]:
    """Separate System-role messages from the conversation turns.

    System contents are joined with *separator* in encounter order. Empty
    system messages contribute nothing; when no non-empty system message
    exists the prompt is ``None`` rather than an empty string.
    """
    system_parts: list[str] = []
    turns: list[Message] = []
    for message in messages:
        if message.role is Role.SYSTEM:
            if message.content:
                system_parts.append(message.content)
        else:
            turns.append(message)
    system = separator.join(system_parts) if system_parts else None
    return system, turns


class HTTPProvider:
    """Base adapter: one POST per ``send``, failures mapped to the taxonomy.

    Subclasses supply the endpoint, headers, request body and response
    parsing. Everything call-scoped stays local to ``send``.
    """

    name = "provider"
    DEFAULT_BASE_URL = ""
    API_PATH = ""
    supported_system_modes: frozenset[SystemPromptMode] = frozenset(SystemPromptMode)
    default_system_mode = SystemPromptMode.INLINE

    def __init__(
        self,
        config: LLMConfig,
        client: ApiClient | None = None,
        *,
        system_mode: SystemPromptMode | None = None,
        system_separator: str = SYSTEM_SEPARATOR,
        base_url: str | None = None,
        timeout: float | None = None,
    ) -> None:
        if client is not None and timeout is not None:
            raise ValueError("timeout applies only when the adapter creates its own client")
        mode = system_mode or self.default_system_mode
        if mode not in self.supported_system_modes:
            raise ValueError(f"{self.name} does not support system mode {mode.value!r}")
        self.config = config
        self.system_mode = mode
        self.system_separator = system_separator
        self.base_url = (base_url or self.DEFAULT_BASE_URL).rstrip("/")
        # A caller-supplied client is shared and left open by close().
        self._owns_client = client is None
        if client is None:
            client = ApiClient(timeout=DEFAULT_TIMEOUT if timeout is None else timeout)
        self._client = client

    @property
    def model(self) -> str:
        return self.config.model

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}{self.API_PATH}"

    def _headers(self) -> dict[str, str]:
        raise NotImplementedError

    def _build_request(self, messages: Sequence[Message]) -> BaseModel:
        raise NotImplementedError

    def _extract_text(self, raw: bytes) -> str:
        """Parse a success body and return the first reply text."""
        raise NotImplementedError

    def _parse(self, schema: type[BaseModel], raw: bytes) -> Any:
        try:
            return schema.model_validate_json(raw)
        except ValidationError as exc:
            logger.warning("%s response did not match %s", self.name, schema.__name__)
            raise DeserializationError(
                f"Failed to deserialize {self.name} response: {exc}", self.name
            ) from exc

    async def send(self, messages: Sequence[Message]) -> str:
        request = self._build_request(messages)
        body = request.model_dump(exclude_none=True)
        logger.debug(
            "POST %s model=%s turns=%d", self.endpoint, self.model, len(body.get("messages", []))
        )

        try:
            resp = await self._client.post(self.endpoint, headers=self._headers(), json=body)
        except httpx.TimeoutException as exc:
            logger.warning("%s request timed out after %ss", self.name, self._client.timeout)
            raise ProviderTimeoutError(f"{self.name} API request timeout: {exc}", self.name) from exc
        except httpx.TransportError as exc:
            logger.warning("%s transport error: %s", self.name, type(exc).__name__)
            raise ProviderConnectionError(
                f"{self.name} API connection error: {exc}", self.name
            ) from exc
        except httpx.DecodingError as exc:
            logger.warning("%s response body could not be decoded", self.name)
            raise DeserializationError(
                f"Failed to decode {self.name} response body: {exc}", self.name
            ) from exc
        except httpx.RequestError as exc:
            logger.warning("%s request failed: %s", self.name, type(exc).__name__)
            raise ProviderConnectionError(f"{self.name} API request failed: {exc}", self.name) from exc

        self._check_status(resp)
        return self._extract_text(resp.content)

    def _check_status(self, resp: httpx.Response) -> None:
        status = resp.status_code
        if resp.is_success:
            return
        logger.warning("%s returned HTTP %d", self.name, status)
        if status == 401:
            raise AuthenticationError(
                f"{self.name} API authentication failed: invalid API key", self.name
            )
        if status == 429:
            raise RateLimitError(f"{self.name} API rate limit exceeded", self.name)
        raise HttpStatusError(status, resp.text, self.name)

    async def close(self) -> None:
        """Close the HTTP client if this adapter created it."""
        if self._owns_client:
            await self._client.aclose()
