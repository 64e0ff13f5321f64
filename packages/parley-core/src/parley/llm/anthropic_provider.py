"""Anthropic Claude provider (Messages API)."""

from __future__ import annotations

from collections.abc import Sequence

from pydantic import BaseModel, Field

from parley.errors import EmptyResponseError
from parley.llm.providers import HTTPProvider, SystemPromptMode, split_system_messages
from parley.messages import Message


class AnthropicMessage(BaseModel):
    role: str
    content: str


class MessagesRequest(BaseModel):
    """Messages API request. ``system`` is a top-level field, not a turn."""

    model: str
    messages: list[AnthropicMessage]
    system: str | None = None
    temperature: float
    max_tokens: int


class ContentBlock(BaseModel):
    type: str
    text: str


class MessagesResponse(BaseModel):
    id: str
    type: str
    role: str
    content: list[ContentBlock] = Field(default_factory=list)
    model: str
    stop_reason: str | None = None


class AnthropicProvider(HTTPProvider):
    """Calls Anthropic Messages API."""

    DEFAULT_BASE_URL = "https://api.anthropic.com"
    API_PATH = "/v1/messages"
    API_VERSION = "2023-06-01"

    name = "Anthropic"
    supported_system_modes = frozenset({SystemPromptMode.SEPARATE})
    default_system_mode = SystemPromptMode.SEPARATE

    def _headers(self) -> dict[str, str]:
        return {
            "x-api-key": self.config.api_key.get_secret_value(),
            "anthropic-version": self.API_VERSION,
            "content-type": "application/json",
        }

    def _convert_messages(
        self, messages: Sequence[Message]
    ) -> tuple[str | None, list[AnthropicMessage]]:
        """Split out the system prompt and map remaining turns 1:1."""
        system, turns = split_system_messages(messages, self.system_separator)
        return system, [AnthropicMessage(role=m.role.value, content=m.content) for m in turns]

    def _build_request(self, messages: Sequence[Message]) -> MessagesRequest:
        system, formatted = self._convert_messages(messages)
        return MessagesRequest(
            model=self.config.model,
            messages=formatted,
            system=system,
            temperature=self.config.temperature,
            max_tokens=self.config.max_tokens,
        )

    def _extract_text(self, raw: bytes) -> str:
        response: MessagesResponse = self._parse(MessagesResponse, raw)
        if not response.content:
            raise EmptyResponseError("Anthropic response contained no content", self.name)
        return response.content[0].text
