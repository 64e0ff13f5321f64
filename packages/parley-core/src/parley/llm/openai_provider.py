"""OpenAI provider (Chat Completions API)."""

from __future__ import annotations

from collections.abc import Sequence

from pydantic import BaseModel, Field

from parley.errors import EmptyResponseError
from parley.llm.providers import HTTPProvider, SystemPromptMode, split_system_messages
from parley.messages import Message, Role


class OpenAIMessage(BaseModel):
    role: str
    content: str | None = None


class ChatCompletionRequest(BaseModel):
    model: str
    messages: list[OpenAIMessage]
    temperature: float
    max_tokens: int


class Choice(BaseModel):
    index: int = 0
    message: OpenAIMessage
    finish_reason: str | None = None


class ChatCompletionResponse(BaseModel):
    id: str
    object: str
    created: int
    model: str
    choices: list[Choice] = Field(default_factory=list)


def convert_chat_messages(
    messages: Sequence[Message],
    mode: SystemPromptMode,
    separator: str,
) -> list[OpenAIMessage]:
    """Map turns to chat-style ``{role, content}`` dicts.

    INLINE keeps system turns where they occur; SEPARATE merges them into a
    single leading system turn.
    """
    if mode is SystemPromptMode.INLINE:
        return [OpenAIMessage(role=m.role.value, content=m.content) for m in messages]

    system, turns = split_system_messages(messages, separator)
    formatted = [OpenAIMessage(role=m.role.value, content=m.content) for m in turns]
    if system is not None:
        formatted.insert(0, OpenAIMessage(role=Role.SYSTEM.value, content=system))
    return formatted


class OpenAIProvider(HTTPProvider):
    """Calls OpenAI Chat Completions API."""

    DEFAULT_BASE_URL = "https://api.openai.com"
    API_PATH = "/v1/chat/completions"

    name = "OpenAI"

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.config.api_key.get_secret_value()}",
            "Content-Type": "application/json",
        }

    def _build_request(self, messages: Sequence[Message]) -> ChatCompletionRequest:
        return ChatCompletionRequest(
            model=self.config.model,
            messages=convert_chat_messages(messages, self.system_mode, self.system_separator),
            temperature=self.config.temperature,
            max_tokens=self.config.max_tokens,
        )

    def _extract_text(self, raw: bytes) -> str:
        response: ChatCompletionResponse = self._parse(ChatCompletionResponse, raw)
        if not response.choices:
            raise EmptyResponseError("OpenAI response contained no choices", self.name)
        content = response.choices[0].message.content
        if content is None:
            raise EmptyResponseError("OpenAI response choice had no message content", self.name)
        return content
