"""Ollama provider for locally served models (``/api/chat``)."""

from __future__ import annotations

from collections.abc import Sequence

from pydantic import BaseModel

from parley.errors import EmptyResponseError
from parley.llm.openai_provider import OpenAIMessage, convert_chat_messages
from parley.llm.providers import HTTPProvider
from parley.messages import Message


class ChatOptions(BaseModel):
    temperature: float
    num_predict: int


class ChatRequest(BaseModel):
    model: str
    messages: list[OpenAIMessage]
    stream: bool = False
    options: ChatOptions


class ChatResponse(BaseModel):
    model: str
    message: OpenAIMessage | None = None
    done: bool = True


class OllamaProvider(HTTPProvider):
    """Interact with a local Ollama model server. No auth header is sent."""

    DEFAULT_BASE_URL = "http://localhost:11434"
    API_PATH = "/api/chat"

    name = "Ollama"

    def _headers(self) -> dict[str, str]:
        return {"Content-Type": "application/json"}

    def _build_request(self, messages: Sequence[Message]) -> ChatRequest:
        return ChatRequest(
            model=self.config.model,
            messages=convert_chat_messages(messages, self.system_mode, self.system_separator),
            options=ChatOptions(
                temperature=self.config.temperature,
                num_predict=self.config.max_tokens,
            ),
        )

    def _extract_text(self, raw: bytes) -> str:
        response: ChatResponse = self._parse(ChatResponse, raw)
        if response.message is None or response.message.content is None:
            raise EmptyResponseError("Ollama response missing message content", self.name)
        return response.message.content
