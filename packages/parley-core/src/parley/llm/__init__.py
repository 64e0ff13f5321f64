"""Provider contract and concrete LLM backend adapters."""

from parley.llm.anthropic_provider import AnthropicProvider
from parley.llm.ollama_provider import OllamaProvider
from parley.llm.openai_provider import OpenAIProvider
from parley.llm.providers import (
    HTTPProvider,
    LLMProvider,
    ProviderType,
    SystemPromptMode,
    split_system_messages,
)

__all__ = [
    "AnthropicProvider",
    "HTTPProvider",
    "LLMProvider",
    "OllamaProvider",
    "OpenAIProvider",
    "ProviderType",
    "SystemPromptMode",
    "split_system_messages",
]
