"""Factory helpers for building provider adapters."""

from __future__ import annotations

from typing import Any

from parley.config import LLMConfig, ProviderSettings
from parley.llm.anthropic_provider import AnthropicProvider
from parley.llm.ollama_provider import OllamaProvider
from parley.llm.openai_provider import OpenAIProvider
from parley.llm.providers import HTTPProvider, ProviderType
from parley.transport import ApiClient

PROVIDER_CLASSES: dict[ProviderType, type[HTTPProvider]] = {
    ProviderType.ANTHROPIC: AnthropicProvider,
    ProviderType.OPENAI: OpenAIProvider,
    ProviderType.OLLAMA: OllamaProvider,
}


def create_provider(
    provider_type: ProviderType | str,
    config: LLMConfig,
    client: ApiClient | None = None,
    **options: Any,
) -> HTTPProvider:
    """Instantiate the adapter for *provider_type*.

    Keyword options (``system_mode``, ``system_separator``, ``base_url``,
    ``timeout``) are passed through to the adapter.
    """
    if isinstance(provider_type, str):
        provider_type = provider_type.lower()
    try:
        kind = ProviderType(provider_type)
    except ValueError:
        raise ValueError(f"Unsupported provider: {provider_type}") from None
    return PROVIDER_CLASSES[kind](config, client, **options)


def provider_from_settings(
    settings: ProviderSettings,
    client: ApiClient | None = None,
) -> HTTPProvider:
    """Build an adapter from env-loaded settings.

    ``timeout_seconds`` configures the adapter's own client. A shared
    *client* keeps its own timeout and the setting is not applied.
    """
    options: dict[str, Any] = {}
    if client is None:
        options["timeout"] = settings.timeout_seconds
    if settings.base_url:
        options["base_url"] = settings.base_url
    return create_provider(settings.provider, settings.to_llm_config(), client, **options)
