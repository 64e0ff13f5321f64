"""Provider configuration: validated adapter config and env-driven settings."""

from __future__ import annotations

from pydantic import BaseModel, Field, SecretStr
from pydantic_settings import BaseSettings

from parley.llm.providers import ProviderType


class LLMConfig(BaseModel):
    """Per-adapter configuration, validated before construction."""

    model_config = {"frozen": True}

    api_key: SecretStr = SecretStr("")
    model: str
    temperature: float = Field(default=0.7, ge=0.0, le=2.0)
    max_tokens: int = Field(default=4096, gt=0)


class ProviderSettings(BaseSettings):
    """Provider selection loaded from ``PARLEY_*`` env vars or a .env file."""

    provider: ProviderType = ProviderType.ANTHROPIC
    api_key: SecretStr = SecretStr("")
    model: str = "claude-sonnet-4-5-20250929"
    temperature: float = Field(default=0.7, ge=0.0, le=2.0)
    max_tokens: int = Field(default=4096, gt=0)

    # Transport
    timeout_seconds: float = Field(default=60.0, gt=0)
    base_url: str | None = None

    model_config = {
        "env_prefix": "PARLEY_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    def to_llm_config(self) -> LLMConfig:
        return LLMConfig(
            api_key=self.api_key,
            model=self.model,
            temperature=self.temperature,
            max_tokens=self.max_tokens,
        )
