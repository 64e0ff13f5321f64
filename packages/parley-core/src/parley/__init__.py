"""Parley — uniform message model over interchangeable LLM backends."""

from parley.config import LLMConfig, ProviderSettings
from parley.errors import (
    AuthenticationError,
    DeserializationError,
    EmptyResponseError,
    ErrorKind,
    HttpStatusError,
    ProviderConnectionError,
    ProviderError,
    ProviderTimeoutError,
    RateLimitError,
)
from parley.messages import Message, Role
from parley.results import ExecutionResult, StepResult

__all__ = [
    "AuthenticationError",
    "DeserializationError",
    "EmptyResponseError",
    "ErrorKind",
    "ExecutionResult",
    "HttpStatusError",
    "LLMConfig",
    "Message",
    "ProviderConnectionError",
    "ProviderError",
    "ProviderSettings",
    "ProviderTimeoutError",
    "RateLimitError",
    "Role",
    "StepResult",
]
